"""
Unit tests for the classification service.

Test individual components in isolation:
- Request validation and output schema validation
- Prompt builder
- Anthropic client wire format and error classification (mock transport)
- Routes and error mapping (mocked LLM client)
- Configuration and logging
"""
