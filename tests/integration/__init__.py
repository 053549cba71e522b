"""
Integration tests for the classification service.

- Anthropic client against the real API (skipped without ANTHROPIC_API_KEY)
- Full HTTP pipeline (TestClient -> classifier -> stubbed transport -> validation)
"""
