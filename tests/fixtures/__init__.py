"""
Test fixtures for the classification service.

Contains sample provider payloads:
- anthropic_tool_use_response.json: Messages API reply with a forced tool call
- anthropic_error_responses.json: Error replies keyed by failure kind
"""
