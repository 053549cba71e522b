"""
Text Classification Service.

Extracts a fixed set of fields from free text:
- zip (postal code)
- brand
- category
- time_pref (time preference)

Architecture: FastAPI endpoint + Anthropic structured output + JSON Schema validation
"""

__version__ = "1.0.0"
