"""
Pydantic schema definitions for API payloads.

Request and response bodies are validated here, at the HTTP boundary,
so the store only ever sees well-formed values.
"""
