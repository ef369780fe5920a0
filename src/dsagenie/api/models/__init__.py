"""
Pydantic models for API request/response schemas.

Request fields use the camelCase names the browser extension sends.
"""
