"""
Pydantic schema definitions for API payloads.

Schemas describe response bodies for the OpenAPI document.  Movie
records themselves are passed through untouched, so the movie schema
documents rather than validates.
"""
