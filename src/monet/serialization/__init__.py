"""Structured encoding of Money (pydantic models)."""
