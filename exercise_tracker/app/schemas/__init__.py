"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store records so the response shape
(text ids, calendar-string dates) stays independent of persistence.
"""
