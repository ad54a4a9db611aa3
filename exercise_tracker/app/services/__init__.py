"""
Service layer.

Each service encapsulates the business rules for a domain and works
against the ``ExerciseStore`` handle passed in by the caller, so the
same logic runs over SQLite or the in-memory store.
"""
