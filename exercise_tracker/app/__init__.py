"""
Application package initializer.

The project is split into a few small layers: ``core`` (configuration,
logging, errors, SQLite helpers), ``store`` (the persistence adapter),
``services`` (business rules), ``schemas`` (response payloads) and
``api`` (the FastAPI routers).  Handlers only talk to services, and
services only talk to the store handle they are given.
"""

from .main import app, create_app  # noqa: F401
