"""
The dashboard's FastAPI application.

``core`` holds settings, logging, seed data and the ``EntityStore``;
``schemas`` the record types; ``services`` the CRUD, relationship and
statistics logic; ``api/v1`` the HTTP routes.  Importing this package
builds the default ``app`` for uvicorn.
"""

from .main import app  # noqa: F401
