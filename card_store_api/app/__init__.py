"""
Application package initializer.

The service is organised like a larger FastAPI project even though it
manages a single resource: settings and logging live in ``core``,
pydantic models in ``schemas``, the in-memory store in ``services``
and the HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
