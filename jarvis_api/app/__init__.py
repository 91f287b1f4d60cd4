"""
Application package initializer.

Contains the FastAPI entrypoint (``main``) and its submodules: core
configuration, schemas, services and the versioned API routers.
"""

from .main import app  # noqa: F401
