"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API starts without any configuration at all.  Values are read when a
``Settings`` instance is created, which lets tests build isolated
settings after adjusting the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_prefix(name: str) -> str:
    """Read a URL prefix, normalising it to ``/segment`` or ``""``."""
    value = os.getenv(name, "").strip().strip("/")
    return f"/{value}" if value else ""


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Jarvis API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Prefix under which the users routes are mounted.  Empty by default
    # so the resource lives at ``/users``; set ``API_PREFIX=/api`` to
    # expose it at ``/api/users`` instead.
    api_prefix: str = field(default_factory=lambda: _env_prefix("API_PREFIX"))

    # Bind address used by ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
