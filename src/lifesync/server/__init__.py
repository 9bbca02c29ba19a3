"""HTTP backend."""

from .app import DEFAULT_PORT, create_app

__all__ = ["DEFAULT_PORT", "create_app"]
