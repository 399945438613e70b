"""HTTP API for skilldex."""

from skilldex.api.app import create_app

__all__ = ["create_app"]
