"""Utilities package."""

from skilldex.utils.config import ApiConfig, Config
from skilldex.utils.logging import setup_logging

__all__ = [
    "ApiConfig",
    "Config",
    "setup_logging",
]
