"""CLI commands for tfslint."""

from .analyze import analyze
from .config import config

__all__ = [
    "analyze",
    "config",
]
