"""Command line interface for unitconv."""

from .main import app, run

__all__ = ["app", "run"]
