"""HTTP surface over a single in-process ranking session."""

from .app import create_app

__all__ = ["create_app"]
