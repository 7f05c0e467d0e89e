"""JSON API for workout-plus."""

from .app import create_app

__all__ = ["create_app"]
