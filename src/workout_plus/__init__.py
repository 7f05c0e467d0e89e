"""workout-plus: workout training program management service."""

__version__ = "0.1.0"
