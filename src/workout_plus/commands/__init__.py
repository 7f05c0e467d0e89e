"""CLI commands for workout-plus."""

from .exercises import exercises
from .init import init, seed
from .programs import programs
from .serve import serve

__all__ = [
    "exercises",
    "init",
    "programs",
    "seed",
    "serve",
]
