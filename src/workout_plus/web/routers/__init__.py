"""API routers."""

from . import exercises, programs, workouts

__all__ = ["exercises", "programs", "workouts"]
