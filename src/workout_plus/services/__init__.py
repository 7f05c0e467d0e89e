"""Multi-entity services for workout-plus."""

from .hierarchy import CascadeResult, HierarchyManager

__all__ = ["CascadeResult", "HierarchyManager"]
