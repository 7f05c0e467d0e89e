"""Data loading utilities."""

from .catalog_seeder import load_catalog, seed_exercises

__all__ = ["load_catalog", "seed_exercises"]
