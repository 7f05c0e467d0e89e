"""Exercise catalog seeding."""

import json
import logging
from pathlib import Path

from ..db.engine import Database
from ..errors import StorageError, ValidationError
from ..models.exercises import COMMON_EXERCISES, Exercise

logger = logging.getLogger(__name__)


def load_catalog(json_path: Path | None = None) -> list[Exercise]:
    """Load the catalog to seed.

    Reads ``json_path`` when given: either a list of exercise objects or an
    object with an ``exercises`` list. Falls back to the built-in catalog if
    no file is given.

    Returns:
        List of Exercise objects in seeding order
    """
    if json_path is None:
        return list(COMMON_EXERCISES)

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    entries = data.get("exercises", []) if isinstance(data, dict) else data

    exercises = []
    for ex_data in entries:
        try:
            exercise = Exercise.from_dict(ex_data)
            exercise.validate()
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            # Skip invalid exercises but log the error
            name = ex_data.get("name", "unknown") if isinstance(ex_data, dict) else "unknown"
            logger.warning("Skipping invalid catalog entry %s: %s", name, e)
            continue
        exercises.append(exercise)

    return exercises


async def seed_exercises(
    database: Database, exercises: list[Exercise] | None = None
) -> int:
    """Ensure every catalog exercise exists, matching by exact name.

    Existing rows are never touched or removed, so this is safe to run on
    every startup. Each exercise is its own unit of work: a failure is
    logged and the remaining exercises are still seeded.

    Args:
        database: Open storage handle
        exercises: Catalog to seed. Uses the built-in catalog if not provided.

    Returns:
        Number of exercises inserted
    """
    if exercises is None:
        exercises = COMMON_EXERCISES

    count = 0
    for exercise in exercises:
        try:
            async with database.connect() as db:
                cursor = await db.execute(
                    "SELECT id FROM exercises WHERE name = ?", (exercise.name,)
                )
                if await cursor.fetchone() is not None:
                    continue
                await db.execute(
                    "INSERT INTO exercises (name, type, video_url) VALUES (?, ?, ?)",
                    (exercise.name, exercise.type, exercise.video_url),
                )
        except StorageError as e:
            logger.warning("Failed to seed exercise %s: %s", exercise.name, e)
            continue
        count += 1
        logger.debug("Added exercise to catalog: %s", exercise.name)

    logger.info("Catalog seeded: %d new of %d exercises", count, len(exercises))
    return count
