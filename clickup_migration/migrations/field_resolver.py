"""Locates the Progress Step custom field among fetched tasks."""

from collections.abc import Iterable

from clickup_migration.display import logger
from clickup_migration.models import CustomField, Task

PROGRESS_STEP_FIELD_NAME = "progress step"


def find_progress_step_field(
    tasks: Iterable[Task],
    field_name: str = PROGRESS_STEP_FIELD_NAME,
) -> CustomField | None:
    """Return the first custom field named ``field_name`` (case-insensitive).

    Tasks are scanned in order, and each task's fields in order. The field's
    id is what the migration matches on for every other task.
    """
    wanted = field_name.casefold()
    for task in tasks:
        for field in task.custom_fields:
            if field.name and field.name.casefold() == wanted:
                logger.info("Found Progress Step field with ID: %s", field.id)
                return field

    logger.warning("No '%s' custom field found in any tasks", field_name)
    return None
