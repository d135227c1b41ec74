"""Static mappings used by the migration."""

from clickup_migration.mappings.progress_step import (
    PROGRESS_STEP_MAPPING,
    build_status_map,
    coerce_progress_step,
    target_status_for,
)

__all__ = [
    "PROGRESS_STEP_MAPPING",
    "build_status_map",
    "coerce_progress_step",
    "target_status_for",
]
