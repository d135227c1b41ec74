"""Migration components: task discovery, field resolution and the per-task migration."""

from clickup_migration.migrations.field_resolver import find_progress_step_field
from clickup_migration.migrations.progress_step_migration import ProgressStepMigration
from clickup_migration.migrations.task_discovery import FULL_PAGE_SIZE, HierarchyWalker, is_last_page

__all__ = [
    "FULL_PAGE_SIZE",
    "HierarchyWalker",
    "ProgressStepMigration",
    "find_progress_step_field",
    "is_last_page",
]
