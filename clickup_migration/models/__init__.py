"""Models package for data structures used in the application."""

from clickup_migration.models.clickup import CustomField, Folder, Task, TaskList
from clickup_migration.models.migration_error import ConfigurationError, MigrationError
from clickup_migration.models.migration_results import MigrationSummary, TaskOutcome

__all__ = [
    "ConfigurationError",
    "CustomField",
    "Folder",
    "MigrationError",
    "MigrationSummary",
    "Task",
    "TaskList",
    "TaskOutcome",
]
