"""Progress Step migration module.

Moves the value of the legacy "Progress Step" custom field into the
task's native status, one task at a time.
"""

from collections.abc import Mapping

from clickup_migration.clients.clickup_client import ClickUpClient
from clickup_migration.display import logger
from clickup_migration.mappings import coerce_progress_step, target_status_for
from clickup_migration.models import CustomField, Task, TaskOutcome


class ProgressStepMigration:
    """Decides and applies the status update for single tasks.

    The decision is idempotent: a task whose status already matches its
    mapped Progress Step is left alone, so repeated runs only write what
    changed in between.
    """

    def __init__(
        self,
        client: ClickUpClient,
        *,
        dry_run: bool = False,
        status_map: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the migration.

        Args:
            client: ClickUp API client used for status updates
            dry_run: Log the updates that would be made without sending them
            status_map: Optional canonical name -> space status name aliases

        """
        self.client = client
        self.dry_run = dry_run
        self.status_map: dict[str, str] = dict(status_map or {})

    def resolve_target_status(self, task: Task, progress_step_field: CustomField) -> str | None:
        field = task.get_custom_field(progress_step_field.id)
        if field is None:
            return None
        target = target_status_for(field.value)
        if target is None:
            return None
        return self.status_map.get(target, target)

    def migrate_one(self, task: Task, progress_step_field: CustomField) -> TaskOutcome:
        """Migrate a single task.

        Args:
            task: Task snapshot to migrate
            progress_step_field: The resolved Progress Step field

        Returns:
            The outcome; ``outcome.migrated`` is True only for a successful update

        """
        if not task.custom_fields:
            logger.debug("Task %s has no custom fields, skipping", task.id)
            return TaskOutcome.SKIPPED_NO_FIELD

        field = task.get_custom_field(progress_step_field.id)
        if field is None or field.value is None:
            logger.debug("Task %s has no Progress Step value, skipping", task.id)
            return TaskOutcome.SKIPPED_NO_FIELD

        current_progress_step = field.value
        logger.info("  ↳ Current Progress Step: %s", current_progress_step)

        target_status = self.resolve_target_status(task, progress_step_field)
        if target_status is None:
            logger.warning(
                "  ↳ Progress Step %r (coerced to %s) has no mapped status, skipping",
                current_progress_step,
                coerce_progress_step(current_progress_step),
            )
            return TaskOutcome.SKIPPED_UNMAPPED

        if task.status is not None and task.status.casefold() == target_status.casefold():
            logger.info("  ↳ Already at correct status (%s)", target_status)
            return TaskOutcome.ALREADY_CORRECT

        if self.dry_run:
            logger.notice("  ↳ [dry run] Would update status: %s -> %s", task.status, target_status)
            return TaskOutcome.DRY_RUN

        if self.client.update_task_status(task.id, target_status):
            logger.success("  ↳ Updated to status: %s", target_status)
            return TaskOutcome.UPDATED

        logger.warning("  ↳ Failed to update status to %s", target_status)
        return TaskOutcome.UPDATE_FAILED
