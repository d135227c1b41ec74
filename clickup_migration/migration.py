"""Runs a full Progress Step migration for one space."""

import time
from collections.abc import Callable

from clickup_migration.clients.clickup_client import ClickUpClient
from clickup_migration.display import ProgressTracker, logger
from clickup_migration.mappings import build_status_map
from clickup_migration.migrations import HierarchyWalker, ProgressStepMigration, find_progress_step_field
from clickup_migration.models import MigrationSummary, Task, TaskOutcome
from clickup_migration.type_definitions import MigrationConfig


def run_migration(
    config: MigrationConfig,
    client: ClickUpClient | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> MigrationSummary:
    """Migrate every task in the configured space.

    Args:
        config: Validated migration configuration
        client: Optional pre-built API client (built from config otherwise)
        sleep: Delay function called between tasks

    Returns:
        Per-outcome counts for the run

    """
    space_id = config["space_id"]
    dry_run = config["dry_run"]
    client = client or ClickUpClient.from_config(config)
    summary = MigrationSummary(space_id=space_id, dry_run=dry_run)

    logger.notice("Starting migration for space %s...", space_id)
    if dry_run:
        logger.warning("Dry run: no task will be updated")

    tasks = HierarchyWalker(client).enumerate_tasks(space_id)
    summary.total_tasks = len(tasks)

    progress_step_field = find_progress_step_field(tasks, config["progress_step_field"])
    if progress_step_field is None:
        summary.aborted = True
        summary.message = f"No '{config['progress_step_field']}' custom field found"
        logger.error("Aborting migration: %s", summary.message)
        return summary

    status_map: dict[str, str] = {}
    if config["match_space_statuses"]:
        status_map = build_status_map(client.get_space_statuses(space_id))

    migration = ProgressStepMigration(client, dry_run=dry_run, status_map=status_map)
    delay = config["request_delay"]

    with ProgressTracker[Task]("Migrating tasks", len(tasks)) as tracker:
        for index, task in enumerate(tracker.track(tasks), start=1):
            logger.info("Processing task %d/%d: %s", index, len(tasks), task.name)

            outcome = migration.migrate_one(task, progress_step_field)
            summary.record(outcome)
            tracker.add_log_item(f"{task.name}: {outcome.value}")

            # Pace requests to stay under the upstream rate limit
            if index < len(tasks) and delay:
                sleep(delay)

    log_summary(summary)
    return summary


def log_summary(summary: MigrationSummary) -> None:
    logger.success("Migration completed!")
    if summary.dry_run:
        logger.info("Would migrate %d tasks", summary.count(TaskOutcome.DRY_RUN))
    logger.success("Successfully migrated %d tasks", summary.migrated_count)
    logger.info(
        "Processed %d tasks: %d already correct, %d without Progress Step, %d unmapped, %d failed",
        summary.total_tasks,
        summary.count(TaskOutcome.ALREADY_CORRECT),
        summary.count(TaskOutcome.SKIPPED_NO_FIELD),
        summary.count(TaskOutcome.SKIPPED_UNMAPPED),
        summary.failed_count,
    )
