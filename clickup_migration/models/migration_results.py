"""
Result models for tracking the outcome of a migration run.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class TaskOutcome(StrEnum):
    """Terminal outcome of the migration decision for one task."""

    SKIPPED_NO_FIELD = "skipped_no_field"
    SKIPPED_UNMAPPED = "skipped_unmapped"
    ALREADY_CORRECT = "already_correct"
    DRY_RUN = "dry_run"
    UPDATED = "updated"
    UPDATE_FAILED = "update_failed"

    @property
    def migrated(self) -> bool:
        """True iff an update request was sent and succeeded."""
        return self is TaskOutcome.UPDATED


class MigrationSummary(BaseModel):
    """Represents the overall result of a migration run."""

    space_id: str
    dry_run: bool = False
    aborted: bool = False
    message: str = ""
    total_tasks: int = 0
    outcomes: dict[TaskOutcome, int] = Field(
        default_factory=lambda: dict.fromkeys(TaskOutcome, 0),
    )
    start_time: str = Field(default_factory=lambda: datetime.now().isoformat())

    def record(self, outcome: TaskOutcome) -> None:
        """Count one task outcome."""
        self.outcomes[outcome] = self.outcomes.get(outcome, 0) + 1

    def count(self, outcome: TaskOutcome) -> int:
        return self.outcomes.get(outcome, 0)

    @property
    def migrated_count(self) -> int:
        return self.count(TaskOutcome.UPDATED)

    @property
    def failed_count(self) -> int:
        return self.count(TaskOutcome.UPDATE_FAILED)

    @property
    def skipped_count(self) -> int:
        return (
            self.count(TaskOutcome.SKIPPED_NO_FIELD)
            + self.count(TaskOutcome.SKIPPED_UNMAPPED)
            + self.count(TaskOutcome.ALREADY_CORRECT)
        )
