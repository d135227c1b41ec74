"""Tests for the end-to-end migration run."""

from unittest.mock import MagicMock

import pytest

from clickup_migration.migration import run_migration
from clickup_migration.models import TaskOutcome
from clickup_migration.type_definitions import MigrationConfig
from tests.utils.data_generators import generate_task_data
from tests.utils.mock_factory import FakeClickUpClient


@pytest.fixture
def sample_tasks() -> list[dict]:
    return [
        generate_task_data("t1", status="Open", progress_step=1),
        generate_task_data("t2", status="TESTING", progress_step=4),
        generate_task_data("t3", status="Open", progress_step="2"),
        generate_task_data("t4", status="Open", with_field=False),
        generate_task_data("t5", status="Open", progress_step=9),
    ]


@pytest.mark.unit
def test_single_task_end_to_end(migration_config: MigrationConfig) -> None:
    client = FakeClickUpClient([generate_task_data("t1", status="Open", progress_step=1)])

    summary = run_migration(migration_config, client=client)

    assert client.updates == [("t1", "RESEARCH")]
    assert summary.migrated_count == 1
    assert summary.total_tasks == 1


@pytest.mark.unit
def test_summary_counts_every_outcome(migration_config: MigrationConfig, sample_tasks: list[dict]) -> None:
    client = FakeClickUpClient(sample_tasks)
    client.fail_updates_for = {"t3"}

    summary = run_migration(migration_config, client=client)

    assert client.updates == [("t1", "RESEARCH"), ("t3", "EXECUTION")]
    assert summary.count(TaskOutcome.UPDATED) == 1
    assert summary.count(TaskOutcome.UPDATE_FAILED) == 1
    assert summary.count(TaskOutcome.ALREADY_CORRECT) == 1
    assert summary.count(TaskOutcome.SKIPPED_NO_FIELD) == 1
    assert summary.count(TaskOutcome.SKIPPED_UNMAPPED) == 1
    assert summary.skipped_count == 3
    assert not summary.aborted


@pytest.mark.unit
def test_second_run_writes_nothing(migration_config: MigrationConfig, sample_tasks: list[dict]) -> None:
    client = FakeClickUpClient(sample_tasks)

    first = run_migration(migration_config, client=client)
    writes_after_first_run = len(client.updates)
    second = run_migration(migration_config, client=client)

    assert first.migrated_count == 2
    assert len(client.updates) == writes_after_first_run
    assert second.migrated_count == 0
    assert second.count(TaskOutcome.ALREADY_CORRECT) == 3


@pytest.mark.unit
def test_aborts_without_progress_step_field(migration_config: MigrationConfig) -> None:
    client = FakeClickUpClient(
        [generate_task_data("t1", with_field=False), generate_task_data("t2", with_field=False)],
    )

    summary = run_migration(migration_config, client=client)

    assert summary.aborted
    assert summary.total_tasks == 2
    assert summary.migrated_count == 0
    assert client.updates == []


@pytest.mark.unit
def test_delay_between_tasks(migration_config: MigrationConfig, sample_tasks: list[dict]) -> None:
    migration_config["request_delay"] = 0.1
    sleep = MagicMock()

    run_migration(migration_config, client=FakeClickUpClient(sample_tasks), sleep=sleep)

    assert sleep.call_count == len(sample_tasks) - 1
    sleep.assert_called_with(0.1)


@pytest.mark.unit
def test_dry_run_reports_without_writing(migration_config: MigrationConfig, sample_tasks: list[dict]) -> None:
    migration_config["dry_run"] = True
    client = FakeClickUpClient(sample_tasks)

    summary = run_migration(migration_config, client=client)

    assert client.updates == []
    assert summary.dry_run
    assert summary.count(TaskOutcome.DRY_RUN) == 2
    assert summary.migrated_count == 0


@pytest.mark.unit
def test_space_statuses_are_matched_when_enabled(migration_config: MigrationConfig) -> None:
    migration_config["match_space_statuses"] = True
    client = FakeClickUpClient([generate_task_data("t1", status="Open", progress_step=1)])
    client.space_statuses = ["open", "research", "done"]

    run_migration(migration_config, client=client)

    assert client.updates == [("t1", "research")]


@pytest.mark.unit
def test_pages_through_large_list(migration_config: MigrationConfig) -> None:
    tasks = [generate_task_data(f"t{n}", status="WAITING", progress_step=0) for n in range(250)]
    client = FakeClickUpClient(tasks)

    summary = run_migration(migration_config, client=client)

    assert summary.total_tasks == 250
    assert client.page_requests == [("list-1", 0), ("list-1", 1), ("list-1", 2)]
    assert summary.count(TaskOutcome.ALREADY_CORRECT) == 250
