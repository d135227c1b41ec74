"""Shared pytest fixtures and configuration for all tests."""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from _pytest.config import Config

from clickup_migration.clients.clickup_client import ClickUpClient
from clickup_migration.models import CustomField
from clickup_migration.type_definitions import MigrationConfig
from tests.utils.data_generators import PROGRESS_STEP_FIELD_ID


def pytest_configure(config: Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark a test as a unit test")


@pytest.fixture(autouse=True)
def clean_clickup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLICKUP_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("CLICKUP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_clickup_client() -> MagicMock:
    """A ClickUpClient mock with empty collections and successful updates."""
    client = MagicMock(spec=ClickUpClient)
    client.get_folders.return_value = []
    client.get_folderless_lists.return_value = []
    client.get_lists_in_folder.return_value = []
    client.get_tasks_page.return_value = []
    client.get_space_statuses.return_value = []
    client.update_task_status.return_value = True
    return client


@pytest.fixture
def progress_step_field() -> CustomField:
    return CustomField(id=PROGRESS_STEP_FIELD_ID, name="Progress Step")


@pytest.fixture
def migration_config() -> Generator[MigrationConfig, Any, None]:
    """A fully populated configuration without delays."""
    yield MigrationConfig(
        api_token="pk_test_token",
        space_id="space-1",
        base_url="https://api.clickup.test/api/v2",
        request_timeout=30.0,
        request_delay=0.0,
        dry_run=False,
        log_level="INFO",
        log_file=None,
        progress_step_field="progress step",
        include_closed=False,
        subtasks=False,
        match_space_statuses=False,
    )
