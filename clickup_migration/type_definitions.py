"""Type definitions for the ClickUp Progress Step migration."""

from typing import Any, Literal, NotRequired, TypedDict

type JsonData = dict[str, Any]

type ConfigValue = str | int | float | bool

type LogLevel = Literal[
    "DEBUG",
    "INFO",
    "NOTICE",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "SUCCESS",
]


class MigrationConfig(TypedDict):
    """Configuration for one migration run."""

    api_token: str
    space_id: str
    base_url: str
    request_timeout: float
    request_delay: float
    dry_run: bool
    log_level: LogLevel
    log_file: NotRequired[str | None]
    progress_step_field: str
    include_closed: bool
    subtasks: bool
    match_space_statuses: bool
