"""ClickUp entity models parsed from API responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClickUpModel(BaseModel):
    """Read-only snapshot of an upstream object; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("name", mode="before", check_fields=False)
    @classmethod
    def _null_name_as_blank(cls, value: Any) -> Any:
        # ClickUp sends "name": null on some objects
        return "" if value is None else value


class CustomField(ClickUpModel):
    """A custom field value attached to a task.

    ``value`` is loosely typed upstream: missing, an integer, a numeric
    string, or some other JSON shape for unrelated field types.
    """

    id: str
    name: str = ""
    value: Any = None


class Task(ClickUpModel):
    """A ClickUp task with its current status name and custom fields."""

    id: str
    name: str = ""
    status: str | None = None
    custom_fields: tuple[CustomField, ...] = Field(default_factory=tuple)

    @field_validator("status", mode="before")
    @classmethod
    def _flatten_status(cls, value: Any) -> Any:
        # The API nests the name: {"status": "open", "color": ..., "type": ...}
        if isinstance(value, dict):
            return value.get("status")
        return value

    @field_validator("custom_fields", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    def get_custom_field(self, field_id: str) -> CustomField | None:
        """Return this task's custom field with the given id, if present."""
        for field in self.custom_fields:
            if field.id == field_id:
                return field
        return None


class TaskList(ClickUpModel):
    """A list of tasks, either folderless or inside a folder."""

    id: str
    name: str = ""


class Folder(ClickUpModel):
    """A folder grouping lists inside a space."""

    id: str
    name: str = ""
