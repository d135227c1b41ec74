"""Tests for locating the Progress Step custom field."""

import pytest

from clickup_migration.migrations import find_progress_step_field
from clickup_migration.models import Task
from tests.utils.data_generators import generate_task_data


@pytest.mark.unit
def test_finds_field_on_third_task_with_varied_case() -> None:
    tasks = [
        Task.model_validate(generate_task_data("t1", with_field=False)),
        Task.model_validate(
            generate_task_data(
                "t2",
                with_field=False,
                extra_fields=[{"id": "cf-other", "name": "Priority", "value": 1}],
            ),
        ),
        Task.model_validate(generate_task_data("t3", 2, field_name="PROGRESS step", field_id="cf-42")),
    ]

    field = find_progress_step_field(tasks)

    assert field is not None
    assert field.id == "cf-42"


@pytest.mark.unit
def test_returns_first_match_in_task_and_field_order() -> None:
    tasks = [
        Task.model_validate(
            generate_task_data(
                "t1",
                field_id="cf-first",
                extra_fields=[{"id": "cf-second", "name": "progress step"}],
            ),
        ),
        Task.model_validate(generate_task_data("t2", field_id="cf-third")),
    ]

    field = find_progress_step_field(tasks)

    assert field is not None
    assert field.id == "cf-first"


@pytest.mark.unit
def test_returns_none_when_no_task_has_the_field(caplog: pytest.LogCaptureFixture) -> None:
    tasks = [Task.model_validate(generate_task_data(f"t{n}", with_field=False)) for n in range(3)]

    assert find_progress_step_field(tasks) is None
    assert "No 'progress step' custom field found" in caplog.text


@pytest.mark.unit
def test_custom_field_name_can_be_configured() -> None:
    tasks = [Task.model_validate(generate_task_data("t1", field_name="Stage", field_id="cf-stage"))]

    assert find_progress_step_field(tasks) is None
    field = find_progress_step_field(tasks, "stage")
    assert field is not None
    assert field.id == "cf-stage"


@pytest.mark.unit
def test_skips_fields_with_null_names() -> None:
    task = Task.model_validate(
        generate_task_data(
            "t1",
            with_field=False,
            extra_fields=[
                {"id": "cf-a", "name": None},
                {"id": "cf-ps", "name": "Progress Step", "value": 1},
            ],
        ),
    )

    field = find_progress_step_field([task])

    assert field is not None
    assert field.id == "cf-ps"
