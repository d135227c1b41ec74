"""Progress Step to status mapping.

The legacy "Progress Step" custom field stores a small integer. Upstream
values arrive either as numbers or as numeric strings, so every lookup
goes through :func:`coerce_progress_step`.
"""

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from clickup_migration.display import logger

PROGRESS_STEP_MAPPING: Mapping[int, str] = MappingProxyType(
    {
        0: "WAITING",
        1: "RESEARCH",
        2: "EXECUTION",
        3: "REVIEW",
        4: "TESTING",
        5: "ACCEPTED",
    },
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_progress_step(value: Any) -> int | None:
    """Coerce a raw field value to an integer step.

    - ``int``: used as-is
    - integral ``float`` (``2.0``): truncated to ``int``
    - ``str``: best-effort parse of a leading integer; text without one is 0
    - anything else (``None``, bools, lists, fractional floats): ``None``
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return None


def target_status_for(value: Any) -> str | None:
    """Return the status name for a raw Progress Step value, or None if unmapped."""
    step = coerce_progress_step(value)
    if step is None:
        return None
    return PROGRESS_STEP_MAPPING.get(step)


def build_status_map(space_statuses: Iterable[str]) -> dict[str, str]:
    """Align the canonical target names with the spelling used by the space.

    Returns a mapping of canonical name -> space status name for every
    target the space declares (compared case-insensitively).
    """
    by_lower = {status.lower(): status for status in space_statuses}
    status_map: dict[str, str] = {}

    for step, target in PROGRESS_STEP_MAPPING.items():
        matching = by_lower.get(target.lower())
        if matching is None:
            logger.warning("No status found for '%s' (Progress Step %s)", target, step)
            continue
        status_map[target] = matching
        logger.debug("Mapped Progress Step %s -> Status '%s'", step, matching)

    return status_map
