"""Shared service-layer helpers for turning action output into plain data."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, date, datetime
from typing import Any

from jackprop.domain.tags import UNDEFINED


def iso_timestamp(value: datetime) -> str:
    """Render *value* in UTC with millisecond precision and a ``Z`` suffix.

    Examples:
        >>> iso_timestamp(datetime(2000, 1, 1, tzinfo=UTC))
        '2000-01-01T00:00:00.000Z'
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def to_plain(value: Any) -> Any:
    """Convert an action result into JSON-safe data.

    ``UNDEFINED`` mapping entries are dropped (and become None elsewhere),
    datetimes become ISO strings, and unknown objects fall back to ``repr``.
    """
    if value is UNDEFINED:
        return None
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, datetime):
        return iso_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items() if v is not UNDEFINED}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    if hasattr(value, "model_dump"):
        return to_plain(value.model_dump(mode="python"))
    return repr(value)
