"""Runtime type tags and the ``UNDEFINED`` sentinel.

Validation reasons about values through a small tag vocabulary
(``string``, ``number``, ``boolean``, ``object``, ``function``) rather than
Python classes.  ``UNDEFINED`` marks an absent value and is distinct from
``None``, which is a present value tagged ``object``.
"""

from __future__ import annotations

import numbers
from enum import StrEnum
from typing import Any, Final, final


@final
class _Undefined:
    """Singleton type for :data:`UNDEFINED`."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class TypeTag(StrEnum):
    """Type names used in validation messages."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    FUNCTION = "function"
    ARRAY = "array"
    DATE = "date"
    UNDEFINED = "undefined"


def type_tag(value: Any) -> TypeTag:
    """Return the runtime tag of *value*.

    ``bool`` is checked before numbers since it subclasses ``int``.
    ``array`` and ``date`` are never returned here: lists and datetimes
    report ``object``, and only the dedicated validators distinguish them.

    Examples:
        >>> type_tag("x")
        <TypeTag.STRING: 'string'>
        >>> type_tag(None)
        <TypeTag.OBJECT: 'object'>
        >>> type_tag(float("nan"))
        <TypeTag.NUMBER: 'number'>
    """
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, numbers.Number):
        return TypeTag.NUMBER
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT
