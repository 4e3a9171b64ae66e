"""ActionTypes: the immutable, chainable validator algebra.

A validator wraps one function ``value -> sanitized value`` that raises
:class:`ActionValidateError` (or any exception, for custom checks) on
failure.  Every combinator returns a *new* validator; the receiver is
never modified, so a shared base such as ``Types.string`` can seed any
number of independent chains::

    name = Types.string.is_required
    age = Types.number.optional(check_adult)
    user = Types.shape({"name": name, "age": age})

INVARIANT: ``compose`` runs the receiver first and feeds its result to the
new function.  ``optional`` skips the new function when that result is
``UNDEFINED``.  Only ``UNDEFINED`` is absent; ``None``, ``""``, ``0`` and
``False`` are validated like any other value.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from typing import Any

from jackprop.domain.errors import ActionValidateError, RequiredError, TypeMismatchError
from jackprop.domain.tags import UNDEFINED, TypeTag, type_tag

Validate = Callable[[Any], Any]


def identity(value: Any) -> Any:
    return value


def read_field(value: Any, key: str) -> Any:
    """Read *key* from a mapping or an attribute-bearing object.

    Missing fields read as ``UNDEFINED``.  ``None`` has no fields at all.
    """
    if value is None:
        raise TypeError(f"Cannot read property {key!r} of None")
    if isinstance(value, Mapping):
        return value.get(key, UNDEFINED)
    return getattr(value, key, UNDEFINED)


def coerce_datetime(value: Any) -> datetime | None:
    """Build an aware UTC datetime from *value*, or None when it is not a date.

    Accepts datetimes, dates, ISO-8601 strings and epoch milliseconds.
    Values without an offset are taken as UTC.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time(), tzinfo=UTC)
    elif isinstance(value, str):
        try:
            result = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    elif isinstance(value, numbers.Real) and not isinstance(value, bool):
        if not math.isfinite(value):
            return None
        try:
            result = datetime.fromtimestamp(float(value) / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        return None

    try:
        if result.tzinfo is None:
            return result.replace(tzinfo=UTC)
        return result.astimezone(UTC)
    except (OverflowError, ValueError):
        return None


def _label(base: str, suffix: str) -> str:
    return f"{base}.{suffix}" if base else suffix


@dataclass(frozen=True, slots=True)
class ActionTypes:
    """An immutable validator and the builder for derived validators.

    Attributes:
        fn: The validation function wrapped by this validator.
        label: Human-readable description of the chain (display only).
    """

    fn: Validate = identity
    label: str = ""

    def validate(self, value: Any = UNDEFINED) -> Any:
        """Return the sanitized *value* or raise on failure."""
        return self.fn(value)

    # ── Combinators ───────────────────────────────────────────────────

    def compose(self, fn: Validate, *, label: str | None = None) -> ActionTypes:
        """Run this validator, then *fn* on its result."""
        inner = self.fn

        def composed(value: Any) -> Any:
            return fn(inner(value))

        name = label if label is not None else getattr(fn, "__name__", "compose")
        return ActionTypes(composed, _label(self.label, name))

    def optional(self, fn: Validate, *, label: str | None = None) -> ActionTypes:
        """Like :meth:`compose`, but pass ``UNDEFINED`` through without calling *fn*."""

        def skip_undefined(value: Any) -> Any:
            if value is UNDEFINED:
                return UNDEFINED
            return fn(value)

        name = label if label is not None else f"optional({getattr(fn, '__name__', 'fn')})"
        return self.compose(skip_undefined, label=name)

    def type_of(self, expected: str) -> ActionTypes:
        """Require the value's type tag to equal *expected* (when present)."""
        tag = TypeTag(expected)

        def check_type(value: Any) -> Any:
            actual = type_tag(value)
            if actual != tag:
                raise TypeMismatchError(actual, tag)
            return value

        return self.optional(check_type, label=str(tag))

    def shape(self, fields: Mapping[str, ActionTypes]) -> ActionTypes:
        """Validate an object field by field against *fields*.

        Every field is attempted.  If any fail, raises a composite
        :class:`ActionValidateError` whose ``errors`` holds only the failing
        keys: the nested error tree for validation errors, ``str(exc)`` for
        anything else.  The sanitized output holds exactly the declared keys.
        """
        field_map = dict(fields)

        def check_shape(value: Any) -> dict[str, Any]:
            sanitized: dict[str, Any] = {}
            errors: dict[str, Any] = {}
            for key, validator in field_map.items():
                try:
                    sanitized[key] = validator.validate(read_field(value, key))
                except ActionValidateError as exc:
                    errors[key] = exc.errors
                except Exception as exc:
                    errors[key] = str(exc)
            if errors:
                raise ActionValidateError(errors)
            return sanitized

        return self.object.optional(check_shape, label=f"shape{{{', '.join(field_map)}}}")

    # ── Primitive accessors ───────────────────────────────────────────

    @property
    def string(self) -> ActionTypes:
        return self.type_of(TypeTag.STRING)

    @property
    def object(self) -> ActionTypes:
        return self.type_of(TypeTag.OBJECT)

    @property
    def bool(self) -> ActionTypes:
        return self.type_of(TypeTag.BOOLEAN)

    boolean = bool

    @property
    def number(self) -> ActionTypes:
        return self.type_of(TypeTag.NUMBER)

    @property
    def func(self) -> ActionTypes:
        return self.type_of(TypeTag.FUNCTION)

    function = func

    @property
    def date(self) -> ActionTypes:
        """Parse the value into an aware UTC ``datetime``."""

        def to_date(value: Any) -> datetime:
            result = coerce_datetime(value)
            if result is None:
                raise TypeMismatchError(type_tag(value), TypeTag.DATE)
            return result

        return self.optional(to_date, label=TypeTag.DATE.value)

    @property
    def array(self) -> ActionTypes:
        """Accept lists and tuples unchanged."""

        def check_array(value: Any) -> Any:
            if isinstance(value, (list, tuple)):
                return value
            raise TypeMismatchError(type_tag(value), TypeTag.ARRAY)

        return self.optional(check_array, label=TypeTag.ARRAY.value)

    @property
    def is_required(self) -> ActionTypes:
        """Fail with "Required" when the upstream value is ``UNDEFINED``."""

        def require(value: Any) -> Any:
            if value is UNDEFINED:
                raise RequiredError()
            return value

        return self.compose(require, label="is_required")


Types = ActionTypes()
