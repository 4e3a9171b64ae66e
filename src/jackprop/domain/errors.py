"""Error hierarchy for action definition and validation.

Two disjoint kinds:

- :class:`ActionCreateError`: the action descriptor itself is malformed.
  Raised by ``create()`` before any callable exists.
- :class:`ActionValidateError`: call arguments failed validation.  Carries
  ``errors``: a leaf message string, or a mapping mirroring the failing shape.
"""

from __future__ import annotations

from typing import Any

VALIDATION_FAILED_MESSAGE = "The action could not be validated"
REQUIRED_MESSAGE = "Required"

ErrorTree = str | dict[str, Any]


class JackpropError(Exception):
    """Base class for all jackprop errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ActionCreateError(JackpropError):
    """The action descriptor is missing a required part."""


class ActionValidateError(JackpropError):
    """Input failed validation.

    Leaf failures carry their message as ``errors``; composite (shape)
    failures carry a dict keyed by the failing field names only.
    """

    def __init__(self, errors: ErrorTree) -> None:
        message = errors if isinstance(errors, str) else VALIDATION_FAILED_MESSAGE
        super().__init__(message)
        self.errors = errors

    @property
    def is_composite(self) -> bool:
        return isinstance(self.errors, dict)


class TypeMismatchError(ActionValidateError):
    """The value's type tag is not the expected one."""

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__(f'Expected type to be "{expected}" but found "{actual}"')
        self.actual = actual
        self.expected = expected


class RequiredError(ActionValidateError):
    """A required value was absent."""

    def __init__(self) -> None:
        super().__init__(REQUIRED_MESSAGE)
