"""jackprop: typed, validated actions built from a composable validator algebra."""

from __future__ import annotations

from jackprop.domain.actions import Action, ActionDescriptor, create
from jackprop.domain.binding import bind_actions_to_store
from jackprop.domain.errors import (
    ActionCreateError,
    ActionValidateError,
    JackpropError,
    RequiredError,
    TypeMismatchError,
)
from jackprop.domain.tags import UNDEFINED, TypeTag, type_tag
from jackprop.domain.types import ActionTypes, Types

__version__ = "0.3.0"

__all__ = [
    "UNDEFINED",
    "Action",
    "ActionCreateError",
    "ActionDescriptor",
    "ActionTypes",
    "ActionValidateError",
    "JackpropError",
    "RequiredError",
    "TypeMismatchError",
    "TypeTag",
    "Types",
    "__version__",
    "bind_actions_to_store",
    "create",
    "type_tag",
]
