"""Action factory: turn a descriptor into a validated, callable action.

``create()`` checks the descriptor eagerly and raises
:class:`ActionCreateError` with a fixed message for the first missing part.
The returned :class:`Action` merges caller values over declared defaults,
validates jacks and props together, and calls ``perform`` with the
sanitized values only when both sides pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jackprop.domain.errors import ActionCreateError, ActionValidateError
from jackprop.domain.tags import UNDEFINED
from jackprop.domain.types import ActionTypes

logger = logging.getLogger(__name__)

DefaultsProvider = Callable[[], Mapping[str, Any]]


class ActionDescriptor(BaseModel):
    """Frozen description of an action.

    Attributes:
        name: Action name (e.g. ``"CreateUser"``).
        description: One-line human description.
        jack_types: Field name -> validator for the jacks input.
        prop_types: Field name -> validator for the props input.
        perform: Handler called as ``perform(jacks, props)``.
        get_default_jacks: Optional zero-argument provider of default jacks.
        get_default_props: Optional zero-argument provider of default props.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    jack_types: dict[str, Any] = Field(default_factory=dict)
    prop_types: dict[str, Any] = Field(default_factory=dict)
    perform: Callable[..., Any]
    get_default_jacks: DefaultsProvider | None = None
    get_default_props: DefaultsProvider | None = None


def _label_of(validator: Any) -> str:
    return getattr(validator, "label", "") or "any"


def _check_descriptor(action: Any) -> ActionDescriptor:
    """Validate the descriptor shape, raising on the first missing part."""
    if isinstance(action, ActionDescriptor):
        return action
    if not isinstance(action, Mapping):
        raise ActionCreateError("An action is required")
    if not isinstance(action.get("name"), str):
        raise ActionCreateError("An action name is required")
    if not isinstance(action.get("description"), str):
        raise ActionCreateError("An action description is required")
    if not isinstance(action.get("jack_types"), Mapping):
        raise ActionCreateError("The action jack types are required")
    if not isinstance(action.get("prop_types"), Mapping):
        raise ActionCreateError("The action prop types are required")
    if not callable(action.get("perform")):
        raise ActionCreateError("An action perform function is required")

    return ActionDescriptor(
        name=action["name"],
        description=action["description"],
        jack_types=dict(action["jack_types"]),
        prop_types=dict(action["prop_types"]),
        perform=action["perform"],
        get_default_jacks=action.get("get_default_jacks"),
        get_default_props=action.get("get_default_props"),
    )


def extend(defaults: Mapping[str, Any], values: Mapping[str, Any] | None) -> dict[str, Any]:
    """Overlay *values* onto a copy of *defaults*.

    An absent *values* mapping (``None`` or ``UNDEFINED``) leaves the defaults
    untouched; a present key always overwrites, even when its value is
    ``UNDEFINED``.
    """
    merged = dict(defaults)
    if values is not None and values is not UNDEFINED:
        merged.update(values)
    return merged


class Action:
    """A created action, callable as ``action(jacks, props)``.

    Validation failures propagate as :class:`ActionValidateError` with
    ``errors`` keyed by ``"jacks"`` and/or ``"props"``.
    """

    def __init__(self, descriptor: ActionDescriptor) -> None:
        self.descriptor = descriptor
        self._types = ActionTypes().shape(
            {
                "jacks": ActionTypes().shape(descriptor.jack_types),
                "props": ActionTypes().shape(descriptor.prop_types),
            }
        )

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def description(self) -> str:
        return self.descriptor.description

    def defaults(self) -> tuple[dict[str, Any], dict[str, Any]]:
        """Return freshly computed ``(default_jacks, default_props)``."""
        d = self.descriptor
        jacks = dict(d.get_default_jacks()) if d.get_default_jacks else {}
        props = dict(d.get_default_props()) if d.get_default_props else {}
        return jacks, props

    def __call__(
        self,
        jacks: Mapping[str, Any] | None = None,
        props: Mapping[str, Any] | None = None,
    ) -> Any:
        default_jacks, default_props = self.defaults()
        try:
            sanitized = self._types.validate(
                {
                    "jacks": extend(default_jacks, jacks),
                    "props": extend(default_props, props),
                }
            )
        except ActionValidateError as exc:
            logger.debug("Validation failed for action %s: %s", self.name, exc.errors)
            raise

        logger.debug("Performing action %s", self.name)
        return self.descriptor.perform(sanitized["jacks"], sanitized["props"])

    def describe(self) -> dict[str, Any]:
        """Plain-data summary of the action's name, description and fields.

        Default providers are reported, never called.
        """
        d = self.descriptor
        return {
            "name": d.name,
            "description": d.description,
            "jacks": {key: _label_of(v) for key, v in d.jack_types.items()},
            "props": {key: _label_of(v) for key, v in d.prop_types.items()},
            "has_default_jacks": d.get_default_jacks is not None,
            "has_default_props": d.get_default_props is not None,
        }

    def __repr__(self) -> str:
        return f"Action(name={self.name!r})"


def create(action: Any) -> Action:
    """Check *action* (a mapping or :class:`ActionDescriptor`) and return a callable.

    Raises:
        ActionCreateError: If the descriptor, its name, description, jack
            types, prop types or perform function is missing.
    """
    descriptor = _check_descriptor(action)
    logger.debug("Created action %s", descriptor.name)
    return Action(descriptor)
