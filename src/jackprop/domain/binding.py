"""Bind a map of store-taking actions to a concrete store."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any


def bind_actions_to_store(
    actions: Mapping[str, Callable[..., Any]],
) -> Callable[[Any], dict[str, Callable[..., Any]]]:
    """Return a factory that pre-binds *store* as each action's first argument.

    Usage::

        create_actions = bind_actions_to_store({"get_user": get_user})
        bound = create_actions(store)
        bound["get_user"]("u_1")  # -> get_user(store, "u_1")
    """
    snapshot = dict(actions)

    def create_actions(store: Any) -> dict[str, Callable[..., Any]]:
        return {name: functools.partial(action, store) for name, action in snapshot.items()}

    return create_actions
