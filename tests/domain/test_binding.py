"""Tests for bind_actions_to_store."""

from __future__ import annotations

from typing import Any

from jackprop.domain.binding import bind_actions_to_store


class _Store:
    def get(self, key: str) -> str:
        return key


ACTIONS = {
    "foo": lambda store: store.get("foo"),
    "bar": lambda store, suffix="": store.get("bar") + suffix,
}


class TestBindActionsToStore:
    def test_binds_store_as_first_argument(self) -> None:
        bound = bind_actions_to_store(ACTIONS)(_Store())
        assert bound["foo"]() == "foo"
        assert bound["bar"]() == "bar"

    def test_forwards_remaining_arguments(self) -> None:
        bound = bind_actions_to_store(ACTIONS)(_Store())
        assert bound["bar"]("!") == "bar!"
        assert bound["bar"](suffix="?") == "bar?"

    def test_same_names(self) -> None:
        bound = bind_actions_to_store(ACTIONS)(_Store())
        assert set(bound) == {"foo", "bar"}

    def test_each_store_bound_independently(self) -> None:
        seen: list[Any] = []
        create_actions = bind_actions_to_store({"record": seen.append})
        a, b = object(), object()
        create_actions(a)["record"]()
        create_actions(b)["record"]()
        assert seen == [a, b]

    def test_action_map_snapshot(self) -> None:
        actions = dict(ACTIONS)
        create_actions = bind_actions_to_store(actions)
        actions["baz"] = lambda store: "baz"
        assert "baz" not in create_actions(_Store())
