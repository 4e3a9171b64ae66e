"""Plugin system: pluggy hooks for contributing and observing actions."""

from jackprop.plugins.hookspecs import hookimpl

__all__ = ["hookimpl"]
