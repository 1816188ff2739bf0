"""
Branch-scoped context for component resolution.

A Context is a shallow key/value overlay handed to every component. Each
child is resolved against its own branch taken immediately before descending,
so an update made while resolving one child is visible to that child's
descendants only, never to its siblings or to the parent's continuation.
"""

from collections.abc import Iterator, Mapping
from typing import Any


class Context(Mapping[str, Any]):
    """Read-only mapping view of the values visible to the current branch."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None, **overrides: Any):
        self._values: dict[str, Any] = {**(values or {}), **overrides}

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context({self._values!r})"

    def branch(self) -> "Context":
        """Independent shallow copy for descending into one child."""
        return Context(self._values)

    def overlay(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> "Context":
        """
        Create a new context with overrides applied on top of this one.

        Params:
            overrides: Mapping of keys to replace or add
            **kwargs: Additional keys to replace or add

        Returns:
            New Context; this context is left untouched
        """
        return Context({**self._values, **(overrides or {}), **kwargs})

    def update(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """
        Merge overrides into this context in place, last write wins.

        Components receive this bound method as their third argument, so an
        update affects the remainder of the component's own branch.

        Params:
            overrides: Mapping of keys to replace or add
            **kwargs: Additional keys to replace or add
        """
        self._values.update(overrides or {})
        self._values.update(kwargs)
