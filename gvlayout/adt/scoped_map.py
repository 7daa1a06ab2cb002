"""A map whose bindings are grouped in nested scopes."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ScopedMap(Generic[K, V]):
    """A stack of scopes; lookups see the innermost binding of a key."""

    def __init__(self) -> None:
        self._stack: list[dict[K, V]] = []

    def push(self) -> None:
        """Open a new, empty scope."""
        self._stack.append({})

    def pop(self) -> None:
        """Drop the innermost scope; does nothing when there is none."""
        if self._stack:
            self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)

    def is_empty(self) -> bool:
        return not self._stack

    def insert(self, key: K, value: V) -> None:
        """Bind ``key`` in the innermost scope."""
        if not self._stack:
            raise IndexError("no open scope to insert into")
        self._stack[-1][key] = value

    def flatten(self) -> dict[K, V]:
        """Merge all scopes, inner bindings overriding outer ones."""
        merged: dict[K, V] = {}
        for scope in self._stack:
            merged.update(scope)
        return merged

    def get(self, key: K) -> V | None:
        for scope in reversed(self._stack):
            if key in scope:
                return scope[key]
        return None

    def has(self, key: K) -> bool:
        return any(key in scope for scope in self._stack)

    def __contains__(self, key: object) -> bool:
        return any(key in scope for scope in self._stack)