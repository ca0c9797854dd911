"""Insertion-ordered token set."""

from __future__ import annotations

from collections.abc import MutableSet
from typing import Iterable, Iterator


class TokenSet(MutableSet):
    """A set of class tokens that iterates in first-insertion order.

    Compiled CSS follows token iteration order, so an unordered ``set`` would
    make output order depend on string hashing.
    """

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._items: dict[str, None] = dict.fromkeys(tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, token: str) -> None:
        self._items[token] = None

    def discard(self, token: str) -> None:
        self._items.pop(token, None)

    def __repr__(self) -> str:
        return f"TokenSet({list(self._items)!r})"
