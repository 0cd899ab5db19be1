"""Pointer drills: a cons list and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""

    def __iter__(self) -> Iterator[int]:
        return iter(())

    def __len__(self) -> int:
        return 0


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.value
            node = node.rest

    def __len__(self) -> int:
        return sum(1 for _ in self)


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a few values."""
    return Cons(1, Cons(2, Nil()))


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values; the input itself is returned when nothing needs changing."""
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]