"""Iterator drills: checked division, factorials and progress counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum

_U64_MAX = (1 << 64) - 1
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


class DivisionError(ArithmeticError):
    """Raised when a division cannot give an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return a divided by b if a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide each sample number by 27; raise the first error met."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping errors in place of results."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, _DIVISOR))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """Factorial of a non-negative number that fits in 64 unsigned bits."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(2, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries across maps with the given progress using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries across maps with the given progress."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)