"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; empty names are refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot become a positive nonzero integer."""


class NegativeError(CreationError):
    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Parsing failed; the cause is a ValueError or a CreationError."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive nonzero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc