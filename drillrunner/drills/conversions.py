"""Conversion drills: byte and character counts, people and colours from input."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_USIZE_MAX = (1 << 64) - 1


def _parse_usize(text: str) -> int:
    """Parse an unsigned machine-size integer, strictly."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of arg."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in arg."""
    return len(arg)


def num_sq(value: int) -> int:
    """Return value squared."""
    return value * value


def average(values: Iterable[float]) -> float:
    """Arithmetic mean of the values."""
    values = list(values)
    if not values:
        raise ValueError("cannot average an empty sequence")
    return sum(values) / len(values)


class ParsePersonErrorKind(Enum):
    """Why a person could not be parsed."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "age is not a number"


class ParsePersonError(ValueError):
    """Raised when text cannot be parsed into a person."""

    def __init__(self, kind: ParsePersonErrorKind, cause: Exception | None = None) -> None:
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, 30 years old."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse "name,age"; fall back to the default person on any problem."""
        try:
            return cls.parse(text)
        except ParsePersonError:
            return cls.default()

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse "name,age"; raise ParsePersonError on any problem."""
        if not text:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        parts = text.split(",")
        if len(parts) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = parts
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, exc) from exc
        return cls(name=name, age=age)


class IntoColorError(ValueError):
    """Raised when values cannot become a colour."""

    BAD_LEN = "BadLen"
    INT_CONVERSION = "IntConversion"

    _MESSAGES = {
        BAD_LEN: "exactly three components are required",
        INT_CONVERSION: "components must be integers in 0..=255",
    }

    def __init__(self, kind: str) -> None:
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


def _component(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise IntoColorError(IntoColorError.INT_CONVERSION)
    return value


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, values: Iterable[int]) -> Color:
        """Build a colour from three integers in 0..=255."""
        values = tuple(values)
        if len(values) != 3:
            raise IntoColorError(IntoColorError.BAD_LEN)
        red, green, blue = (_component(value) for value in values)
        return cls(red=red, green=green, blue=blue)