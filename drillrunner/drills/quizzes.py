"""Quiz drills: pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def calculate_price_of_apples(n: int) -> int:
    """Apples cost 2 each, or 1 each when buying more than 40."""
    return n if n > 40 else 2 * n


class Command(Enum):
    """Transformations that take no argument."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


def transformer(items: list[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Command.UPPERCASE:
                output.append(text.upper())
            case Command.TRIM:
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetic grade."""

    grade: float | str
    student_name: str
    student_age: int

    def __str__(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )