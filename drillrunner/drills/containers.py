"""Container drills: fruit baskets, a scores table and list doubling."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_GOALS_PATTERN = re.compile(r"\+?[0-9]+")


class Fruit(Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 2, "cherry": 1}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add two of every fruit kind missing from the basket, leaving the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass
class Team:
    """A team with its goals scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _GOALS_PATTERN.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("goal total exceeds 255")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored = _add_goals(team_1.goals_scored, team_1_score)
        team_1.goals_conceded = _add_goals(team_1.goals_conceded, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored = _add_goals(team_2.goals_scored, team_2_score)
        team_2.goals_conceded = _add_goals(team_2.goals_conceded, team_1_score)
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]