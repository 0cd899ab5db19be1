"""String drills: colour words, trimming, composing and capitalising."""

from __future__ import annotations

from collections.abc import Iterable

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is green, blue or red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def capitalize_first(word: str) -> str:
    """Upper-case the first character."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them together."""
    return "".join(capitalize_first(word) for word in words)