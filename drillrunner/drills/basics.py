"""Basic drills: conditionals, options and small functions."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour of the day; None for hours past 24."""
    if time_of_day < 22:
        return 5
    if time_of_day < 25:
        return 0
    return None


def is_even(num: int) -> bool:
    """Whether num is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num