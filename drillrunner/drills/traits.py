"""Trait drills: appending "Bar", shared licensing info and combined behaviours."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or the string "Bar" to a list."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Gives every subclass the same licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


class OtherStruct(SomeTrait, OtherTrait):
    """Has both behaviours."""


def some_func(item: SomeTrait) -> bool:
    """Combine both behaviours; the item must provide them."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError("item must provide both SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()