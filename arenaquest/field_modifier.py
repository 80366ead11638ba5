"""Helpers that adjust and report the stats of characters and enemies."""

from __future__ import annotations

from functools import singledispatch
from typing import TypeVar

from arenaquest.entities import Character, Enemy

T = TypeVar("T")


def get_higher_stat(a: T, b: T) -> T:
    """Return the larger of two values, preferring ``b`` on a tie."""
    return a if a > b else b


@singledispatch
def increase_health(obj, amount: int) -> None:
    """Raise the health of a character or an enemy by ``amount``."""
    raise TypeError(f"Cannot increase health of {type(obj).__name__}")


@increase_health.register
def _(obj: Character, amount: int) -> None:
    obj.heal(amount)


@increase_health.register
def _(obj: Enemy, amount: int) -> None:
    obj.increase_health(amount)


@singledispatch
def print_stats(obj) -> None:
    """Print the combat stats of a character or an enemy."""
    raise TypeError(f"Cannot print stats of {type(obj).__name__}")


@print_stats.register
def _(obj: Character) -> None:
    print("Character Stats:")
    print(f"Health: {obj.health}")
    print(f"Strength: {obj.strength}")
    print(f"Defense: {obj.defense}")


@print_stats.register
def _(obj: Enemy) -> None:
    print("Enemy Stats:")
    print(f"Health: {obj.health}")
    print(f"Damage: {obj.damage}")
    print(f"Defense: {obj.defense}")


def describe_character(character: Character) -> None:
    """Print the description of the given character."""
    character.describe()