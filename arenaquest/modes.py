"""Alternative game modes and a training dummy."""

from __future__ import annotations

from abc import ABC, abstractmethod


class _ModeCharacter(ABC):
    """A fighter whose attack depends on the terrain of the mode."""

    @abstractmethod
    def attack(self) -> str:
        """Perform an attack in this mode and return its description."""


def _announce(message: str) -> str:
    print(message)
    return message


class DungeonWarrior(_ModeCharacter):
    """A warrior fighting in the dark dungeons."""

    def attack(self) -> str:
        return _announce("Attacking in Dungeons! You can not see anything!")


class ForestWarrior(_ModeCharacter):
    """A warrior fighting among the trees."""

    def attack(self) -> str:
        return _announce("You fight in the forrest! You can not swing your sword!")


class Dummy:
    """A training dummy that taunts the player."""

    def say_provocation(self) -> str:
        return _announce("A dummy appears you can train on it!")