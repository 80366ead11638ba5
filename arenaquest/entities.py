"""Base characters and enemies that fight each other."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from arenaquest.observer import Subject


class CharacterType(Enum):
    SWORDSMAN = 0
    DRUID = 1
    SHAMAN = 2


class EnemyType(Enum):
    WITCH = 0
    DEMON = 1
    BEAST = 2


def _announce(message: str) -> str:
    """Print a message to the battle log and hand it back."""
    print(message)
    return message


class Character(Subject, ABC):
    """A playable fighter whose state changes are reported to observers."""

    object_count = 0

    def __init__(self, name, health, strength, defense, type):
        self._init_stats(name, health, strength, defense, type)
        print(f"Character {name} created!")

    def _init_stats(self, name, health, strength, defense, type) -> None:
        Subject.__init__(self)
        self.name: str = name
        self.health: int = health
        self.strength: int = strength
        self.defense: int = defense
        self.type: CharacterType = type

    @abstractmethod
    def describe(self) -> str:
        """Print a short description of this character and return it."""

    @abstractmethod
    def __add__(self, other):
        """Combine two characters of the same kind into a new one."""

    def attack(self, enemy: Enemy) -> None:
        print(f"{self.name} attacks {enemy.name}!")
        enemy.get_hit(self.strength)
        self.notify_observers()

    def get_hit(self, damage: int) -> None:
        actual = max(0, damage - self.defense)
        self.health -= actual
        print(f"{self.name} takes {actual} damage! Health: {self.health}")
        self.notify_observers()
        if self.health <= 0:
            self.die()

    def heal(self, amount: int) -> None:
        self.health += amount
        print(f"{self.name} heals for {amount} HP! Health is now {self.health}")
        self.notify_observers()

    def spawn(self) -> None:
        print(f"Mighty {self.name} appears!")
        self.notify_observers()

    def die(self) -> None:
        print(f"{self.name} has died!")
        self.notify_observers()


class Enemy:
    """A hostile creature the characters fight."""

    def __init__(self, name, health, damage, defense, type):
        self._init_stats(name, health, damage, defense, type)
        print(f"Enemy {name} created!")

    def _init_stats(self, name, health, damage, defense, type) -> None:
        self.name: str = name
        self.health: int = health
        self.damage: int = damage
        self.defense: int = defense
        self.type: EnemyType = type

    def attack(self, character: Character) -> None:
        print(f"{self.name} attacks {character.name}!")
        character.get_hit(self.damage)

    def get_hit(self, damage: int) -> None:
        actual = max(0, damage - self.defense)
        self.health -= actual
        print(f"{self.name} takes {actual} damage! Health: {self.health}")
        if self.health <= 0:
            self.die()

    def spawn(self) -> str:
        """Announce the enemy's arrival and return the announcement."""
        return _announce(f"Angry {self.name} appears!")

    def die(self) -> str:
        """Announce the enemy's defeat and return the announcement."""
        return _announce(f"{self.name} has been defeated!")

    def describe(self) -> str:
        """Print a short description of this enemy and return it."""
        return _announce("This is a generic enemy.")

    def increase_health(self, amount: int) -> None:
        self.health += amount