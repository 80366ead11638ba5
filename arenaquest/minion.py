"""The minion character: a loyal follower of a boss."""

from __future__ import annotations

from arenaquest.entities import Character


class Minion(Character):
    """A loyal helper character."""

    def __init__(self, name, health, strength, defense, type, loyalty):
        super().__init__(name, health, strength, defense, type)
        self.loyalty: int = loyalty

    def cheer_boss(self) -> str:
        """Cheer the boss and return the cheer."""
        text = f"{self.name} cheers the boss with loyalty level {self.loyalty}!"
        print(text)
        return text

    def describe(self) -> str:
        text = f"{self.name} is a loyal minion with loyalty level {self.loyalty}"
        print(text)
        return text

    def __add__(self, other):
        if isinstance(other, Minion):
            return Minion(
                f"Combined_{self.name}_{other.name}",
                self.health + other.health,
                self.strength + other.strength,
                self.defense + other.defense,
                self.type,
                self.loyalty + other.loyalty,
            )
        if isinstance(other, Character):
            raise TypeError("Cannot combine Minion with non-Minion character.")
        return NotImplemented