"""Specialised enemies: enraged bosses and sneaky minions."""

from __future__ import annotations

from arenaquest.entities import Character, Enemy


class BossEnemy(Enemy):
    """A terrifying enemy that may be enraged."""

    def __init__(self, name, health, damage, defense, type, enraged):
        self._init_stats(name, health, damage, defense, type)
        self.enraged: bool = enraged

    def empower(self) -> None:
        if self.enraged:
            self.damage += 5
            print(f"{self.name} is enraged! Damage increased to {self.damage}!")

    def describe(self) -> str:
        text = f"BossEnemy {self.name} - terrifying and enraged!"
        print(text)
        return text


class MinionEnemy(Enemy):
    """A sly enemy whose sneak attacks deal bonus damage."""

    def __init__(self, name, health, damage, defense, type, sneakiness):
        self._init_stats(name, health, damage, defense, type)
        self.sneakiness: int = sneakiness

    def sneak_attack(self, target: Character) -> None:
        print(f"{self.name} does a sneak attack!")
        target.get_hit(self.damage + self.sneakiness)

    def describe(self) -> str:
        text = f"MinionEnemy {self.name} - sneaky and sly."
        print(text)
        return text