"""The boss character: strong, raging and able to merge with other bosses."""

from __future__ import annotations

from arenaquest.entities import Character


class Boss(Character):
    """A powerful character driven by rage."""

    def __init__(self, name, health, strength, defense, type, rage_level):
        self._init_stats(name, health, strength, defense, type)
        self.rage_level: int = rage_level
        self.is_dizzy: bool = False
        Character.object_count += 1
        print(f"Boss {name} enters the battlefield!")

    def unleash_rage(self) -> None:
        self.strength += self.rage_level
        print(f"{self.name} unleashes rage! Strength is now {self.strength}!")

    def describe(self) -> str:
        text = f"{self.name} is a powerful boss with rage level {self.rage_level}"
        print(text)
        return text

    def __add__(self, other):
        if isinstance(other, Boss):
            return Boss(
                f"Combined {self.name} {other.name}",
                self.health + other.health,
                self.strength + other.strength,
                self.defense + other.defense,
                self.type,
                self.rage_level + other.rage_level,
            )
        if isinstance(other, Character):
            raise TypeError("Cannot combine Boss with non-Boss character.")
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Boss):
            return NotImplemented
        return self.rage_level == other.rage_level

    __hash__ = None

    def __and__(self, other):
        if not isinstance(other, Boss):
            return NotImplemented
        return (self.health > 100 and self.rage_level > 5) and (
            other.health > 100 and other.rage_level > 5
        )

    @staticmethod
    def default_rage_level() -> int:
        return 10

    def shout_battle_cry(self, cry: str) -> None:
        print(f"{self.name} roars: {cry}!")

    def power_strike(self) -> None:
        if self.strength < 15:
            raise RuntimeError("Strength too low for Power Strike!")
        if self.is_dizzy:
            raise RuntimeError(
                f"{self.name} is dizzy and cannot perform a power attack!"
            )
        print(f"{self.name} uses Power Strike with strength {self.strength}!")

    def equip_rare_item(self) -> None:
        if self.rage_level < 10:
            raise RuntimeError("Cannot equip rare legendary Item: Rage level too low!")
        print(f"{self.name} equips a legendary Item!")

    def validate_health(self) -> None:
        if self.health < 0:
            raise ValueError("Health cannot be negative.")