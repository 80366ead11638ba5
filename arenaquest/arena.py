"""A simple arena where one character and one enemy exchange blows."""

from __future__ import annotations

from arenaquest.entities import Character, Enemy


class BattleArena:
    """Pairs a hero with a villain and runs a single round of combat."""

    def __init__(self, hero: Character, villain: Enemy) -> None:
        self.hero = hero
        self.villain = villain

    def battle(self) -> None:
        """The hero strikes first, then the villain strikes back."""
        print("***BATTLE STARTS!*** ")
        self.hero.attack(self.villain)
        self.villain.attack(self.hero)