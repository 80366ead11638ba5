"""Command-line entry point running a short demonstration scene."""

from __future__ import annotations

import argparse

from arenaquest.boss import Boss
from arenaquest.entities import CharacterType
from arenaquest.observer import UI


def main(argv=None) -> int:
    """Spawn a boss watched by the UI, hit it and heal it."""
    parser = argparse.ArgumentParser(
        prog="arenaquest",
        description="Run a short arena scene with an observed boss.",
    )
    parser.parse_args(argv)

    boss = Boss("MadDog", 150, 25, 10, CharacterType.SWORDSMAN, 8)
    ui_observer = UI()
    boss.add_observer(ui_observer)
    boss.get_hit(30)
    boss.heal(20)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())