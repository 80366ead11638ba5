# arenaquest

A small text role-playing battle engine. Heroes (`Boss`, `Minion`) fight
enemies (`Enemy`, `BossEnemy`, `MinionEnemy`) in a `BattleArena`. Every change
to a hero's state can be reported to observers such as the console `UI`.
All events are printed to standard output as they happen.

## Installation

```
pip install .
```

## Running the demo

```
arenaquest
```

The command takes no options besides `--help`. It brings the boss "MadDog"
onto the battlefield, attaches a `UI` observer, deals him a hit of 30 and then
heals him by 20, printing each event. It exits with status 0.

## Using the library

```python
from arenaquest.boss import Boss
from arenaquest.enemies import BossEnemy
from arenaquest.entities import CharacterType, EnemyType
from arenaquest.arena import BattleArena
from arenaquest.observer import UI

boss = Boss("MadDog", 150, 25, 10, CharacterType.SWORDSMAN, 8)
boss.add_observer(UI())

villain = BossEnemy("Dread", 200, 20, 5, EnemyType.DEMON, True)
villain.empower()

BattleArena(boss, villain).battle()
```

### Modules

- `arenaquest.observer`: `Observer` (abstract, with `update()`), `Subject`
  (`add_observer`, `remove_observer`, `notify_observers`, and a read-only
  `observers` tuple) and `UI`, an observer that writes
  `[UI] Character's state has changed!` to a stream (standard output by
  default) and counts its calls in `updates`.
- `arenaquest.entities`: the `CharacterType` and `EnemyType` enums, the
  abstract `Character` (a `Subject`) and the base `Enemy`.
- `arenaquest.boss`: `Boss`, a character with `rage_level` and `is_dizzy`.
- `arenaquest.minion`: `Minion`, a character with `loyalty`.
- `arenaquest.enemies`: `BossEnemy` (with `enraged`) and `MinionEnemy`
  (with `sneakiness`).
- `arenaquest.arena`: `BattleArena`, whose `battle()` lets the hero attack the
  villain once and the villain strike back once.
- `arenaquest.field_modifier`: `get_higher_stat(a, b)`,
  `increase_health(obj, amount)`, `print_stats(obj)` and
  `describe_character(character)`.
- `arenaquest.modes`: `DungeonWarrior`, `ForestWarrior` and the training
  `Dummy`, each printing and returning a fixed line.

### Rules worth knowing

- Damage taken is the incoming damage minus defense, never below zero. When
  health drops to zero or below, `die()` is called.
- A character notifies its observers after attacking, being hit, healing,
  spawning and dying. Enemies have no observers.
- `Boss + Boss` and `Minion + Minion` build a new, combined character whose
  stats and rage level or loyalty are the sums of both. Combining a boss or
  minion with a different kind of character raises `TypeError`.
- Two bosses compare equal when their rage levels are equal. `boss_a & boss_b`
  is true only when both have health above 100 and rage level above 5.
- `Boss.power_strike()` raises `RuntimeError` when strength is below 15 or the
  boss is dizzy. `Boss.equip_rare_item()` raises `RuntimeError` when the rage
  level is below 10. `Boss.validate_health()` raises `ValueError` when health
  is negative. `Boss.default_rage_level()` returns 10.
- `BossEnemy.empower()` adds 5 damage, but only when the enemy is enraged.
  `MinionEnemy.sneak_attack(target)` hits for damage plus sneakiness.
- `Character.object_count` counts the bosses created.
- `get_higher_stat` returns `b` when the two values are equal.
  `increase_health` heals a character (notifying its observers) or raises an
  enemy's health silently. Both it and `print_stats` raise `TypeError` for
  anything that is neither a character nor an enemy.

## What it does not do

There is no interactive game loop, no player input, no turn order beyond a
single `BattleArena.battle()` round, and no saving or loading of characters.
The command only runs the fixed demonstration described above.

## Tests

```
pip install .[test]
pytest
```