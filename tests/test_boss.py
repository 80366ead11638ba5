import pytest

from arenaquest.boss import Boss
from arenaquest.entities import Character, CharacterType
from arenaquest.minion import Minion
from arenaquest.observer import UI


def _boss(name="MadDog", health=150, strength=25, defense=10, rage=8):
    return Boss(name, health, strength, defense, CharacterType.SWORDSMAN, rage)


def test_construction_announces_and_counts(capsys):
    before = Character.object_count
    boss = _boss()
    assert Character.object_count == before + 1
    assert capsys.readouterr().out == "Boss MadDog enters the battlefield!\n"
    assert boss.is_dizzy is False
    assert boss.rage_level == 8


def test_unleash_rage_adds_rage_to_strength(capsys):
    boss = _boss()
    capsys.readouterr()
    boss.unleash_rage()
    assert boss.strength == 33
    assert capsys.readouterr().out == "MadDog unleashes rage! Strength is now 33!\n"


def test_describe_and_battle_cry(capsys):
    boss = _boss()
    capsys.readouterr()
    boss.describe()
    boss.shout_battle_cry("For glory")
    assert capsys.readouterr().out == (
        "MadDog is a powerful boss with rage level 8\nMadDog roars: For glory!\n"
    )


def test_adding_bosses_combines_stats():
    first = _boss()
    second = Boss("Grim", 120, 20, 7, CharacterType.DRUID, 4)
    before = Character.object_count
    combined = first + second
    assert isinstance(combined, Boss)
    assert combined.name == "Combined MadDog Grim"
    assert combined.health == 270
    assert combined.strength == 45
    assert combined.defense == 17
    assert combined.rage_level == 12
    assert combined.type is CharacterType.SWORDSMAN
    assert Character.object_count == before + 1


def test_adding_boss_and_minion_fails():
    boss = _boss()
    minion = Minion("Tiny", 40, 5, 2, CharacterType.SHAMAN, 3)
    with pytest.raises(TypeError) as excinfo:
        boss.__add__(minion)
    assert "Cannot combine Boss with non-Boss character." in str(excinfo.value)


def test_adding_boss_and_number_fails():
    with pytest.raises(TypeError):
        _boss() + 5


def test_equality_compares_rage_level():
    assert _boss(name="A", rage=8) == _boss(name="B", health=10, rage=8)
    assert not (_boss(rage=8) == _boss(rage=9))


def test_and_requires_both_strong_and_raging():
    assert (_boss(health=150, rage=8) & _boss(health=101, rage=6)) is True
    assert (_boss(health=150, rage=8) & _boss(health=100, rage=8)) is False
    assert (_boss(health=150, rage=5) & _boss(health=150, rage=8)) is False


def test_default_rage_level():
    assert Boss.default_rage_level() == 10


def test_power_strike_success(capsys):
    boss = _boss()
    capsys.readouterr()
    boss.power_strike()
    assert capsys.readouterr().out == "MadDog uses Power Strike with strength 25!\n"


def test_power_strike_needs_strength():
    with pytest.raises(RuntimeError, match="Strength too low for Power Strike!"):
        _boss(strength=14).power_strike()


def test_power_strike_blocked_when_dizzy():
    boss = _boss()
    boss.is_dizzy = True
    with pytest.raises(RuntimeError, match="MadDog is dizzy"):
        boss.power_strike()


def test_equip_rare_item(capsys):
    with pytest.raises(RuntimeError, match="Rage level too low"):
        _boss(rage=9).equip_rare_item()
    boss = _boss(rage=10)
    capsys.readouterr()
    boss.equip_rare_item()
    assert capsys.readouterr().out == "MadDog equips a legendary Item!\n"


def test_validate_health():
    boss = _boss(health=5, defense=0)
    boss.validate_health()
    boss.get_hit(20)
    with pytest.raises(ValueError, match="Health cannot be negative."):
        boss.validate_health()


def test_main_scenario_with_ui_observer(capsys):
    boss = _boss()
    ui = UI()
    boss.add_observer(ui)
    capsys.readouterr()
    boss.get_hit(30)
    boss.heal(20)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "MadDog takes 20 damage! Health: 130",
        "[UI] Character's state has changed!",
        "MadDog heals for 20 HP! Health is now 150",
        "[UI] Character's state has changed!",
    ]
    assert ui.updates == 2