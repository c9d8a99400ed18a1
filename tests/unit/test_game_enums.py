"""
Unit tests for game enumerations.

Tests the enums and lookup tables used throughout the combat code for
consistency, completeness, and proper behavior.
"""
from dataclasses import fields

import pytest

from src.core.data import (
    ACTION_CLASS,
    CHARACTER_CLASS_DATA,
    CHARACTER_CLASS_NAMES,
    DAMAGE_NAMES,
    DAMAGE_ORDER,
    CharacterClass,
    CharacterClassInfo,
    CombatAction,
    Damage,
    FailureType,
)


class TestCharacterClass:
    """Test the CharacterClass enumeration."""

    def test_closed_set_of_classes(self):
        """Test that exactly the three playable classes exist."""
        assert [c.name for c in CharacterClass] == ['WARRIOR', 'WIZARD', 'ARCHER']

    @pytest.mark.parametrize("character_class,name", [
        (CharacterClass.WARRIOR, "Warrior"),
        (CharacterClass.WIZARD, "Wizard"),
        (CharacterClass.ARCHER, "Archer"),
    ])
    def test_display_names(self, character_class, name):
        assert CHARACTER_CLASS_NAMES[character_class] == name

    def test_every_class_has_info(self):
        """Test that every class has static data."""
        for character_class in CharacterClass:
            info = CHARACTER_CLASS_DATA[character_class]
            assert info.name == CHARACTER_CLASS_NAMES[character_class]
            assert ACTION_CLASS[info.action] is character_class

    def test_class_info_fields(self):
        """Test that class info holds only what the combat code reads."""
        assert [f.name for f in fields(CharacterClassInfo)] == ["name", "damage", "action"]


class TestDamage:
    """Test the Damage enumeration."""

    def test_damage_values(self):
        """Test damage display values."""
        assert Damage.PHYSICAL.value == "Physical damage"
        assert Damage.MAGICAL.value == "Magical damage"
        assert Damage.RANGED.value == "Ranged damage"

    def test_damage_order_covers_all_kinds(self):
        assert set(DAMAGE_ORDER) == set(Damage)
        assert len(DAMAGE_ORDER) == len(Damage)

    def test_damage_names(self):
        assert DAMAGE_NAMES[Damage.PHYSICAL] == "Physical"
        assert DAMAGE_NAMES[Damage.MAGICAL] == "Magical"
        assert DAMAGE_NAMES[Damage.RANGED] == "Ranged"

    def test_one_damage_kind_per_class(self):
        """Test that classes map 1:1 onto damage kinds."""
        damages = [info.damage for info in CHARACTER_CLASS_DATA.values()]
        assert sorted(damages, key=lambda d: d.value) == sorted(Damage, key=lambda d: d.value)


class TestFailureType:
    """Test the FailureType enumeration."""

    def test_failure_types(self):
        assert [f.name for f in FailureType] == ['NO_TARGET', 'INVALID_TARGET']

    def test_failure_type_values(self):
        assert FailureType.NO_TARGET.value == "NoTarget"
        assert FailureType.INVALID_TARGET.value == "InvalidTarget"


class TestCombatAction:
    """Test the CombatAction enumeration."""

    @pytest.mark.parametrize("name,expected", [
        ("smash", CombatAction.SMASH),
        ("BURN", CombatAction.BURN),
        ("  Shoot ", CombatAction.SHOOT),
    ])
    def test_from_name(self, name, expected):
        assert CombatAction.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown action 'heal'"):
            CombatAction.from_name("heal")

    def test_action_class_lookup(self):
        """Test that each action is bound to exactly one class."""
        assert ACTION_CLASS[CombatAction.SMASH] is CharacterClass.WARRIOR
        assert ACTION_CLASS[CombatAction.BURN] is CharacterClass.WIZARD
        assert ACTION_CLASS[CombatAction.SHOOT] is CharacterClass.ARCHER
