"""
Unit tests for character types and classifier predicates.
"""
import pytest

from src.core.data import CharacterClass, Damage
from src.game.entities import (
    Archer,
    Character,
    Warrior,
    Wizard,
    create_character,
    is_archer,
    is_warrior,
    is_wizard,
)

PREDICATES = [is_warrior, is_wizard, is_archer]


class TestCharacterTypes:
    """Test the three character types."""

    def test_capabilities(self):
        """Test that each type outputs its own damage kind."""
        assert Warrior().smash() is Damage.PHYSICAL
        assert Wizard().burn() is Damage.MAGICAL
        assert Archer().shoot() is Damage.RANGED

    @pytest.mark.parametrize("character,name", [
        (Warrior(), "Warrior"),
        (Wizard(), "Wizard"),
        (Archer(), "Archer"),
    ])
    def test_display_name(self, character, name):
        assert str(character) == name
        assert character.get_class_name() == name

    def test_single_capability(self):
        """Test that no type exposes another type's action."""
        assert not hasattr(Warrior(), "burn") and not hasattr(Warrior(), "shoot")
        assert not hasattr(Wizard(), "smash") and not hasattr(Wizard(), "shoot")
        assert not hasattr(Archer(), "smash") and not hasattr(Archer(), "burn")

    def test_equal_by_class(self):
        assert Warrior() == Warrior()
        assert Warrior() != Wizard()
        assert len({Warrior(), Warrior(), Archer()}) == 2

    def test_class_info(self):
        info = Wizard().get_class_info()
        assert info.name == "Wizard"
        assert info.damage is Damage.MAGICAL

    def test_base_is_not_instantiable(self):
        with pytest.raises(TypeError, match="Character has no character class"):
            Character()

    def test_untagged_subclass_is_not_instantiable(self):
        class Peasant(Character):
            pass

        with pytest.raises(TypeError, match="Peasant has no character class"):
            Peasant()


class TestClassifierPredicates:
    """Test that predicates are mutually exclusive and exhaustive."""

    @pytest.mark.parametrize("character,expected", [
        (Warrior(), is_warrior),
        (Wizard(), is_wizard),
        (Archer(), is_archer),
    ])
    def test_exactly_one_predicate_holds(self, character, expected):
        matches = [predicate for predicate in PREDICATES if predicate(character)]
        assert matches == [expected]

    def test_predicates_read_class_tag(self):
        """Test that classification ignores method presence."""

        class Impostor(Warrior):
            def burn(self):
                return Damage.MAGICAL

        impostor = Impostor()
        assert is_warrior(impostor)
        assert not is_wizard(impostor)


class TestCreateCharacter:
    """Test the character factory."""

    @pytest.mark.parametrize("character_class,character_type", [
        (CharacterClass.WARRIOR, Warrior),
        (CharacterClass.WIZARD, Wizard),
        (CharacterClass.ARCHER, Archer),
    ])
    def test_creates_matching_type(self, character_class, character_type):
        character = create_character(character_class)
        assert type(character) is character_type
        assert character.character_class is character_class

    def test_unknown_class(self):
        with pytest.raises(KeyError):
            create_character("paladin")  # type: ignore[arg-type]


class TestPackageExports:
    """Test the public surface of the entities package."""

    def test_exports(self):
        import src.game.entities as entities

        assert set(entities.__all__) == {
            "Character", "Warrior", "Wizard", "Archer",
            "is_warrior", "is_wizard", "is_archer",
            "CHARACTER_TYPES", "create_character",
        }
