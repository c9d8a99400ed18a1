"""Playable character types.

The player controls one of three character types, each differentiated by the
single kind of damage it can put out:
- Warrior: smashes for physical damage
- Wizard: burns for magical damage
- Archer: shoots for ranged damage

Every character carries an explicit ``character_class`` tag. The classifier
predicates below read that tag rather than probing for methods, so the three
are mutually exclusive and together cover every character.
"""

from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, TypeGuard

from ...core.data import (
    CharacterClass,
    CharacterClassInfo,
    Damage,
    CHARACTER_CLASS_DATA,
    CHARACTER_CLASS_NAMES,
)


class Character(ABC):
    """Base class for all character types."""

    character_class: ClassVar[CharacterClass]

    def __new__(cls, *args, **kwargs):
        if not isinstance(getattr(cls, "character_class", None), CharacterClass):
            raise TypeError(f"{cls.__name__} has no character class and cannot be instantiated")
        return super().__new__(cls)

    def get_class_name(self) -> str:
        """Get the human-readable class name."""
        return CHARACTER_CLASS_NAMES[self.character_class]

    def get_class_info(self) -> CharacterClassInfo:
        """Get the static information for this character's class."""
        return CHARACTER_CLASS_DATA[self.character_class]

    def __str__(self) -> str:
        return self.get_class_name()


@dataclass(frozen=True)
class Warrior(Character):
    """A warrior can only output physical damage."""

    character_class: ClassVar[CharacterClass] = CharacterClass.WARRIOR

    def smash(self) -> Damage:
        return Damage.PHYSICAL


@dataclass(frozen=True)
class Wizard(Character):
    """A wizard can only output magical damage."""

    character_class: ClassVar[CharacterClass] = CharacterClass.WIZARD

    def burn(self) -> Damage:
        return Damage.MAGICAL


@dataclass(frozen=True)
class Archer(Character):
    """An archer can only output ranged damage."""

    character_class: ClassVar[CharacterClass] = CharacterClass.ARCHER

    def shoot(self) -> Damage:
        return Damage.RANGED


# ============== Classifier Predicates ==============


def is_warrior(character: Character) -> TypeGuard[Warrior]:
    return character.character_class is CharacterClass.WARRIOR


def is_wizard(character: Character) -> TypeGuard[Wizard]:
    return character.character_class is CharacterClass.WIZARD


def is_archer(character: Character) -> TypeGuard[Archer]:
    return character.character_class is CharacterClass.ARCHER


# ============== Factory ==============

CHARACTER_TYPES: dict[CharacterClass, type[Character]] = {
    CharacterClass.WARRIOR: Warrior,
    CharacterClass.WIZARD: Wizard,
    CharacterClass.ARCHER: Archer,
}


def create_character(character_class: CharacterClass) -> Character:
    """Create a character of the given class.

    Args:
        character_class: Character class enum

    Returns:
        New character instance

    Raises:
        KeyError: If character_class is not recognized
    """
    if character_class not in CHARACTER_TYPES:
        raise KeyError(f"No character type found for class: {character_class}")

    return CHARACTER_TYPES[character_class]()
