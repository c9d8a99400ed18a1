"""Entity definitions.

This package contains the playable character types:
- character.py: Warrior, Wizard and Archer, classifier predicates and factory
"""

from .character import (
    Character,
    Warrior,
    Wizard,
    Archer,
    is_warrior,
    is_wizard,
    is_archer,
    CHARACTER_TYPES,
    create_character,
)

__all__ = [
    "Character",
    "Warrior",
    "Wizard",
    "Archer",
    "is_warrior",
    "is_wizard",
    "is_archer",
    "CHARACTER_TYPES",
    "create_character",
]
