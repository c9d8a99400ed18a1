"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- game_enums.py: Centralized enums for character classes, damage, failures and actions
- game_info.py: Static character class data and lookup tables
"""

from .game_enums import (
    CharacterClass,
    Damage,
    FailureType,
    CombatAction,
    CHARACTER_CLASS_NAMES,
    DAMAGE_NAMES,
    FAILURE_TYPE_NAMES,
    DAMAGE_ORDER,
)
from .game_info import CharacterClassInfo, CHARACTER_CLASS_DATA, ACTION_CLASS

__all__ = [
    "CharacterClass",
    "Damage",
    "FailureType",
    "CombatAction",
    "CHARACTER_CLASS_NAMES",
    "DAMAGE_NAMES",
    "FAILURE_TYPE_NAMES",
    "DAMAGE_ORDER",
    "CharacterClassInfo",
    "CHARACTER_CLASS_DATA",
    "ACTION_CLASS",
]
