"""Static information about character classes.

This module provides a single lookup table describing each character class:
its display name, the damage it deals and the action that deals it.
"""

from dataclasses import dataclass
from typing import Dict

from .game_enums import (
    CharacterClass,
    CombatAction,
    Damage,
    CHARACTER_CLASS_NAMES,
)


@dataclass(frozen=True)
class CharacterClassInfo:
    """Static information about a character class."""
    name: str
    damage: Damage
    action: CombatAction


# Centralized data for all character classes
CHARACTER_CLASS_DATA: Dict[CharacterClass, CharacterClassInfo] = {
    CharacterClass.WARRIOR: CharacterClassInfo(
        CHARACTER_CLASS_NAMES[CharacterClass.WARRIOR], Damage.PHYSICAL, CombatAction.SMASH
    ),
    CharacterClass.WIZARD: CharacterClassInfo(
        CHARACTER_CLASS_NAMES[CharacterClass.WIZARD], Damage.MAGICAL, CombatAction.BURN
    ),
    CharacterClass.ARCHER: CharacterClassInfo(
        CHARACTER_CLASS_NAMES[CharacterClass.ARCHER], Damage.RANGED, CombatAction.SHOOT
    ),
}

# Reverse lookup: which class an action requires
ACTION_CLASS: Dict[CombatAction, CharacterClass] = {
    info.action: character_class
    for character_class, info in CHARACTER_CLASS_DATA.items()
}
