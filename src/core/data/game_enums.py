"""Centralized game enums and constants.

This module contains all core game enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum


class CharacterClass(Enum):
    """Character classes, each with a single way of dealing damage."""
    WARRIOR = "warrior"
    WIZARD = "wizard"
    ARCHER = "archer"


class Damage(Enum):
    """Kinds of damage a character can put out."""
    PHYSICAL = "Physical damage"
    MAGICAL = "Magical damage"
    RANGED = "Ranged damage"


class FailureType(Enum):
    """What can go wrong when a player orders an action."""
    NO_TARGET = "NoTarget"            # No character selected
    INVALID_TARGET = "InvalidTarget"  # Wrong action for the character class


class CombatAction(Enum):
    """Actions a player can order, one per character class."""
    SMASH = "smash"
    BURN = "burn"
    SHOOT = "shoot"

    @classmethod
    def from_name(cls, name: str) -> "CombatAction":
        """Resolve an action from its verb, ignoring case.

        Raises:
            ValueError: If the verb is not a known action
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(action.value for action in cls)
            raise ValueError(f"Unknown action '{name}' (expected one of: {valid})")


# Convenience mappings for display and lookup
CHARACTER_CLASS_NAMES = {
    CharacterClass.WARRIOR: "Warrior",
    CharacterClass.WIZARD: "Wizard",
    CharacterClass.ARCHER: "Archer",
}

DAMAGE_NAMES = {
    Damage.PHYSICAL: "Physical",
    Damage.MAGICAL: "Magical",
    Damage.RANGED: "Ranged",
}

FAILURE_TYPE_NAMES = {
    FailureType.NO_TARGET: "No Target",
    FailureType.INVALID_TARGET: "Invalid Target",
}

# Stable ordering used wherever damage kinds are indexed (tallies, reports)
DAMAGE_ORDER: tuple[Damage, ...] = (Damage.PHYSICAL, Damage.MAGICAL, Damage.RANGED)
