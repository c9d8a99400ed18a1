"""Combat system components.

This package contains the combat logic with clear separation of concerns:
- actions.py: Per-class action validators, target resolution and best-effort variants
- army.py: Army-wide damage aggregation
"""

from .actions import (
    smash,
    burn,
    shoot,
    check_target_selected,
    check_target_and_smash,
    check_target_and_burn,
    check_target_and_shoot,
    smash_option,
    burn_option,
    shoot_option,
    strike_option,
    no_target_failure,
    invalid_target_failure,
    NO_TARGET_MESSAGE,
    VALIDATORS,
    TARGETED_ACTIONS,
    BEST_EFFORT_ACTIONS,
)
from .army import TotalDamage, attack

__all__ = [
    "smash",
    "burn",
    "shoot",
    "check_target_selected",
    "check_target_and_smash",
    "check_target_and_burn",
    "check_target_and_shoot",
    "smash_option",
    "burn_option",
    "shoot_option",
    "strike_option",
    "no_target_failure",
    "invalid_target_failure",
    "NO_TARGET_MESSAGE",
    "VALIDATORS",
    "TARGETED_ACTIONS",
    "BEST_EFFORT_ACTIONS",
    "TotalDamage",
    "attack",
]
