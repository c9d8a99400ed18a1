"""Targeted combat actions.

Each action (smash, burn, shoot) can only be performed by one character
class. This module builds three layers on top of that rule:

1. Validators (``smash``, ``burn``, ``shoot``): check a known character and
   return ``Ok(Damage)`` or ``Err(Failure)`` of kind INVALID_TARGET.
2. Target resolution (``check_target_and_*``): additionally require that a
   target is selected at all, failing with NO_TARGET otherwise.
3. Best-effort variants (``*_option``): the validators with the failure
   dropped, for callers that only need to know whether the action worked.

Expected failures are always returned as values, never raised.
"""

from typing import Callable

from ...core.data import CharacterClass, CombatAction, Damage, FailureType
from ...core.failures import Failure
from ...core.functional import Option, Result, chain, flow, map_ok
from ..entities.character import Character, is_archer, is_warrior, is_wizard

Validator = Callable[[Character], Result[Damage, Failure]]
TargetedAction = Callable[[Option[Character]], Result[Damage, Failure]]
BestEffortAction = Callable[[Character], Option[Damage]]

no_target_failure = Failure.builder(FailureType.NO_TARGET)
invalid_target_failure = Failure.builder(FailureType.INVALID_TARGET)

NO_TARGET_MESSAGE = "No unit currently selected"


def _cannot_perform(action: CombatAction) -> Callable[[Character], Failure]:
    return lambda character: invalid_target_failure(
        f"{character} cannot perform {action.value}"
    )


check_target_selected: Callable[[Option[Character]], Result[Character, Failure]] = (
    Result.from_option(lambda: no_target_failure(NO_TARGET_MESSAGE))
)


# ============== Validators ==============

check_warrior = Result.from_predicate(is_warrior, _cannot_perform(CombatAction.SMASH))
check_wizard = Result.from_predicate(is_wizard, _cannot_perform(CombatAction.BURN))
check_archer = Result.from_predicate(is_archer, _cannot_perform(CombatAction.SHOOT))

smash: Validator = flow(check_warrior, map_ok(lambda warrior: warrior.smash()))
burn: Validator = flow(check_wizard, map_ok(lambda wizard: wizard.burn()))
shoot: Validator = flow(check_archer, map_ok(lambda archer: archer.shoot()))


# ============== Target Resolution ==============

check_target_and_smash: TargetedAction = flow(check_target_selected, chain(smash))
check_target_and_burn: TargetedAction = flow(check_target_selected, chain(burn))
check_target_and_shoot: TargetedAction = flow(check_target_selected, chain(shoot))


# ============== Best-Effort Variants ==============

smash_option: BestEffortAction = flow(smash, Option.from_result)
burn_option: BestEffortAction = flow(burn, Option.from_result)
shoot_option: BestEffortAction = flow(shoot, Option.from_result)


# ============== Lookup Tables ==============

VALIDATORS: dict[CombatAction, Validator] = {
    CombatAction.SMASH: smash,
    CombatAction.BURN: burn,
    CombatAction.SHOOT: shoot,
}

TARGETED_ACTIONS: dict[CombatAction, TargetedAction] = {
    CombatAction.SMASH: check_target_and_smash,
    CombatAction.BURN: check_target_and_burn,
    CombatAction.SHOOT: check_target_and_shoot,
}

BEST_EFFORT_ACTIONS: dict[CharacterClass, BestEffortAction] = {
    CharacterClass.WARRIOR: smash_option,
    CharacterClass.WIZARD: burn_option,
    CharacterClass.ARCHER: shoot_option,
}


def strike_option(character: Character) -> Option[Damage]:
    """Attempt the action matching the character's own class.

    Classifies the character once and runs only that class's best-effort
    action, so every character in the closed set yields a damage kind.
    """
    return BEST_EFFORT_ACTIONS[character.character_class](character)
