"""Skirmish session: target selection, action orders and volleys.

The session is the one place where the pure combat functions meet state:
it remembers which character is selected and records every outcome in the
battle log.
"""

from typing import Optional

from ..core.data import CombatAction, Damage, DAMAGE_NAMES
from ..core.failures import Failure
from ..core.functional import NOTHING, Option, Result, Some
from .army_loader import Army
from .combat import TARGETED_ACTIONS, TotalDamage, attack
from .entities.character import Character
from .log_manager import LogManager


class Skirmish:
    """Tracks the selected target within an army and resolves orders."""

    def __init__(self, army: Army, log_manager: Optional[LogManager] = None):
        self.army = army
        self.log = log_manager or LogManager()
        self._selected: Option[Character] = NOTHING
        self._selected_index: Optional[int] = None

        self.log.system(f"Skirmish started with {army.name} ({len(army)} units)")

    @property
    def selected_target(self) -> Option[Character]:
        return self._selected

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    def select(self, index: int) -> Character:
        """Select the character at ``index`` as the current target.

        Raises:
            IndexError: If index is outside the army
        """
        if not 0 <= index < len(self.army):
            raise IndexError(f"No unit at index {index} (army has {len(self.army)} units)")

        character = self.army[index]
        self._selected = Some(character)
        self._selected_index = index
        self.log.targeting(f"Selected {character} at index {index}")
        return character

    def clear_selection(self) -> None:
        self._selected = NOTHING
        self._selected_index = None
        self.log.targeting("Selection cleared")

    def perform(self, action: CombatAction) -> Result[Damage, Failure]:
        """Order the selected target to perform ``action``.

        Failures are logged as warnings and returned, never raised.
        """
        result = TARGETED_ACTIONS[action](self._selected)

        if result.is_ok():
            damage = result.unwrap()
            character = self._selected.get_or_raise()
            self.log.battle(f"{character} used {action.value}: {DAMAGE_NAMES[damage]} damage")
        else:
            failure = result.fold(lambda error: error, lambda _: None)
            self.log.warning(f"{action.value} failed ({failure.kind.value}): {failure.message}")

        return result

    def volley(self) -> TotalDamage:
        """Have the whole army attack and log the totals."""
        totals = attack(self.army.characters)
        self.log.battle(f"Volley from {len(self.army)} units: {totals.format()}")
        self.log.debug(f"Volley totals: {totals!r}")
        return totals
