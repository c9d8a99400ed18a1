"""Army-wide damage aggregation.

An attack orders every character in a selection to use its own action and
reports how many hits of each damage kind the army puts out. Each character
is classified once; the resulting damage kinds are tallied in a single
numpy pass.
"""

from collections.abc import Mapping
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from ...core.data import Damage, DAMAGE_NAMES, DAMAGE_ORDER
from ...core.functional import filter_map, size
from ..entities.character import Character
from .actions import strike_option

_DAMAGE_INDEX: dict[Damage, int] = {damage: i for i, damage in enumerate(DAMAGE_ORDER)}


class TotalDamage(Mapping[Damage, int]):
    """Immutable count of hits per damage kind.

    Every damage kind is always present, with a count of 0 when no character
    dealt it. Compares equal to any mapping holding the same counts.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[Damage, int]):
        missing = [damage for damage in DAMAGE_ORDER if damage not in counts]
        if missing:
            raise ValueError(f"TotalDamage is missing damage kinds: {missing}")
        if any(counts[damage] < 0 for damage in DAMAGE_ORDER):
            raise ValueError("TotalDamage counts must be non-negative")
        self._counts = {damage: int(counts[damage]) for damage in DAMAGE_ORDER}

    @classmethod
    def from_array(cls, counts: NDArray[np.intp]) -> "TotalDamage":
        """Create from an array of counts ordered like ``DAMAGE_ORDER``."""
        if counts.shape != (len(DAMAGE_ORDER),):
            raise ValueError(
                f"Array must have shape ({len(DAMAGE_ORDER)},) for TotalDamage conversion"
            )
        return cls(dict(zip(DAMAGE_ORDER, counts.tolist())))

    @classmethod
    def empty(cls) -> "TotalDamage":
        return cls({damage: 0 for damage in DAMAGE_ORDER})

    def __getitem__(self, damage: Damage) -> int:
        return self._counts[damage]

    def __iter__(self) -> Iterator[Damage]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __hash__(self) -> int:
        return hash(tuple(self._counts.items()))

    @property
    def total(self) -> int:
        """Total number of hits across all damage kinds."""
        return sum(self._counts.values())

    def to_numpy(self) -> NDArray[np.intp]:
        """Convert to an array of counts ordered like ``DAMAGE_ORDER``."""
        return np.array([self._counts[damage] for damage in DAMAGE_ORDER], dtype=np.intp)

    def format(self) -> str:
        """Format the totals for display, e.g. ``Physical: 2, Magical: 1, Ranged: 1``."""
        return ", ".join(
            f"{DAMAGE_NAMES[damage]}: {count}" for damage, count in self._counts.items()
        )

    def __repr__(self) -> str:
        inner = ", ".join(f"{damage.name}={count}" for damage, count in self._counts.items())
        return f"TotalDamage({inner})"


def attack(army: Sequence[Character]) -> TotalDamage:
    """Aggregate the damage kinds put out by a selection of characters.

    Args:
        army: Characters in any order; may be empty and contain duplicates

    Returns:
        TotalDamage with one count per damage kind, summing to ``len(army)``
    """
    damages = filter_map(strike_option, army)

    indices = np.fromiter(
        (_DAMAGE_INDEX[damage] for damage in damages), dtype=np.intp, count=size(damages)
    )
    counts = np.bincount(indices, minlength=len(DAMAGE_ORDER))

    return TotalDamage.from_array(counts)
