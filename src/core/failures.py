"""Tagged failure values.

A ``Failure`` pairs a machine-checkable kind with a human-readable message.
Failures are created where a check fails and are never mutated afterwards.
Use ``Failure.builder`` to get a constructor bound to one kind:

    no_target_failure = Failure.builder(FailureType.NO_TARGET)
    no_target_failure("No unit currently selected")
"""

from dataclasses import dataclass
from typing import Callable

from .data import FailureType, FAILURE_TYPE_NAMES


@dataclass(frozen=True)
class Failure:
    """A diagnostic describing why an action could not be performed."""
    kind: FailureType
    message: str

    @staticmethod
    def builder(kind: FailureType) -> Callable[[str], "Failure"]:
        """Get a constructor that creates failures of the given kind."""
        def build(message: str) -> "Failure":
            return Failure(kind=kind, message=message)

        return build

    def is_kind(self, kind: FailureType) -> bool:
        return self.kind is kind

    def format(self) -> str:
        """Format the failure for display."""
        return f"{FAILURE_TYPE_NAMES[self.kind]}: {self.message}"

    def __str__(self) -> str:
        return self.message
