"""Result pattern for error handling without exceptions.

A ``Result`` is either ``Ok(value)`` or ``Err(error)``, never both. Expected
failures travel as ``Err`` values and callers inspect them explicitly;
exceptions stay reserved for programming errors.

Two styles of composition are supported:

    # method chaining
    Ok(character).flat_map(smash).map(str)

    # point-free, for use with ``flow``
    flow(check_target_selected, chain(smash))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from .option import Option

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class Result(ABC, Generic[T, E]):
    """Outcome of an operation that can fail."""

    # ============== Constructors ==============

    @staticmethod
    def from_predicate(
        predicate: Callable[[T], bool], on_false: Callable[[T], E]
    ) -> Callable[[T], "Result[T, E]"]:
        """Build a check that passes values satisfying ``predicate``.

        Args:
            predicate: Test applied to the input
            on_false: Builds the error from the rejected input

        Returns:
            Function returning ``Ok(value)`` or ``Err(on_false(value))``
        """
        def check(value: T) -> "Result[T, E]":
            if predicate(value):
                return Ok(value)
            return Err(on_false(value))

        return check

    @staticmethod
    def from_option(on_nothing: Callable[[], E]) -> Callable[["Option[T]"], "Result[T, E]"]:
        """Build a converter that turns ``Nothing`` into ``Err(on_nothing())``."""
        def convert(option: "Option[T]") -> "Result[T, E]":
            return option.to_result(on_nothing)

        return convert

    # ============== Queries ==============

    @abstractmethod
    def is_ok(self) -> bool:
        pass

    def is_err(self) -> bool:
        return not self.is_ok()

    # ============== Combinators ==============

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Result[U, E]":
        """Transform the success payload; errors pass through."""
        pass

    @abstractmethod
    def map_err(self, func: Callable[[E], F]) -> "Result[T, F]":
        """Transform the error payload; successes pass through."""
        pass

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Result[U, Any]"]) -> "Result[U, Any]":
        """Chain into a dependent step that may itself fail.

        The error type widens to the union of both steps' errors.
        """
        pass

    @abstractmethod
    def fold(self, on_err: Callable[[E], U], on_ok: Callable[[T], U]) -> U:
        pass

    @abstractmethod
    def get_or_else(self, default: U) -> "T | U":
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """Return the success payload.

        Raises:
            ValueError: If this is an ``Err``
        """
        pass

    def to_option(self) -> "Option[T]":
        """Drop the error, keeping only presence of a value."""
        from .option import Option

        return Option.from_result(self)


@dataclass(frozen=True)
class Ok(Result[T, Any]):
    """Successful result carrying typed data."""
    value: T

    def is_ok(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Result[U, Any]:
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], F]) -> Result[T, F]:
        return self

    def flat_map(self, func: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return func(self.value)

    def fold(self, on_err: Callable[[Any], U], on_ok: Callable[[T], U]) -> U:
        return on_ok(self.value)

    def get_or_else(self, default: U) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Result[Any, E]):
    """Failed result carrying the error value."""
    error: E

    def is_ok(self) -> bool:
        return False

    def map(self, func: Callable[[Any], U]) -> Result[U, E]:
        return self

    def map_err(self, func: Callable[[E], F]) -> Result[Any, F]:
        return Err(func(self.error))

    def flat_map(self, func: Callable[[Any], Result[U, Any]]) -> Result[U, Any]:
        return self

    def fold(self, on_err: Callable[[E], U], on_ok: Callable[[Any], U]) -> U:
        return on_err(self.error)

    def get_or_else(self, default: U) -> U:
        return default

    def unwrap(self) -> Any:
        raise ValueError(f"Called unwrap() on an Err: {self.error!r}")

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# ============== Point-free helpers ==============


def map_ok(func: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Lift ``func`` to operate on the success side of a result."""
    return lambda result: result.map(func)


def map_error(func: Callable[[E], F]) -> Callable[[Result[T, E]], Result[T, F]]:
    """Lift ``func`` to operate on the error side of a result."""
    return lambda result: result.map_err(func)


def chain(func: Callable[[T], Result[U, Any]]) -> Callable[[Result[T, Any]], Result[U, Any]]:
    """Lift a result-producing step so it can follow another in ``flow``."""
    return lambda result: result.flat_map(func)
