"""Optional values.

An ``Option`` is either ``Some(value)`` or ``Nothing``. It replaces ``None``
checks scattered through calling code with explicit, chainable operations:

    Option.of(selected).map(lambda c: c.character_class).get_or_else(None)

``Nothing`` is a singleton: ``Nothing()`` always returns the module-level
``NOTHING``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Generic, Iterator, Optional, TypeVar

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(ABC, Generic[T]):
    """A value that may be absent."""

    # ============== Constructors ==============

    @staticmethod
    def of(value: Optional[T]) -> "Option[T]":
        """Wrap a possibly-``None`` value."""
        if value is None:
            return NOTHING
        return Some(value)

    @staticmethod
    def from_predicate(predicate: Callable[[T], bool], value: T) -> "Option[T]":
        """``Some(value)`` if the predicate holds, ``Nothing`` otherwise."""
        return Some(value) if predicate(value) else NOTHING

    @staticmethod
    def from_result(result: "Result[T, Any]") -> "Option[T]":
        """Convert a result to an option, discarding the error payload."""
        return result.fold(lambda _error: NOTHING, Some)

    # ============== Queries ==============

    @abstractmethod
    def is_some(self) -> bool:
        pass

    def is_nothing(self) -> bool:
        return not self.is_some()

    def __bool__(self) -> bool:
        return self.is_some()

    # ============== Combinators ==============

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Transform the contained value, if any."""
        pass

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Chain into another option-producing step."""
        pass

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        pass

    @abstractmethod
    def fold(self, on_nothing: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """Collapse both cases into a single value."""
        pass

    @abstractmethod
    def get_or_else(self, default: U) -> "T | U":
        pass

    @abstractmethod
    def get_or_raise(self) -> T:
        """Return the value.

        Raises:
            ValueError: If the option is empty
        """
        pass

    def to_result(self, on_nothing: Callable[[], E]) -> "Result[T, E]":
        """Convert to a result, building the error lazily when empty."""
        from .result import Err, Ok

        return self.fold(lambda: Err(on_nothing()), Ok)

    def __iter__(self) -> Iterator[T]:
        """Yield the value if present, so options work in comprehensions."""
        if self.is_some():
            yield self.get_or_raise()


@dataclass(frozen=True)
class Some(Option[T]):
    """A present value."""
    value: T

    def is_some(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Option[U]:
        return Some(func(self.value))

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return func(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else NOTHING

    def fold(self, on_nothing: Callable[[], U], on_some: Callable[[T], U]) -> U:
        return on_some(self.value)

    def get_or_else(self, default: U) -> T:
        return self.value

    def get_or_raise(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Option[Any]):
    """An absent value."""

    _instance: ClassVar[Optional["Nothing"]] = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def map(self, func: Callable[[Any], U]) -> Option[U]:
        return self

    def flat_map(self, func: Callable[[Any], Option[U]]) -> Option[U]:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Option[Any]:
        return self

    def fold(self, on_nothing: Callable[[], U], on_some: Callable[[Any], U]) -> U:
        return on_nothing()

    def get_or_else(self, default: U) -> U:
        return default

    def get_or_raise(self) -> Any:
        raise ValueError("Called get_or_raise() on an empty Option")

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Nothing = Nothing()
