"""Collection transforms that work with ``Option``."""

from typing import Callable, Iterable, Sized, TypeVar

from .option import Option

T = TypeVar("T")
U = TypeVar("U")


def filter_map(func: Callable[[T], Option[U]], items: Iterable[T]) -> list[U]:
    """Map and filter in one pass, keeping only present results.

    Args:
        func: Option-producing function applied to each item
        items: Input collection, consumed once

    Returns:
        Present values in input order
    """
    return [value for item in items for value in func(item)]


def size(items: Sized) -> int:
    """Number of elements in a collection."""
    return len(items)
