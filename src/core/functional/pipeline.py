"""Left-to-right function composition."""

from functools import reduce
from typing import Any, Callable


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``funcs`` from left to right.

    ``pipe(x, f, g)`` is ``g(f(x))``. With no functions the value is returned
    unchanged.
    """
    return reduce(lambda acc, func: func(acc), funcs, value)


def flow(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose ``funcs`` into a single function, applied left to right.

    The first function may take any arguments; each following one receives
    the previous return value.

    Raises:
        ValueError: If no functions are given
    """
    if not funcs:
        raise ValueError("flow() requires at least one function")

    first, rest = funcs[0], funcs[1:]

    def composed(*args: Any, **kwargs: Any) -> Any:
        return pipe(first(*args, **kwargs), *rest)

    return composed
