"""Functional error-handling combinators.

This package contains small, dependency-free building blocks:
- option.py: Optional values (Some / Nothing)
- result.py: Disjoint success/failure results (Ok / Err)
- pipeline.py: pipe and flow composition
- sequence.py: Collection transforms over Option-producing functions
"""

from .option import Option, Some, Nothing, NOTHING
from .result import Result, Ok, Err, map_ok, map_error, chain
from .pipeline import pipe, flow
from .sequence import filter_map, size

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "Result",
    "Ok",
    "Err",
    "map_ok",
    "map_error",
    "chain",
    "pipe",
    "flow",
    "filter_map",
    "size",
]
