"""Boolean folds of a predicate over a sequence."""

from __future__ import annotations

from collections.abc import Callable

from .fold import reduce
from .guards import guard_function, guard_sequence


def all(sequence, predicate: Callable[[object], object]) -> bool:
    """``True`` when every element satisfies ``predicate``; ``True`` when empty.

    The predicate is evaluated for every element; the fold does not stop early.
    """
    guard_sequence(sequence, where="all: sequence")
    guard_function(predicate, where="all: predicate")
    return reduce(sequence, lambda acc, element: bool(predicate(element)) and acc, True)


def any(sequence, predicate: Callable[[object], object]) -> bool:
    """``True`` when at least one element satisfies ``predicate``; ``False`` when empty."""
    guard_sequence(sequence, where="any: sequence")
    guard_function(predicate, where="any: predicate")
    return reduce(sequence, lambda acc, element: bool(predicate(element)) or acc, False)
