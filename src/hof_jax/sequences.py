"""Element-wise operations expressed as specialized folds."""

from __future__ import annotations

from collections.abc import Callable

from .fold import reduce
from .guards import guard_function, guard_sequence
from .values import fit_arity, pack_like


def map(sequence, mapper: Callable[..., object]):
    """Return ``[mapper(element, index, sequence) for each element]``."""
    guard_sequence(sequence, where="map: sequence")
    guard_function(mapper, where="map: mapper")
    apply = fit_arity(mapper, 3, required=1)

    def collect(mapped: list[object], element, index: int, source) -> list[object]:
        mapped.append(apply(element, index, source))
        return mapped

    return pack_like(sequence, reduce(sequence, collect, []), keep_dtype=False)


def _keep(sequence, predicate: Callable[[object], object]) -> list[object]:
    def keep(kept: list[object], element, _index: int, _source) -> list[object]:
        if predicate(element):
            kept.append(element)
        return kept

    return reduce(sequence, keep, [])


def filter(sequence, predicate: Callable[[object], object]):
    """Return the elements for which ``predicate(element)`` is truthy, in order."""
    guard_sequence(sequence, where="filter: sequence")
    guard_function(predicate, where="filter: predicate")
    return pack_like(sequence, _keep(sequence, predicate))


def reject(sequence, predicate: Callable[[object], object]):
    """Complement of :func:`filter`."""
    guard_sequence(sequence, where="reject: sequence")
    guard_function(predicate, where="reject: predicate")
    return pack_like(sequence, _keep(sequence, lambda element: not predicate(element)))


def each(sequence, callback: Callable[..., object]) -> None:
    guard_sequence(sequence, where="each: sequence")
    guard_function(callback, where="each: callback")
    call = fit_arity(callback, 3, required=1)
    for index in range(len(sequence)):
        call(sequence[index], index, sequence)
