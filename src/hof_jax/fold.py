"""Left fold, the operation every other sequence operation is built on."""

from __future__ import annotations

from collections.abc import Callable

from .errors import InvalidState
from .guards import guard_function, guard_sequence
from .values import MISSING, fit_arity, is_absent


def reduce(sequence, reducer: Callable[..., object], initial: object = MISSING):
    """Fold ``sequence`` from the left.

    ``reducer`` is called as ``reducer(accumulator, element, index, sequence)``
    (or with as many of those leading arguments as it accepts). When
    ``initial`` is omitted or ``None`` the first element seeds the fold and
    iteration starts at index 1; any other value, including ``0``, ``False``
    and ``""``, seeds the fold and iteration starts at index 0.

    Raises:
        InvalidArgument: ``sequence`` is not a sequence or ``reducer`` is not
            callable.
        InvalidState: ``sequence`` is empty and no initial value was given.
    """
    guard_sequence(sequence, where="reduce: sequence")
    guard_function(reducer, where="reduce: reducer")

    length = len(sequence)
    if is_absent(initial):
        if length == 0:
            raise InvalidState("reduce: empty sequence requires an initial value")
        acc = sequence[0]
        start = 1
    else:
        acc = initial
        start = 0

    step = fit_arity(reducer, 4, required=2)
    for index in range(start, length):
        acc = step(acc, sequence[index], index, sequence)
    return acc
