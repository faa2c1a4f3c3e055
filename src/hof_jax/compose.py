"""Left-to-right function composition."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .errors import InvalidArgument
from .fold import reduce
from .guards import guard_function, guard_sequence


def _then(first: Callable[..., object], second: Callable[[object], object]) -> Callable[..., object]:
    def chained(*args, **kwargs):
        return second(first(*args, **kwargs))

    return chained


def flow(functions: Sequence[Callable[..., object]]) -> Callable[..., object]:
    """Compose ``functions`` so that ``flow([f, g])(x) == g(f(x))``.

    The first function receives every call argument, each later one receives
    the previous return value. The functions are copied up front, so changing
    the caller's sequence afterwards does not affect the result.
    """
    guard_sequence(functions, where="flow: functions")
    chain = tuple(functions)
    if not chain:
        raise InvalidArgument("flow: functions must contain at least one callable")
    for index, func in enumerate(chain):
        guard_function(func, where=f"flow: functions[{index}]")

    return reduce(chain[1:], _then, chain[0])
