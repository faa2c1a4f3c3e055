"""Comparison-based selection and ordering."""

from __future__ import annotations

import numbers
from collections.abc import Callable
from decimal import Decimal
from functools import cmp_to_key

import numpy as np

from .fold import reduce
from .guards import guard_function, guard_sequence
from .values import is_array, pack_like

_REAL_DTYPE_KINDS = frozenset("biuf")


def _identity(value):
    return value


def _category(value) -> str:
    if isinstance(value, (numbers.Real, Decimal)):
        return "number"
    scalar_like = isinstance(value, np.generic) or (is_array(value) and value.ndim == 0)
    if scalar_like and value.dtype.kind in _REAL_DTYPE_KINDS:
        return "number"
    return type(value).__name__


def _precedes(left, right) -> bool:
    """``left < right`` under a total pre-order over mixed keys.

    Keys of different categories order by category name (all real numbers,
    including 0-d numeric arrays, share one category). Within a category the
    native ``<`` applies, and a pair it cannot compare counts as equal.
    """
    left_category = _category(left)
    right_category = _category(right)
    if left_category != right_category:
        return left_category < right_category
    try:
        return bool(left < right)
    except (TypeError, ValueError):
        return False


def _compare_keyed(left: tuple[object, object], right: tuple[object, object]) -> int:
    if _precedes(left[0], right[0]):
        return -1
    if _precedes(right[0], left[0]):
        return 1
    return 0


def _select(sequence, key: Callable[[object], object], *, largest: bool):
    if len(sequence) == 0:
        return None

    def keep(best, element, _index: int, _source):
        if largest:
            better = _precedes(key(best), key(element))
        else:
            better = _precedes(key(element), key(best))
        return element if better else best

    return reduce(sequence, keep)


def max_by(sequence, key: Callable[[object], object]):
    """Element with the greatest ``key(element)``; the earliest wins ties.

    Returns ``None`` for an empty sequence.
    """
    guard_sequence(sequence, where="max_by: sequence")
    guard_function(key, where="max_by: key")
    return _select(sequence, key, largest=True)


def min_by(sequence, key: Callable[[object], object]):
    """Element with the least ``key(element)``; the earliest wins ties.

    Returns ``None`` for an empty sequence.
    """
    guard_sequence(sequence, where="min_by: sequence")
    guard_function(key, where="min_by: key")
    return _select(sequence, key, largest=False)


def max(sequence):
    guard_sequence(sequence, where="max: sequence")
    return _select(sequence, _identity, largest=True)


def min(sequence):
    guard_sequence(sequence, where="min: sequence")
    return _select(sequence, _identity, largest=False)


def _sorted_by(sequence, key: Callable[[object], object]):
    def decorate(keyed: list[tuple[object, object]], element, _index: int, _source):
        keyed.append((key(element), element))
        return keyed

    keyed = reduce(sequence, decorate, [])
    keyed.sort(key=cmp_to_key(_compare_keyed))
    return pack_like(sequence, [element for _, element in keyed])


def sort_by(sequence, key: Callable[[object], object]):
    """New sequence in ascending ``key(element)`` order.

    The sort is stable and calls ``key`` once per element. The input is left
    untouched.
    """
    guard_sequence(sequence, where="sort_by: sequence")
    guard_function(key, where="sort_by: key")
    return _sorted_by(sequence, key)


def sort(sequence):
    guard_sequence(sequence, where="sort: sequence")
    return _sorted_by(sequence, _identity)
