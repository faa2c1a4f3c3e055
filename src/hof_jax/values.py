"""Runtime value model for sequences and callbacks."""

from __future__ import annotations

import inspect
from collections.abc import Sequence
from typing import Callable, Final

import jax
import jax.numpy as jnp
import numpy as np

from .config import load_settings

MISSING: Final = object()

_TEXT_TYPES: Final = (str, bytes, bytearray)
_SCALAR_TYPES: Final = (bool, int, float, complex, np.generic)
_POSITIONAL_KINDS: Final = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def is_absent(value: object) -> bool:
    return value is MISSING or value is None


def is_jax_array(value: object) -> bool:
    return isinstance(value, jax.Array)


def is_numpy_array(value: object) -> bool:
    return isinstance(value, np.ndarray)


def is_array(value: object) -> bool:
    return is_jax_array(value) or is_numpy_array(value)


def is_sequence(value: object) -> bool:
    if is_array(value):
        return value.ndim >= 1
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, Sequence)


def _is_array_like(value: object) -> bool:
    return is_array(value) or isinstance(value, _SCALAR_TYPES)


def _stack_items(xp, items: list[object]) -> object:
    try:
        arrays = [xp.asarray(item) for item in items]
    except (TypeError, OverflowError, ValueError):
        return items
    first_shape = arrays[0].shape
    if any(arr.shape != first_shape or arr.dtype == object for arr in arrays):
        return items
    return xp.stack(arrays, axis=0)


def pack_like(source: object, items: list[object], *, keep_dtype: bool = True) -> object:
    """Return ``items`` in the container matching ``source``.

    Lists stay lists. When ``source`` is a jax or numpy array and packing is
    enabled, same-shaped numeric items are stacked back into an array of the
    same library; anything else (strings, ragged shapes, ``Decimal`` or
    ``Fraction`` values, integers the array dtype cannot hold) falls back to a
    list.
    """
    if not is_array(source) or not load_settings().pack_arrays:
        return items
    xp = jnp if is_jax_array(source) else np

    if not items:
        if keep_dtype:
            return xp.zeros((0, *source.shape[1:]), dtype=source.dtype)
        return xp.asarray([])

    if not all(_is_array_like(item) for item in items):
        return items
    return _stack_items(xp, items)


def positional_capacity(func: Callable[..., object]) -> int | None:
    """Number of positional arguments ``func`` accepts.

    ``None`` means the callable takes ``*args`` and can receive any number.
    """
    signature = inspect.signature(func)

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in _POSITIONAL_KINDS:
            count += 1
    return count


def fit_arity(func: Callable[..., object], limit: int, *, required: int) -> Callable[..., object]:
    """Adapt ``func`` so it can be called with ``limit`` positional arguments.

    Callbacks receive the leading arguments they declare room for. Builtins
    without an inspectable signature receive the first ``required`` ones.
    """
    try:
        capacity = positional_capacity(func)
    except (TypeError, ValueError):
        capacity = required

    if capacity is None or capacity >= limit:
        return func

    def call(*args):
        return func(*args[:capacity])

    return call
