"""Structured error types for argument validation and fold state."""

from __future__ import annotations


class HOFError(Exception):
    """Base class for structured hof-jax errors."""


class InvalidArgument(HOFError, TypeError):
    """A sequence or callback argument failed validation."""


class InvalidState(HOFError, ValueError):
    """The operation cannot produce a value from the arguments it was given."""


def describe_type(value: object) -> str:
    return type(value).__name__
