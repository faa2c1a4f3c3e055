"""Argument guards shared by every public operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidArgument, describe_type
from .values import is_array, is_sequence


class GuardStatus(str, Enum):
    OK = "ok"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass(frozen=True)
class GuardResult:
    """Tagged outcome of a non-raising argument check."""

    status: GuardStatus
    message: str | None = None

    @classmethod
    def accept(cls) -> "GuardResult":
        return cls(status=GuardStatus.OK)

    @classmethod
    def reject(cls, message: str) -> "GuardResult":
        return cls(status=GuardStatus.INVALID_ARGUMENT, message=message)

    @property
    def ok(self) -> bool:
        return self.status is GuardStatus.OK

    def raise_for_status(self) -> None:
        if not self.ok:
            raise InvalidArgument(self.message)


def check_function(value: object, *, where: str = "callback") -> GuardResult:
    if callable(value):
        return GuardResult.accept()
    return GuardResult.reject(f"{where} must be callable, got {describe_type(value)}")


def check_sequence(value: object, *, where: str = "sequence") -> GuardResult:
    if is_sequence(value):
        return GuardResult.accept()
    if is_array(value):
        return GuardResult.reject(f"{where} must have rank >= 1, got a rank-0 array")
    return GuardResult.reject(
        f"{where} must be a list, tuple, jax array or numpy array, got {describe_type(value)}"
    )


def guard_function(value: object, *, where: str = "callback") -> None:
    check_function(value, where=where).raise_for_status()


def guard_sequence(value: object, *, where: str = "sequence") -> None:
    check_sequence(value, where=where).raise_for_status()
