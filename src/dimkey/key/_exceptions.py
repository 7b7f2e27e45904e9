__all__ = ["ModeMismatchError", "FieldUnspecifiedError", "InvalidModeError"]

from dataclasses import dataclass
from typing import Any

from ._key import KeyMode


@dataclass(frozen=True, slots=True)
class ModeMismatchError(Exception):
    expected: tuple[KeyMode, ...]
    actual: KeyMode

    def __str__(self):
        expected = " or ".join(str(mode) for mode in self.expected)
        return f"Expected a key in mode {expected}, but got a key in mode {self.actual}"


@dataclass(frozen=True, slots=True)
class FieldUnspecifiedError(Exception):
    field: str

    def __str__(self):
        return f"Expected the {self.field} of the Range key to be specified, but it is None"


@dataclass(frozen=True, slots=True)
class InvalidModeError(Exception):
    payload: Any

    def __str__(self):
        return (
            f"Expected the payload of a key to be a Position, Range, or Gather, "
            f"but got {self.payload!r}"
        )
