"""Tagged result values for chord operations.

Every public operation returns either ``Ok(value)`` or ``Err(error)``
instead of raising for malformed input. Callers that prefer exceptions
can call ``unwrap()``.

Examples
--------
>>> Ok(["C", "E", "G"]).unwrap()
['C', 'E', 'G']
>>> err = Err(ChordError("invalid_format", "Invalid chord format"))
>>> err.is_err()
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar, Union

T = TypeVar("T")

ErrorKind = Literal[
    "invalid_format",
    "unknown_quality",
    "insufficient_pitches",
    "dominant_required",
    "invalid_root",
]


@dataclass(frozen=True)
class ChordError:
    """A single failure returned by a chord operation.

    Parameters
    ----------
    kind : ErrorKind
        Machine-readable failure category.
    message : str
        Human-readable description.
    """

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class ChordSubstituterError(ValueError):
    """Raised by ``Err.unwrap()``."""

    def __init__(self, error: ChordError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed result holding a ``ChordError``."""

    error: ChordError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ChordSubstituterError(self.error)


Result = Union[Ok[T], Err]


def err(kind: ErrorKind, message: str) -> Err:
    """Shorthand for ``Err(ChordError(kind, message))``."""
    return Err(ChordError(kind, message))
