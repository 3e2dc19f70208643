"""
Error kinds and the Result value passed between stages.

Every stage (loading, prompting, resolving) returns a ``Result`` instead of
raising. The CLI entry point is the only place where a failed Result is turned
into a log message and a process exit code.

Usage:
    >>> result = load_table(path)
    >>> if not result.is_ok:
    ...     logger.error(str(result.error))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(Enum):
    """Failure categories."""
    IO = "IO"              # file access, malformed rows
    TERMINAL = "Terminal"  # console read/write, unparsable menu answers


@dataclass(frozen=True)
class AppError:
    """A failure with its category and a human readable message."""
    kind: ErrorKind
    message: str

    @classmethod
    def io(cls, message: str) -> AppError:
        return cls(ErrorKind.IO, message)

    @classmethod
    def terminal(cls, message: str) -> AppError:
        return cls(ErrorKind.TERMINAL, message)

    def __str__(self) -> str:
        return f"{self.kind.value} error: {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a stage: either a value or an ``AppError``.

    Attributes:
        value: Payload on success (may legitimately be None)
        error: Failure description, None on success
    """
    value: Optional[T] = None
    error: Optional[AppError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: AppError) -> Result[T]:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None
