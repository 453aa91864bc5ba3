"""Errors raised across the binding and the exit codes they map to.

Every failure that reaches the CLI boundary is a `FireplaceError`. Each class
carries the process exit code the CLI terminates with, so the mapping lives
next to the error instead of in a lookup table in the CLI.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes of a FIREPLACE solution."""

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2


class FireplaceError(Exception):
    """Base error. Consumers may raise it directly from a solver."""

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidPartError(FireplaceError):
    exit_code = ExitCode.USAGE

    def __init__(self) -> None:
        super().__init__("Invalid part, please use 1 or 2 as argument for --part flag.")


class MissingPartError(FireplaceError):
    exit_code = ExitCode.USAGE

    def __init__(self) -> None:
        super().__init__("Missing part, please use 1 or 2 as argument for --part flag.")


class InputReadError(FireplaceError):
    """Puzzle input could not be read from its source."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Could not read puzzle input: {reason}")
        self.reason = reason


class SolverError(FireplaceError):
    """Wraps any non-Fireplace exception raised by a solver function."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "SolverError":
        return cls(str(exc) or type(exc).__name__)
