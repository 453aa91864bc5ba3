"""Contracts for solver functions and input readers.

Protocols keep the dispatcher independent of concrete readers and let
consumers hand in plain functions without subclassing anything.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class SolverFunction(Protocol):
    """A consumer-supplied function computing one part's answer.

    The returned object is printed with `str()`. Failures are signalled by
    raising; any exception counts as a failed run.
    """

    def __call__(self, input_data: str, args: list[str] | None) -> Any: ...


@runtime_checkable
class InputReader(Protocol):
    """Source of the puzzle input text."""

    def read(self) -> str:
        """Return the whole puzzle input."""

        ...
