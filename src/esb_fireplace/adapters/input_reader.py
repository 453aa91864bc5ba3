"""Puzzle input readers.

`StdinReader` is what the orchestrator drives; `StaticInputReader` serves
tests and programmatic use where the input is already in memory.
"""

from __future__ import annotations

import sys
from typing import TextIO


class StdinReader:
    """Reads the whole puzzle input from a text stream (stdin by default).

    The stream is looked up at read time, not at construction, so a replaced
    `sys.stdin` is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        if stream is None:
            raise OSError("standard input is not available")
        return stream.read()


class StaticInputReader:
    def __init__(self, text: str) -> None:
        self.text = text

    def read(self) -> str:
        return self.text
