"""Part selector for a puzzle day.

Each puzzle has exactly two parts. The enum is the single source of truth for
the values accepted by `--part`, shared by the CLI and the dispatcher.
"""

from __future__ import annotations

from enum import Enum

from esb_fireplace.core.errors import InvalidPartError, MissingPartError


class Part(str, Enum):
    """Which solver function runs."""

    ONE = "1"
    TWO = "2"

    @classmethod
    def parse(cls, value: str | int | None) -> "Part":
        """Parse a raw CLI value into a `Part`.

        Raises `MissingPartError` when no value was given and
        `InvalidPartError` for anything that is not 1 or 2.
        """

        if value is None:
            raise MissingPartError()
        if isinstance(value, Part):
            return value
        raw = str(value).strip()
        if not raw:
            raise MissingPartError()
        try:
            return cls(raw)
        except ValueError:
            raise InvalidPartError() from None
