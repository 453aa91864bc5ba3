"""Domain models (Pydantic v2).

`FireplaceArgs` is everything a single invocation needs besides the input
text: which part to run and the arguments to forward to the solver.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from esb_fireplace.core.domain.part import Part


class FireplaceArgs(BaseModel):
    """Parsed arguments of one invocation.

    `args` is `None` when nothing was passed through and an empty list when
    `--args` was given without values. Solvers can tell the two apart.
    """

    model_config = ConfigDict(frozen=True)

    part: Part = Field(
        ...,
        description="Solver function to run.",
    )
    args: list[str] | None = Field(
        default=None,
        description="Extra arguments forwarded verbatim, in order, to the solver.",
    )

    @classmethod
    def from_values(
        cls,
        part: str | int | None,
        args: Sequence[str] | None = None,
    ) -> "FireplaceArgs":
        """Build from raw CLI values, validating the part selector."""

        return cls(
            part=Part.parse(part),
            args=list(args) if args is not None else None,
        )
