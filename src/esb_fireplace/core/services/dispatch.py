"""Dispatch of one FIREPLACE invocation.

Reads the input, runs the selected solver and prints its answer. Kept free of
CLI concerns so the same flow can be driven from tests or from another
entry point with an in-memory reader.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from esb_fireplace.core.domain.models import FireplaceArgs
from esb_fireplace.core.domain.part import Part
from esb_fireplace.core.errors import FireplaceError, InputReadError, SolverError
from esb_fireplace.core.interfaces.solver import InputReader, SolverFunction
from esb_fireplace.core.logger import get_logger


def load_input(input_reader: InputReader) -> str:
    """Read the puzzle input, mapping I/O and decoding failures to `InputReadError`."""

    try:
        return input_reader.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(str(exc) or type(exc).__name__) from exc


def select_solver(
    part: Part,
    solve_pt1: SolverFunction,
    solve_pt2: SolverFunction,
) -> SolverFunction:
    return solve_pt1 if part is Part.ONE else solve_pt2


def run(
    solve_pt1: SolverFunction,
    solve_pt2: SolverFunction,
    input_reader: InputReader,
    fp_args: FireplaceArgs,
    *,
    echo: bool = True,
    output: TextIO | None = None,
) -> Any:
    """Run the solver selected by `fp_args` and return its answer.

    With `echo` the answer's `str()` is written to `output` (stdout by
    default) followed by a newline. Solver exceptions other than
    `FireplaceError` are wrapped in `SolverError`.
    """

    log = get_logger(__name__)

    input_data = load_input(input_reader)
    solver = select_solver(fp_args.part, solve_pt1, solve_pt2)
    log.debug(
        "dispatch",
        part=fp_args.part.value,
        solver=getattr(solver, "__name__", repr(solver)),
        input_chars=len(input_data),
        args=fp_args.args,
    )

    try:
        answer = solver(input_data, fp_args.args)
    except FireplaceError:
        log.debug("solver_failed", part=fp_args.part.value)
        raise
    except Exception as exc:
        log.debug("solver_raised", part=fp_args.part.value, exc_type=type(exc).__name__)
        raise SolverError.from_exception(exc) from exc

    if echo:
        stream = output if output is not None else sys.stdout
        print(answer, file=stream)
        stream.flush()
    log.debug("answer_written", part=fp_args.part.value, echoed=echo)
    return answer
