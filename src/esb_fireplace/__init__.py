"""FIREPLACE v1.0 binding for Python.

Lets a single-file Advent of Code solution be driven by the `esb` tooling:
`--part {1|2}` picks the solver, stdin carries the puzzle input and the answer
is printed on stdout. See https://github.com/luxedo/esb.
"""

from esb_fireplace.adapters.input_reader import StaticInputReader, StdinReader
from esb_fireplace.cli.main import build_app, run_cli
from esb_fireplace.core.config import FireplaceSettings
from esb_fireplace.core.domain.models import FireplaceArgs
from esb_fireplace.core.domain.part import Part
from esb_fireplace.core.errors import (
    ExitCode,
    FireplaceError,
    InputReadError,
    InvalidPartError,
    MissingPartError,
    SolverError,
)
from esb_fireplace.core.interfaces.solver import InputReader, SolverFunction
from esb_fireplace.core.services.dispatch import run

__version__ = "1.0.0"

__all__ = [
    "ExitCode",
    "FireplaceArgs",
    "FireplaceError",
    "FireplaceSettings",
    "InputReadError",
    "InputReader",
    "InvalidPartError",
    "MissingPartError",
    "Part",
    "SolverError",
    "SolverFunction",
    "StaticInputReader",
    "StdinReader",
    "build_app",
    "run",
    "run_cli",
]
