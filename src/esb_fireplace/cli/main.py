"""Typer entry point of a FIREPLACE solution.

A solution file hands its two solver functions to `run_cli`:

    from esb_fireplace import run_cli

    def solve_pt1(input_data, args):
        ...

    def solve_pt2(input_data, args):
        ...

    if __name__ == "__main__":
        run_cli(solve_pt1, solve_pt2)

The orchestrator then calls `python day_01.py --part 1 < input.txt`, with
optional `--args a b c` forwarded to the solver.
"""

from __future__ import annotations

from typing import List, NoReturn, Optional, Sequence

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from typer.core import TyperCommand

from esb_fireplace.adapters.input_reader import StdinReader
from esb_fireplace.cli.ui_components import print_error
from esb_fireplace.core.config import FireplaceSettings
from esb_fireplace.core.domain.models import FireplaceArgs
from esb_fireplace.core.errors import ExitCode, FireplaceError
from esb_fireplace.core.interfaces.solver import InputReader, SolverFunction
from esb_fireplace.core.logger import get_logger, setup_logging
from esb_fireplace.core.services.dispatch import run

ESB_DESCRIPTION = (
    "Script your way to rescue Christmas as part of the ElfScript Brigade team. "
    "`esb` is a CLI tool to help us elves to save Christmas for the Advent Of Code "
    "yearly events. For more information visit https://github.com/luxedo/esb"
)

_ARGS_FLAGS = ("-a", "--args")
_PART_FLAGS = ("-p", "--part")


def pass_through_args(use_args: bool, extra: Sequence[str] | None) -> list[str] | None:
    """Arguments for the solver: `None` when nothing was passed through."""

    if not use_args and not extra:
        return None
    return list(extra or [])


def protect_pass_through(args: Sequence[str]) -> list[str]:
    """Rewrite argv so Click never parses the tokens following `--args`.

    Everything after the first `-a`/`--args` is placed behind `--` and reaches
    the solver verbatim. A part selector given after the arguments
    (`--part 2`, `-p 2`, `--part=2`) is moved in front of the flag.
    """

    tokens = list(args)
    for index, token in enumerate(tokens):
        if token == "--":
            return tokens
        if token in _ARGS_FLAGS:
            break
    else:
        return tokens

    moved: list[str] = []
    forwarded: list[str] = []
    rest = tokens[index + 1 :]
    i = 0
    while i < len(rest):
        token = rest[i]
        if token in _PART_FLAGS and i + 1 < len(rest):
            moved.extend(rest[i : i + 2])
            i += 2
            continue
        if token.startswith("--part="):
            moved.append(token)
        else:
            forwarded.append(token)
        i += 1

    return [*tokens[:index], *moved, tokens[index], "--", *forwarded]


class PassThroughCommand(TyperCommand):
    """Typer command whose pass-through arguments are shielded from option parsing."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, protect_pass_through(args))


def build_app(
    solve_pt1: SolverFunction,
    solve_pt2: SolverFunction,
    *,
    input_reader: InputReader | None = None,
    settings: FireplaceSettings | None = None,
) -> typer.Typer:
    """Single-command Typer app bound to a pair of solver functions."""

    app = typer.Typer(add_completion=False, help=ESB_DESCRIPTION)

    @app.command(
        cls=PassThroughCommand,
        help=ESB_DESCRIPTION,
        context_settings={"ignore_unknown_options": True},
    )
    def solve(
        part: Optional[str] = typer.Option(
            None,
            "--part",
            "-p",
            metavar="{1|2}",
            help="Run solution part 1 or part 2",
        ),
        use_args: bool = typer.Option(
            False,
            "--args",
            "-a",
            help="Additional arguments for running the solutions",
        ),
        extra: Optional[List[str]] = typer.Argument(
            None,
            metavar="[ARGS]...",
            show_default=False,
        ),
    ) -> None:
        err_console = Console(stderr=True)
        try:
            run_settings = settings or FireplaceSettings()
        except ValidationError as exc:
            err_console.print("[bold red]error:[/bold red] invalid ESB_FIREPLACE_* settings", highlight=False)
            err_console.print(str(exc), markup=False, highlight=False)
            raise typer.Exit(code=int(ExitCode.USAGE)) from exc

        setup_logging(run_settings)
        log = get_logger(__name__)

        try:
            fp_args = FireplaceArgs.from_values(part, pass_through_args(use_args, extra))
            run(solve_pt1, solve_pt2, input_reader or StdinReader(), fp_args)
        except FireplaceError as exc:
            print_error(err_console, exc, show_traceback=run_settings.show_traceback)
            log.info("run_failed", error=type(exc).__name__, exit_code=int(exc.exit_code))
            raise typer.Exit(code=int(exc.exit_code)) from exc

        log.info("run_succeeded", part=fp_args.part.value)

    return app


def run_cli(
    solve_pt1: SolverFunction,
    solve_pt2: SolverFunction,
    argv: Sequence[str] | None = None,
    *,
    prog_name: str | None = None,
) -> NoReturn:
    """Parse `argv` (default `sys.argv[1:]`), run and exit the process."""

    app = build_app(solve_pt1, solve_pt2)
    app(args=list(argv) if argv is not None else None, prog_name=prog_name)
    raise SystemExit(int(ExitCode.SUCCESS))
