"""Rich rendering for the CLI.

Only stderr is written here. The answer itself is printed plain by the
dispatcher so the orchestrator never sees markup or wrapping.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.traceback import Traceback

from esb_fireplace.core.errors import FireplaceError


def build_error_text(error: BaseException) -> Text:
    """One-line `error: <message>` text; the message is never parsed as markup."""

    message = str(error) or type(error).__name__
    return Text.assemble(("error: ", "bold red"), message)


def print_error(
    console: Console,
    error: BaseException,
    *,
    show_traceback: bool = False,
) -> None:
    if show_traceback:
        console.print(Traceback.from_exception(type(error), error, error.__traceback__))
    console.print(build_error_text(error), soft_wrap=True, highlight=False)
    if isinstance(error, FireplaceError) and error.__cause__ is not None and not show_traceback:
        cause = error.__cause__
        console.print(
            Text(f"caused by {type(cause).__name__}", style="dim"),
            soft_wrap=True,
            highlight=False,
        )
