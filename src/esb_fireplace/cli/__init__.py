"""CLI layer: Typer application, Rich output and the exit-code boundary."""
