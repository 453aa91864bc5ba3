"""Solver doubles shared by the test modules."""

from __future__ import annotations

PT2_RETURN = "2"


def solve_pt1(input_data: str, args: list[str] | None) -> str:
    if args is not None:
        return " ".join(args)
    return input_data.strip()


def solve_pt2(input_data: str, args: list[str] | None) -> str:
    return PT2_RETURN


class RecordingSolver:
    """Solver double remembering every call it received."""

    def __init__(self, answer: object = "ok") -> None:
        self.answer = answer
        self.calls: list[tuple[str, list[str] | None]] = []

    def __call__(self, input_data: str, args: list[str] | None) -> object:
        self.calls.append((input_data, args))
        return self.answer
