"""Problem text → :class:`YardProblem`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from yard_planner.src.common.exceptions import ProblemFormatError


@dataclass(frozen=True)
class YardProblem:
    """Yard size and, for each row, the containers its intake queue receives."""

    n: int
    rows: Tuple[Tuple[int, ...], ...]

    def validate(self, source_name: str = "<string>") -> None:
        n = self.n
        if n < 2:
            raise ProblemFormatError(f"Yard size must be at least 2, got {n}", source_name)
        if len(self.rows) != n or any(len(row) != n for row in self.rows):
            raise ProblemFormatError(f"Expected {n} rows of {n} containers", source_name)
        ids = sorted(c for row in self.rows for c in row)
        if ids != list(range(n * n)):
            raise ProblemFormatError(
                f"Container ids must be a permutation of 0..{n * n - 1}", source_name
            )


def parse_problem(text: str, source_name: str = "<string>") -> YardProblem:
    """Read ``N`` followed by N rows of N container ids."""
    tokens = text.split()
    if not tokens:
        raise ProblemFormatError("Empty problem", source_name)

    values: List[int] = []
    for position, token in enumerate(tokens, start=1):
        try:
            values.append(int(token))
        except ValueError:
            raise ProblemFormatError(
                f"Token {position} is not an integer: {token!r}", source_name
            )

    n = values[0]
    if n < 2:
        raise ProblemFormatError(f"Yard size must be at least 2, got {n}", source_name)
    body = values[1:]
    if len(body) != n * n:
        raise ProblemFormatError(
            f"Expected {n * n} container ids after the size, got {len(body)}",
            source_name,
        )

    rows = tuple(tuple(body[row * n:(row + 1) * n]) for row in range(n))
    problem = YardProblem(n=n, rows=rows)
    problem.validate(source_name)
    return problem
