"""Delivery scoring for a finished (or abandoned) run."""

from __future__ import annotations

from dataclasses import dataclass

from yard_planner.src.common.constants import (
    INVERSION_PENALTY,
    MISPLACED_PENALTY,
    UNDELIVERED_PENALTY,
)
from yard_planner.src.yard.state import YardState


@dataclass(frozen=True)
class DeliveryReport:
    turns: int
    inversions: int
    misplaced: int
    undelivered: int

    @property
    def score(self) -> int:
        """Lower is better; a perfect run scores its turn count."""
        return (
            self.turns
            + INVERSION_PENALTY * self.inversions
            + MISPLACED_PENALTY * self.misplaced
            + UNDELIVERED_PENALTY * self.undelivered
        )

    def summary(self) -> str:
        return (
            f"turns={self.turns} inversions={self.inversions} "
            f"misplaced={self.misplaced} undelivered={self.undelivered} "
            f"score={self.score}"
        )


def evaluate(state: YardState) -> DeliveryReport:
    """Score the done lists of ``state``.

    An inversion is a pair of containers delivered to their own row in the
    wrong order; a misplaced container went to another row.
    """
    n = state.n
    inversions = 0
    misplaced = 0
    delivered = 0
    for row, done in enumerate(state.done):
        delivered += len(done)
        for i, first in enumerate(done):
            if first // n != row:
                misplaced += 1
                continue
            for second in done[i + 1:]:
                if second // n == row and second < first:
                    inversions += 1
    return DeliveryReport(
        turns=state.turn,
        inversions=inversions,
        misplaced=misplaced,
        undelivered=n * n - delivered,
    )
