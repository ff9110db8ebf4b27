"""Target selection: which containers to work on this turn, and where to go."""

from __future__ import annotations

from typing import List, Sequence

from yard_planner.src.common.constants import UNREACHABLE_KICK_COST
from yard_planner.src.yard.moves import Cell
from yard_planner.src.yard.state import ContainerLocation, LocationKind, YardState


def carry_out_candidates(state: YardState) -> List[int]:
    """The container each unfinished output row is waiting for, in row order."""
    n = state.n
    return [
        n * row + len(done)
        for row, done in enumerate(state.done)
        if len(done) < n
    ]


def kick_cost(location: ContainerLocation, kicked: Sequence[int]) -> int:
    """Queued containers that still have to be pulled out to reach this one."""
    if location.kind is LocationKind.QUEUE:
        return max(0, location.depth + 1 - kicked[location.row])
    if location.kind is LocationKind.DONE:
        return UNREACHABLE_KICK_COST
    return 0


def select_targets(state: YardState) -> List[int]:
    """Order the carry-out candidates by how cheap they are to reach.

    Each pick commits the kicks it needs in its intake row, so later
    candidates in the same row are scored against them. Ties go to the
    lower container id.
    """
    n = state.n
    candidates = carry_out_candidates(state)
    kicked = [0] * n
    targets: List[int] = []
    while len(targets) < n and candidates:
        # equal costs go to the lower id, not to the previous round's order
        chosen = min(
            candidates, key=lambda c: (kick_cost(state.locate(c), kicked), c)
        )
        candidates.remove(chosen)
        targets.append(chosen)
        location = state.locate(chosen)
        if location.kind is LocationKind.QUEUE:
            kicked[location.row] = max(kicked[location.row], location.depth + 1)
    return targets


def make_destinations(state: YardState, targets: Sequence[int]) -> List[Cell]:
    """Cells cranes must visit to pick up (or kick toward) the targets.

    A target on the board yields its own cell. A queued target yields its
    row's intake cell once for every container that has to leave the queue
    before it, itself included. Carried and delivered targets yield nothing.
    """
    kicked = [0] * state.n
    destinations: List[Cell] = []
    for target in targets:
        location = state.locate(target)
        if location.kind is LocationKind.BOARD:
            destinations.append(location.cell)
        elif location.kind is LocationKind.QUEUE:
            row = location.row
            while kicked[row] < location.depth + 1:
                destinations.append((row, 0))
                kicked[row] += 1
    return destinations
