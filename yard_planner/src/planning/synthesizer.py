"""Turn synthesis: combine per-crane options into one collision-free move vector."""

from __future__ import annotations

import itertools
from typing import List, Optional, Sequence, Tuple

from yard_planner.src.common.exceptions import PlanningExhaustedError
from yard_planner.src.routing.reachability import shortest_options
from yard_planner.src.yard.moves import TRAVEL_MOVES, Cell, Move, next_position
from yard_planner.src.yard.state import Crane, YardState
from yard_planner.src.yard.transition import find_collision

Candidate = Tuple[Move, int]


def _can_travel(state: YardState, crane: Crane, move: Move) -> bool:
    target = next_position(move, crane.position, state.n)
    if target is None:
        return False
    return crane.may_traverse_occupied or not state.is_occupied(target)


def crane_candidates(
    state: YardState, crane: Crane, destination: Optional[Cell]
) -> List[Candidate]:
    """Moves worth considering for ``crane`` this turn, with remaining distance."""
    if crane.bombed:
        return [(Move.STAY, 0)]

    if destination is None:
        # No task: anything legal will do
        candidates = [(Move.STAY, 0)]
        candidates.extend(
            (move, 0) for move in TRAVEL_MOVES if _can_travel(state, crane, move)
        )
        return candidates

    if destination == crane.position:
        occupied = state.is_occupied(crane.position)
        if not crane.carrying and occupied:
            return [(Move.PICK, 0)]
        if crane.carrying and not occupied:
            return [(Move.RELEASE, 0)]
        return [(Move.STAY, 0)]

    options = shortest_options(
        state, crane.position, destination, crane.may_traverse_occupied
    )
    if not options:
        return [(Move.STAY, 0)]
    return [(option.move, option.distance) for option in options]


def synthesize_turn(
    state: YardState, destinations: Sequence[Optional[Cell]]
) -> List[Move]:
    """Pick the move vector that makes the most progress without collisions.

    Every combination of per-crane candidates is tried; combinations where
    all cranes stay are skipped, and the lowest total remaining distance
    wins (earliest combination on ties).
    """
    per_crane = [
        crane_candidates(state, crane, destination)
        for crane, destination in zip(state.cranes, destinations)
    ]
    current = state.crane_positions()

    best: Optional[Tuple[int, Tuple[Candidate, ...]]] = None
    for combo in itertools.product(*per_crane):
        if all(move is Move.STAY for move, _ in combo):
            continue
        total = sum(weight for _, weight in combo)
        if best is not None and total >= best[0]:
            continue
        proposed = [
            None if crane.bombed else next_position(move, crane.position, state.n)
            for crane, (move, _) in zip(state.cranes, combo)
        ]
        if find_collision(current, proposed) is None:
            best = (total, combo)

    if best is None:
        raise PlanningExhaustedError("Cannot find a collision-free move", state.turn)
    return [move for move, _ in best[1]]
