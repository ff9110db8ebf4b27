"""Yard model and rules.

This package holds the simulation half of the planner:

1. Moves: the eight crane actions and their transcript characters.
2. State: immutable snapshots of board, intake queues, done lists and cranes.
3. Transition: per-crane legality, collision checks and the atomic turn
   update with automatic carry-out and carry-in.
"""

from .moves import FIRST_STEPS, TRAVEL_MOVES, Cell, Move, in_bounds, next_position
from .state import (
    DELIVERED,
    ContainerLocation,
    Crane,
    LocationKind,
    YardState,
)
from .transition import apply_crane_move, find_collision, replay, step

__all__ = [
    "FIRST_STEPS",
    "TRAVEL_MOVES",
    "Cell",
    "Move",
    "in_bounds",
    "next_position",
    "DELIVERED",
    "ContainerLocation",
    "Crane",
    "LocationKind",
    "YardState",
    "apply_crane_move",
    "find_collision",
    "replay",
    "step",
]
