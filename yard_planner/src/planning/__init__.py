"""Turn planning.

Each turn the planner works in three steps:

1. Target selection: which containers the output rows are waiting for and
   which intake cells have to be emptied to reach them.
2. Assignment: one destination per crane, greedy and nearest-first.
3. Synthesis: the collision-free move vector with the best total progress.
"""

from .assignment import Destinations, TaskAssigner, assign_destinations
from .synthesizer import crane_candidates, synthesize_turn
from .targets import carry_out_candidates, kick_cost, make_destinations, select_targets

__all__ = [
    "Destinations",
    "TaskAssigner",
    "assign_destinations",
    "crane_candidates",
    "synthesize_turn",
    "carry_out_candidates",
    "kick_cost",
    "make_destinations",
    "select_targets",
]
