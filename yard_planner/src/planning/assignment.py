"""Crane-to-destination assignment for one turn."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from yard_planner.src.common.diagnostics import ProgramDiagnostics
from yard_planner.src.routing.reachability import is_reachable, manhattan
from yard_planner.src.yard.moves import Cell
from yard_planner.src.yard.state import YardState

from .targets import carry_out_candidates, make_destinations, select_targets

logger = logging.getLogger(__name__)

Destinations = List[Optional[Cell]]


class TaskAssigner:
    """Decide where every crane should head this turn.

    Cranes that already carry a container go to that container's next
    resting place. Remaining destinations from target selection are handed
    out greedily to the nearest idle crane that can finish the job; there
    is no backtracking, so an early assignment is never revisited.
    """

    def __init__(
        self, state: YardState, diagnostics: Optional[ProgramDiagnostics] = None
    ) -> None:
        self.state = state
        self.diagnostics = diagnostics or ProgramDiagnostics()
        self.diagnostics.default_stage = "planning"
        self._due = set(carry_out_candidates(state))

    def release_point(
        self,
        container: Optional[int],
        start: Cell,
        large: bool,
        claimed: Sequence[Optional[Cell]],
    ) -> Optional[Cell]:
        """Where ``container``, lifted at ``start``, should be put down next.

        A container due for carry-out goes straight to its output cell.
        Anything else is parked on the first reachable, unclaimed interior
        cell, or failing that on the nearest vacated intake cell. None when
        nothing fits.
        """
        n = self.state.n
        if container is not None and container in self._due:
            return (container // n, n - 1)

        for cell in self.state.free_interior_cells():
            if cell not in claimed and is_reachable(self.state, start, cell, large):
                return cell

        spare = [
            cell
            for cell in self.state.vacated_intake_cells()
            if cell not in claimed and is_reachable(self.state, start, cell, large)
        ]
        if spare:
            spare.sort(key=lambda cell: manhattan(start, cell))
            return spare[0]
        return None

    def assign(self) -> Destinations:
        """One destination per crane; None means the crane has no task."""
        state = self.state
        n = state.n
        destinations: Destinations = [None] * len(state.cranes)
        busy = [crane.index for crane in state.cranes if crane.carrying]

        for index in busy:
            crane = state.cranes[index]
            start = crane.position
            goal = self.release_point(crane.container, start, crane.large, destinations)
            if is_reachable(state, start, goal, crane.large):
                destinations[index] = goal
            elif start[1] != n - 1:
                # Nowhere to take it: put it down here and free the crane
                destinations[index] = start
                logger.debug("Crane %d releases container %d in place", index, crane.container)
                self.diagnostics.info(
                    f"Releasing container {crane.container} in place at {start}",
                    turn=state.turn,
                    crane=index,
                )
            else:
                destinations[index] = goal

        tasks = make_destinations(state, select_targets(state))
        for task in tasks:
            container = state.cell(task)
            candidates = []
            for crane in state.cranes:
                if crane.index in busy or crane.bombed:
                    continue
                goal = self.release_point(container, task, crane.large, destinations)
                if is_reachable(state, task, goal, crane.large):
                    candidates.append((manhattan(crane.position, task), crane.index))
            if candidates:
                _, chosen = min(candidates)
                destinations[chosen] = task
                busy.append(chosen)

        return destinations


def assign_destinations(
    state: YardState, diagnostics: Optional[ProgramDiagnostics] = None
) -> Destinations:
    """Convenience wrapper around :class:`TaskAssigner`."""
    return TaskAssigner(state, diagnostics).assign()
