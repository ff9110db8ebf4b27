"""Solver driver: runs the plan → synthesize → step loop until the yard is done."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from yard_planner.src.common.constants import DEFAULT_CONFIG, SolverConfig
from yard_planner.src.common.diagnostics import ProgramDiagnostics
from yard_planner.src.common.exceptions import (
    IllegalMoveError,
    PlanningExhaustedError,
)
from yard_planner.src.emission.transcript import to_crane_sequences
from yard_planner.src.parsing.problem_parser import YardProblem
from yard_planner.src.planning.assignment import TaskAssigner
from yard_planner.src.planning.synthesizer import synthesize_turn
from yard_planner.src.yard.moves import Move
from yard_planner.src.yard.state import YardState
from yard_planner.src.yard.transition import step

from .scoring import DeliveryReport, evaluate

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    RUNNING = "running"
    DONE = "done"
    TURN_LIMIT_EXCEEDED = "turn_limit_exceeded"


@dataclass
class SolveResult:
    """Outcome of one run; ``actions`` holds one move sequence per crane."""

    actions: List[List[Move]]
    turns: List[List[Move]]
    initial_state: YardState
    final_state: YardState
    status: RunStatus
    report: DeliveryReport
    messages: List[str] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.status is RunStatus.DONE

    @property
    def turn_count(self) -> int:
        return len(self.turns)


class YardSolver:
    """Greedy turn-by-turn scheduler for one yard problem."""

    def __init__(
        self,
        problem: YardProblem,
        config: SolverConfig = DEFAULT_CONFIG,
        diagnostics: Optional[ProgramDiagnostics] = None,
    ) -> None:
        self.problem = problem
        self.config = config
        self.diagnostics = diagnostics or ProgramDiagnostics()
        self.diagnostics.default_stage = "driver"
        if config.large_crane_index >= problem.n:
            raise ValueError(
                f"large_crane_index must be below the yard size {problem.n}, "
                f"got {config.large_crane_index}"
            )
        self.initial_state = YardState.initial(problem.rows, config.large_crane_index)
        self.state = self.initial_state
        self.status = RunStatus.RUNNING

    def solve(self) -> SolveResult:
        """Play turns until every container is delivered or the ceiling is hit."""
        turns: List[List[Move]] = []

        while self.status is RunStatus.RUNNING:
            if self.state.is_complete():
                self.status = RunStatus.DONE
                break
            if len(turns) >= self.config.max_turns:
                self.status = RunStatus.TURN_LIMIT_EXCEEDED
                self.diagnostics.warning(
                    f"Turn limit of {self.config.max_turns} reached with "
                    f"{self._undelivered()} container(s) undelivered",
                    turn=self.state.turn,
                )
                break

            moves = self.plan_turn()
            logger.debug(
                "turn %d: %s", self.state.turn, "".join(m.to_char() for m in moves)
            )
            try:
                self.state = step(self.state, moves)
            except IllegalMoveError as exc:
                self.diagnostics.error(f"Rejected move vector: {exc}", turn=self.state.turn)
                raise
            turns.append(moves)

        report = evaluate(self.state)
        self.diagnostics.info(f"Run finished: {report.summary()}", turn=self.state.turn)
        return SolveResult(
            actions=to_crane_sequences(turns, len(self.state.cranes)),
            turns=turns,
            initial_state=self.initial_state,
            final_state=self.state,
            status=self.status,
            report=report,
            messages=self.diagnostics.get_messages(),
        )

    def plan_turn(self) -> List[Move]:
        """Destinations for every crane, then the best move vector toward them."""
        destinations = TaskAssigner(self.state, self.diagnostics).assign()
        self.diagnostics.default_stage = "driver"
        try:
            return synthesize_turn(self.state, destinations)
        except PlanningExhaustedError as exc:
            self.diagnostics.error(str(exc), turn=self.state.turn)
            raise

    def _undelivered(self) -> int:
        n = self.state.n
        return n * n - sum(len(done) for done in self.state.done)


def solve_problem(
    problem: YardProblem,
    config: SolverConfig = DEFAULT_CONFIG,
    diagnostics: Optional[ProgramDiagnostics] = None,
) -> SolveResult:
    return YardSolver(problem, config, diagnostics).solve()
