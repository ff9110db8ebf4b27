"""Solver driver and delivery scoring."""

from .driver import RunStatus, SolveResult, YardSolver, solve_problem
from .scoring import DeliveryReport, evaluate

__all__ = [
    "RunStatus",
    "SolveResult",
    "YardSolver",
    "solve_problem",
    "DeliveryReport",
    "evaluate",
]
