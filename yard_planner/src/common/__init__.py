"""Common utilities shared across planner stages."""

from .diagnostics import Diagnostic, DiagnosticSeverity, ProgramDiagnostics
from .exceptions import (
    CollisionError,
    IllegalMoveError,
    PlanningExhaustedError,
    ProblemFormatError,
    StateInvariantError,
    TranscriptFormatError,
    YardError,
)
from .constants import *

__all__ = [
    "Diagnostic",
    "DiagnosticSeverity",
    "ProgramDiagnostics",
    "CollisionError",
    "IllegalMoveError",
    "PlanningExhaustedError",
    "ProblemFormatError",
    "StateInvariantError",
    "TranscriptFormatError",
    "YardError",
    # Constants
    "DEFAULT_CONFIG",
    "SolverConfig",
    "UNREACHABLE_KICK_COST",
]
