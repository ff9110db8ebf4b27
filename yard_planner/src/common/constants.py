"""Shared constants and solver configuration."""

import sys
from dataclasses import dataclass

# Planner sentinel for containers that can never become a target
UNREACHABLE_KICK_COST = sys.maxsize

# Delivery score weights
INVERSION_PENALTY = 100
MISPLACED_PENALTY = 10_000
UNDELIVERED_PENALTY = 1_000_000


@dataclass(frozen=True)
class SolverConfig:
    """Tunable settings for one solver run."""

    max_turns: int = 1000
    large_crane_index: int = 0

    def __post_init__(self) -> None:
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {self.max_turns}")
        if self.large_crane_index < 0:
            raise ValueError(
                f"large_crane_index must be non-negative, got {self.large_crane_index}"
            )


DEFAULT_CONFIG = SolverConfig()
