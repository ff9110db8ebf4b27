from typing import Optional, Tuple

"""Exception hierarchy shared by every yard planner stage."""


class YardError(Exception):
    """Base class for all yard planner failures."""


class IllegalMoveError(YardError):
    """A single crane was asked to do something the rules forbid."""

    def __init__(self, reason: str, crane: Optional[int] = None) -> None:
        self.reason = reason
        self.crane = crane
        prefix = f"Crane {crane}: " if crane is not None else ""
        super().__init__(f"{prefix}{reason}")


class CollisionError(IllegalMoveError):
    """Two cranes would end on the same cell or swap cells."""

    def __init__(self, first: int, second: int, kind: str = "collided") -> None:
        self.cranes: Tuple[int, int] = (first, second)
        super().__init__(f"Crane {first} and {second} {kind}.")
        self.crane = first


class StateInvariantError(YardError):
    """A yard snapshot violates conservation or occupancy rules."""


class PlanningExhaustedError(YardError):
    """No collision-free move combination exists for the current turn."""

    def __init__(self, message: str, turn: Optional[int] = None) -> None:
        self.message = message
        self.turn = turn
        location = f" at turn {turn}" if turn is not None else ""
        super().__init__(f"{message}{location}")


class ProblemFormatError(YardError):
    """The problem text could not be turned into a yard problem."""

    def __init__(self, message: str, source_name: str = "<string>") -> None:
        self.message = message
        self.source_name = source_name
        super().__init__(f"{source_name}: {message}")


class TranscriptFormatError(YardError):
    """A crane action transcript is malformed."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        self.message = message
        self.line = line
        self.column = column
        location = f" at {line}:{column}" if line > 0 else ""
        super().__init__(f"{message}{location}")
