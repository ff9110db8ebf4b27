"""Per-crane actions and their geometry."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from yard_planner.src.common.exceptions import TranscriptFormatError

Cell = Tuple[int, int]


class Move(Enum):
    """One crane action for one turn; the value is its transcript character."""

    STAY = "."
    PICK = "P"
    RELEASE = "Q"
    UP = "U"
    LEFT = "L"
    DOWN = "D"
    RIGHT = "R"
    BOMB = "B"

    @classmethod
    def from_char(cls, char: str) -> "Move":
        try:
            return cls(char)
        except ValueError:
            raise TranscriptFormatError(f"Invalid crane action character {char!r}")

    def to_char(self) -> str:
        return self.value

    @property
    def delta(self) -> Cell:
        """Row/column offset of a travel move, (0, 0) for everything else."""
        return _DELTAS.get(self, (0, 0))

    @property
    def is_travel(self) -> bool:
        return self in _DELTAS


_DELTAS = {
    Move.UP: (-1, 0),
    Move.LEFT: (0, -1),
    Move.DOWN: (1, 0),
    Move.RIGHT: (0, 1),
}

# Search order for first steps: the four directions, then staying put
TRAVEL_MOVES: Tuple[Move, ...] = (Move.UP, Move.LEFT, Move.DOWN, Move.RIGHT)
FIRST_STEPS: Tuple[Move, ...] = TRAVEL_MOVES + (Move.STAY,)


def in_bounds(cell: Cell, n: int) -> bool:
    return 0 <= cell[0] < n and 0 <= cell[1] < n


def next_position(move: Move, cell: Cell, n: int) -> Optional[Cell]:
    """Cell a crane at ``cell`` occupies after ``move`` on an n×n yard.

    Returns None when a travel move would leave the yard, and for BOMB,
    since a bombed crane leaves the yard for good.
    """
    if move is Move.BOMB:
        return None
    dx, dy = move.delta
    target = (cell[0] + dx, cell[1] + dy)
    if not in_bounds(target, n):
        return None
    return target
