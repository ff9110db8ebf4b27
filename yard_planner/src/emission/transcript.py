"""Crane action transcripts: one line of action characters per crane."""

from __future__ import annotations

from typing import List, Optional, Sequence

from yard_planner.src.common.exceptions import TranscriptFormatError
from yard_planner.src.yard.moves import Move


def to_turns(actions: Sequence[Sequence[Move]]) -> List[List[Move]]:
    """Per-crane sequences → per-turn move vectors, padding with STAY."""
    length = max((len(sequence) for sequence in actions), default=0)
    return [
        [sequence[t] if t < len(sequence) else Move.STAY for sequence in actions]
        for t in range(length)
    ]


def to_crane_sequences(turns: Sequence[Sequence[Move]], n_cranes: int) -> List[List[Move]]:
    """Per-turn move vectors → per-crane sequences, padding short vectors with STAY."""
    return [
        [moves[i] if i < len(moves) else Move.STAY for moves in turns]
        for i in range(n_cranes)
    ]


def format_transcript(actions: Sequence[Sequence[Move]]) -> str:
    """Render per-crane sequences as equal-length lines."""
    length = max((len(sequence) for sequence in actions), default=0)
    lines = []
    for sequence in actions:
        line = "".join(move.to_char() for move in sequence)
        lines.append(line.ljust(length, Move.STAY.to_char()))
    return "\n".join(lines)


def parse_transcript(text: str, n_cranes: Optional[int] = None) -> List[List[Move]]:
    """Parse a transcript back into per-crane move sequences."""
    lines = [line.strip() for line in text.strip().splitlines()]
    if n_cranes is not None and len(lines) != n_cranes:
        raise TranscriptFormatError(f"Expected {n_cranes} crane lines, got {len(lines)}")

    actions: List[List[Move]] = []
    for line_no, line in enumerate(lines, start=1):
        sequence = []
        for column, char in enumerate(line, start=1):
            try:
                sequence.append(Move.from_char(char))
            except TranscriptFormatError as exc:
                raise TranscriptFormatError(exc.message, line_no, column) from exc
        actions.append(sequence)
    return actions
