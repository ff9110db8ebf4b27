"""Turn transition engine: legality checks and atomic state updates."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from yard_planner.src.common.exceptions import CollisionError, IllegalMoveError

from .moves import Cell, Move, next_position
from .state import Crane, YardState


def apply_crane_move(
    state: YardState, crane: Crane, move: Move, board: List[List[Optional[int]]]
) -> Crane:
    """Check one crane's move against ``state`` and return the crane after it.

    Picks and releases are written into ``board``, a mutable copy of the
    pre-turn board. ``state`` itself is only read.
    """
    if move is Move.STAY:
        return crane
    if crane.bombed:
        raise IllegalMoveError("has already been bombed.", crane.index)

    x, y = crane.position
    if move is Move.PICK:
        if crane.carrying:
            raise IllegalMoveError("already holds a container.", crane.index)
        container = state.board[x][y]
        if container is None:
            raise IllegalMoveError(f"no container at {x} {y} to pick.", crane.index)
        board[x][y] = None
        return replace(crane, container=container)

    if move is Move.RELEASE:
        if not crane.carrying:
            raise IllegalMoveError("does not hold a container.", crane.index)
        if state.board[x][y] is not None:
            raise IllegalMoveError(
                f"cannot release onto occupied cell {x} {y}.", crane.index
            )
        board[x][y] = crane.container
        return replace(crane, container=None)

    if move is Move.BOMB:
        if crane.carrying:
            raise IllegalMoveError(
                "cannot be bombed while carrying a container.", crane.index
            )
        return replace(crane, position=None)

    target = next_position(move, crane.position, state.n)
    if target is None:
        raise IllegalMoveError("would move out of the yard.", crane.index)
    if crane.carrying and not crane.large and state.is_occupied(target):
        raise IllegalMoveError(
            f"cannot carry a container over the container at {target[0]} {target[1]}.",
            crane.index,
        )
    return replace(crane, position=target)


def find_collision(
    current: Sequence[Optional[Cell]], proposed: Sequence[Optional[Cell]]
) -> Optional[Tuple[int, int, str]]:
    """First pair of cranes whose simultaneous moves conflict.

    Cranes whose proposed position is None (bombed) never collide. Returns
    ``(first, second, kind)`` with ``first < second``, or None.
    """
    for i in range(len(proposed)):
        if proposed[i] is None:
            continue
        for j in range(i):
            if proposed[j] is None:
                continue
            if proposed[i] == proposed[j]:
                return j, i, "collided"
            if proposed[i] == current[j] and proposed[j] == current[i]:
                return j, i, "swapped cells"
    return None


def step(state: YardState, moves: Sequence[Move]) -> YardState:
    """Play one turn and return the next snapshot.

    Every crane's move is checked before anything is committed; any
    violation raises and leaves ``state`` untouched. After the moves the
    terminal column is carried out and the intake cells carried in.
    """
    if len(moves) != len(state.cranes):
        raise IllegalMoveError(
            f"Expected {len(state.cranes)} moves for the turn, got {len(moves)}."
        )

    board = [list(row) for row in state.board]
    cranes = tuple(
        apply_crane_move(state, crane, move, board)
        for crane, move in zip(state.cranes, moves)
    )

    collision = find_collision(
        state.crane_positions(), [crane.position for crane in cranes]
    )
    if collision is not None:
        raise CollisionError(*collision)

    committed = replace(
        state,
        board=tuple(tuple(row) for row in board),
        cranes=cranes,
        turn=state.turn + 1,
    )
    return committed.carried_out().carried_in()


def replay(state: YardState, turns: Iterable[Sequence[Move]]) -> YardState:
    """Apply a sequence of per-turn move vectors starting from ``state``."""
    for moves in turns:
        state = step(state, moves)
    return state
