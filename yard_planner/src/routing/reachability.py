"""Breadth-first route search for a single crane on the yard grid."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from yard_planner.src.yard.moves import FIRST_STEPS, TRAVEL_MOVES, Cell, Move, in_bounds
from yard_planner.src.yard.state import YardState

UNVISITED = -1


@dataclass(frozen=True)
class RouteOption:
    """A first step toward a goal and the total turns the route takes."""

    move: Move
    distance: int


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _passable(state: YardState, cell: Cell, may_traverse_occupied: bool) -> bool:
    return in_bounds(cell, state.n) and (
        may_traverse_occupied or not state.is_occupied(cell)
    )


def _bfs_distances(
    state: YardState,
    sources: Iterable[Cell],
    may_traverse_occupied: bool,
    goal: Optional[Cell] = None,
) -> np.ndarray:
    """Distance grid from ``sources`` (each at distance 1).

    Unreached cells hold UNVISITED. The search stops early once ``goal``
    has been labelled.
    """
    n = state.n
    dist = np.full((n, n), UNVISITED, dtype=np.int64)
    frontier: deque[Cell] = deque()
    for source in sources:
        if dist[source] == UNVISITED:
            dist[source] = 1
            frontier.append(source)

    while frontier:
        cell = frontier.popleft()
        if cell == goal:
            break
        for move in TRAVEL_MOVES:
            dx, dy = move.delta
            nxt = (cell[0] + dx, cell[1] + dy)
            if not _passable(state, nxt, may_traverse_occupied):
                continue
            if dist[nxt] != UNVISITED:
                continue
            dist[nxt] = dist[cell] + 1
            frontier.append(nxt)
    return dist


def shortest_options(
    state: YardState, start: Cell, goal: Cell, may_traverse_occupied: bool
) -> List[RouteOption]:
    """Shortest route length toward ``goal`` for each possible first step.

    The first step is one of UP, LEFT, DOWN, RIGHT or STAY; the cell it
    lands on counts as distance 1. Steps that leave the yard, land on a
    blocked cell, or cannot reach the goal are omitted. A cell holding a
    container is blocked unless ``may_traverse_occupied``.
    """
    options: List[RouteOption] = []
    if not in_bounds(goal, state.n):
        return options
    for move in FIRST_STEPS:
        dx, dy = move.delta
        first = (start[0] + dx, start[1] + dy)
        if not _passable(state, first, may_traverse_occupied):
            continue
        dist = _bfs_distances(state, [first], may_traverse_occupied, goal=goal)
        if dist[goal] != UNVISITED:
            options.append(RouteOption(move, int(dist[goal])))
    return options


def is_reachable(
    state: YardState, start: Cell, goal: Optional[Cell], may_traverse_occupied: bool
) -> bool:
    """True exactly when ``shortest_options`` would return something."""
    if goal is None or not in_bounds(goal, state.n):
        return False
    sources = []
    for move in FIRST_STEPS:
        dx, dy = move.delta
        first = (start[0] + dx, start[1] + dy)
        if _passable(state, first, may_traverse_occupied):
            sources.append(first)
    if not sources:
        return False
    dist = _bfs_distances(state, sources, may_traverse_occupied, goal=goal)
    return bool(dist[goal] != UNVISITED)
