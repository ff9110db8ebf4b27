"""
Pytest configuration for the yard planner project.
Ensures that the root directory is in the Python path so imports work correctly,
and provides a factory for hand-built yard snapshots.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from yard_planner.src.yard.state import Crane, YardState  # noqa: E402


def build_state(
    n,
    containers=None,
    cranes=None,
    queues=None,
    done=None,
    large_index=0,
    turn=0,
):
    """Build a YardState directly, without carry-in.

    Args:
        n: yard size
        containers: {(row, col): container_id} on the board
        cranes: list of (position, carried_container) per crane;
            defaults to empty-handed cranes at (i, 0)
        queues: intake queues, front first (default: all empty)
        done: done lists (default: all empty)
        large_index: index of the large crane
    """
    board = [[None] * n for _ in range(n)]
    for (x, y), container in (containers or {}).items():
        board[x][y] = container
    if cranes is None:
        cranes = [((i, 0), None) for i in range(n)]
    return YardState(
        board=tuple(tuple(row) for row in board),
        queues=tuple(tuple(q) for q in (queues or [()] * n)),
        done=tuple(tuple(d) for d in (done or [()] * n)),
        cranes=tuple(
            Crane(index=i, large=(i == large_index), position=pos, container=held)
            for i, (pos, held) in enumerate(cranes)
        ),
        turn=turn,
    )


def identity_rows(n):
    return [list(range(n * row, n * row + n)) for row in range(n)]


@pytest.fixture
def make_state():
    return build_state


@pytest.fixture
def rows_in_order():
    return identity_rows
