"""Immutable yard snapshots: board, intake queues, done lists and cranes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from yard_planner.src.common.exceptions import StateInvariantError

from .moves import Cell

Board = Tuple[Tuple[Optional[int], ...], ...]


@dataclass(frozen=True)
class Crane:
    """One crane; ``position`` is None once the crane has been bombed."""

    index: int
    large: bool
    position: Optional[Cell]
    container: Optional[int] = None

    @property
    def bombed(self) -> bool:
        return self.position is None

    @property
    def carrying(self) -> bool:
        return self.container is not None

    @property
    def may_traverse_occupied(self) -> bool:
        """Whether the crane can currently pass over cells holding containers."""
        return self.large or not self.carrying


class LocationKind(Enum):
    BOARD = "board"
    QUEUE = "queue"
    CARRIED = "carried"
    DONE = "done"


@dataclass(frozen=True)
class ContainerLocation:
    """Where a container currently is.

    BOARD uses ``row``/``column``, QUEUE uses ``row``/``depth`` (0 is the
    front of the queue), CARRIED uses ``crane``. DONE carries no data.
    """

    kind: LocationKind
    row: Optional[int] = None
    column: Optional[int] = None
    depth: Optional[int] = None
    crane: Optional[int] = None

    @property
    def cell(self) -> Optional[Cell]:
        if self.kind is LocationKind.BOARD:
            return (self.row, self.column)
        return None


DELIVERED = ContainerLocation(LocationKind.DONE)


@dataclass(frozen=True)
class YardState:
    """Everything on the yard at one turn.

    Snapshots never change after construction; the transition engine builds
    the next one. Queues list their containers front first.
    """

    board: Board
    queues: Tuple[Tuple[int, ...], ...]
    done: Tuple[Tuple[int, ...], ...]
    cranes: Tuple[Crane, ...]
    turn: int = 0
    _locations: Optional[Dict[int, ContainerLocation]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def initial(
        cls, rows: Sequence[Sequence[int]], large_crane_index: int = 0
    ) -> "YardState":
        """Fresh yard for the given intake rows, with the first carry-in done."""
        n = len(rows)
        board: Board = tuple((None,) * n for _ in range(n))
        cranes = tuple(
            Crane(index=i, large=(i == large_crane_index), position=(i, 0))
            for i in range(n)
        )
        state = cls(
            board=board,
            queues=tuple(tuple(row) for row in rows),
            done=tuple(() for _ in range(n)),
            cranes=cranes,
        )
        return state.carried_in()

    @property
    def n(self) -> int:
        return len(self.board)

    def cell(self, cell: Cell) -> Optional[int]:
        return self.board[cell[0]][cell[1]]

    def is_occupied(self, cell: Cell) -> bool:
        return self.board[cell[0]][cell[1]] is not None

    def crane_positions(self) -> List[Optional[Cell]]:
        return [crane.position for crane in self.cranes]

    def crane_at(self, cell: Cell) -> Optional[Crane]:
        for crane in self.cranes:
            if crane.position == cell:
                return crane
        return None

    def iter_board(self) -> Iterator[Tuple[Cell, int]]:
        """Yield ``(cell, container)`` for every occupied cell, row-major."""
        for x, row in enumerate(self.board):
            for y, container in enumerate(row):
                if container is not None:
                    yield (x, y), container

    def locations(self) -> Dict[int, ContainerLocation]:
        """Location of every container that has not been delivered yet."""
        if self._locations is None:
            found: Dict[int, ContainerLocation] = {}
            for (x, y), container in self.iter_board():
                found[container] = ContainerLocation(LocationKind.BOARD, row=x, column=y)
            for row, queue in enumerate(self.queues):
                for depth, container in enumerate(queue):
                    found.setdefault(
                        container,
                        ContainerLocation(LocationKind.QUEUE, row=row, depth=depth),
                    )
            for crane in self.cranes:
                if crane.carrying:
                    found.setdefault(
                        crane.container,
                        ContainerLocation(LocationKind.CARRIED, crane=crane.index),
                    )
            object.__setattr__(self, "_locations", found)
        return self._locations

    def locate(self, container: int) -> ContainerLocation:
        return self.locations().get(container, DELIVERED)

    def container_count(self) -> int:
        on_board = sum(1 for _ in self.iter_board())
        queued = sum(len(queue) for queue in self.queues)
        carried = sum(1 for crane in self.cranes if crane.carrying)
        delivered = sum(len(done) for done in self.done)
        return on_board + queued + carried + delivered

    def is_complete(self) -> bool:
        return all(len(done) == self.n for done in self.done)

    def free_interior_cells(self) -> List[Cell]:
        """Empty cells usable as temporary storage.

        Rows top to bottom; within a row, columns from n-2 down to 2 so the
        intake side stays clear.
        """
        n = self.n
        return [
            (x, y)
            for x in range(n)
            for y in range(n - 2, 1, -1)
            if self.board[x][y] is None
        ]

    def vacated_intake_cells(self) -> List[Cell]:
        """Empty intake cells whose queue is exhausted."""
        return [
            (x, 0)
            for x in range(self.n)
            if not self.queues[x] and self.board[x][0] is None
        ]

    def carried_out(self) -> "YardState":
        """Move every container on the terminal column into its row's done list."""
        last = self.n - 1
        board = [list(row) for row in self.board]
        done = [list(row) for row in self.done]
        for x in range(self.n):
            container = board[x][last]
            if container is not None:
                done[x].append(container)
                board[x][last] = None
        return replace(
            self,
            board=tuple(tuple(row) for row in board),
            done=tuple(tuple(row) for row in done),
        )

    def carried_in(self) -> "YardState":
        """Feed each empty intake cell from its queue.

        A crane holding a container over the intake cell blocks the feed.
        """
        blocked = {crane.position for crane in self.cranes if crane.carrying}
        board = [list(row) for row in self.board]
        queues = [list(queue) for queue in self.queues]
        for x in range(self.n):
            if board[x][0] is None and (x, 0) not in blocked and queues[x]:
                board[x][0] = queues[x].pop(0)
        return replace(
            self,
            board=tuple(tuple(row) for row in board),
            queues=tuple(tuple(queue) for queue in queues),
        )

    def check_invariants(self) -> None:
        """Raise StateInvariantError if containers or cranes are inconsistent."""
        n = self.n
        ids: List[int] = [container for _, container in self.iter_board()]
        for queue in self.queues:
            ids.extend(queue)
        ids.extend(crane.container for crane in self.cranes if crane.carrying)
        for done in self.done:
            ids.extend(done)

        if len(ids) != n * n:
            raise StateInvariantError(
                f"Expected {n * n} containers on the yard, found {len(ids)}"
            )
        duplicates = sorted(c for c, count in Counter(ids).items() if count > 1)
        if duplicates:
            raise StateInvariantError(f"Containers present twice: {duplicates}")

        occupied: Dict[Cell, int] = {}
        for crane in self.cranes:
            if crane.bombed:
                if crane.carrying:
                    raise StateInvariantError(
                        f"Bombed crane {crane.index} still holds a container"
                    )
                continue
            other = occupied.setdefault(crane.position, crane.index)
            if other != crane.index:
                raise StateInvariantError(
                    f"Crane {other} and {crane.index} share cell {crane.position}"
                )
