"""
Tests for yard/transition.py - Legality checks and the atomic turn update.
"""

import pytest

from yard_planner.src.common.exceptions import CollisionError, IllegalMoveError
from yard_planner.src.yard.moves import Move
from yard_planner.src.yard.state import YardState
from yard_planner.src.yard.transition import find_collision, replay, step

S, P, Q, U, L, D, R, B = (
    Move.STAY,
    Move.PICK,
    Move.RELEASE,
    Move.UP,
    Move.LEFT,
    Move.DOWN,
    Move.RIGHT,
    Move.BOMB,
)


@pytest.fixture
def start(rows_in_order):
    return YardState.initial(rows_in_order(3))


class TestPickAndRelease:
    def test_pick_takes_container_and_blocks_carry_in(self, start):
        after = step(start, [P, S, S])
        assert after.cranes[0].container == 0
        assert after.board[0][0] is None
        assert after.queues[0] == (1, 2)
        assert after.turn == 1

    def test_leaving_intake_lets_next_container_in(self, start):
        after = step(step(start, [P, S, S]), [R, S, S])
        assert after.cranes[0].position == (0, 1)
        assert after.board[0][0] == 1
        assert after.queues[0] == (2,)

    def test_pick_while_carrying_rejected(self, make_state):
        state = make_state(2, containers={(0, 0): 1}, cranes=[((0, 0), 0), ((1, 0), None)])
        with pytest.raises(IllegalMoveError, match="already holds") as exc_info:
            step(state, [P, S])
        assert exc_info.value.crane == 0

    def test_pick_on_empty_cell_rejected(self, make_state):
        state = make_state(2)
        with pytest.raises(IllegalMoveError, match="no container"):
            step(state, [S, P])

    def test_release_without_container_rejected(self, make_state):
        state = make_state(2)
        with pytest.raises(IllegalMoveError, match="does not hold"):
            step(state, [Q, S])

    def test_release_onto_container_rejected(self, make_state):
        state = make_state(
            2, containers={(0, 1): 1}, cranes=[((0, 1), 0), ((1, 0), None)]
        )
        with pytest.raises(IllegalMoveError, match="occupied cell"):
            step(state, [Q, S])

    def test_release_on_terminal_column_is_carried_out(self, make_state):
        state = make_state(3, cranes=[((0, 0), None), ((1, 2), 3), ((2, 0), None)])
        after = step(state, [S, Q, S])
        assert after.done[1] == (3,)
        assert after.board[1][2] is None
        assert not after.cranes[1].carrying


class TestTravel:
    def test_off_grid_rejected(self, start):
        with pytest.raises(IllegalMoveError, match="out of the yard"):
            step(start, [U, S, S])

    def test_regular_crane_cannot_carry_over_container(self, make_state):
        state = make_state(
            3, containers={(1, 2): 4}, cranes=[((0, 0), None), ((1, 1), 3), ((2, 0), None)]
        )
        with pytest.raises(IllegalMoveError, match="cannot carry") as exc_info:
            step(state, [S, R, S])
        assert exc_info.value.crane == 1

    def test_large_crane_may_carry_over_container(self, make_state):
        state = make_state(
            3, containers={(0, 1): 4}, cranes=[((0, 0), 3), ((1, 0), None), ((2, 0), None)]
        )
        after = step(state, [R, S, S])
        assert after.cranes[0].position == (0, 1)
        assert after.cranes[0].container == 3
        assert after.board[0][1] == 4

    def test_empty_handed_crane_passes_over_container(self, make_state):
        state = make_state(3, containers={(1, 1): 4})
        after = step(state, [S, R, S])
        assert after.cranes[1].position == (1, 1)


class TestBomb:
    def test_bomb_while_carrying_rejected(self, start):
        carrying = step(start, [P, S, S])
        with pytest.raises(IllegalMoveError, match="bombed while carrying"):
            step(carrying, [B, S, S])

    def test_bombed_crane_leaves_the_yard(self, start):
        after = step(start, [B, S, S])
        assert after.cranes[0].bombed
        assert after.crane_at((0, 0)) is None

    def test_bombed_crane_cannot_act(self, start):
        after = step(start, [B, S, S])
        for move in (P, Q, R, B):
            with pytest.raises(IllegalMoveError, match="already been bombed"):
                step(after, [move, S, S])

    def test_bombed_crane_may_stay(self, start):
        after = step(step(start, [B, S, S]), [S, R, S])
        assert after.cranes[0].bombed

    def test_bombed_crane_never_collides(self, start):
        after = step(start, [B, U, S])
        assert after.cranes[1].position == (0, 0)


class TestCollisions:
    def test_same_destination(self, start):
        with pytest.raises(CollisionError) as exc_info:
            step(start, [D, S, S])
        assert exc_info.value.cranes == (0, 1)

    def test_swap(self, start):
        with pytest.raises(CollisionError, match="swapped"):
            step(start, [D, U, S])

    def test_find_collision_ignores_removed(self):
        assert find_collision([(0, 0), (0, 1)], [None, (0, 0)]) is None
        assert find_collision([(0, 0), (0, 1)], [(0, 1), (0, 1)]) == (0, 1, "collided")

    def test_following_is_allowed(self, start):
        after = step(start, [R, U, S])
        assert after.cranes[0].position == (0, 1)
        assert after.cranes[1].position == (0, 0)


class TestAtomicity:
    def test_failed_turn_leaves_state_untouched(self, start):
        before = start
        with pytest.raises(IllegalMoveError):
            step(start, [P, P, U])
        assert start == before
        assert start.board[1][0] == 3
        assert not start.cranes[0].carrying

    def test_wrong_vector_length_rejected(self, start):
        with pytest.raises(IllegalMoveError, match="Expected 3 moves"):
            step(start, [S, S])

    def test_conservation_after_each_turn(self, start):
        state = start
        for moves in ([P, P, S], [R, R, S], [R, R, P], [Q, Q, R]):
            state = step(state, moves)
            assert state.container_count() == 9
            state.check_invariants()


class TestReplay:
    def test_replay_matches_stepwise(self, start):
        turns = [[P, P, S], [R, R, S], [R, R, S], [Q, Q, S]]
        state = start
        for moves in turns:
            state = step(state, moves)
        assert replay(start, turns) == state
        assert state.done[0] == (0,)
        assert state.done[1] == (3,)
