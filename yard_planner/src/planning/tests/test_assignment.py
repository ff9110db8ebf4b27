"""
Tests for planning/assignment.py - Greedy crane-to-destination assignment.
"""

from yard_planner.src.common.diagnostics import DiagnosticSeverity, ProgramDiagnostics
from yard_planner.src.planning.assignment import TaskAssigner, assign_destinations
from yard_planner.src.yard.state import YardState


class TestIdleCranes:
    """Tasks handed to empty-handed cranes."""

    def test_each_crane_takes_its_own_row(self, rows_in_order):
        state = YardState.initial(rows_in_order(3))
        assert assign_destinations(state) == [(0, 0), (1, 0), (2, 0)]

    def test_nearest_crane_wins(self, make_state):
        state = make_state(
            3,
            containers={(1, 1): 0},
            cranes=[((0, 0), None), ((1, 0), None), ((2, 2), None)],
        )
        assert assign_destinations(state) == [None, (1, 1), None]

    def test_distance_ties_go_to_lower_index(self, make_state):
        state = make_state(
            3,
            containers={(1, 1): 0},
            cranes=[((0, 1), None), ((1, 0), None), ((2, 1), None)],
        )
        assert assign_destinations(state) == [(1, 1), None, None]

    def test_crane_that_cannot_deliver_is_passed_over(self, make_state):
        # Column 1 is full, so only the large crane can carry container 0 across
        state = make_state(
            3,
            containers={(0, 0): 0, (0, 1): 4, (1, 1): 5, (2, 1): 7},
            cranes=[((2, 0), None), ((1, 0), None), ((2, 2), None)],
        )
        assert assign_destinations(state) == [(0, 0), None, None]

    def test_bombed_cranes_get_nothing(self, make_state):
        state = make_state(
            3,
            containers={(1, 1): 0},
            cranes=[((0, 0), None), (None, None), ((2, 2), None)],
        )
        assert assign_destinations(state) == [(1, 1), None, None]


class TestCarryingCranes:
    """Destinations for cranes that already hold a container."""

    def test_due_container_goes_to_its_output_cell(self, make_state):
        state = make_state(3, cranes=[((0, 0), None), ((1, 1), 3), ((2, 0), None)])
        assert assign_destinations(state) == [None, (1, 2), None]

    def test_parking_cells_are_claimed_in_order(self, make_state):
        state = make_state(
            5,
            cranes=[((0, 0), 7), ((1, 0), 8), ((2, 0), None), ((3, 0), None), ((4, 0), None)],
        )
        destinations = assign_destinations(state)
        assert destinations[:2] == [(0, 3), (0, 2)]
        assert destinations[2:] == [None, None, None]

    def test_release_in_place_when_nowhere_to_park(self, make_state):
        state = make_state(
            3,
            containers={(0, 0): 1, (1, 0): 4, (2, 0): 8},
            cranes=[((0, 1), None), ((1, 1), 7), ((2, 1), None)],
        )
        diagnostics = ProgramDiagnostics(log_level="info")
        destinations = TaskAssigner(state, diagnostics).assign()
        assert destinations[1] == (1, 1)
        messages = diagnostics.get_messages(DiagnosticSeverity.INFO)
        assert any("in place" in message for message in messages)

    def test_no_release_in_place_on_output_column(self, make_state):
        state = make_state(
            3,
            containers={(0, 0): 1, (1, 0): 4, (2, 0): 8},
            cranes=[((0, 1), None), ((1, 2), 7), ((2, 1), None)],
        )
        assert assign_destinations(state)[1] is None

    def test_parking_falls_back_to_vacated_intake(self, make_state):
        state = make_state(
            3,
            containers={(1, 0): 4, (2, 0): 8},
            cranes=[((0, 1), None), ((1, 1), 7), ((2, 1), None)],
        )
        assert assign_destinations(state)[1] == (0, 0)


def test_assigner_sets_planning_stage(rows_in_order):
    diagnostics = ProgramDiagnostics()
    TaskAssigner(YardState.initial(rows_in_order(2)), diagnostics)
    assert diagnostics.default_stage == "planning"
