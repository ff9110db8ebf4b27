#!/usr/bin/env python3
"""
End-to-end tests for the yard planner.
Tests the complete pipeline using sample problems: Problem text -> Parser -> Solver -> Transcript -> Replay
"""

from pathlib import Path

import pytest

from yard_planner.cli import solve_problem_source
from yard_planner.src.common.constants import DEFAULT_CONFIG
from yard_planner.src.emission import format_transcript, parse_transcript, to_turns
from yard_planner.src.parsing import parse_problem
from yard_planner.src.solver import RunStatus, evaluate, solve_problem
from yard_planner.src.yard import YardState, replay

SAMPLE_DIR = Path(__file__).parent / "sample_problems"
sample_files = sorted(SAMPLE_DIR.glob("*.txt"))


class TestEndToEndPlanning:
    """End-to-end planning tests using sample problems."""

    def _run_full_pipeline(self, text: str, source_name: str = "<string>"):
        """Parse, solve, write the transcript and read it back."""
        problem = parse_problem(text, source_name)
        result = solve_problem(problem)
        transcript = format_transcript(result.actions)
        actions = parse_transcript(transcript, n_cranes=problem.n)
        return problem, result, actions

    @pytest.mark.parametrize("sample_path", sample_files, ids=lambda p: p.name)
    def test_sample_problem_is_delivered(self, sample_path):
        """Every sample replays from its transcript and either finishes in order
        or runs the full turn ceiling."""
        problem, result, actions = self._run_full_pipeline(
            sample_path.read_text(encoding="utf-8"), str(sample_path)
        )
        final = replay(YardState.initial(problem.rows), to_turns(actions))
        assert final == result.final_state

        if not result.completed:
            assert result.status is RunStatus.TURN_LIMIT_EXCEEDED
            assert result.turn_count == DEFAULT_CONFIG.max_turns
            assert all(len(line) == DEFAULT_CONFIG.max_turns for line in actions)
            return

        for row, done in enumerate(final.done):
            assert list(done) == list(range(problem.n * row, problem.n * row + problem.n))

        report = evaluate(final)
        assert report.score == result.turn_count

    def test_ordered_3x3_schedule(self):
        """The fully ordered 3x3 yard is a three-lap shuttle for every crane."""
        success, transcript, _ = solve_problem_source(
            (SAMPLE_DIR / "ordered_3x3.txt").read_text(encoding="utf-8")
        )
        assert success is True
        assert transcript.splitlines() == ["PRRQLLPRRQLLPRRQ"] * 3

    def test_transcript_replays_to_same_score(self):
        """Re-reading the emitted transcript reproduces the run."""
        text = (SAMPLE_DIR / "swapped_head_5x5.txt").read_text(encoding="utf-8")
        problem, result, actions = self._run_full_pipeline(text)
        final = replay(result.initial_state, to_turns(actions))
        assert evaluate(final) == result.report
