"""Problem input parsing."""

from .problem_parser import YardProblem, parse_problem

__all__ = ["YardProblem", "parse_problem"]
