#!/usr/bin/env python3
"""
Yardplan CLI - Command-line interface for the crane yard planner.

This module provides the entry point for the 'yardplan' command installed via pip.

Usage:
    yardplan problem.txt                      # Solve a problem file
    yardplan --input "2 0 1 2 3"              # Solve from string
    yardplan problem.txt -o actions.txt       # Save the transcript to file
    yardplan problem.txt --max-turns 500      # Lower the turn ceiling
    yardplan problem.txt --report             # Print the delivery score
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from yard_planner.src.common.constants import DEFAULT_CONFIG, SolverConfig
from yard_planner.src.common.diagnostics import ProgramDiagnostics
from yard_planner.src.common.exceptions import YardError
from yard_planner.src.emission.transcript import format_transcript
from yard_planner.src.parsing.problem_parser import parse_problem
from yard_planner.src.solver.driver import SolveResult, YardSolver


def run_pipeline(
    source_text: str,
    source_name: str = "<string>",
    log_level: str = "error",
    config: SolverConfig = DEFAULT_CONFIG,
) -> tuple[Optional[SolveResult], str, ProgramDiagnostics]:
    """
    Parse and solve a yard problem, keeping the diagnostics collector.

    Returns:
        (result or None on failure, failure reason or "", diagnostics)
    """
    diagnostics = ProgramDiagnostics(log_level=log_level)

    diagnostics.default_stage = "parsing"
    try:
        problem = parse_problem(source_text, source_name)
    except YardError as e:
        diagnostics.error(str(e))
        return None, "Parsing failed", diagnostics

    try:
        solver = YardSolver(problem, config=config, diagnostics=diagnostics)
    except ValueError as e:
        diagnostics.error(str(e), stage="driver")
        return None, "Invalid configuration", diagnostics

    try:
        result = solver.solve()
    except YardError:
        return None, "Planning failed", diagnostics

    return result, "", diagnostics


def solve_problem_source(
    source_text: str,
    source_name: str = "<string>",
    log_level: str = "error",
    config: SolverConfig = DEFAULT_CONFIG,
    report: bool = False,
) -> tuple[bool, str, list]:
    """
    Solve a yard problem given as text.

    Args:
        source_text: Problem text (N followed by N rows of N container ids)
        source_name: Name of the source (for error messages)
        log_level: Logging verbosity level
        config: Solver configuration settings
        report: If True, append the delivery report to the diagnostic messages

    Returns:
        (success: bool, result: str, diagnostics: list)
    """
    result, reason, diagnostics = run_pipeline(source_text, source_name, log_level, config)
    if result is None:
        return False, reason, diagnostics.get_messages()

    messages = diagnostics.get_messages()
    if report:
        messages.append(result.report.summary())

    return True, format_transcript(result.actions), messages


def setup_logging(level: str) -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "-i",
    "--input",
    "input_string",
    type=str,
    help="Solve from string instead of file",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output file for the transcript (default: stdout)",
)
@click.option(
    "--max-turns",
    type=click.IntRange(min=1),
    default=DEFAULT_CONFIG.max_turns,
    help=f"Turn ceiling before giving up (default: {DEFAULT_CONFIG.max_turns})",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Set the logging level",
)
@click.option("--report", is_flag=True, help="Print the delivery report to stderr")
def main(input_file, input_string, output, max_turns, log_level, report):
    """Plan crane moves for a container yard problem."""
    setup_logging(log_level)

    if input_file and input_string:
        click.echo("Error: Cannot specify both input file and --input string", err=True)
        sys.exit(1)

    if not input_file and not input_string:
        click.echo("Error: Must specify either an input file or --input string", err=True)
        sys.exit(1)

    if input_string:
        source_text = input_string
        source_name = "<string>"
    else:
        try:
            source_text = input_file.read_text(encoding="utf-8")
            source_name = str(input_file.resolve())
        except OSError as e:
            click.echo(f"Failed to read input file: {e}", err=True)
            sys.exit(1)

    config = replace(DEFAULT_CONFIG, max_turns=max_turns)
    result, reason, diagnostics = run_pipeline(
        source_text,
        source_name=source_name,
        log_level=log_level,
        config=config,
    )
    verbose = log_level in ["debug", "info"]

    if result is None:
        click.echo(f"Planning failed: {reason}", err=True)
        click.echo(diagnostics.format_for_user(), err=True)
        sys.exit(1)

    transcript = format_transcript(result.actions)
    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(transcript + "\n", encoding="utf-8")
        except OSError as e:
            click.echo(f"Failed to write output file: {e}", err=True)
            sys.exit(1)
    else:
        click.echo(transcript)

    if report:
        click.echo(result.report.summary(), err=True)
    if diagnostics.diagnostics and (report or verbose):
        click.echo(diagnostics.format_for_user(), err=True)


if __name__ == "__main__":
    main()
