import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

"""Unified diagnostic collection for the whole planning pipeline."""


logger = logging.getLogger(__name__)


class DiagnosticSeverity(Enum):
    """Severity levels for planner diagnostics."""

    DEBUG = "debug"  # Internal planner information
    INFO = "info"  # Informational messages for users
    WARNING = "warning"  # Issues that don't stop the run
    ERROR = "error"  # Issues that stop the run


_SEVERITY_ORDER = [
    DiagnosticSeverity.DEBUG,
    DiagnosticSeverity.INFO,
    DiagnosticSeverity.WARNING,
    DiagnosticSeverity.ERROR,
]

_LOG_LEVELS = {
    DiagnosticSeverity.DEBUG: logging.DEBUG,
    DiagnosticSeverity.INFO: logging.INFO,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.ERROR: logging.ERROR,
}


@dataclass
class Diagnostic:
    """A single diagnostic message with context."""

    severity: DiagnosticSeverity
    message: str
    stage: str  # parsing, planning, transition, driver, emission
    turn: Optional[int] = None
    crane: Optional[int] = None


class ProgramDiagnostics:
    """Central diagnostic collection for one solver run.

    Tracks diagnostics across every stage and offers querying, filtering
    and formatting for user output. Every recorded diagnostic is also
    forwarded to the ``logging`` module.

    Usage:
        diagnostics = ProgramDiagnostics()
        diagnostics.warning("Turn limit reached", stage="driver", turn=1000)
        if diagnostics.has_errors():
            print(diagnostics.format_for_user())
    """

    def __init__(self, log_level: str = "warning"):
        self.diagnostics: List[Diagnostic] = []
        self.log_level = log_level.lower()
        self._error_count = 0
        self._warning_count = 0
        self.default_stage = "unknown"

    @property
    def verbose(self) -> bool:
        return self.log_level in ("debug", "info")

    def debug(
        self,
        message: str,
        stage: str | None = None,
        turn: Optional[int] = None,
        crane: Optional[int] = None,
    ) -> None:
        """Add a debug message (kept only at debug log level)."""
        if self.log_level == "debug":
            self._add(DiagnosticSeverity.DEBUG, message, stage, turn, crane)

    def info(
        self,
        message: str,
        stage: str | None = None,
        turn: Optional[int] = None,
        crane: Optional[int] = None,
    ) -> None:
        """Add an informational message (kept in verbose mode)."""
        if self.verbose:
            self._add(DiagnosticSeverity.INFO, message, stage, turn, crane)

    def warning(
        self,
        message: str,
        stage: str | None = None,
        turn: Optional[int] = None,
        crane: Optional[int] = None,
    ) -> None:
        """Add a warning (always kept, doesn't stop the run)."""
        self._add(DiagnosticSeverity.WARNING, message, stage, turn, crane)
        self._warning_count += 1

    def error(
        self,
        message: str,
        stage: str | None = None,
        turn: Optional[int] = None,
        crane: Optional[int] = None,
    ) -> None:
        """Add an error (always kept, stops the run)."""
        self._add(DiagnosticSeverity.ERROR, message, stage, turn, crane)
        self._error_count += 1

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        stage: str | None,
        turn: Optional[int],
        crane: Optional[int],
    ) -> None:
        diag = Diagnostic(
            severity=severity,
            message=message,
            stage=stage or self.default_stage,
            turn=turn,
            crane=crane,
        )
        self.diagnostics.append(diag)
        logger.log(_LOG_LEVELS[severity], self._format_diagnostic(diag))

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return self._error_count > 0

    def error_count(self) -> int:
        return self._error_count

    def warning_count(self) -> int:
        return self._warning_count

    def get_messages(
        self, min_severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    ) -> List[str]:
        """Get formatted messages at or above the specified severity level."""
        threshold = _SEVERITY_ORDER.index(min_severity)
        return [
            self._format_diagnostic(diag)
            for diag in self.diagnostics
            if _SEVERITY_ORDER.index(diag.severity) >= threshold
        ]

    def _format_diagnostic(self, diag: Diagnostic) -> str:
        # Format: SEVERITY [stage:turn]: message
        location_parts = [diag.stage]
        if diag.turn is not None:
            location_parts.append(f"turn {diag.turn}")
        if diag.crane is not None:
            location_parts.append(f"crane {diag.crane}")

        location = ":".join(location_parts)
        return f"{diag.severity.value.upper()} [{location}]: {diag.message}"

    def format_for_user(self) -> str:
        """Format all diagnostics for user-friendly output."""
        if not self.diagnostics:
            return "No diagnostics."

        if self.log_level == "debug":
            min_severity = DiagnosticSeverity.DEBUG
        elif self.verbose:
            min_severity = DiagnosticSeverity.INFO
        else:
            min_severity = DiagnosticSeverity.WARNING

        messages = self.get_messages(min_severity)
        summary = (
            f"\nRun summary: {self._error_count} error(s), "
            f"{self._warning_count} warning(s)"
        )
        return "\n".join(messages) + summary
