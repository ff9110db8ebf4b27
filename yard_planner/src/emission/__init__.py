"""Transcript emission and parsing."""

from .transcript import format_transcript, parse_transcript, to_crane_sequences, to_turns

__all__ = ["format_transcript", "parse_transcript", "to_crane_sequences", "to_turns"]
