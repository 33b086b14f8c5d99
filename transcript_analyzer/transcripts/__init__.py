"""Transcript parsing.

Transcripts come in two flavours:

- hand-written transcripts in the canonical `- HH:MM:SS section content` format
  (strict parser, every bad line is reported),
- speech-to-text output in one of several loose formats (lenient parser,
  grammar cascade with a synthetic-timestamp fallback).

Both produce an ordered list of `TranscriptEntry` records with `timestamp`,
`section` and `content`.
"""

from transcript_analyzer.transcripts.base import (
    ErrorCode,
    TranscriptEntry,
    TranscriptParseError,
    ValidationResult,
)
from transcript_analyzer.transcripts.lenient_parser import LenientEntryParser, parse_transcript_from_text
from transcript_analyzer.transcripts.registry import get_entry_parser, parse_transcript_text
from transcript_analyzer.transcripts.strict_parser import StrictEntryParser, parse_transcript

__all__ = [
    "ErrorCode",
    "LenientEntryParser",
    "StrictEntryParser",
    "TranscriptEntry",
    "TranscriptParseError",
    "ValidationResult",
    "get_entry_parser",
    "parse_transcript",
    "parse_transcript_from_text",
    "parse_transcript_text",
]
