# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript data model and parser interfaces."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol


class ErrorCode(str, Enum):
    """Error codes shared by the parsing core and the analysis step."""

    INVALID_FILE_FORMAT = "INVALID_FILE_FORMAT"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    PARSING_ERROR = "PARSING_ERROR"
    API_KEY_MISSING = "API_KEY_MISSING"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass(frozen=True)
class TranscriptEntry:
    """
    One timestamped transcript line.

    Attributes:
        timestamp:
            Timestamp in `H:MM:SS` or `HH:MM:SS` form.
        section:
            Topic or speaker label.
        content:
            Trimmed, non-empty text.
    """

    timestamp: str
    section: str
    content: str

    def as_dict(self) -> dict[str, str]:
        return {
            "timestamp": self.timestamp,
            "section": self.section,
            "content": self.content,
        }


@dataclass
class ValidationResult:
    """
    Advisory validation outcome.

    Attributes:
        is_valid:
            True if no errors were found. Warnings do not affect validity.
        errors:
            Error messages in detection order.
        warnings:
            Warning messages in detection order.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, object]:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


class TranscriptParseError(RuntimeError):
    """Raised when a transcript cannot be turned into entries.

    The message aggregates every failing line, so one exception describes all
    problems of the input.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PARSING_ERROR,
        line: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.line = line

    def __str__(self) -> str:
        if self.line is not None:
            return f"Line {self.line}: {self.message}"
        return self.message


class EntryParser(Protocol):
    """Interface for turning raw transcript text into entries."""

    name: str

    def parse(self, content: object) -> list[TranscriptEntry]:
        """Return entries in source order or raise TranscriptParseError."""

        raise NotImplementedError


class TranscriptSource(Protocol):
    """Interface for reading raw transcript text from a file.

    Implementations only extract text; grammar handling is left to the parsers.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this source supports the given file."""

        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        """Return the transcript text, one transcript line per text line."""

        raise NotImplementedError
