# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parser for the canonical, user-authored transcript format.

Rules:
- Every non-empty line must look like `- HH:MM:SS section content`.
- The section is a single lowercase token. An uppercase token usually means
  the author forgot the section and the first word of the content took its place.
- Content must not be empty.

All lines are checked before failing, so one error lists every offending line.
"""

import re
from dataclasses import dataclass

from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.timestamps import is_valid_timestamp


CANONICAL_LINE_RE = re.compile(r"^-\s+(?P<ts>[0-9]{1,2}:[0-9]{2}:[0-9]{2})\s+(?P<section>\S+)\s+(?P<content>.+)$")

CANONICAL_FORMAT = "- HH:MM:SS section_name content"


def split_lines(content: str) -> list[str]:
    """Split text into trimmed lines; numbering starts at the first non-blank line."""

    return [line.strip() for line in content.strip().split("\n")]


def require_text(content: object) -> str:
    """Return `content` if it is a non-empty string, otherwise raise."""

    if not isinstance(content, str) or not content.strip():
        raise TranscriptParseError(
            "Invalid input: content must be a non-empty string",
            ErrorCode.INVALID_FILE_FORMAT,
        )
    return content


def aggregate_errors(errors: list[str]) -> TranscriptParseError:
    return TranscriptParseError(
        "Failed to parse transcript. Errors found:\n" + "\n".join(errors),
        ErrorCode.INVALID_FILE_FORMAT,
    )


def parse_canonical_line(line: str, line_number: int) -> TranscriptEntry:
    """
    Parse one trimmed line in canonical format.

    Args:
        line:
            Trimmed, non-empty line.
        line_number:
            1-based line number for error reporting.

    Returns:
        The parsed entry.

    Raises:
        TranscriptParseError:
            If the line does not satisfy the canonical grammar.
    """

    match = CANONICAL_LINE_RE.match(line)
    if match is None:
        raise TranscriptParseError(
            f"Invalid line format. Expected: {CANONICAL_FORMAT}",
            ErrorCode.INVALID_FILE_FORMAT,
            line_number,
        )

    timestamp = match.group("ts")
    section = match.group("section").strip()
    content = match.group("content").strip()

    if not is_valid_timestamp(timestamp):
        raise TranscriptParseError(
            f"Invalid timestamp format: {timestamp}. Expected HH:MM:SS",
            ErrorCode.INVALID_FILE_FORMAT,
            line_number,
        )

    if not section:
        raise TranscriptParseError("Section name cannot be empty", ErrorCode.INVALID_FILE_FORMAT, line_number)

    if section != section.lower():
        raise TranscriptParseError(
            "Section name should be lowercase. This might indicate a missing section name.",
            ErrorCode.INVALID_FILE_FORMAT,
            line_number,
        )

    if not content:
        raise TranscriptParseError("Content cannot be empty", ErrorCode.INVALID_FILE_FORMAT, line_number)

    return TranscriptEntry(timestamp=timestamp.strip(), section=section, content=content)


@dataclass(frozen=True)
class StrictEntryParser:
    """Parse transcripts written in the canonical `- HH:MM:SS section content` format."""

    name: str = "strict"

    def parse(self, content: object) -> list[TranscriptEntry]:
        """
        Parse a canonical transcript.

        Args:
            content:
                Raw transcript text.

        Returns:
            Entries in source line order.

        Raises:
            TranscriptParseError:
                If the input is not a non-empty string, if any line is invalid
                (one aggregated error), or if no entries were found.
        """

        text = require_text(content)

        entries: list[TranscriptEntry] = []
        errors: list[str] = []

        for line_number, line in enumerate(split_lines(text), start=1):
            if not line:
                continue

            try:
                entries.append(parse_canonical_line(line, line_number))
            except TranscriptParseError as exc:
                errors.append(f"Line {line_number}: {exc.message}")

        if errors:
            raise aggregate_errors(errors)

        if not entries:
            raise TranscriptParseError(
                f"No valid transcript entries found. Expected format: {CANONICAL_FORMAT}",
                ErrorCode.INVALID_FILE_FORMAT,
            )

        return entries


def parse_transcript(content: object) -> list[TranscriptEntry]:
    """Parse canonical transcript text (see StrictEntryParser)."""

    return StrictEntryParser().parse(content)
