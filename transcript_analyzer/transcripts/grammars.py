# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Line grammars for loosely-structured transcripts.

Machine-generated transcripts (speech-to-text output) rarely follow a single
format. This module lists the accepted line shapes in priority order. The first
grammar that matches a line wins:

1. `[HH:MM:SS] Speaker: Content`
2. `HH:MM:SS Speaker: Content`
3. `Speaker: [HH:MM:SS] Content`
4. `HH:MM:SS - Speaker: Content`
5. A timestamp anywhere in the line, followed by enough text
6. Plain narrative text without any colon (synthetic timestamp)

Header-like lines (very short lines, bare list markers, anything mentioning
"transcript") are skipped before matching.
"""

import re
from dataclasses import dataclass
from typing import Callable

from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.timestamps import from_seconds, is_valid_timestamp


MIN_LINE_LENGTH = 5

# Embedded timestamps need some actual text after them.
MIN_EMBEDDED_CONTENT_LENGTH = 10

MIN_PLAIN_TEXT_LENGTH = 20

# Seconds per line for plain-text lines without a timestamp.
PLAIN_TEXT_SECONDS_PER_LINE = 10

UNKNOWN_SPEAKER = "unknown_speaker"
PLAIN_TEXT_SPEAKER = "speaker"

SUPPORTED_SHAPES = (
    "[HH:MM:SS] Speaker: Content, "
    "HH:MM:SS Speaker: Content, "
    "Speaker: [HH:MM:SS] Content, "
    "HH:MM:SS - Speaker: Content"
)

LIST_MARKER_RE = re.compile(r"^[0-9]+\.$")

_BRACKET_RE = re.compile(r"^\[(?P<ts>[0-9]{1,2}:[0-9]{2}:[0-9]{2})\]\s*(?P<speaker>[^:]+):\s*(?P<content>.+)$")
_PLAIN_RE = re.compile(r"^(?P<ts>[0-9]{1,2}:[0-9]{2}:[0-9]{2})\s+(?P<speaker>[^:]+):\s*(?P<content>.+)$")
_SPEAKER_FIRST_RE = re.compile(r"^(?P<speaker>[^:]+):\s*\[(?P<ts>[0-9]{1,2}:[0-9]{2}:[0-9]{2})\]\s*(?P<content>.+)$")
_DASH_RE = re.compile(r"^(?P<ts>[0-9]{1,2}:[0-9]{2}:[0-9]{2})\s*-\s*(?P<speaker>[^:]+):\s*(?P<content>.+)$")
_EMBEDDED_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}:[0-9]{2}")
_PLAIN_TEXT_RE = re.compile(r"^[A-Z][^:]*$")

# Raw (timestamp, speaker, content) triple extracted from a line.
Candidate = tuple[str, str, str]


@dataclass(frozen=True)
class LineGrammar:
    """
    One entry of the grammar cascade.

    Attributes:
        name:
            Short identifier (useful in tests and debugging).
        match:
            Callable receiving the trimmed line and its 0-based index. Returns a
            candidate triple, or None if the grammar does not apply.
    """

    name: str
    match: Callable[[str, int], Candidate | None]


def _labelled(pattern: re.Pattern[str]) -> Callable[[str, int], Candidate | None]:
    def _match(line: str, index: int) -> Candidate | None:
        _ = index
        m = pattern.match(line)
        if m is None:
            return None
        return m.group("ts"), m.group("speaker"), m.group("content")

    return _match


def _match_embedded(line: str, index: int) -> Candidate | None:
    _ = index
    m = _EMBEDDED_RE.search(line)
    if m is None:
        return None

    content = line[m.end():].strip()
    if len(content) <= MIN_EMBEDDED_CONTENT_LENGTH:
        return None
    return m.group(0), UNKNOWN_SPEAKER, content


def _match_plain_text(line: str, index: int) -> Candidate | None:
    if len(line) <= MIN_PLAIN_TEXT_LENGTH or not _PLAIN_TEXT_RE.match(line):
        return None
    return from_seconds(index * PLAIN_TEXT_SECONDS_PER_LINE), PLAIN_TEXT_SPEAKER, line


GRAMMARS: tuple[LineGrammar, ...] = (
    LineGrammar("bracketed", _labelled(_BRACKET_RE)),
    LineGrammar("timestamp_first", _labelled(_PLAIN_RE)),
    LineGrammar("speaker_first", _labelled(_SPEAKER_FIRST_RE)),
    LineGrammar("dash", _labelled(_DASH_RE)),
    LineGrammar("embedded", _match_embedded),
    LineGrammar("plain_text", _match_plain_text),
)


def is_header_line(line: str) -> bool:
    """Return True for lines that should be skipped without counting as errors."""

    return (
        len(line) < MIN_LINE_LENGTH
        or LIST_MARKER_RE.match(line) is not None
        or "transcript" in line.lower()
    )


def section_from_speaker(speaker: str) -> str:
    """Turn a speaker label into a section name (`Speaker 1` -> `speaker_1`)."""

    return re.sub(r"\s+", "_", speaker.strip().lower())


def build_entry(timestamp: str, speaker: str, content: str, line_number: int) -> TranscriptEntry:
    """
    Validate a candidate triple and build an entry from it.

    Args:
        timestamp:
            Extracted timestamp text.
        speaker:
            Extracted speaker label.
        content:
            Extracted content.
        line_number:
            1-based line number used in error messages.

    Returns:
        A new TranscriptEntry.

    Raises:
        TranscriptParseError:
            If the timestamp is invalid or speaker/content are empty.
    """

    if not is_valid_timestamp(timestamp):
        raise TranscriptParseError(
            f"Invalid timestamp format: {timestamp}. Expected HH:MM:SS",
            ErrorCode.INVALID_FILE_FORMAT,
            line_number,
        )

    if not speaker or not speaker.strip():
        raise TranscriptParseError("Speaker cannot be empty", ErrorCode.INVALID_FILE_FORMAT, line_number)

    if not content or not content.strip():
        raise TranscriptParseError("Content cannot be empty", ErrorCode.INVALID_FILE_FORMAT, line_number)

    return TranscriptEntry(
        timestamp=timestamp.strip(),
        section=section_from_speaker(speaker),
        content=content.strip(),
    )


def match_line(line: str, line_number: int) -> TranscriptEntry | None:
    """
    Run the cascade on one trimmed, non-empty line.

    Args:
        line:
            Trimmed line text.
        line_number:
            1-based line number. Plain-text lines derive their synthetic
            timestamp from it.

    Returns:
        The entry of the first matching grammar, or None if the line is a
        header/metadata line that should be skipped.

    Raises:
        TranscriptParseError:
            If no grammar matches or the matched parts are invalid.
    """

    if is_header_line(line):
        return None

    for grammar in GRAMMARS:
        candidate = grammar.match(line, line_number - 1)
        if candidate is not None:
            return build_entry(*candidate, line_number)

    raise TranscriptParseError(
        f'Invalid line format. Line content: "{line}". Supported formats: {SUPPORTED_SHAPES}',
        ErrorCode.INVALID_FILE_FORMAT,
        line_number,
    )
