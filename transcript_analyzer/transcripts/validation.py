# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Advisory transcript validation.

Nothing in here raises. Callers receive a ValidationResult and decide what to
do with errors and warnings.
"""

import re
from collections import Counter
from typing import Iterable

from transcript_analyzer.transcripts.base import TranscriptEntry, ValidationResult
from transcript_analyzer.transcripts.strict_parser import CANONICAL_LINE_RE
from transcript_analyzer.transcripts.timestamps import TIMESTAMP_RE, is_valid_timestamp, to_seconds


# Stricter than the parser grammar: the section must be a word token and the
# timestamp must be in range.
TRANSCRIPT_LINE_RE = re.compile(r"^-\s+([0-1]?[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]\s+([A-Za-z0-9_]+)\s+(.+)$")

SECTION_NAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")

SHORT_CONTENT_LENGTH = 10


def validate_timestamp(timestamp: str) -> bool:
    """Return True if the timestamp is valid as-is (no surrounding whitespace)."""

    return isinstance(timestamp, str) and TIMESTAMP_RE.fullmatch(timestamp) is not None


def validate_section_name(section: str) -> bool:
    return isinstance(section, str) and SECTION_NAME_RE.fullmatch(section) is not None


def validate_transcript_entry(entry: TranscriptEntry) -> ValidationResult:
    """
    Validate a single entry.

    Args:
        entry:
            Entry to check.

    Returns:
        Errors for invalid timestamp/section/content and a warning for very
        short content.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not validate_timestamp(entry.timestamp):
        errors.append(f'Invalid timestamp format: "{entry.timestamp}". Expected HH:MM:SS format.')

    if not validate_section_name(entry.section):
        errors.append(
            f'Invalid section name: "{entry.section}". '
            "Must contain only alphanumeric characters and underscores."
        )

    content = entry.content or ""
    if not content.strip():
        errors.append("Content cannot be empty.")
    if len(content.strip()) < SHORT_CONTENT_LENGTH:
        warnings.append(f'Very short content in section "{entry.section}": "{content}"')

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def validate_transcript_entries(entries: Iterable[TranscriptEntry]) -> ValidationResult:
    """
    Validate a parsed entry sequence.

    Besides the per-entry checks (prefixed with the 1-based entry position), this
    warns about duplicate timestamps and about timestamps that go backwards.
    Equal adjacent timestamps are not considered out of order.

    Args:
        entries:
            Entries in transcript order.

    Returns:
        The combined ValidationResult.
    """

    items = list(entries)
    if not items:
        return ValidationResult(is_valid=False, errors=["Transcript must contain at least one entry."])

    errors: list[str] = []
    warnings: list[str] = []

    for idx, entry in enumerate(items, start=1):
        result = validate_transcript_entry(entry)
        errors.extend(f"Line {idx}: {e}" for e in result.errors)
        warnings.extend(f"Line {idx}: {w}" for w in result.warnings)

    counts = Counter(entry.timestamp for entry in items)
    duplicates = [ts for ts, n in counts.items() if n > 1]
    if duplicates:
        warnings.append(f"Duplicate timestamps found: {', '.join(duplicates)}")

    for prev, curr in zip(items, items[1:]):
        # Ordering can only be checked for parseable timestamps.
        if not (is_valid_timestamp(prev.timestamp) and is_valid_timestamp(curr.timestamp)):
            continue
        if to_seconds(prev.timestamp) > to_seconds(curr.timestamp):
            warnings.append(
                f"Timestamps not in chronological order: {prev.timestamp} comes after {curr.timestamp}"
            )

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def validate_transcript_format(content: object) -> ValidationResult:
    """
    Check raw text against the canonical line format before parsing.

    Every non-blank line must match `- HH:MM:SS section content`.

    Args:
        content:
            Raw transcript text.

    Returns:
        A ValidationResult with one error per non-matching line. Line numbers
        count non-blank lines only.
    """

    if not isinstance(content, str) or not content.strip():
        return ValidationResult(is_valid=False, errors=["Transcript content cannot be empty."])

    lines = [line.strip() for line in content.split("\n") if line.strip()]

    errors: list[str] = []
    for idx, line in enumerate(lines, start=1):
        if TRANSCRIPT_LINE_RE.match(line) is None:
            errors.append(
                f'Line {idx}: Invalid format. Expected "- HH:MM:SS section_name content" but got: "{line}"'
            )

    return ValidationResult(is_valid=not errors, errors=errors)


def has_canonical_line(content: object) -> bool:
    """Return True if at least one line is in canonical format with a valid timestamp."""

    if not isinstance(content, str):
        return False

    for line in content.strip().split("\n"):
        match = CANONICAL_LINE_RE.match(line.strip())
        if match is not None and is_valid_timestamp(match.group("ts")):
            return True

    return False
