# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Parser for loosely-structured, machine-generated transcripts.

Each line is run through the grammar cascade (see `grammars`). If some lines
fail but most of the document looked fine, a second pass over the whole
document turns every remaining prose line into an entry with a synthetic
timestamp (8 seconds per line) and the section `transcript`.

Fallback policies:
- `append`: fallback entries are appended after the cascade entries. Lines the
  cascade already consumed appear twice.
- `dedupe`: the fallback pass skips lines the cascade already turned into
  entries.
- `replace`: only the fallback entries are returned.
"""

from dataclasses import dataclass

from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.grammars import LIST_MARKER_RE, MIN_LINE_LENGTH, match_line
from transcript_analyzer.transcripts.strict_parser import aggregate_errors, require_text, split_lines
from transcript_analyzer.transcripts.timestamps import from_seconds


FALLBACK_POLICIES = ("append", "dedupe", "replace")

# The fallback pass only runs if fewer than this share of lines failed.
FALLBACK_ERROR_RATIO = 0.8

FALLBACK_SECONDS_PER_LINE = 8
FALLBACK_SECTION = "transcript"

_FALLBACK_HEADER_WORDS = ("transcript", "generated")


def _is_fallback_header(line: str) -> bool:
    lowered = line.lower()
    return any(word in lowered for word in _FALLBACK_HEADER_WORDS) or LIST_MARKER_RE.match(line) is not None


def fallback_entries(content: str, *, skip_lines: set[int] | None = None) -> list[TranscriptEntry]:
    """
    Turn every prose line of a document into an entry with a synthetic timestamp.

    Args:
        content:
            Raw transcript text.
        skip_lines:
            Optional 1-based line numbers to leave out (already parsed lines).

    Returns:
        Entries with timestamps 00:00:00, 00:00:08, ... and section `transcript`.
    """

    skip = skip_lines or set()
    entries: list[TranscriptEntry] = []
    current = 0

    for line_number, line in enumerate(split_lines(content), start=1):
        if len(line) < MIN_LINE_LENGTH or _is_fallback_header(line):
            continue
        if line_number in skip:
            continue

        entries.append(TranscriptEntry(timestamp=from_seconds(current), section=FALLBACK_SECTION, content=line))
        current += FALLBACK_SECONDS_PER_LINE

    return entries


@dataclass(frozen=True)
class LenientEntryParser:
    """
    Parse speech-to-text output using the grammar cascade.

    Attributes:
        fallback:
            How fallback entries are combined with cascade entries. One of
            `append` (default), `dedupe`, `replace`.
    """

    name: str = "lenient"
    fallback: str = "append"

    def __post_init__(self) -> None:
        if self.fallback not in FALLBACK_POLICIES:
            raise ValueError(
                f"Unknown fallback policy: {self.fallback} (supported: {', '.join(FALLBACK_POLICIES)})"
            )

    def parse(self, content: object) -> list[TranscriptEntry]:
        """
        Parse loosely-structured transcript text.

        Args:
            content:
                Raw transcript text.

        Returns:
            Entries in source order, followed by fallback entries if the
            fallback pass was needed.

        Raises:
            TranscriptParseError:
                If the input is not a non-empty string, if too many lines are
                unrecognizable, or if nothing usable was found.
        """

        text = require_text(content)
        lines = split_lines(text)

        entries: list[TranscriptEntry] = []
        parsed_lines: set[int] = set()
        errors: list[str] = []

        for line_number, line in enumerate(lines, start=1):
            if not line:
                continue

            try:
                entry = match_line(line, line_number)
            except TranscriptParseError as exc:
                errors.append(f"Line {line_number}: {exc.message}")
                continue

            if entry is not None:
                entries.append(entry)
                parsed_lines.add(line_number)

        if errors and len(errors) < len(lines) * FALLBACK_ERROR_RATIO:
            recovered = self._recover(text, entries, parsed_lines)
            if recovered:
                return recovered

        if errors:
            raise aggregate_errors(errors)

        if not entries:
            raise TranscriptParseError(
                "No valid transcript entries found. Expected format: [HH:MM:SS] Speaker: Content",
                ErrorCode.INVALID_FILE_FORMAT,
            )

        return entries

    def _recover(
        self,
        text: str,
        entries: list[TranscriptEntry],
        parsed_lines: set[int],
    ) -> list[TranscriptEntry]:
        """Combine cascade entries with the whole-document fallback pass."""

        if self.fallback == "replace":
            return fallback_entries(text)

        if self.fallback == "dedupe":
            extra = fallback_entries(text, skip_lines=parsed_lines)
        else:
            extra = fallback_entries(text)

        if not extra:
            return []
        return [*entries, *extra]


def parse_transcript_from_text(content: object, *, fallback: str = "append") -> list[TranscriptEntry]:
    """Parse machine-generated transcript text (see LenientEntryParser)."""

    return LenientEntryParser(fallback=fallback).parse(content)
