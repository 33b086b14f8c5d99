# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Derived transcript statistics."""

from typing import Any, Sequence

from transcript_analyzer.transcripts.base import TranscriptEntry
from transcript_analyzer.transcripts.timestamps import from_seconds, is_valid_timestamp, to_seconds


def calculate_duration(entries: Sequence[TranscriptEntry]) -> str | None:
    """Return the latest timestamp as `HH:MM:SS`.

    Entries need not be in chronological order. Returns None for no entries or
    if any timestamp is invalid.
    """

    if not entries or not all(is_valid_timestamp(entry.timestamp) for entry in entries):
        return None
    return from_seconds(max(to_seconds(entry.timestamp) for entry in entries))


def count_words(entries: Sequence[TranscriptEntry]) -> int:
    return sum(len(entry.content.split()) for entry in entries)


def get_unique_sections(entries: Sequence[TranscriptEntry]) -> list[str]:
    return sorted({entry.section for entry in entries})


def summarize(entries: Sequence[TranscriptEntry]) -> dict[str, Any]:
    """Return all statistics as one mapping (used for work files)."""

    return {
        "total_duration": calculate_duration(entries),
        "word_count": count_words(entries),
        "entry_count": len(entries),
        "sections": get_unique_sections(entries),
    }
