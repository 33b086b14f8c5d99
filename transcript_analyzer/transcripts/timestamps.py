# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Timestamp helpers.

Timestamps are wall-clock offsets in the form `H:MM:SS` or `HH:MM:SS`. Hours
range from 0 to 23; anything beyond is rejected rather than clamped.
"""

import re


TIMESTAMP_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])$")


def is_valid_timestamp(value: object) -> bool:
    """Return True if `value` is a valid timestamp (surrounding whitespace allowed)."""

    if not isinstance(value, str):
        return False
    return TIMESTAMP_RE.fullmatch(value.strip()) is not None


def to_seconds(timestamp: str) -> int:
    """Convert a validated timestamp into seconds since midnight."""

    hours, minutes, seconds = (int(part) for part in timestamp.strip().split(":"))
    return hours * 3600 + minutes * 60 + seconds


def from_seconds(total_seconds: int) -> str:
    """Format seconds as a zero-padded `HH:MM:SS` string.

    Example:
        975 -> "00:16:15"
    """

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
