# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript file readers.

Readers only extract raw text. Each ODT paragraph/heading becomes one text line
so that the line grammars apply unchanged.
"""

from pathlib import Path

from odfdo import Document

from transcript_analyzer.transcripts.base import ErrorCode, TranscriptParseError, TranscriptSource


MAX_FILE_SIZE_MB = 20


class TextTranscriptSource:
    """Read .txt and .md transcripts."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_text(self, path: Path) -> str:
        try:
            raw = path.read_text(encoding="utf-8")
        except Exception as exc:  # noqa: BLE001
            raise TranscriptParseError(f"Failed to read text file '{path}': {exc}") from exc

        return raw.replace("\r\n", "\n").replace("\r", "\n")


class OdtTranscriptSource:
    """Read ODT transcripts, one line per paragraph."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_text(self, path: Path) -> str:
        try:
            body = Document(path).body
            # XPath also finds paragraphs nested in lists, tables and frames.
            nodes = list(body.xpath(".//text:p | .//text:h"))
        except Exception as exc:  # noqa: BLE001
            raise TranscriptParseError(f"Failed to read ODT file '{path}': {exc}") from exc

        return "\n".join(" ".join(_node_text(node).split()) for node in nodes)


def _node_text(node: object) -> str:
    # odfdo paragraphs expose nested spans via `inner_text`/`text_recursive`,
    # while `.text` only holds the leading text node.
    for attr in ("inner_text", "text_recursive", "text"):
        value = getattr(node, attr, None)
        if callable(value):
            value = value()
        if isinstance(value, str):
            return value
    return ""


_SOURCES: list[TranscriptSource] = [
    OdtTranscriptSource(),
    TextTranscriptSource(),
]


def supported_suffixes() -> list[str]:
    return [".md", ".odt", ".txt"]


def get_transcript_source(path: Path) -> TranscriptSource:
    """
    Select a reader based on the file suffix.

    Args:
        path:
            Transcript file path.

    Returns:
        A source instance.

    Raises:
        TranscriptParseError:
            With code INVALID_FILE_FORMAT if no reader supports the file.
    """

    for source in _SOURCES:
        if source.can_read(path):
            return source

    raise TranscriptParseError(
        f"Unsupported transcript format: {path} (supported: {', '.join(supported_suffixes())})",
        ErrorCode.INVALID_FILE_FORMAT,
    )


def read_transcript_text(path: Path, *, max_file_size_mb: int = MAX_FILE_SIZE_MB) -> str:
    """
    Read raw transcript text after checking suffix and size.

    Args:
        path:
            Transcript file path.
        max_file_size_mb:
            Size limit in megabytes.

    Returns:
        The transcript text with normalized line endings.

    Raises:
        TranscriptParseError:
            INVALID_FILE_FORMAT for unsupported files, FILE_TOO_LARGE for
            oversized files, PARSING_ERROR for unreadable or empty files.
    """

    source = get_transcript_source(path)

    try:
        size = path.stat().st_size
    except OSError as exc:
        raise TranscriptParseError(f"Failed to access '{path}': {exc}") from exc

    if size > max_file_size_mb * 1024 * 1024:
        raise TranscriptParseError(
            f"File size exceeds {max_file_size_mb}MB limit: {path}",
            ErrorCode.FILE_TOO_LARGE,
        )

    text = source.read_text(path)
    if not text.strip():
        raise TranscriptParseError(f"File is empty: {path}", ErrorCode.PARSING_ERROR)

    return text
