# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Entry parser registry."""

from pathlib import Path

from transcript_analyzer.config import ConfigError, ParsingConfig
from transcript_analyzer.transcripts.base import EntryParser, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.lenient_parser import LenientEntryParser
from transcript_analyzer.transcripts.sources import read_transcript_text
from transcript_analyzer.transcripts.strict_parser import StrictEntryParser
from transcript_analyzer.transcripts.validation import has_canonical_line


# Bump this whenever parsing semantics change in a way that should force
# regeneration of entry work files even if the transcript bytes are unchanged.
TRANSCRIPT_PARSING_VERSION = 1


def get_entry_parser(mode: str, content: str = "", *, fallback: str = "append") -> EntryParser:
    """
    Select an entry parser.

    Args:
        mode:
            `strict`, `lenient` or `auto`.
        content:
            Raw transcript text. Only inspected in `auto` mode: text with at
            least one canonical line goes to the strict parser, so typos in
            hand-written transcripts are reported instead of papered over.
        fallback:
            Fallback policy for the lenient parser.

    Returns:
        A parser instance.

    Raises:
        ConfigError:
            If the mode is unknown.
    """

    if mode == "strict":
        return StrictEntryParser()
    if mode == "lenient":
        return LenientEntryParser(fallback=fallback)
    if mode == "auto":
        if has_canonical_line(content):
            return StrictEntryParser()
        return LenientEntryParser(fallback=fallback)

    raise ConfigError(f"Unsupported parsing mode: {mode} (supported: auto, lenient, strict)")


def parse_transcript_text(content: str, mode: str = "auto", *, fallback: str = "append") -> tuple[str, list[TranscriptEntry]]:
    """Parse raw text and return the name of the parser used with the entries."""

    parser = get_entry_parser(mode, content, fallback=fallback)
    return parser.name, parser.parse(content)


def read_transcript_entries(path: Path, parsing: ParsingConfig) -> tuple[str, list[TranscriptEntry]]:
    """Read and parse a transcript file, normalizing errors to ConfigError."""

    try:
        text = read_transcript_text(path, max_file_size_mb=parsing.max_file_size_mb)
        return parse_transcript_text(text, parsing.mode, fallback=parsing.fallback)
    except TranscriptParseError as exc:
        raise ConfigError(f"{path}: [{exc.code.value}] {exc}") from exc
