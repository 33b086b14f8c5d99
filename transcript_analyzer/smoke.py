# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Smoke-test helpers.

Run via:

    python -m transcript_analyzer.smoke

This only exercises parsing, validation and statistics (no LLM calls).
"""

import argparse
import json
from pathlib import Path

from transcript_analyzer.sample_data import SAMPLE_SPEECH_TO_TEXT_CONTENT, SAMPLE_TRANSCRIPT_CONTENT
from transcript_analyzer.transcripts.base import TranscriptParseError
from transcript_analyzer.transcripts.registry import parse_transcript_text
from transcript_analyzer.transcripts.stats import summarize
from transcript_analyzer.transcripts.validation import validate_transcript_entries


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transcript Analyzer smoke test")
    parser.add_argument(
        "transcript",
        nargs="?",
        help="Optional UTF-8 transcript file (default: bundled samples)",
    )
    parser.add_argument(
        "--mode",
        default="auto",
        choices=("auto", "strict", "lenient"),
        help="Parser selection (default: auto)",
    )
    parser.add_argument(
        "--print-entries",
        action="store_true",
        help="Print the parsed entries as JSON",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.transcript:
        samples = {str(args.transcript): Path(str(args.transcript)).read_text(encoding="utf-8")}
    else:
        samples = {
            "sample (canonical)": SAMPLE_TRANSCRIPT_CONTENT,
            "sample (speech-to-text)": SAMPLE_SPEECH_TO_TEXT_CONTENT,
        }

    status = 0
    for label, text in samples.items():
        try:
            parser_name, entries = parse_transcript_text(text, str(args.mode))
        except TranscriptParseError as exc:
            print(f"PARSE ERROR in {label} [{exc.code.value}]: {exc}")
            status = 2
            continue

        stats = summarize(entries)
        validation = validate_transcript_entries(entries)

        print(f"Transcript: {label}")
        print(f"Parser: {parser_name}")
        print(f"Entries: {stats['entry_count']}")
        print(f"Duration: {stats['total_duration']}")
        print(f"Words: {stats['word_count']}")
        print(f"Sections: {', '.join(stats['sections'])}")
        print(f"Validation: {len(validation.errors)} error(s), {len(validation.warnings)} warning(s)")

        if bool(args.print_entries):
            print(json.dumps([e.as_dict() for e in entries], ensure_ascii=False, indent=2))

    return status


if __name__ == "__main__":
    raise SystemExit(main())
