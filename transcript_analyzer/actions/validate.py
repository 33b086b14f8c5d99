# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript validation action.

Prints the advisory format check and, if the transcript parses, the entry
validation for every configured transcript. Nothing is written to the workdir.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from transcript_analyzer.actions.inputs import discover_input_files, rel_posix
from transcript_analyzer.config import ConfigError, TranscriptConfig
from transcript_analyzer.transcripts.base import TranscriptParseError, ValidationResult
from transcript_analyzer.transcripts.registry import parse_transcript_text
from transcript_analyzer.transcripts.sources import read_transcript_text
from transcript_analyzer.transcripts.validation import validate_transcript_entries, validate_transcript_format


@dataclass(frozen=True)
class ValidateAction:
    """
    `validate` subcommand.

    Reports format errors and quality warnings without writing work files.
    """

    name: str = "validate"
    help: str = "Check transcripts and report errors and warnings"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Exit with an error if any transcript has validation errors",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute validation.

        Raises:
            ConfigError:
                If `--strict` is set and at least one transcript has errors.
        """

        if config is None:
            raise RuntimeError("ValidateAction requires a config, but none was provided")

        input_files = discover_input_files(config)
        if not input_files:
            print("No input transcript files found.")
            return

        invalid = 0
        for input_path in input_files:
            if not self._validate_one_file(config, input_path):
                invalid += 1

        print(f"Validated {len(input_files)} transcript(s): {invalid} with errors.")

        if bool(getattr(args, "strict", False)) and invalid:
            raise ConfigError(f"{invalid} transcript(s) failed validation")

    def _validate_one_file(self, config: TranscriptConfig, input_path: Path) -> bool:
        """Print the report for one transcript and return True if it has no errors."""

        rel_path = rel_posix(config.base_dir, input_path)
        print(f"== {rel_path}")

        try:
            text = read_transcript_text(input_path, max_file_size_mb=config.parsing.max_file_size_mb)
        except TranscriptParseError as exc:
            print(f"  ERROR [{exc.code.value}]: {exc}")
            return False

        fmt = validate_transcript_format(text)
        if fmt.is_valid:
            print("  Format: canonical")
        else:
            print(f"  Format: not canonical ({len(fmt.errors)} line(s) differ)")

        try:
            parser_name, entries = parse_transcript_text(
                text,
                config.parsing.mode,
                fallback=config.parsing.fallback,
            )
        except TranscriptParseError as exc:
            print(f"  ERROR [{exc.code.value}]:")
            self._print_lines(str(exc).splitlines())
            return False

        print(f"  Parsed {len(entries)} entries with the {parser_name} parser")
        result = validate_transcript_entries(entries)
        self._print_result(result)
        return result.is_valid

    def _print_result(self, result: ValidationResult) -> None:
        for error in result.errors:
            print(f"  ERROR: {error}")
        for warning in result.warnings:
            print(f"  WARNING: {warning}")
        if result.is_valid and not result.warnings:
            print("  OK")

    def _print_lines(self, lines: list[str]) -> None:
        for line in lines:
            print(f"    {line}")
