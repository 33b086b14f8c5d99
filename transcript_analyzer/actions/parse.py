# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript parsing action.

This action turns transcript files into YAML work files holding the parsed
entries, the advisory validation result and derived statistics. Files that fail
to parse are reported and recorded in the index; the remaining files are still
processed.
"""

import argparse
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from transcript_analyzer.actions.inputs import discover_input_files, document_id, rel_posix
from transcript_analyzer.config import PARSING_MODES, ConfigError, TranscriptConfig
from transcript_analyzer.transcripts.registry import TRANSCRIPT_PARSING_VERSION, read_transcript_entries
from transcript_analyzer.transcripts.stats import summarize
from transcript_analyzer.transcripts.validation import validate_transcript_entries
from transcript_analyzer.yaml_io import write_yaml_mapping


@dataclass(frozen=True)
class ParseAction:
    """
    `parse` subcommand.

    Parses every configured transcript into an entry work file.
    """

    name: str = "parse"
    help: str = "Parse transcripts into timestamped entries"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `parse` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "--mode",
            choices=PARSING_MODES,
            help="Override parsing.mode from the config",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute transcript parsing.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Raises:
            ConfigError:
                If the work directory cannot be written.
        """

        if config is None:
            raise RuntimeError("ParseAction requires a config, but none was provided")

        mode = getattr(args, "mode", None)
        if mode:
            config = replace(config, parsing=replace(config.parsing, mode=mode))

        out_dir = config.workdir / "entries"
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Cannot create work directory '{out_dir}': {exc}") from exc

        input_files = discover_input_files(config)
        if not input_files:
            print("No input transcript files found.")
            return

        index: dict[str, Any] = {
            "schema_version": 1,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "config": {
                "path": rel_posix(config.base_dir, config.config_path),
            },
            "transcript_parsing_version": TRANSCRIPT_PARSING_VERSION,
            "parsing": {
                "mode": config.parsing.mode,
                "fallback": config.parsing.fallback,
            },
            "documents": [],
        }

        failed = 0
        for input_path in input_files:
            record = self._parse_one_file(config=config, input_path=input_path, out_dir=out_dir)
            index["documents"].append(record)
            if record.get("status") == "failed":
                failed += 1

        index_path = out_dir / "index.yaml"
        write_yaml_mapping(index_path, index)

        total = len(input_files)
        print(f"Parsed {total} transcript(s): ok {total - failed}, failed {failed}. Wrote index: {index_path}")

    def _parse_one_file(self, *, config: TranscriptConfig, input_path: Path, out_dir: Path) -> dict[str, Any]:
        """
        Parse one transcript and write its entry work file.

        Args:
            config:
                Loaded configuration.
            input_path:
                Path to the transcript.
            out_dir:
                Output directory inside the workdir.

        Returns:
            A document record for the index file.
        """

        doc_id = document_id(config.base_dir, input_path)
        rel_path = rel_posix(config.base_dir, input_path)
        out_path = out_dir / f"{doc_id}.yaml"

        print(f"Parsing: {rel_path} ", end="", flush=True)

        try:
            parser_name, entries = read_transcript_entries(input_path, config.parsing)
        except ConfigError as exc:
            print()  # finish progress line
            print(f"WARNING: Skipping transcript due to parse error: {rel_path}\n{exc}")
            return {
                "document_id": doc_id,
                "source_path": rel_path,
                "status": "failed",
                "error": str(exc),
            }

        validation = validate_transcript_entries(entries)
        stats = summarize(entries)

        print(f"({len(entries)} entries, {parser_name} parser, {len(validation.warnings)} warning(s))")

        write_yaml_mapping(
            out_path,
            {
                "schema_version": 1,
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "transcript_parsing_version": TRANSCRIPT_PARSING_VERSION,
                "source": {"path": rel_path},
                "document_id": doc_id,
                "parser": parser_name,
                "stats": stats,
                "validation": validation.as_dict(),
                "entries": [e.as_dict() for e in entries],
            },
        )

        return {
            "document_id": doc_id,
            "source_path": rel_path,
            "status": "ok",
            "entries_file": rel_posix(config.base_dir, out_path),
            "parser": parser_name,
            "entries_total": len(entries),
        }
