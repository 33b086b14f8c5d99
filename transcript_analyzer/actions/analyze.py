# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript analysis action.

This action reads the entry work files written by `parse`, asks the LLM for a
structured analysis (summary, highlights, lowlights, named entities) and writes
one YAML analysis file per transcript.
"""

import argparse
import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from transcript_analyzer.actions.inputs import rel_posix
from transcript_analyzer.analysis import AnalysisError, analyze_transcript
from transcript_analyzer.config import ConfigError, TranscriptConfig
from transcript_analyzer.transcripts.base import TranscriptEntry
from transcript_analyzer.yaml_io import read_yaml_mapping, write_yaml_mapping


@dataclass(frozen=True)
class AnalyzeAction:
    """
    `analyze` subcommand.

    Runs the LLM analysis for every successfully parsed transcript.
    """

    name: str = "analyze"
    help: str = "Analyze parsed transcripts using the LLM"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        _ = parser

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the analysis.

        Raises:
            RuntimeError:
                If no configuration was provided.
            ConfigError:
                If `parse` has not been run yet.
        """

        _ = args
        if config is None:
            raise RuntimeError("AnalyzeAction requires a config, but none was provided")

        asyncio.run(self._run_async(config))

    async def _run_async(self, config: TranscriptConfig) -> None:
        entries_index = config.workdir / "entries" / "index.yaml"
        if not entries_index.exists():
            raise ConfigError(f"No entries index found. Run the 'parse' command first: {entries_index}")

        analysis_dir = config.workdir / "analysis"
        analysis_dir.mkdir(parents=True, exist_ok=True)

        index = read_yaml_mapping(entries_index)
        documents = index.get("documents")
        if not isinstance(documents, list) or not documents:
            print("No documents found in entries index. Nothing to analyze.")
            return

        analyzed = 0
        failed = 0
        total_docs = len(documents)
        for doc_idx, doc_entry in enumerate(documents, start=1):
            if not isinstance(doc_entry, dict) or doc_entry.get("status") != "ok":
                print(f"[{doc_idx}/{total_docs}] Skipping document without parsed entries")
                continue

            entries_file = doc_entry.get("entries_file")
            if not isinstance(entries_file, str) or not entries_file.strip():
                print(f"[{doc_idx}/{total_docs}] Skipping document entry without entries_file")
                continue

            entries_path = (config.base_dir / entries_file).resolve()
            if not entries_path.exists():
                print(f"[{doc_idx}/{total_docs}] Skipping missing entries file: {entries_path}")
                continue

            doc_id = str(doc_entry.get("document_id") or entries_path.stem)
            print(f"[{doc_idx}/{total_docs}] Analyzing: {doc_id}")

            entries = self._load_entries(entries_path)
            try:
                result = await analyze_transcript(entries, config.analysis)
            except AnalysisError as exc:
                failed += 1
                print(f"WARNING: Analysis failed for {doc_id}: {exc}")
                continue

            out_path = analysis_dir / f"{doc_id}.yaml"
            write_yaml_mapping(
                out_path,
                {
                    "schema_version": 1,
                    "generated_at": datetime.now(timezone.utc).isoformat(),
                    "document_id": doc_id,
                    "entries_file": rel_posix(config.base_dir, entries_path),
                    "result": result,
                },
            )
            analyzed += 1

        print(f"Analyzed {analyzed} transcript(s), failed {failed}. Output: {analysis_dir}")

    def _load_entries(self, path: Path) -> list[TranscriptEntry]:
        """
        Load entries from an entry work file.

        Raises:
            ConfigError:
                If the work file does not contain a valid entry list.
        """

        data = read_yaml_mapping(path)
        raw_entries: Any = data.get("entries")
        if not isinstance(raw_entries, list):
            raise ConfigError(f"Entries work file has no 'entries' list: {path}")

        entries: list[TranscriptEntry] = []
        for idx, item in enumerate(raw_entries, start=1):
            if not isinstance(item, dict):
                raise ConfigError(f"Invalid entry at position {idx} in {path}")
            entries.append(
                TranscriptEntry(
                    timestamp=str(item.get("timestamp") or ""),
                    section=str(item.get("section") or ""),
                    content=str(item.get("content") or ""),
                )
            )
        return entries
