# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `transcripts.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from transcript_analyzer.cli_io import is_interactive_tty, prompt_overwrite
from transcript_analyzer.config import ConfigError, TranscriptConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template transcripts.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Glob patterns for transcript files to include/exclude",
            "# Supported transcript formats: .txt, .md, .odt",
            "# 'include' can be a string or a list of strings.",
            'include: ["transcripts/**/*.txt", "transcripts/**/*.md", "transcripts/**/*.odt"]',
            "# 'exclude' is optional and can be a string or a list of strings.",
            'exclude: "private/**"',
            "",
            "# Working directory for entry and analysis work files",
            "workdir: ./work",
            "",
            "# Parsing options (optional; defaults shown)",
            "# parsing:",
            "#   # auto:    strict parser if at least one line looks like",
            "#   #          '- HH:MM:SS section content', lenient parser otherwise",
            "#   # strict:  hand-written transcripts, every bad line is reported",
            "#   # lenient: speech-to-text output such as '[00:01:23] Speaker: Text'",
            "#   mode: auto",
            "#",
            "#   # How the lenient parser treats lines no known format matched:",
            "#   #   append:  add every prose line with 8-second synthetic timestamps",
            "#   #            after the parsed entries (lines may appear twice)",
            "#   #   dedupe:  like append, but skip lines that were already parsed",
            "#   #   replace: keep only the synthetic-timestamp entries",
            "#   fallback: append",
            "#",
            "#   # Larger files are rejected.",
            "#   max_file_size_mb: 20",
            "",
            "# Analysis options (optional; defaults shown)",
            "# The model and credentials are read from the environment or a .env file:",
            "#   LLM_OPENAI_API_KEY, LLM_OPENAI_MODEL, LLM_OPENAI_BASE_URL (optional)",
            "# analysis:",
            "#   temperature: 0.1",
            "#   max_output_tokens: 8192",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="transcripts.yaml",
            help="Destination path for the template (default: ./transcripts.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and overwriting was not confirmed.
        """

        _ = config
        dest = Path(args.path)
        force = bool(args.force)

        if dest.exists() and not force:
            if not is_interactive_tty():
                raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")
            if not prompt_overwrite(dest):
                print("Aborted.")
                return

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
