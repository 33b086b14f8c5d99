from __future__ import annotations

"""
Subcommand protocol.

`app.py` builds one argparse subparser per action and loads `transcripts.yaml`
only for actions that set `requires_config`.
"""

import argparse
from typing import Protocol

from transcript_analyzer.config import TranscriptConfig


class Action(Protocol):
    """
    A `transcript-analyzer` subcommand.

    Attributes:
        name:
            Subcommand name (`parse`, `validate`, ...).
        help:
            One-line description shown by `--help`.
        requires_config:
            If True, `run` receives the loaded TranscriptConfig and the
            subparser gets the shared `--config` option.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add subcommand options to `parser`."""

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the subcommand.

        Raises:
            ConfigError:
                For invalid input or configuration. The CLI turns this into
                exit code 2.
        """
