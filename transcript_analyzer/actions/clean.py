from __future__ import annotations

"""
`clean`: delete the entry and analysis work files.

The workdir itself is kept. Without `--force` the user must confirm on a
terminal.
"""

import argparse
import shutil
from dataclasses import dataclass
from pathlib import Path

from transcript_analyzer.cli_io import is_interactive_tty, prompt_delete_contents
from transcript_analyzer.config import ConfigError, TranscriptConfig


def is_protected_workdir(workdir: Path, base_dir: Path) -> bool:
    """
    True if emptying `workdir` would delete more than work files.

    That is the case for the filesystem root, the home directory and any
    directory that contains the config file (and thus the transcripts).
    """

    workdir = workdir.resolve()
    if workdir == Path(workdir.anchor) or base_dir.resolve().is_relative_to(workdir):
        return True

    try:
        return workdir == Path.home().resolve()
    except RuntimeError:
        return False


def empty_workdir(workdir: Path) -> int:
    """Delete everything below `workdir` and return the number of top-level items removed."""

    if not workdir.exists():
        return 0
    if not workdir.is_dir():
        raise ConfigError(f"workdir is not a directory: {workdir}")

    children = sorted(workdir.iterdir())
    for child in children:
        try:
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
        except OSError as exc:
            raise ConfigError(f"Failed to remove '{child}': {exc}") from exc

    return len(children)


@dataclass(frozen=True)
class CleanAction:
    """`clean` subcommand."""

    name: str = "clean"
    help: str = "Delete all work files in the configured workdir"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("-f", "--force", action="store_true", help="Delete without asking")

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Empty the workdir.

        Raises:
            ConfigError:
                If the workdir is protected, deletion fails, or confirmation is
                needed but no terminal is attached.
        """

        if config is None:
            raise RuntimeError("CleanAction requires a config, but none was provided")

        workdir = config.workdir
        if is_protected_workdir(workdir, config.base_dir):
            raise ConfigError(f"Refusing to clean {workdir}: it is not a dedicated work directory")

        if not args.force:
            if not is_interactive_tty():
                raise ConfigError("clean needs confirmation, but no terminal is attached. Re-run with --force.")
            if not prompt_delete_contents(workdir):
                print("Aborted.")
                return

        removed = empty_workdir(workdir)
        print(f"Removed {removed} item(s) from: {workdir}")
