# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Confirmation prompts for `template --force` and `clean --force`."""

import sys
from pathlib import Path


_YES = {"y", "yes"}
_NO = {"n", "no", ""}


def is_interactive_tty() -> bool:
    """True if a user can answer prompts (stdin and stdout are terminals)."""

    streams = (sys.stdin, sys.stdout)
    return all(stream is not None and stream.isatty() for stream in streams)


def confirm(question: str) -> bool:
    """
    Ask a yes/no question. Anything but an explicit yes counts as no.

    Raises:
        RuntimeError:
            If there is no terminal to ask on.
    """

    if not is_interactive_tty():
        raise RuntimeError(f"Cannot ask for confirmation without a terminal: {question}")

    while True:
        try:
            answer = input(f"{question} [y/N] ").strip().lower()
        except EOFError:
            return False
        if answer in _YES:
            return True
        if answer in _NO:
            return False


def prompt_overwrite(path: Path) -> bool:
    return confirm(f"{path} exists. Replace it with the template?")


def prompt_delete_contents(path: Path) -> bool:
    return confirm(f"Delete all work files in '{path}'?")
