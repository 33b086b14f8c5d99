# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Input discovery helpers shared by the actions."""

import fnmatch
import glob
import hashlib
from pathlib import Path

from transcript_analyzer.config import TranscriptConfig


def normalize_glob_pattern(pattern: str) -> str:
    """
    Normalize user-provided glob patterns to Python's recursive glob syntax.

    `**.txt` is not a standard recursive glob segment and is converted to
    `**/*.txt`.
    """

    p = pattern.strip()
    if p.startswith("**.") and "/" not in p:
        return f"**/*.{p[3:]}"
    if p in {"**", "**/"}:
        return "**/*"
    return p


def rel_posix(base_dir: Path, path: Path) -> str:
    """Return `path` relative to `base_dir` with '/' separators (absolute if outside)."""

    try:
        rel = path.resolve().relative_to(base_dir.resolve())
    except ValueError:
        rel = path.resolve()
    return rel.as_posix()


def discover_input_files(config: TranscriptConfig) -> list[Path]:
    """
    Find transcript files based on include/exclude patterns.

    Patterns are resolved relative to the directory containing the YAML
    configuration.

    Args:
        config:
            Loaded configuration.

    Returns:
        Sorted list of paths to transcript files.
    """

    base_dir = config.base_dir

    paths: list[Path] = []
    for pat in config.include:
        include_glob = (base_dir / normalize_glob_pattern(pat)).as_posix()
        paths.extend(Path(p) for p in glob.glob(include_glob, recursive=True))

    exclude_norms = [normalize_glob_pattern(p) for p in config.exclude or []]
    if exclude_norms:
        paths = [
            p
            for p in paths
            if not any(fnmatch.fnmatch(rel_posix(base_dir, p), ex) for ex in exclude_norms)
        ]

    return sorted({p.resolve() for p in paths if p.is_file()})


def document_id(base_dir: Path, input_path: Path) -> str:
    """
    Compute a stable, filesystem-friendly document identifier from the path.

    Example:
        `transcripts/Team Sync.txt` -> `Team_Sync-1a2b3c4d5e`
    """

    rel = rel_posix(base_dir, input_path)
    digest = hashlib.sha1(rel.encode("utf-8"), usedforsecurity=False).hexdigest()[:10]
    safe = "".join(ch if ch.isalnum() or ch in {"-", "_"} else "_" for ch in input_path.stem)
    safe = safe.strip("_") or "document"
    return f"{safe}-{digest}"
