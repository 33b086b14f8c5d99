# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Work file storage (entries, index and analysis files) as YAML."""

from pathlib import Path
from typing import Any

import yaml

from transcript_analyzer.config import ConfigError


def read_yaml_mapping(path: Path) -> dict[str, Any]:
    """
    Load a work file written by `write_yaml_mapping`.

    Raises:
        ConfigError:
            If the file is missing, is not valid YAML or its top level is not
            a mapping.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read work file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Work file '{path}' is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Work file '{path}' must contain a mapping at the top level")
    return data


def write_yaml_mapping(path: Path, payload: dict[str, Any]) -> None:
    """Write `payload` in insertion order, replacing `path` only once the dump succeeded."""

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), encoding="utf-8")
    tmp_path.replace(path)
