# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `transcripts.yaml`, validating required keys, and
normalizing paths so that downstream actions can rely on a typed config object.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


PARSING_MODES = ("auto", "strict", "lenient")
FALLBACK_POLICIES = ("append", "dedupe", "replace")


@dataclass(frozen=True)
class ParsingConfig:
    """
    Configuration for transcript parsing.

    Attributes:
        mode:
            Parser selection. Supported values:
                - `auto`: strict parser if at least one line is in canonical
                  format, lenient parser otherwise
                - `strict`: canonical `- HH:MM:SS section content` only
                - `lenient`: grammar cascade for speech-to-text output
        fallback:
            How the lenient parser combines fallback entries with cascade
            entries (`append`, `dedupe` or `replace`).
        max_file_size_mb:
            Transcript files larger than this are rejected.
    """

    mode: str = "auto"
    fallback: str = "append"
    max_file_size_mb: int = 20


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Configuration for the LLM analysis step.

    Attributes:
        temperature:
            Sampling temperature passed to the model.
        max_output_tokens:
            Upper bound for the response length.
    """

    temperature: float = 0.1
    max_output_tokens: int = 8192


@dataclass(frozen=True)
class TranscriptConfig:
    """
    Parsed configuration for a transcript analyzer run.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths and glob patterns are resolved against.
        include:
            Glob patterns for transcript files to include.
        exclude:
            Optional glob patterns for transcript files to exclude.
        workdir:
            Directory for work files.
        parsing:
            Settings used by the parse step.
        analysis:
            Settings used by the analysis step.
    """

    config_path: Path
    base_dir: Path
    include: list[str]
    exclude: list[str] | None
    workdir: Path
    parsing: ParsingConfig
    analysis: AnalysisConfig


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "transcripts.yaml"


def _parse_patterns(value: Any, *, key: str, required: bool) -> list[str] | None:
    """
    Parse a glob pattern setting that may be a string or a list of strings.

    Args:
        value:
            Raw YAML value.
        key:
            Config key (for error messages).
        required:
            If True, a missing value is an error.

    Returns:
        List of stripped patterns, or None if optional and missing.

    Raises:
        ConfigError:
            If the value has the wrong type or contains empty patterns.
    """

    if value is None:
        if required:
            raise ConfigError(f"'{key}' must be a non-empty string or list of strings")
        return None

    items = [value] if isinstance(value, str) else value
    if not isinstance(items, list) or not items:
        raise ConfigError(f"'{key}' must be a non-empty string or list of strings")

    patterns: list[str] = []
    for idx, item in enumerate(items, start=1):
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"'{key}' entries must be non-empty strings (problem at index {idx})")
        patterns.append(item.strip())

    return patterns


def load_config(path: Path) -> TranscriptConfig:
    """
    Load and validate a `transcripts.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated TranscriptConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            "No transcripts.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("include", "workdir") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    include = _parse_patterns(raw.get("include"), key="include", required=True) or []
    exclude = _parse_patterns(raw.get("exclude"), key="exclude", required=False)

    workdir = raw.get("workdir")
    if not isinstance(workdir, str) or not workdir.strip():
        raise ConfigError("'workdir' must be a non-empty string")

    parsing = _parse_parsing(raw.get("parsing"))
    analysis = _parse_analysis(raw.get("analysis"))

    # Interpret workdir and glob patterns relative to config file location.
    base_dir = path.parent.resolve()

    return TranscriptConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        include=include,
        exclude=exclude,
        workdir=(base_dir / workdir.strip()).resolve(),
        parsing=parsing,
        analysis=analysis,
    )


def _parse_parsing(value: Any) -> ParsingConfig:
    """
    Parse and validate the optional `parsing` section.

    Args:
        value:
            Raw YAML value for the `parsing` key.

    Returns:
        A ParsingConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ParsingConfig()

    if not isinstance(value, dict):
        raise ConfigError("'parsing' must be a mapping if provided")

    mode = value.get("mode", ParsingConfig.mode)
    fallback = value.get("fallback", ParsingConfig.fallback)
    max_file_size_mb = value.get("max_file_size_mb", ParsingConfig.max_file_size_mb)

    if not isinstance(mode, str) or mode.strip().lower() not in PARSING_MODES:
        raise ConfigError(f"parsing.mode must be one of: {', '.join(PARSING_MODES)}")
    if not isinstance(fallback, str) or fallback.strip().lower() not in FALLBACK_POLICIES:
        raise ConfigError(f"parsing.fallback must be one of: {', '.join(FALLBACK_POLICIES)}")

    # bool is a subclass of int
    if not isinstance(max_file_size_mb, int) or isinstance(max_file_size_mb, bool):
        raise ConfigError("parsing.max_file_size_mb must be an integer")
    if max_file_size_mb <= 0:
        raise ConfigError("parsing.max_file_size_mb must be > 0")

    return ParsingConfig(
        mode=mode.strip().lower(),
        fallback=fallback.strip().lower(),
        max_file_size_mb=max_file_size_mb,
    )


def _parse_analysis(value: Any) -> AnalysisConfig:
    """
    Parse and validate the optional `analysis` section.

    Args:
        value:
            Raw YAML value for the `analysis` key.

    Returns:
        An AnalysisConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return AnalysisConfig()

    if not isinstance(value, dict):
        raise ConfigError("'analysis' must be a mapping if provided")

    temperature = value.get("temperature", AnalysisConfig.temperature)
    max_output_tokens = value.get("max_output_tokens", AnalysisConfig.max_output_tokens)

    if not isinstance(temperature, (int, float)) or isinstance(temperature, bool):
        raise ConfigError("analysis.temperature must be a number")
    if not 0 <= float(temperature) <= 2:
        raise ConfigError("analysis.temperature must be between 0 and 2")

    if not isinstance(max_output_tokens, int) or isinstance(max_output_tokens, bool):
        raise ConfigError("analysis.max_output_tokens must be an integer")
    if max_output_tokens <= 0:
        raise ConfigError("analysis.max_output_tokens must be > 0")

    return AnalysisConfig(
        temperature=float(temperature),
        max_output_tokens=max_output_tokens,
    )
