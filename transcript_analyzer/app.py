from __future__ import annotations

"""
CLI entrypoint for the transcript analyzer.

Subcommands: template, clean, parse, validate, analyze.
"""

import argparse
import sys
from dotenv import load_dotenv

from transcript_analyzer.actions.analyze import AnalyzeAction
from transcript_analyzer.actions.base import Action
from transcript_analyzer.actions.clean import CleanAction
from transcript_analyzer.actions.parse import ParseAction
from transcript_analyzer.actions.template import TemplateAction
from transcript_analyzer.actions.validate import ValidateAction
from transcript_analyzer.config import ConfigError, find_config_path, load_config
from transcript_analyzer.transcripts.base import TranscriptParseError


def _action_repository() -> dict[str, Action]:
	"""Return all subcommands keyed by name, in `--help` order."""
	actions = [
		TemplateAction(),
		CleanAction(),
		ParseAction(),
		ValidateAction(),
		AnalyzeAction(),
	]
	return {a.name: a for a in actions}


def build_parser(actions: dict[str, Action] | None = None) -> argparse.ArgumentParser:
	"""
	Build the `transcript-analyzer` argument parser.

	Every action gets its own subparser. Actions that need `transcripts.yaml`
	also get the shared `--config` option. The selected action instance is
	stored as `args.action_impl`.
	"""
	parser = argparse.ArgumentParser(
		prog="transcript-analyzer",
		description="Parse, validate and analyze timestamped conversation transcripts.",
	)

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help="Path to transcripts.yaml (default: ./transcripts.yaml)",
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in (actions or _action_repository()).items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(action_impl=action)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Argument list without the program name. Defaults to sys.argv.

	Returns:
		`0` on success, `2` for configuration and transcript errors, `3` for
		unfinished actions.
	"""
	load_dotenv()

	args = build_parser().parse_args(argv)
	action: Action = args.action_impl

	try:
		config = None
		if action.requires_config:
			config = load_config(find_config_path(args.config))

		action.run(args, config)
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2
	except TranscriptParseError as exc:
		print(f"error: [{exc.code.value}] {exc}", file=sys.stderr)
		return 2
	except NotImplementedError as exc:
		print(f"not implemented: {exc}", file=sys.stderr)
		return 3

	return 0


if __name__ == "__main__":
	raise SystemExit(main())
