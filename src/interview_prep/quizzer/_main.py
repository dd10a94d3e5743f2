"""CLI entry points for the quiz, the full review and the main menu."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from rich.console import Console

from interview_prep.core.logging import configure_logger
from interview_prep.core import workspace as workspace_mod
from interview_prep.core.workspace import WorkspaceError
from interview_prep.topics.menu import run_menu

from .bank import default_bank
from .config import (
    CONFIG_FILENAME,
    ConfigOverrides,
    InterviewPrepConfigError,
    LoadResult,
    load_config,
    write_template,
)
from .errors import ErrorKind, QuizError
from .report import render_review, review_all
from .runner import run_quiz
from .selector import make_rng

LOGGER_NAME = "interview_prep.quizzer"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interview-prep quiz",
        description=(
            "Answer randomly drawn Java and Maven interview questions."
        ),
        epilog=(
            "Run `interview-prep quiz config init` to scaffold the default "
            f"{CONFIG_FILENAME} template."
        ),
    )
    parser.add_argument(
        "--num",
        type=int,
        help="Number of questions to ask (skips the size prompt).",
    )
    _add_common_arguments(parser)
    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the question shuffle for a reproducible draw.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=(
            "Path to a TOML config file (defaults to the workspace config "
            "directory)."
        ),
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        help="Override the workspace root used for config and logs.",
    )
    parser.add_argument(
        "--log-level",
        help="Set the logging level for the run (defaults to INFO).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Mirror log records to stderr.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    if args_list[:1] == ["config"]:
        return _handle_config(args_list[1:])

    parser = build_arg_parser()
    args = parser.parse_args(args_list)
    return _run_interactive(
        args,
        parser,
        lambda console, load, logger: run_quiz(
            console.input,
            console,
            rng=make_rng(load.config.seed),
            count=args.num,
            default_count=load.config.default_questions,
            logger=logger,
        ),
    )


def menu_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="interview-prep menu",
        description="Browse interview topics or take the quiz.",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv) if argv is not None else None)
    return _run_interactive(
        args,
        parser,
        lambda console, load, logger: run_menu(
            console.input,
            console,
            rng=make_rng(load.config.seed),
            default_count=load.config.default_questions,
            logger=logger,
        ),
    )


def review_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="interview-prep review",
        description="Print every question with its correct answer.",
    )
    parser.parse_args(list(argv) if argv is not None else None)
    render_review(Console(), review_all(default_bank()))
    return 0


def _run_interactive(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    action: Callable[[Console, LoadResult, logging.Logger], object],
) -> int:
    overrides = ConfigOverrides(seed=args.seed, log_level=args.log_level)
    try:
        load_result = load_config(
            config_path=args.config,
            overrides=overrides,
            workspace_path=args.workspace,
        )
    except InterviewPrepConfigError as exc:
        parser.error(str(exc))

    logger, log_path = configure_logger(
        LOGGER_NAME,
        log_dir=load_result.layout.path_for("logs"),
        level=load_result.config.log_level,
        verbose=args.verbose,
    )
    logger.debug(
        "Interactive command invoked",
        extra={
            "prog": parser.prog,
            "config_path": load_result.config_path,
            "log_path": log_path,
        },
    )

    console = Console()
    try:
        action(console, load_result, logger)
    except QuizError as exc:
        if exc.kind is ErrorKind.INVALID_ARGUMENT:
            sys.stderr.write(f"{exc}\n")
            return 2
        if exc.kind is ErrorKind.INPUT_EXHAUSTED:
            logger.info("Input closed; ending session")
            sys.stderr.write("\nInput closed; session ended.\n")
            return 1
        raise
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.stderr.write("\nSession interrupted.\n")
        return 130
    return 0


def _handle_config(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="interview-prep quiz config",
        description="Manage the interview-prep configuration file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    init_parser = subparsers.add_parser(
        "init",
        help=f"Write the default {CONFIG_FILENAME} template.",
    )
    init_parser.add_argument(
        "--path",
        type=Path,
        help=(
            "Destination for the config TOML (defaults to the workspace "
            "config directory)."
        ),
    )
    init_parser.add_argument(
        "--workspace",
        type=Path,
        help="Workspace root used when resolving the default config path.",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the destination if a config already exists.",
    )
    args = parser.parse_args(argv)

    try:
        target = _resolve_config_target(args)
        written = write_template(target, overwrite=args.force)
    except (WorkspaceError, InterviewPrepConfigError) as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    sys.stdout.write(f"Wrote interview-prep config to {written}\n")
    return 0


def _resolve_config_target(args: argparse.Namespace) -> Path:
    if args.path is not None:
        candidate = args.path.expanduser()
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    layout = workspace_mod.ensure_workspace(path=args.workspace)
    return layout.path_for("config") / CONFIG_FILENAME


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
