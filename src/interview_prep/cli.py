"""Unified CLI entry point for interview-prep."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from importlib import import_module, metadata
from typing import Callable, Mapping, Optional, Sequence


CommandHandler = Callable[[Sequence[str]], int]

DIST_NAME = "interview-prep"


@dataclass(frozen=True)
class CommandSpec:
    """Represents an interview-prep subcommand."""

    name: str
    summary: str
    handler: CommandHandler
    is_interactive: bool = False


def _module_command(module: str, func: str, prog: str) -> CommandHandler:
    return lambda argv: _run_module_command(module, func, prog, argv)


_COMMAND_SPECS: Sequence[CommandSpec] = (
    CommandSpec(
        name="init",
        summary="Bootstrap the interview-prep workspace.",
        handler=_module_command(
            "interview_prep.workspace.cli", "main", "interview-prep init"
        ),
    ),
    CommandSpec(
        name="menu",
        summary="Browse Java and Maven topics or take the quiz.",
        is_interactive=True,
        handler=_module_command(
            "interview_prep.quizzer._main", "menu_main", "interview-prep menu"
        ),
    ),
    CommandSpec(
        name="quiz",
        summary="Answer randomly drawn interview questions.",
        is_interactive=True,
        handler=_module_command(
            "interview_prep.quizzer._main", "main", "interview-prep quiz"
        ),
    ),
    CommandSpec(
        name="review",
        summary="Print every question with its correct answer.",
        handler=_module_command(
            "interview_prep.quizzer._main",
            "review_main",
            "interview-prep review",
        ),
    ),
)

COMMANDS: Mapping[str, CommandSpec] = {
    spec.name: spec for spec in _COMMAND_SPECS
}


def format_command_table() -> str:
    """Return a formatted command table for help output."""

    width = max(len(spec.name) for spec in _COMMAND_SPECS)
    lines = ["Available commands:"]
    for spec in _COMMAND_SPECS:
        suffix = " (interactive)" if spec.is_interactive else ""
        lines.append(f"  {spec.name.ljust(width)}  {spec.summary}{suffix}")
    return "\n".join(lines)


def format_usage() -> str:
    parts = [
        "Usage: interview-prep <command> [args...]",
        "Run `interview-prep list` for commands or "
        "`interview-prep help <name>` for details.",
        "",
        format_command_table(),
    ]
    return "\n".join(parts)


def _print(
    text: str, *, stream: Optional[Callable[[str], object]] = None
) -> None:
    target = stream if stream is not None else sys.stdout.write
    if text:
        target(text + "\n")


def _print_unknown(command: str) -> int:
    _print(f"Unknown command '{command}'.", stream=sys.stderr.write)
    _print(format_command_table(), stream=sys.stderr.write)
    return 2


def _handle_version() -> int:
    try:
        version = metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        version = "unknown"
    _print(version)
    return 0


def _handle_help(argv: Sequence[str]) -> int:
    if not argv:
        _print(format_usage())
        return 0
    spec = COMMANDS.get(argv[0])
    if not spec:
        return _print_unknown(argv[0])
    _print(f"{spec.name}: {spec.summary}")
    _print(f"Run `interview-prep {spec.name} --help` for command options.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    if not args:
        _print(format_usage())
        return 2

    head, *tail = args
    if head in ("-h", "--help"):
        _print(format_usage())
        return 0
    if head in ("-V", "--version", "version"):
        return _handle_version()
    if head == "list":
        _print(format_command_table())
        return 0
    if head == "help":
        return _handle_help(tail)

    spec = COMMANDS.get(head)
    if spec:
        return spec.handler(tail)
    return _print_unknown(head)


def _run_module_command(
    module_name: str,
    func_name: str,
    prog_name: str,
    argv: Sequence[str],
) -> int:
    target = getattr(import_module(module_name), func_name)
    return _invoke_main(target, prog_name, argv)


def _invoke_main(
    func: Callable[..., object], prog_name: str, argv: Sequence[str]
) -> int:
    args = list(argv)
    old_argv = sys.argv
    sys.argv = [prog_name, *args]
    try:
        result = func(args)
    except SystemExit as exc:
        return _normalize_system_exit(exc)
    finally:
        sys.argv = old_argv

    return result if isinstance(result, int) else 0


def _normalize_system_exit(exc: SystemExit) -> int:
    code = exc.code
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    _print(str(code), stream=sys.stderr.write)
    return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation guard
    raise SystemExit(main())
