"""CLI application entry point and command routing for ahoy.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ahoy.exceptions.AhoyError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Argument parsing happens in two passes.  The first pass only picks up
the global flags (``-f``, ``--verbose``) so the right config file can
be loaded; the second pass uses a parser whose help text lists the
commands found in that file.

Architecture notes
------------------
* No business logic lives here: lookup and execution are delegated to
  :class:`~ahoy.core.command_service.CommandService`.
* Everything after the command name belongs to the command: global
  flags are only recognised before it.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ahoy.cli import exit_codes
from ahoy.cli.console import console, escape
from ahoy.cli.init_command import INIT_USAGE
from ahoy.cli.logging_setup import configure_logging
from ahoy.core.command_service import CommandService
from ahoy.core.models import CommandDef, Config, InvocationContext
from ahoy.core.template import ARGS_PLACEHOLDER
from ahoy.exceptions import AhoyError, ConfigReadError, ShellCommandError, UnknownCommandError
from ahoy.infra.config_loader import load_config
from ahoy.infra.config_locator import CONFIG_FILENAME, resolve_config_path
from ahoy.infra.shell_runner import SubprocessShellRunner
from ahoy.settings import AhoySettings, load_settings
from ahoy.version import __version__

logger = logging.getLogger(__name__)

PROG: str = "ahoy"

INIT_COMMAND: str = "init"
HELP_COMMANDS: tuple[str, ...] = ("help", "h")
HELP_USAGE: str = "Shows a list of commands or help for one command."


# ---------------------------------------------------------------------------
# Argument parsers
# ---------------------------------------------------------------------------

def _add_global_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-f",
        dest="file",
        metavar="FILE",
        default=None,
        help=f"use a specific ahoy file instead of searching for {CONFIG_FILENAME}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="output extra details like the commands to be run [$AHOY_VERBOSE]",
    )
    parser.add_argument(
        "--generate-bash-completion",
        action="store_true",
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="command to run (see the list below)",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="arguments passed on to the command",
    )


def _preparse(argv: Sequence[str]) -> argparse.Namespace:
    """Extract the global flags without failing on ``--help`` or ``--version``."""
    parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    _add_global_arguments(parser)
    namespace, _unknown = parser.parse_known_args(list(argv))
    return namespace


def _command_index(argv: Sequence[str]) -> int | None:
    """Position of the command name in *argv*, or ``None`` when there is none.

    Only the global flags may appear before the command, and ``-f`` is
    the only one that takes a separate value.  Tokens after the returned
    index are handed to the command exactly as given.
    """
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            return index + 1 if index + 1 < len(argv) else None
        if token == "-f":
            index += 2
        elif token.startswith("-") and token != "-":
            index += 1
        else:
            return index
    return None


def format_command_listing(entries: Sequence[tuple[str, str]]) -> str:
    """Render ``(names, summary)`` pairs as an aligned ``commands:`` block."""
    width = max((len(names) for names, _ in entries), default=0)
    lines = ["commands:"]
    for names, summary in entries:
        lines.append(f"  {names:<{width}}  {summary}".rstrip())
    return "\n".join(lines)


def _listing_entries(service: CommandService) -> list[tuple[str, str]]:
    entries = [(name, command.summary) for name, command in service.visible_commands()]
    entries.append((INIT_COMMAND, INIT_USAGE))
    entries.append((", ".join(HELP_COMMANDS), HELP_USAGE))
    return entries


def _build_parser(service: CommandService, config_path: Path | None) -> argparse.ArgumentParser:
    """Construct the top-level parser for the loaded configuration."""
    if config_path is None:
        source_note = f"No {CONFIG_FILENAME} found. Run '{PROG} {INIT_COMMAND}' to create one."
    else:
        source_note = f"Commands loaded from {config_path}."

    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Run the project commands defined in the nearest "
        f"{CONFIG_FILENAME}.",
        epilog=f"{format_command_listing(_listing_entries(service))}\n\n{source_note}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_global_arguments(parser)
    return parser


def _build_command_parser(name: str, command: CommandDef) -> argparse.ArgumentParser:
    """Parser for one configured command.

    Flags are only interpreted up to the first positional argument;
    everything from there on is captured verbatim.  Commands marked
    ``hide_help`` get no ``-h/--help`` flag of their own.
    """
    parser = argparse.ArgumentParser(
        prog=f"{PROG} {name}",
        description=command.description or command.usage or None,
        add_help=not command.hide_help,
    )
    template = command.shell_template.replace("%", "%%")
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help=f"substituted for {ARGS_PLACEHOLDER} in: {template}",
    )
    return parser


def _build_builtin_parser(name: str, usage: str) -> argparse.ArgumentParser:
    return argparse.ArgumentParser(prog=f"{PROG} {name}", description=usage)


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------

def _load_config_or_empty(config_path: Path | None) -> Config:
    """Load *config_path*, degrading to an empty config when it is unreadable.

    Parse errors are not caught: a malformed file aborts the run.
    """
    if config_path is None:
        logger.info("No %s found; only built-in commands are available.", CONFIG_FILENAME)
        return Config()
    try:
        return load_config(config_path)
    except ConfigReadError as exc:
        console.print(f"[yellow]Warning:[/yellow] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        return Config()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _command_args(name: str, command: CommandDef, args: Sequence[str]) -> tuple[str, ...]:
    """Apply the per-command flag rules to *args*.

    A leading ``--`` is dropped.  A leading flag goes through the
    command's parser, which prints help or exits with a usage error.
    Everything else is kept as given.
    """
    if command.skip_flag_parsing or not args:
        return tuple(args)
    first = args[0]
    if first == "--":
        return tuple(args[1:])
    if first.startswith("-") and first != "-":
        _build_command_parser(name, command).parse_args([first])
    return tuple(args)


def _handle_alias(service: CommandService, context: InvocationContext) -> int:
    """Run a configured command and translate its status to an exit code."""
    command = service.get(context.command_name)
    args = _command_args(context.command_name, command, context.args)
    context = dataclasses.replace(context, args=args)

    try:
        returncode = service.run(context)
    except ShellCommandError:
        console.print()
        raise

    if returncode != 0:
        logger.info("%s exited with status %d", context.command_name, returncode)
        console.print()
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def _handle_init(settings: AhoySettings, context: InvocationContext) -> int:
    """Dispatch the built-in ``init`` command."""
    from ahoy.cli.init_command import run_init

    _build_builtin_parser(INIT_COMMAND, INIT_USAGE).parse_args(list(context.args))
    return run_init(settings, context.working_dir)


def _handle_help(
    parser: argparse.ArgumentParser,
    service: CommandService,
    topics: Sequence[str],
) -> int:
    """Dispatch ``help [command]``."""
    if not topics:
        parser.print_help()
        return exit_codes.SUCCESS

    topic = topics[0]
    if topic in service:
        _build_command_parser(topic, service.get(topic)).print_help()
    elif topic == INIT_COMMAND:
        _build_builtin_parser(INIT_COMMAND, INIT_USAGE).print_help()
    elif topic in HELP_COMMANDS:
        _build_builtin_parser(topic, HELP_USAGE).print_help()
    else:
        raise UnknownCommandError(
            f"No help topic for '{topic}'.",
            hint=f"Run '{PROG} --help' to list the available commands.",
        )
    return exit_codes.SUCCESS


def _print_completion(service: CommandService) -> None:
    """Print every command name, one per line, for shell completion hooks."""
    for name in (*service.command_names(), INIT_COMMAND, *HELP_COMMANDS):
        print(name)


def _dispatch(
    parser: argparse.ArgumentParser,
    service: CommandService,
    settings: AhoySettings,
    context: InvocationContext,
) -> int:
    # Configured commands shadow the built-ins of the same name.
    name = context.command_name
    if name in service:
        return _handle_alias(service, context)
    if name == INIT_COMMAND:
        return _handle_init(settings, context)
    if name in HELP_COMMANDS:
        return _handle_help(parser, service, context.args)
    raise UnknownCommandError(
        f"No command named '{name}'.",
        hint=f"Run '{PROG} --help' to list the available commands.",
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ahoy CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    settings = load_settings()
    early = _preparse(argv)
    verbose = early.verbose or settings.verbose
    configure_logging(verbose)

    working_dir = Path.cwd()
    config_path = resolve_config_path(early.file, working_dir)
    config = _load_config_or_empty(config_path)
    service = CommandService(config, SubprocessShellRunner(shell=settings.shell))

    parser = _build_parser(service, config_path)
    args = parser.parse_args(argv)

    if args.generate_bash_completion:
        _print_completion(service)
        return exit_codes.SUCCESS

    index = _command_index(argv)
    if args.command is None or index is None:
        parser.print_help()
        return exit_codes.SUCCESS

    context = InvocationContext(
        working_dir=working_dir,
        config_path=config_path,
        command_name=argv[index],
        args=tuple(argv[index + 1:]),
        verbose=verbose,
    )
    return _dispatch(parser, service, settings, context)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AhoyError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
