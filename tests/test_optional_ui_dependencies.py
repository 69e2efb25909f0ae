"""Regression tests for the optional Rich dependency.

Bootstrap commands (``--help``, ``--version``, completion) and plain
command dispatch must keep working when Rich is not importable; output
then falls back to plain text on the same stream.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from ahoy.cli import exit_codes
from ahoy.cli.app import main
from ahoy.cli.console import console, escape, stdout_console, strip_markup
from ahoy.cli.logging_setup import configure_logging


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.logging", "rich.markup"):
        monkeypatch.setitem(sys.modules, name, None)


class TestMarkupHelpers:
    def test_strip_markup_removes_tags(self) -> None:
        assert strip_markup("[bold red]Error:[/bold red] boom") == "Error: boom"

    def test_strip_markup_keeps_escaped_brackets(self) -> None:
        assert strip_markup(escape("[x] path")) == "[x] path"

    def test_escape_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        assert escape("[bold]") == "\\[bold]"


class TestConsoleFallback:
    def test_plain_print_to_stderr(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.print("[yellow]Warning:[/yellow] careful")
        captured = capsys.readouterr()
        assert captured.err == "Warning: careful\n"
        assert captured.out == ""

    def test_blank_line(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.print()
        assert capsys.readouterr().err == "\n"

    def test_stdout_console_plain_print(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        stdout_console.print("[bold green]Done.[/bold green] ok")
        captured = capsys.readouterr()
        assert captured.out == "Done. ok\n"
        assert captured.err == ""


class TestLoggingSetup:
    def test_verbose_sets_info(self) -> None:
        logger = configure_logging(verbose=True)
        assert logger.name == "ahoy"
        assert logger.level == logging.INFO

    def test_quiet_sets_warning(self) -> None:
        assert configure_logging(verbose=False).level == logging.WARNING

    def test_repeated_calls_keep_one_handler(self) -> None:
        configure_logging(verbose=False)
        logger = configure_logging(verbose=True)
        assert len(logger.handlers) == 1

    def test_uses_rich_handler_when_available(self) -> None:
        from rich.logging import RichHandler

        logger = configure_logging(verbose=True)
        assert isinstance(logger.handlers[0], RichHandler)

    def test_plain_handler_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        logger = configure_logging(verbose=True)
        assert type(logger.handlers[0]) is logging.StreamHandler


class TestCLIWithoutRich:
    def test_help_works_without_rich(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_version_works_without_rich(
        self, project: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_failing_command_without_rich(
        self,
        project: Path,
        write_config: Callable[[Path, str], Path],
        monkeypatch: pytest.MonkeyPatch,
        capfd: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        write_config(project, "commands:\n  fail:\n    cmd: exit 1\n")
        assert main(["fail"]) == exit_codes.GENERAL_ERROR
        assert capfd.readouterr().err.endswith("\n")
