"""Shared pytest fixtures and configuration for the ahoy test suite.

Guidelines
----------
* No internet access in any test: HTTP goes through ``httpx.MockTransport``.
* Every test that calls :func:`ahoy.cli.app.main` runs inside its own
  temporary project directory.
* ``AHOY_*`` variables from the developer's shell must not leak in.
"""

from __future__ import annotations

import logging
import textwrap
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from ahoy.infra.config_locator import CONFIG_FILENAME

_AHOY_ENV_VARS = ("AHOY_VERBOSE", "AHOY_SHELL", "AHOY_INIT_URL", "AHOY_INIT_TIMEOUT")


@pytest.fixture(autouse=True)
def _clean_ahoy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _AHOY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_ahoy_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("ahoy")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory that is also the current directory."""
    root = tmp_path.resolve()
    monkeypatch.chdir(root)
    return root


@pytest.fixture()
def write_config() -> Callable[[Path, str], Path]:
    """Write a dedented ``.ahoy.yml`` into a directory and return its path."""

    def _write(directory: Path, body: str) -> Path:
        path = directory / CONFIG_FILENAME
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write


class RecordingRunner:
    """ShellRunner double that records commands instead of running them."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[str, Path]] = []

    def run(self, command: str, *, cwd: Path) -> int:
        self.calls.append((command, Path(cwd)))
        return self.returncode


@pytest.fixture()
def runner(monkeypatch: pytest.MonkeyPatch) -> RecordingRunner:
    """Replace the subprocess runner used by the CLI with a recorder."""
    from ahoy.cli import app as app_module

    recorder = RecordingRunner()
    monkeypatch.setattr(
        app_module, "SubprocessShellRunner", lambda shell="bash": recorder,
    )
    return recorder
