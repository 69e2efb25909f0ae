"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols: never on concrete
implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ShellRunner(Protocol):
    """Contract for executing a command string through a shell.

    Implementations run the command to completion with the parent's
    standard streams inherited.  No sandboxing is performed: whatever
    the config file says is executed verbatim.
    """

    def run(self, command: str, *, cwd: Path) -> int:
        """Execute *command* inside *cwd* and return its exit status.

        Raises
        ------
        ShellCommandError
            When the shell interpreter cannot be started.
        """
        ...  # pragma: no cover


class TemplateFetcher(Protocol):
    """Contract for downloading the example config used by ``ahoy init``."""

    def fetch(self, url: str) -> bytes:
        """Return the raw body found at *url*.

        Raises
        ------
        InitTemplateError
            On any network or HTTP failure.
        """
        ...  # pragma: no cover
