"""Subprocess-backed implementation of :class:`~ahoy.core.protocols.ShellRunner`.

Commands are handed to the shell verbatim.  Whatever the config file
says is executed with the user's privileges; nothing here sandboxes
it.  Standard streams are inherited so the child talks to the user's
terminal directly.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from ahoy.exceptions import ShellCommandError


class SubprocessShellRunner:
    """Run command strings as ``<shell> -c <command>``.

    This class satisfies the :class:`~ahoy.core.protocols.ShellRunner`
    protocol structurally: no explicit inheritance required.
    """

    def __init__(self, shell: str = "bash") -> None:
        self._shell: str = shell

    @property
    def shell(self) -> str:
        return self._shell

    def build_argv(self, command: str) -> list[str]:
        return [self._shell, "-c", command]

    def run(self, command: str, *, cwd: Path) -> int:
        """Run *command* in *cwd*, blocking until it exits.

        Raises
        ------
        ShellCommandError
            When the shell cannot be started (missing binary, bad *cwd*).
        """
        try:
            completed = subprocess.run(self.build_argv(command), cwd=cwd, check=False)
        except OSError as exc:
            raise ShellCommandError(
                f"Could not start '{self._shell}' in {cwd}: {exc.strerror or exc}",
                hint="Check that the shell is installed (see AHOY_SHELL).",
            ) from exc
        return completed.returncode
