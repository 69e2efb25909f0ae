"""Core command service: maps config entries to runnable commands.

The service owns the loaded :class:`~ahoy.core.models.Config` and a
:class:`~ahoy.core.protocols.ShellRunner` injected at construction
time.  It is responsible for:

* Presenting command names in a stable, sorted order.
* Rendering a command template with the captured arguments.
* Delegating execution to the runner.

Guarantees
----------
* No ``print()``; diagnostics go through :mod:`logging` only.
* No subprocess or filesystem access of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ahoy.core.models import CommandDef, Config, InvocationContext
from ahoy.core.protocols import ShellRunner
from ahoy.core.template import render_command
from ahoy.exceptions import UnknownCommandError

logger = logging.getLogger(__name__)


class CommandService:
    """Stateless dispatcher over a loaded configuration.

    Parameters
    ----------
    config:
        The parsed config file contents.
    runner:
        Any object satisfying the :class:`ShellRunner` protocol.
    """

    def __init__(self, config: Config, runner: ShellRunner) -> None:
        self._config: Config = config
        self._runner: ShellRunner = runner

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._config.commands

    def command_names(self) -> list[str]:
        """All configured command names, sorted lexicographically."""
        return sorted(self._config.commands)

    def visible_commands(self) -> list[tuple[str, CommandDef]]:
        """Sorted ``(name, command)`` pairs not marked ``hide_help``."""
        return [
            (name, self._config.commands[name])
            for name in self.command_names()
            if not self._config.commands[name].hide_help
        ]

    def get(self, name: str) -> CommandDef:
        """Return the command called *name*.

        Raises
        ------
        UnknownCommandError
            When no such command is configured.
        """
        try:
            return self._config.commands[name]
        except KeyError:
            raise UnknownCommandError(
                f"No command named '{name}'.",
                hint="Run 'ahoy --help' to list the available commands.",
            ) from None

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def build_command_line(self, name: str, args: Sequence[str]) -> str:
        """Return the shell string that running *name* with *args* executes."""
        return render_command(self.get(name).shell_template, args)

    def run(self, context: InvocationContext) -> int:
        """Run the command described by *context* and return its exit status.

        The shell runs inside :attr:`InvocationContext.source_dir`.

        Raises
        ------
        UnknownCommandError
            When ``context.command_name`` is not configured.
        ShellCommandError
            When the runner cannot start the shell.
        """
        command_line = self.build_command_line(context.command_name, context.args)
        if context.verbose:
            logger.info(
                "===> ahoy %s from %s : %s",
                context.command_name,
                context.config_path,
                command_line,
            )
        return self._runner.run(command_line, cwd=context.source_dir)
