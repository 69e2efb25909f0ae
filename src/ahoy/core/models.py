"""Domain models for ahoy.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  A :class:`Config` is loaded once per
invocation and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Command alias
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDef:
    """A single named shell-command alias from the config file."""

    description: str = ""
    """Long description shown in the command's own help."""

    usage: str = ""
    """One-line summary shown next to the name in the command listing."""

    shell_template: str = ""
    """Shell command string; may contain the ``{{args}}`` placeholder."""

    hide_help: bool = False
    """Omit this command from the help listing."""

    skip_flag_parsing: bool = False
    """Forward every trailing token verbatim, including leading flags."""

    @property
    def summary(self) -> str:
        """Text for the listing: ``usage``, falling back to ``description``."""
        return self.usage or self.description


# ---------------------------------------------------------------------------
# Whole configuration
# ---------------------------------------------------------------------------

def _empty_commands() -> Mapping[str, CommandDef]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Config:
    """Parsed contents of an ``.ahoy.yml`` file.

    ``commands`` is a read-only mapping so that the frozen guarantee
    extends to its contents.
    """

    version: str = ""
    commands: Mapping[str, CommandDef] = field(default_factory=_empty_commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return len(self.commands) > 0


# ---------------------------------------------------------------------------
# Per-run invocation state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Everything a command handler needs to know about the current run."""

    working_dir: Path
    """Directory the user invoked ahoy from."""

    config_path: Path | None
    """The located config file, or ``None`` when none was found."""

    command_name: str
    args: tuple[str, ...] = ()
    """Raw trailing arguments captured after the command name."""

    verbose: bool = False

    @property
    def source_dir(self) -> Path:
        """Directory commands run in: the config file's parent directory."""
        if self.config_path is None:
            return self.working_dir
        return self.config_path.parent
