"""Turn decoded YAML data into a :class:`~ahoy.core.models.Config`.

The input is the decoded YAML document; this module never
touches the filesystem.  Any structural problem is reported as a
:class:`~ahoy.exceptions.ConfigParseError`.

Expected shape::

    version: "2"
    commands:
      greet:
        usage: Say hello.
        cmd: echo hello {{args}}
        hide_help: false
        skip_flag_parsing: false
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ahoy.core.models import CommandDef, Config
from ahoy.exceptions import ConfigParseError

_SCALARS = (str, int, float, bool)


def parse_config(data: Any, *, source: str = "config") -> Config:
    """Validate *data* and build a :class:`Config`.

    Parameters
    ----------
    data:
        The decoded YAML document.  ``None`` (an empty file) yields an
        empty configuration.
    source:
        Label used in error messages, normally the file path.

    Raises
    ------
    ConfigParseError
        When the document does not have the expected shape.
    """
    if data is None:
        return Config()
    if not isinstance(data, Mapping):
        raise ConfigParseError(
            f"{source}: top level must be a mapping, got {type(data).__name__}.",
        )

    version = _scalar_text(data.get("version"), f"{source}: version")

    raw_commands = data.get("commands")
    if raw_commands is None:
        raw_commands = {}
    if not isinstance(raw_commands, Mapping):
        raise ConfigParseError(
            f"{source}: 'commands' must be a mapping of name to command.",
        )

    commands = {
        str(name): _parse_command(entry, f"{source}: commands.{name}")
        for name, entry in raw_commands.items()
    }
    return Config(version=version, commands=MappingProxyType(commands))


def _parse_command(entry: Any, where: str) -> CommandDef:
    if entry is None:
        return CommandDef()
    if not isinstance(entry, Mapping):
        raise ConfigParseError(f"{where} must be a mapping.")

    return CommandDef(
        description=_scalar_text(entry.get("description"), f"{where}.description"),
        usage=_scalar_text(entry.get("usage"), f"{where}.usage"),
        shell_template=_scalar_text(entry.get("cmd"), f"{where}.cmd"),
        hide_help=_flag(entry.get("hide_help"), f"{where}.hide_help"),
        skip_flag_parsing=_flag(
            entry.get("skip_flag_parsing"), f"{where}.skip_flag_parsing",
        ),
    )


def _scalar_text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, _SCALARS):
        return str(value)
    raise ConfigParseError(f"{where} must be a string, got {type(value).__name__}.")


def _flag(value: Any, where: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise ConfigParseError(f"{where} must be true or false, got {value!r}.")
