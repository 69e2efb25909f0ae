"""PyYAML-backed loading of ``.ahoy.yml`` files.

This module is the **only** place in the codebase that imports
``yaml``.  Read failures and parse failures are reported as distinct
exception types because the CLI treats them differently: an unreadable
file only warns, an unparseable one aborts.

Scalars are kept as the text written in the file, so ``cmd: true``
runs ``true`` and ``version: 1.10`` stays ``"1.10"``.  Only the values
of ``hide_help`` and ``skip_flag_parsing`` go through YAML's usual
boolean resolution.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from ahoy.core.config_parser import parse_config
from ahoy.core.models import Config
from ahoy.exceptions import ConfigParseError, ConfigReadError

_STR_TAG: str = "tag:yaml.org,2002:str"
_RESOLVED_TAGS: frozenset[str] = frozenset(
    f"tag:yaml.org,2002:{name}" for name in ("bool", "int", "float", "timestamp")
)
_FLAG_KEYS: frozenset[str] = frozenset({"hide_help", "skip_flag_parsing"})


def _keep_text(node: yaml.Node) -> None:
    if isinstance(node, yaml.ScalarNode) and node.tag in _RESOLVED_TAGS:
        node.tag = _STR_TAG


class ConfigLoader(yaml.SafeLoader):
    """Safe loader that constructs resolved scalars from their source text."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict:
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            for key_node, value_node in node.value:
                _keep_text(key_node)
                if not (isinstance(key_node, yaml.ScalarNode) and key_node.value in _FLAG_KEYS):
                    _keep_text(value_node)
        return super().construct_mapping(node, deep=deep)


def load_config(path: Path) -> Config:
    """Read and parse the config file at *path*.

    Raises
    ------
    ConfigReadError
        When the file cannot be read (missing, a directory, no permission).
    ConfigParseError
        When the content is not valid YAML or has the wrong shape.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigReadError(
            f"Unable to read config file {path}: {exc.strerror or exc}",
            hint="You can create an example one by using 'ahoy init'.",
        ) from exc

    try:
        data = yaml.load(raw, Loader=ConfigLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Invalid YAML in {path}:\n{exc}") from exc

    return parse_config(data, source=str(path))
