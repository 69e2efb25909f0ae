"""Core / service layer: pure data model and dispatch logic.

Rules
-----
* No ``print()`` calls.
* No filesystem, subprocess or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from ahoy.core.command_service import CommandService
from ahoy.core.config_parser import parse_config
from ahoy.core.models import CommandDef, Config, InvocationContext
from ahoy.core.protocols import ShellRunner, TemplateFetcher
from ahoy.core.template import ARGS_PLACEHOLDER, render_command

__all__: list[str] = [
    "ARGS_PLACEHOLDER",
    "CommandDef",
    "CommandService",
    "Config",
    "InvocationContext",
    "ShellRunner",
    "TemplateFetcher",
    "parse_config",
    "render_command",
]
