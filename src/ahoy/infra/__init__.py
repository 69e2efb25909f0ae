"""Infrastructure layer: external system integration.

This layer wraps all interaction with the filesystem, PyYAML, the
shell, and the network.  Every raw third-party exception must be caught
here and re-raised as an :class:`~ahoy.exceptions.AhoyError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from ahoy.infra.config_loader import load_config
from ahoy.infra.config_locator import CONFIG_FILENAME, find_config, resolve_config_path
from ahoy.infra.shell_runner import SubprocessShellRunner
from ahoy.infra.template_fetcher import HttpTemplateFetcher

__all__: list[str] = [
    "CONFIG_FILENAME",
    "HttpTemplateFetcher",
    "SubprocessShellRunner",
    "find_config",
    "load_config",
    "resolve_config_path",
]
