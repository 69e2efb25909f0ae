"""ahoy: project command-alias runner.

Reads named shell commands from the nearest ``.ahoy.yml`` and exposes
them as subcommands.
"""

from ahoy.version import __version__

__all__: list[str] = ["__version__"]
