"""Allow ``python -m ahoy`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m ahoy`` behaves identically to the ``ahoy`` console
script.
"""

from __future__ import annotations

from ahoy.cli.app import cli

if __name__ == "__main__":
    cli()
