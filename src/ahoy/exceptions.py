"""Custom exception hierarchy for ahoy.

All exceptions that cross layer boundaries must inherit from
:class:`AhoyError`.  Raw third-party exceptions (PyYAML, httpx,
pydantic, ``OSError``) must NEVER propagate beyond the infrastructure
layer: they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
AhoyError
├── ConfigNotFoundError
├── ConfigReadError
├── ConfigParseError
├── UnknownCommandError
├── ShellCommandError
├── InitTemplateError
├── SettingsError
└── EnvironmentError
"""

from __future__ import annotations


class AhoyError(Exception):
    """Base exception for all ahoy errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration file ------------------------------------------------------

class ConfigNotFoundError(AhoyError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigReadError(AhoyError):
    """Raised when a located config file cannot be read from disk.

    Unlike the other config errors this one is recoverable: the CLI
    warns and continues with an empty configuration.
    """


class ConfigParseError(AhoyError):
    """Raised when the config file is not valid YAML or has the wrong shape."""


# --- Dispatch ------------------------------------------------------------------

class UnknownCommandError(AhoyError):
    """Raised when the requested subcommand is neither configured nor built in."""


class ShellCommandError(AhoyError):
    """Raised when the shell interpreter for a command cannot be started."""


# --- init ----------------------------------------------------------------------

class InitTemplateError(AhoyError):
    """Raised when the example config cannot be fetched or written."""


# --- Environment -------------------------------------------------------------

class SettingsError(AhoyError):
    """Raised when an ``AHOY_*`` environment variable holds an invalid value."""


class EnvironmentError(AhoyError):
    """Raised when a required runtime dependency is not available."""
