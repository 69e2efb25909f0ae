"""Environment-driven settings for ahoy.

Every knob is read from an ``AHOY_``-prefixed environment variable via
pydantic-settings.  Command-line flags take precedence; they are
merged in the CLI layer, not here.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ahoy.exceptions import SettingsError

DEFAULT_INIT_URL: str = (
    "https://raw.githubusercontent.com/devinci-code/ahoy/master/examples/examples.ahoy.yml"
)


class AhoySettings(BaseSettings):
    """Process-wide settings resolved once per invocation."""

    model_config = SettingsConfigDict(
        env_prefix="AHOY_",
        extra="ignore",
        frozen=True,
    )

    verbose: bool = False
    """Log each command before running it (``AHOY_VERBOSE``)."""

    shell: str = Field(default="bash", min_length=1)
    """Interpreter invoked as ``<shell> -c <command>`` (``AHOY_SHELL``)."""

    init_url: str = DEFAULT_INIT_URL
    """Where ``ahoy init`` downloads the example config from."""

    init_timeout: float = Field(default=30.0, gt=0)
    """Seconds to wait for the ``init`` download."""


def load_settings() -> AhoySettings:
    """Build :class:`AhoySettings` from the environment.

    Raises
    ------
    SettingsError
        When an ``AHOY_*`` variable fails validation.
    """
    try:
        return AhoySettings()
    except ValidationError as exc:
        fields = ", ".join(
            "AHOY_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        raise SettingsError(
            f"Invalid environment configuration: {fields or exc}",
            hint="Unset the variable or give it a valid value.",
        ) from exc
