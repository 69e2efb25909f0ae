"""``ahoy init``: download an example ``.ahoy.yml`` into the current directory.

An existing file with the same name is overwritten.  The command is
always offered, even when the loaded config defines its own ``init``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ahoy.cli import exit_codes
from ahoy.cli.console import escape, stdout_console
from ahoy.core.protocols import TemplateFetcher
from ahoy.exceptions import InitTemplateError
from ahoy.infra.config_locator import CONFIG_FILENAME
from ahoy.settings import AhoySettings

logger = logging.getLogger(__name__)

INIT_USAGE: str = f"Initialize a new {CONFIG_FILENAME} config file in the current directory."


def run_init(
    settings: AhoySettings,
    directory: Path,
    *,
    fetcher: TemplateFetcher | None = None,
) -> int:
    """Fetch the example config and write it to *directory*.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` once the file is written.

    Raises
    ------
    InitTemplateError
        When the download or the write fails.
    """
    if fetcher is None:
        from ahoy.infra.template_fetcher import HttpTemplateFetcher

        fetcher = HttpTemplateFetcher(timeout=settings.init_timeout)

    logger.info("Fetching %s", settings.init_url)
    content = fetcher.fetch(settings.init_url)

    target = directory / CONFIG_FILENAME
    try:
        target.write_bytes(content)
    except OSError as exc:
        raise InitTemplateError(
            f"Could not write {target}: {exc.strerror or exc}",
        ) from exc

    stdout_console.print(
        f"[bold green]{escape(CONFIG_FILENAME)} downloaded to the current directory.[/bold green] "
        "You can customize it to suit your needs!"
    )
    return exit_codes.SUCCESS
