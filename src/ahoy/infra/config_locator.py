"""Infrastructure: locate the ``.ahoy.yml`` file for the current project.

Rules
-----
* Existence checks only: the file is not opened here.
* No ``print()``: callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ahoy.exceptions import ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: str = ".ahoy.yml"


def find_config(start: Path) -> Path | None:
    """Walk from *start* up to the filesystem root looking for the config file.

    Returns the first match, or ``None`` when no directory on the way
    contains one.  *start* itself is checked first.
    """
    start = start.absolute()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            logger.debug("Found config file at %s", candidate)
            return candidate
    logger.debug("No %s between %s and the filesystem root", CONFIG_FILENAME, start)
    return None


def resolve_config_path(explicit: str | Path | None, start: Path) -> Path | None:
    """Return the config file to use for this invocation.

    Parameters
    ----------
    explicit:
        Path given with ``-f``.  When set it must exist; no search is
        performed.
    start:
        Directory to start searching from when *explicit* is ``None``.

    Raises
    ------
    ConfigNotFoundError
        When *explicit* is given but nothing exists at that path.
    """
    if explicit is not None:
        path = Path(explicit)
        if not path.exists():
            raise ConfigNotFoundError(
                f"An ahoy config file was specified to be at {path} "
                "but couldn't be found.",
                hint="Check your path.",
            )
        return path
    return find_config(start)
