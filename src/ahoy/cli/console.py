"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``, completion)
remain functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from ahoy.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"(?<!\\)\[/?[a-z]+(?: [a-z]+)*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr, or stdout if asked."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def escape(text: str) -> str:
    """Escape *text* so square brackets in it are not read as markup."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text.replace("[", "\\[")
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Drop Rich style tags, keeping escaped brackets as plain text."""
    return _MARKUP_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool = True) -> None:
        self._stderr: bool = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else a plain print to the same stream."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr if self._stderr else sys.stdout,
            )
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
stdout_console = _ConsoleProxy(stderr=False)
