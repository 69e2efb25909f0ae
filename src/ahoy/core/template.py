"""Placeholder substitution for command templates.

Deliberately minimal: a single literal replace of the first
``{{args}}`` token.  Any later occurrences are left untouched.
"""

from __future__ import annotations

from collections.abc import Sequence

ARGS_PLACEHOLDER: str = "{{args}}"


def join_args(args: Sequence[str]) -> str:
    """Join trailing arguments with single spaces, without quoting."""
    return " ".join(args)


def render_command(template: str, args: Sequence[str]) -> str:
    """Return *template* with its first ``{{args}}`` replaced by *args*."""
    return template.replace(ARGS_PLACEHOLDER, join_args(args), 1)
