"""Diagnostic output helpers for pagination."""

from __future__ import annotations

import sys
from typing import Iterable

from .page_constants import DEBUG_PAGINATION
from .page_types import Issue


def _debug(*, msg: str) -> None:
    """Print pagination trace output when DEBUG_PAGINATION is enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg)


def _warn(*, msg: str) -> None:
    """Print a warning to stderr.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    print(f"warning: {msg}", file=sys.stderr)


def _warn_issues(*, issues: Iterable[Issue]) -> None:
    """Print each issue once as a warning."""

    for issue in issues:
        _warn(msg=str(issue))
