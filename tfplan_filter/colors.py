"""ANSI colouring helpers and debug output."""

from __future__ import annotations

import sys
from typing import TextIO

from tfplan_filter.model import Action, ResourceCollection

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
BOLD = "\033[1m"

_COLORS = {"create": GREEN, "update": YELLOW, "destroy": RED}
_SYMBOLS = {"create": "+", "update": "~", "destroy": "-"}


def _key(action: Action | str) -> str:
    return action.value if isinstance(action, Action) else action


def color_for_action(action: Action | str) -> str:
    """Return the ANSI colour used for ``action``."""
    return _COLORS.get(_key(action), RESET)


def symbol_for_action(action: Action | str) -> str:
    """Return the one-character marker used for ``action``."""
    return _SYMBOLS.get(_key(action), "?")


def colorize_text(text: str, color: str, use_colors: bool) -> str:
    """Wrap ``text`` in ``color`` when colours are enabled."""
    return f"{color}{text}{RESET}" if use_colors else text


def bold_text(text: str, use_colors: bool) -> str:
    """Make ``text`` bold when colours are enabled."""
    return colorize_text(text, BOLD, use_colors)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def debug_info(resources: ResourceCollection) -> str:
    """Return the debug report for ``resources``."""
    lines = [
        "",
        "=== DEBUG INFO ===",
        f"Found summary: {_flag(resources.found_summary)}",
        f"Has detailed resources: {_flag(resources.has_detailed_resources)}",
    ]
    if resources.found_summary:
        lines += [
            f"Summary adds: {resources.summary_adds}",
            f"Summary changes: {resources.summary_changes}",
            f"Summary destroys: {resources.summary_destroys}",
        ]
    lines += [
        f"Total changes detected: {resources.total_changes()}",
        "=================",
    ]
    return "\n".join(lines) + "\n"


def print_debug_info(
    resources: ResourceCollection, verbose: bool, file: TextIO | None = None
) -> None:
    """Write the debug report to ``file`` (stdout by default) when ``verbose``."""
    if not verbose:
        return
    (file or sys.stdout).write(debug_info(resources))