import io

import pytest

from tfplan_filter import colors
from tfplan_filter.model import Action, ResourceCollection


@pytest.mark.parametrize(
    ("action", "color", "symbol"),
    [
        (Action.CREATE, colors.GREEN, "+"),
        (Action.UPDATE, colors.YELLOW, "~"),
        (Action.DESTROY, colors.RED, "-"),
    ],
)
def test_color_and_symbol(action, color, symbol):
    assert colors.color_for_action(action) == color
    assert colors.symbol_for_action(action) == symbol
    assert colors.color_for_action(action.value) == color


def test_unknown_action_fallbacks():
    assert colors.color_for_action("rename") == colors.RESET
    assert colors.symbol_for_action("rename") == "?"


def test_ansi_codes():
    assert colors.colorize_text("x", colors.GREEN, True) == "\033[32mx\033[0m"
    assert colors.bold_text("x", True) == "\033[1mx\033[0m"
    assert colors.color_for_action(Action.CREATE) == "\033[32m"
    assert colors.color_for_action("rename") == "\033[0m"


def test_colorize_text():
    assert colors.colorize_text("hi", colors.CYAN, False) == "hi"
    wrapped = colors.colorize_text("hi", colors.CYAN, True)
    assert wrapped.startswith(colors.CYAN)
    assert wrapped.endswith(colors.RESET)
    assert wrapped[len(colors.CYAN):-len(colors.RESET)] == "hi"


def test_bold_text():
    assert colors.bold_text("x", True) == colors.colorize_text("x", colors.BOLD, True)
    assert colors.bold_text("x", False) == "x"


def test_debug_info_with_summary():
    resources = ResourceCollection(
        found_summary=True, summary_adds=2, summary_changes=1, summary_destroys=3
    )
    report = colors.debug_info(resources)
    lines = report.splitlines()
    assert lines[0] == ""
    assert lines[1] == "=== DEBUG INFO ==="
    assert "Found summary: true" in lines
    assert "Has detailed resources: false" in lines
    assert "Summary adds: 2" in lines
    assert "Summary changes: 1" in lines
    assert "Summary destroys: 3" in lines
    assert f"Total changes detected: {resources.total_changes()}" in lines
    assert lines[-1] == "================="


def test_debug_info_without_summary_omits_counts():
    resources = ResourceCollection()
    resources.add_resource(Action.CREATE, "aws_s3_bucket.logs")
    report = colors.debug_info(resources)
    assert "Summary adds" not in report
    assert "Found summary: false" in report
    assert "Has detailed resources: true" in report


def test_print_debug_info_respects_verbose():
    resources = ResourceCollection()
    quiet = io.StringIO()
    colors.print_debug_info(resources, False, quiet)
    assert quiet.getvalue() == ""
    loud = io.StringIO()
    colors.print_debug_info(resources, True, loud)
    assert loud.getvalue() == colors.debug_info(resources)