"""Rendering a resource collection as text, JSON or HTML."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from tfplan_filter.colors import BOLD, RESET, bold_text, color_for_action, symbol_for_action
from tfplan_filter.model import MODULE_TYPE, Action, ResourceCollection

_TITLE = "=== TERRAFORM PLAN SUMMARY ==="

_SECTIONS = (
    (Action.CREATE, "CREATE"),
    (Action.UPDATE, "UPDATE"),
    (Action.DESTROY, "DESTROY"),
)

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_HTML_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Terraform Plan Summary</title>
    <style>
        body {
            font-family: Arial, sans-serif;
            line-height: 1.6;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            color: #333;
        }
        h1 {
            color: #0f4c81;
            border-bottom: 2px solid #0f4c81;
            padding-bottom: 10px;
        }
        .summary {
            background: #f5f5f5;
            padding: 15px;
            border-radius: 4px;
            margin-bottom: 20px;
        }
        .action-group {
            margin-bottom: 30px;
        }
        .create h2 {
            color: #2a9d8f;
        }
        .update h2 {
            color: #e9c46a;
        }
        .destroy h2 {
            color: #e76f51;
        }
        .resource-type {
            background: #f9f9f9;
            padding: 8px 12px;
            margin-bottom: 10px;
            border-radius: 4px;
            font-weight: bold;
        }
        .resource {
            background: white;
            border-left: 4px solid #ddd;
            padding: 10px 15px;
            margin-bottom: 10px;
            border-radius: 0 4px 4px 0;
        }
        .create .resource {
            border-left-color: #2a9d8f;
        }
        .update .resource {
            border-left-color: #e9c46a;
        }
        .destroy .resource {
            border-left-color: #e76f51;
        }
        .timestamp {
            font-size: 0.8em;
            color: #666;
            margin-top: 30px;
        }
        .plan-summary {
            margin-top: 20px;
            font-weight: bold;
            padding: 10px;
            background-color: #f0f8ff;
            border-radius: 4px;
        }
    </style>
</head>
<body>
"""


@dataclass
class Options:
    """Settings for the text formatter."""

    use_colors: bool = False
    verbose: bool = False


def _groups(resources: ResourceCollection, action: Action) -> Iterator[tuple[str, list[str]]]:
    """Yield (type, resources) pairs with module resources first, then by type name."""
    by_type = resources.resources_by_type(action)
    modules = by_type.get(MODULE_TYPE)
    if modules:
        yield MODULE_TYPE, modules
    for kind in sorted(by_type):
        if kind == MODULE_TYPE or not by_type[kind]:
            continue
        yield kind, by_type[kind]


def _plan_summary(resources: ResourceCollection) -> str:
    return (
        f"Plan: {resources.summary_adds} to add, {resources.summary_changes} to change, "
        f"{resources.summary_destroys} to destroy."
    )


def _summary_counts(resources: ResourceCollection) -> tuple[tuple[str, int], ...]:
    return (
        ("create", resources.summary_adds),
        ("update", resources.summary_changes),
        ("destroy", resources.summary_destroys),
    )


def _label(text: str, opts: Options) -> str:
    return f"{BOLD}{text}{RESET}" if opts.use_colors else text


def _text_section(resources: ResourceCollection, action: Action, name: str, opts: Options) -> str:
    if not resources.get_resources_for_action(action):
        return ""
    color = color_for_action(action)
    symbol = symbol_for_action(action)
    header = f"RESOURCES TO {name}:"
    parts = [bold_text(header, opts.use_colors) if opts.use_colors else header, "\n"]
    for kind, members in _groups(resources, action):
        parts.append(f"  {_label(f'# {kind.upper()} RESOURCES:', opts)}\n")
        for resource in members:
            if opts.use_colors:
                parts.append(f"    {color}{symbol} {resource}{RESET}\n")
            else:
                parts.append(f"    {symbol} {resource}\n")
        parts.append("\n")
    return "".join(parts)


def format_text(resources: ResourceCollection, opts: Options | None = None) -> str:
    """Render ``resources`` as plain or ANSI-coloured text."""
    opts = opts or Options()
    title = bold_text(_TITLE, opts.use_colors) if opts.use_colors else _TITLE
    parts = ["\n", title, "\n\n"]

    if resources.has_detailed_resources:
        parts.extend(_text_section(resources, action, name, opts) for action, name in _SECTIONS)
    elif resources.found_summary:
        for word, count in _summary_counts(resources):
            if count > 0:
                parts.append(
                    f"{_label(f'RESOURCES TO {word.upper()}:', opts)} {count} (details not available)\n\n"
                )

    parts.append(f"{_label('TOTAL CHANGES:', opts)} {resources.total_changes()}\n")

    if resources.found_summary:
        parts.append(f"\n{_label('Plan Summary:', opts)} {_plan_summary(resources)}\n")

    return "".join(parts)


def _timestamp(moment: datetime) -> str:
    """Format ``moment`` as RFC 3339 with trailing fractional zeros dropped."""
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    seconds = int(offset.total_seconds())
    sign = "+" if seconds >= 0 else "-"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def _escape_json(text: str) -> str:
    for char, escaped in (
        ("&", "\\u0026"),
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text


def format_json(resources: ResourceCollection) -> str:
    """Render ``resources`` as an indented JSON document; empty lists become null."""
    payload = {
        **{
            action.value: resources.get_resources_for_action(action) or None
            for action, _ in _SECTIONS
        },
        "summary": {
            "total": resources.total_changes(),
            "adds": resources.summary_adds,
            "changes": resources.summary_changes,
            "destroys": resources.summary_destroys,
        },
        "has_detailed_resources": resources.has_detailed_resources,
        "found_summary": resources.found_summary,
        "timestamp": _timestamp(datetime.now().astimezone()),
    }
    return _escape_json(json.dumps(payload, indent=2, ensure_ascii=False))


def _html_section(resources: ResourceCollection, action: Action) -> str:
    if not resources.get_resources_for_action(action):
        return ""
    parts = [
        f'    <div class="action-group {action.value}">\n',
        f"        <h2>Resources to {action.value}</h2>\n",
    ]
    for kind, members in _groups(resources, action):
        title = "MODULE RESOURCES" if kind == MODULE_TYPE else kind.upper()
        parts.append(f'        <div class="resource-type">{title}</div>\n')
        parts.extend(f'        <div class="resource">{resource}</div>\n' for resource in members)
    parts.append("    </div>\n")
    return "".join(parts)


def _html_time(moment: datetime) -> str:
    return f"{_MONTHS[moment.month - 1]} {moment.day}, {moment:%Y %H:%M:%S}"


def format_html(resources: ResourceCollection) -> str:
    """Render ``resources`` as a standalone HTML report."""
    parts = [
        _HTML_HEAD,
        "    <h1>Terraform Plan Summary</h1>\n",
        '    <div class="summary">\n',
        f"        <p><strong>Total changes:</strong> {resources.total_changes()}</p>\n",
    ]

    if resources.has_detailed_resources:
        parts.extend(_html_section(resources, action) for action, _ in _SECTIONS)
    elif resources.found_summary:
        parts.append('    <div class="summary-details">\n')
        for word, count in _summary_counts(resources):
            if count > 0:
                parts.append(
                    f"        <p><strong>Resources to {word}:</strong> {count} "
                    "(details not available)</p>\n"
                )
        parts.append("    </div>\n")

    if resources.found_summary:
        parts.append(f'    <div class="plan-summary">{_plan_summary(resources)}</div>\n')

    parts.append(
        f'    <div class="timestamp">Report generated on {_html_time(datetime.now())}</div>\n'
    )
    parts.append("</body>\n</html>")
    return "".join(parts)