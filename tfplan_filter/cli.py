"""Command-line entry point: summarise a Terraform JSON plan."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Sequence

from tfplan_filter.colors import print_debug_info
from tfplan_filter.formatter import Options, format_html, format_json, format_text
from tfplan_filter.model import ResourceCollection
from tfplan_filter.parser import PlanParseError, TextPlanError, parse_terraform_plan

PROG = "terraform-plan-filter"
VERSION = "dev"

_TEXT_PLAN_HELP = (
    "\n\nThis tool now only supports JSON-formatted Terraform plans.\n"
    "Please use the following commands:\n"
    "  terraform plan -out=tfplan\n"
    "  terraform show -json tfplan | terraform-plan-filter"
)


@dataclass
class Config:
    """Options chosen on the command line."""

    no_color: bool = False
    json_out: bool = False
    html_out: bool = False
    plan_file: str = ""
    output_file: str = ""
    verbose: bool = False
    show_version: bool = False


class _CliError(Exception):
    """A failure that ends the run with a message on stderr."""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, allow_abbrev=False)
    parser.add_argument("-no-color", "--no-color", dest="no_color", action="store_true",
                        help="Disable colored output")
    parser.add_argument("-json", "--json", dest="json_out", action="store_true",
                        help="Output in JSON format")
    parser.add_argument("-html", "--html", dest="html_out", action="store_true",
                        help="Output in HTML format")
    parser.add_argument("-plan", "--plan", dest="plan_file", default="",
                        help="Terraform JSON plan file (default: stdin)")
    parser.add_argument("-output", "--output", dest="output_file", default="",
                        help="Output file (default: stdout)")
    parser.add_argument("-verbose", "--verbose", dest="verbose", action="store_true",
                        help="Show verbose output")
    parser.add_argument("-version", "--version", dest="show_version", action="store_true",
                        help="Show version information")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments; NO_COLOR or TERM=dumb force plain output."""
    namespace = _build_parser().parse_args(argv)
    config = Config(**vars(namespace))
    if os.environ.get("NO_COLOR") or os.environ.get("TERM") == "dumb":
        config.no_color = True
    return config


def render_output(result: ResourceCollection, config: Config) -> str:
    """Format ``result`` in the format ``config`` asks for."""
    if config.json_out:
        return format_json(result)
    if config.html_out:
        return format_html(result)
    return format_text(result, Options(use_colors=not config.no_color, verbose=config.verbose))


def _read_plan(plan_file: str) -> ResourceCollection:
    try:
        if not plan_file:
            return parse_terraform_plan(sys.stdin)
        if not os.path.exists(plan_file):
            raise _CliError(f"plan file {plan_file} does not exist")
        try:
            with open(plan_file, "rb") as stream:
                return parse_terraform_plan(stream)
        except OSError as exc:
            raise _CliError(f"error opening plan file: {exc}") from exc
    except TextPlanError as exc:
        raise _CliError(f"error: {exc}{_TEXT_PLAN_HELP}") from exc
    except PlanParseError as exc:
        raise _CliError(f"error parsing Terraform plan: {exc}") from exc


def _write_output(output: str, output_file: str) -> None:
    if not output_file:
        sys.stdout.write(output)
        sys.stdout.flush()
        return
    try:
        stream = open(output_file, "w", encoding="utf-8")
    except OSError as exc:
        raise _CliError(f"error creating output file: {exc}") from exc
    try:
        with stream:
            stream.write(output)
    except OSError as exc:
        raise _CliError(f"error writing output: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    config = parse_args(argv)
    if config.show_version:
        print(f"{PROG} version {VERSION}")
        return 0
    try:
        result = _read_plan(config.plan_file)
        _write_output(render_output(result, config), config.output_file)
    except _CliError as exc:
        print(exc, file=sys.stderr)
        return 1
    if config.verbose:
        print_debug_info(result, config.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())