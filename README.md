# tfplan-filter

Turn a Terraform JSON plan into a short summary of what will be created,
updated and destroyed, grouped by resource type. Output can be coloured
text, JSON or a standalone HTML report.

## Installation

```
pip install .
```

This installs the `terraform-plan-filter` command. The same command can also
be run as `python -m tfplan_filter.cli`.

## Usage

The tool reads JSON plans only. Produce one with Terraform and pipe it in:

```
terraform plan -out=tfplan
terraform show -json tfplan | terraform-plan-filter
```

Options (each may be written with one dash or two):

| Option            | Meaning                                        |
|-------------------|------------------------------------------------|
| `-plan FILE`      | Read the JSON plan from FILE (default: stdin)  |
| `-output FILE`    | Write the result to FILE (default: stdout)     |
| `-json`           | Emit JSON                                      |
| `-html`           | Emit an HTML report                            |
| `-no-color`       | Disable ANSI colours in text output            |
| `-verbose`        | Print debug information to stdout afterwards   |
| `-version`        | Print the version and exit                     |

If both `-json` and `-html` are given, JSON wins. Colours are also turned off
when the `NO_COLOR` environment variable is set or `TERM` is `dumb`.

Examples:

```
terraform-plan-filter -plan plan.json -html -output report.html
terraform-plan-filter -plan plan.json -json
```

Replacements count as both a create and a destroy. Data sources and no-op
changes are left out. Text and HTML output list module resources
(addresses starting with `module.`) in their own group ahead of the other
resource types.

When given the human-readable plan output instead of JSON, the command stops
with exit status 1 and explains how to produce a JSON plan. Any other input
that cannot be read as a plan also ends with status 1 and a message on stderr.

## Library use

```python
from tfplan_filter.parser import parse_terraform_plan
from tfplan_filter.formatter import Options, format_text

with open("plan.json", encoding="utf-8") as stream:
    resources = parse_terraform_plan(stream)

print(format_text(resources, Options(use_colors=False)))
```

- `tfplan_filter.parser`: `parse_terraform_plan(stream)` reads a whole text or
  binary stream; `parse_plan_data(data)` takes a `str` or `bytes`. Both return a
  `ResourceCollection` and raise `TextPlanError` for the human-readable plan
  format, or `PlanParseError` (a `ValueError`) for input that cannot be read
  as a plan.
- `tfplan_filter.model`: `ResourceCollection` holds resource addresses per
  `Action` (`CREATE`, `UPDATE`, `DESTROY`) with `get_resources_for_action`,
  `count_resources_for_action`, `resources_by_type` and `total_changes`;
  `extract_resource_type` gives the type part of an address.
- `tfplan_filter.formatter`: `format_text`, `format_json` and `format_html`.
  In JSON output an action with no resources is `null`.
- `tfplan_filter.colors`: ANSI helpers and `debug_info` / `print_debug_info`.

## Running the tests

```
pip install ".[test]"
pytest
```