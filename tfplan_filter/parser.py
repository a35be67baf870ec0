"""Reading Terraform plans produced by ``terraform show -json``."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from typing import IO, Any

from tfplan_filter.model import Action, ResourceCollection

TEXT_PLAN_MESSAGE = (
    "input appears to be text format, not JSON. "
    "Please use 'terraform show -json tfplan' to generate JSON output"
)
_TEXT_PREFIX = "Terraform will perform"

_ACTIONS = {"create": Action.CREATE, "update": Action.UPDATE, "delete": Action.DESTROY}


class PlanParseError(ValueError):
    """The input could not be read as a Terraform JSON plan."""


class TextPlanError(PlanParseError):
    """The input is a human-readable plan rather than JSON."""


class _SchemaMismatch(Exception):
    pass


@dataclass(frozen=True)
class _Change:
    address: str
    mode: str
    actions: tuple[str, ...]


def _string(value: Any, what: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise _SchemaMismatch(f"expected a string for {what}, got {type(value).__name__}")


def _object(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise _SchemaMismatch(f"expected an object for {what}, got {type(value).__name__}")


def _actions(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise _SchemaMismatch(f"expected a list for change.actions, got {type(value).__name__}")
    return tuple(_string(item, "change.actions") for item in value)


def _read_changes(raw: Any, strict: bool) -> list[_Change]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise _SchemaMismatch(f"expected a list for resource_changes, got {type(raw).__name__}")
    changes = []
    for item in raw:
        entry = _object(item, "resource_changes entry")
        if strict:
            for key in ("type", "name", "provider_name"):
                _string(entry.get(key), key)
        change = _object(entry.get("change"), "change")
        changes.append(
            _Change(
                address=_string(entry.get("address"), "address"),
                mode=_string(entry.get("mode"), "mode"),
                actions=_actions(change.get("actions")),
            )
        )
    return changes


def _full_changes(doc: Any) -> list[_Change]:
    top = _object(doc, "plan")
    for key in ("format_version", "terraform_version"):
        _string(top.get(key), key)
    return _read_changes(top.get("resource_changes"), strict=True)


def _loose_changes(doc: Any) -> list[_Change]:
    if doc is not None and not isinstance(doc, dict):
        raise PlanParseError(
            f"error parsing JSON: cannot read {type(doc).__name__} as an object"
        )
    if not doc or "resource_changes" not in doc:
        raise PlanParseError("couldn't find resource_changes in the JSON")
    try:
        return _read_changes(doc["resource_changes"], strict=False)
    except _SchemaMismatch as exc:
        raise PlanParseError(f"error parsing resource changes: {exc}") from None


def _collect(changes: list[_Change]) -> ResourceCollection:
    collection = ResourceCollection(found_summary=True)
    counts: Counter[Action] = Counter()
    for change in changes:
        if change.mode == "data":
            continue
        if "replace" in change.actions:
            planned = [Action.CREATE, Action.DESTROY]
        else:
            planned = [_ACTIONS[a] for a in change.actions if a in _ACTIONS]
        for action in planned:
            collection.add_resource(action, change.address)
            counts[action] += 1
    collection.summary_adds = counts[Action.CREATE]
    collection.summary_changes = counts[Action.UPDATE]
    collection.summary_destroys = counts[Action.DESTROY]
    collection.has_detailed_resources = True
    return collection


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def parse_plan_data(data: str | bytes) -> ResourceCollection:
    """Parse a JSON plan held in ``data``."""
    prefix: str | bytes = _TEXT_PREFIX.encode() if isinstance(data, bytes) else _TEXT_PREFIX
    if data.startswith(prefix):
        raise TextPlanError(TEXT_PLAN_MESSAGE)
    try:
        doc = json.loads(data, parse_constant=_reject_constant)
    except ValueError as exc:
        raise PlanParseError(f"error parsing JSON: {exc}") from exc
    try:
        changes = _full_changes(doc)
    except _SchemaMismatch:
        changes = _loose_changes(doc)
    return _collect(changes)


def parse_terraform_plan(stream: IO[str] | IO[bytes]) -> ResourceCollection:
    """Read a whole JSON plan from ``stream`` and parse it."""
    return parse_plan_data(stream.read())