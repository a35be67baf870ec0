"""Resource collection built from a Terraform plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MODULE_TYPE = "module"
UNKNOWN_TYPE = "unknown"


class Action(str, Enum):
    """Kind of change Terraform plans for a resource."""

    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


def _as_action(value: Action | str) -> Action | None:
    try:
        return Action(value)
    except ValueError:
        return None


def _is_module_resource(resource: str) -> bool:
    return resource.startswith("module.")


def extract_resource_type(resource: str) -> str:
    """Return the resource type of a Terraform address such as ``aws_s3_bucket.name``."""
    if _is_module_resource(resource):
        return MODULE_TYPE
    parts = resource.split(".")
    if len(parts) >= 2:
        return parts[0]
    return UNKNOWN_TYPE


@dataclass
class ResourceCollection:
    """Resource addresses grouped by action, plus the plan's summary counts."""

    resources: dict[Action, set[str]] = field(
        default_factory=lambda: {action: set() for action in Action}
    )
    found_summary: bool = False
    summary_adds: int = 0
    summary_changes: int = 0
    summary_destroys: int = 0
    has_detailed_resources: bool = False

    def add_resource(self, action: Action | str, resource: str) -> None:
        """Record ``resource`` under ``action``; duplicates are ignored."""
        self.resources.setdefault(Action(action), set()).add(resource)
        self.has_detailed_resources = True

    def _members(self, action: Action | str) -> set[str]:
        key = _as_action(action)
        if key is None:
            return set()
        return self.resources.get(key, set())

    def get_resources_for_action(self, action: Action | str) -> list[str]:
        """Return the resources for ``action``, sorted."""
        return sorted(self._members(action))

    def count_resources_for_action(self, action: Action | str) -> int:
        """Return how many resources are recorded for ``action``."""
        return len(self._members(action))

    def _summary_total(self) -> int:
        return self.summary_adds + self.summary_changes + self.summary_destroys

    def total_changes(self) -> int:
        """Return the total change count, preferring the plan's summary."""
        if self.has_detailed_resources and not self.found_summary:
            return sum(self.count_resources_for_action(action) for action in Action)
        return self._summary_total()

    def resources_by_type(self, action: Action | str) -> dict[str, list[str]]:
        """Group the resources for ``action`` by type; module resources share one group."""
        grouped: dict[str, list[str]] = {}
        for resource in self._members(action):
            grouped.setdefault(extract_resource_type(resource), []).append(resource)
        return {kind: sorted(grouped[kind]) for kind in sorted(grouped)}