"""Value types describing the sidebar selection."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class NavigationState:
    active_item_id: str
    expanded_group_ids: FrozenSet[str] = field(default_factory=frozenset)

    def is_expanded(self, group_id: str) -> bool:
        return group_id in self.expanded_group_ids

    def with_expanded(self, group_ids: Iterable[str]) -> "NavigationState":
        return replace(self, expanded_group_ids=frozenset(group_ids))


@dataclass(frozen=True)
class NavigationIntent:
    """Request for the router to display ``path``."""

    item_id: str
    path: str
