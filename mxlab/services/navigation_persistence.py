"""Persist the sidebar selection in a string key-value store."""
from __future__ import annotations

import json
from typing import Dict

from mxlab.navigation_state import NavigationState
from mxlab.services.logging_service import logging_service
from mxlab.utils.key_value_store import KeyValueStore

ACTIVE_ITEM_KEY = "sidebar-active-item"
EXPANDED_ITEMS_KEY = "sidebar-expanded-items"


class NavigationStatePersistence:
    """Reads and writes :class:`NavigationState` under two fixed keys.

    ``sidebar-active-item`` holds the plain item id and
    ``sidebar-expanded-items`` a JSON object mapping group ids to booleans.
    Saving is fire-and-forget: store failures are logged, never raised.
    """

    def __init__(self, store: KeyValueStore, default_item_id: str) -> None:
        self.store = store
        self.default_item_id = default_item_id
        self._logger = logging_service.get_logger(__name__)

    def load(self) -> NavigationState:
        active = self.store.get(ACTIVE_ITEM_KEY) or self.default_item_id
        return NavigationState(active, frozenset(self._load_expanded()))

    def _load_expanded(self) -> list[str]:
        raw = self.store.get(EXPANDED_ITEMS_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            self._logger.warning("Discarding malformed %s value", EXPANDED_ITEMS_KEY)
            return []
        if not isinstance(data, dict):
            return []
        return [group_id for group_id, expanded in data.items() if expanded is True]

    def save(self, state: NavigationState) -> None:
        expanded: Dict[str, bool] = {group_id: True for group_id in sorted(state.expanded_group_ids)}
        try:
            self.store.set(ACTIVE_ITEM_KEY, state.active_item_id)
            self.store.set(EXPANDED_ITEMS_KEY, json.dumps(expanded))
        except OSError as exc:
            self._logger.warning("Could not persist navigation state: %s", exc)
