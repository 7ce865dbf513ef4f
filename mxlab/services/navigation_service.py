"""Wires the menu configuration, persistence and reconciler together."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from mxlab.config.settings_manager import SettingsManager
from mxlab.navigation import NavigationConfig, build_navigation_config
from mxlab.navigation_state import NavigationIntent, NavigationState
from mxlab.reconciler import NavigationReconciler, RouteExpansion
from mxlab.services.logging_service import logging_service
from mxlab.services.navigation_persistence import NavigationStatePersistence
from mxlab.utils.key_value_store import JsonFileKeyValueStore, KeyValueStore

CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class NavigationService:
    """Creates reconcilers bound to a store and renders the sidebar model."""

    def __init__(
        self,
        settings: SettingsManager,
        config: Optional[NavigationConfig] = None,
    ) -> None:
        self.settings = settings
        self.config = config or build_navigation_config(settings.default_item)
        self._logger = logging_service.get_logger(__name__)

    def reload(self) -> None:
        """Rebuild the lookup tables after the settings changed."""
        self.config = build_navigation_config(self.settings.default_item)

    def reconciler_for(self, store: KeyValueStore) -> NavigationReconciler:
        persistence = NavigationStatePersistence(store, self.config.default_item_id)
        return NavigationReconciler(
            self.config,
            state=persistence.load(),
            on_state_change=persistence.save,
            route_expansion=RouteExpansion(self.settings.route_expansion),
        )

    def client_store(self, client_id: str) -> JsonFileKeyValueStore:
        if not CLIENT_ID_PATTERN.match(client_id or ""):
            raise ValueError(f"Invalid client id: {client_id!r}")
        directory: Path = self.settings.navigation_dir
        return JsonFileKeyValueStore(directory / f"{client_id}.json")

    def menu_item_click(
        self, reconciler: NavigationReconciler, item_id: str
    ) -> Optional[NavigationIntent]:
        group = self.config.group(item_id)
        if group is None:
            self._logger.info("Menu click on unknown item %s treated as leaf", item_id)
            return reconciler.on_menu_item_clicked(item_id, False, [])
        return reconciler.on_menu_item_clicked(item_id, group.has_children, group.children)

    def menu(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": group.id,
                "label": group.label,
                "icon": group.icon,
                "route": group.route,
                "children": [
                    {"id": sub.id, "label": sub.label, "route": sub.route}
                    for sub in group.sub_items
                ],
            }
            for group in self.config.menu
        ]

    def sidebar(self, state: NavigationState) -> List[Dict[str, Any]]:
        entries = self.menu()
        for entry in entries:
            children = entry["children"]
            for child in children:
                child["active"] = child["id"] == state.active_item_id
            entry["expanded"] = state.is_expanded(entry["id"])
            entry["active"] = entry["id"] == state.active_item_id or any(
                child["active"] for child in children
            )
        return entries

    @staticmethod
    def describe_state(state: NavigationState) -> Dict[str, Any]:
        return {
            "active_item": state.active_item_id,
            "expanded_groups": sorted(state.expanded_group_ids),
        }

    @staticmethod
    def describe_intent(intent: Optional[NavigationIntent]) -> Optional[Dict[str, str]]:
        if intent is None:
            return None
        return {"item_id": intent.item_id, "path": intent.path}
