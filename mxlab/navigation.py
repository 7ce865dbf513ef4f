"""Sidebar menu configuration for the MX Lab CMMS UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

DEFAULT_ITEM_ID = "dashboard"


@dataclass(frozen=True)
class SubItem:
    id: str
    label: str
    route: str


@dataclass(frozen=True)
class MenuGroup:
    id: str
    label: str
    icon: str
    route: Optional[str] = None
    sub_items: Tuple[SubItem, ...] = ()

    @property
    def has_children(self) -> bool:
        return bool(self.sub_items)

    @property
    def children(self) -> List[str]:
        return [sub_item.id for sub_item in self.sub_items]


def build_menu() -> List[MenuGroup]:
    """Return the ordered list of sidebar groups."""
    return [
        MenuGroup(id="dashboard", label="Tableau de bord", icon="layout-dashboard", route="/dashboard"),
        MenuGroup(
            id="orders",
            label="Ordre d'Intervention",
            icon="clipboard-list",
            sub_items=(
                SubItem(id="intervention-requests", label="Les demandes d'interventions", route="/interventionRequests"),
                SubItem(id="create-order", label="Créer order d'intervention", route="/interventionsCreate"),
                SubItem(id="orders-list", label="Liste des ordres d'interventions", route="/interventionsList"),
            ),
        ),
        MenuGroup(
            id="users",
            label="Utilisateurs",
            icon="users",
            sub_items=(
                SubItem(id="user-list", label="Liste des utilisateurs", route="/userList"),
                SubItem(id="user-create", label="Créer un utilisateur", route="/userCreate"),
            ),
        ),
        MenuGroup(
            id="surveillance",
            label="Surveillance des sites",
            icon="map",
            sub_items=(
                SubItem(id="site-view", label="Vue des sites", route="/siteView"),
                SubItem(id="site-list", label="Liste des sites", route="/sitesList"),
                SubItem(id="site-create", label="Créer un site", route="/createSite"),
            ),
        ),
        MenuGroup(
            id="equipment",
            label="Équipement",
            icon="package",
            sub_items=(
                SubItem(id="equipment-list", label="Liste des équipements", route="/equipmentsView"),
                SubItem(id="equipment-create", label="Créer un équipement", route="/create"),
                SubItem(id="equipment-iot", label="IoT", route="/iot"),
            ),
        ),
        MenuGroup(
            id="maintenance",
            label="Maintenance",
            icon="wrench",
            sub_items=(
                SubItem(id="maintenance-history", label="Historique", route="/historiques"),
                SubItem(id="maintenance-calendar", label="Calendrier", route="/calender"),
                SubItem(id="maintenance-preventive", label="Maintenance préventive", route="/previntive"),
            ),
        ),
        MenuGroup(id="visualisations", label="Visualisations", icon="bar-chart", route="/visualizations"),
        MenuGroup(id="settings", label="Paramètres", icon="settings", route="/settings"),
    ]


def build_dynamic_prefixes() -> Dict[str, str]:
    """Return mapping of parameterised route prefixes to the item they highlight."""
    return {
        "/interventionDetails/": "intervention-requests",
        "/interventionApproval/": "intervention-requests",
        "/userView/": "user-list",
        "/userCreate/": "user-list",
    }


def _normalize_path(path: str) -> str:
    path = urlsplit(path or "").path or "/"
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


@dataclass
class NavigationConfig:
    """Static lookup tables derived from the menu definition."""

    menu: List[MenuGroup]
    default_item_id: str = DEFAULT_ITEM_ID
    dynamic_prefixes: Dict[str, str] = field(default_factory=dict)
    path_to_item: Dict[str, str] = field(default_factory=dict)
    item_to_route: Dict[str, str] = field(default_factory=dict)
    item_to_parent: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for group in self.menu:
            if group.route:
                self.item_to_route.setdefault(group.id, group.route)
                self.path_to_item.setdefault(_normalize_path(group.route), group.id)
            for sub_item in group.sub_items:
                self.item_to_route.setdefault(sub_item.id, sub_item.route)
                self.path_to_item.setdefault(_normalize_path(sub_item.route), sub_item.id)
                self.item_to_parent.setdefault(sub_item.id, group.id)
        if self.default_item_id not in self.item_to_route:
            raise ValueError(f"Unknown default navigation item: {self.default_item_id}")

    def resolve_path(self, path: str) -> Optional[str]:
        normalized = _normalize_path(path)
        item_id = self.path_to_item.get(normalized)
        if item_id is not None:
            return item_id
        # Longest prefix wins so nested dynamic routes stay unambiguous.
        for prefix in sorted(self.dynamic_prefixes, key=len, reverse=True):
            if normalized.startswith(prefix) and len(normalized) > len(prefix):
                return self.dynamic_prefixes[prefix]
        return None

    def route_for(self, item_id: str) -> Optional[str]:
        return self.item_to_route.get(item_id)

    def parent_of(self, item_id: str) -> Optional[str]:
        return self.item_to_parent.get(item_id)

    def group(self, group_id: str) -> Optional[MenuGroup]:
        for group in self.menu:
            if group.id == group_id:
                return group
        return None


def build_navigation_config(default_item_id: str = DEFAULT_ITEM_ID) -> NavigationConfig:
    return NavigationConfig(
        menu=build_menu(),
        default_item_id=default_item_id,
        dynamic_prefixes=build_dynamic_prefixes(),
    )
