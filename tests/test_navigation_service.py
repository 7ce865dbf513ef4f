from __future__ import annotations

import pytest

from mxlab.navigation_state import NavigationState
from mxlab.reconciler import RouteExpansion
from mxlab.utils.key_value_store import MappingKeyValueStore


def test_reconciler_state_survives_new_instances(navigation_service):
    backing = {}
    first = navigation_service.reconciler_for(MappingKeyValueStore(backing))
    first.on_route_changed("/equipmentsView")

    second = navigation_service.reconciler_for(MappingKeyValueStore(backing))
    assert second.state == NavigationState("equipment-list", frozenset({"equipment"}))


def test_route_policy_follows_settings(navigation_service, settings):
    settings.save({"navigation": {"route_expansion": "exclusive"}})
    reconciler = navigation_service.reconciler_for(MappingKeyValueStore())
    assert reconciler.route_expansion is RouteExpansion.EXCLUSIVE


def test_reload_picks_up_new_default(navigation_service, settings):
    settings.save({"navigation": {"default_item": "settings"}})
    navigation_service.reload()
    reconciler = navigation_service.reconciler_for(MappingKeyValueStore())
    assert reconciler.state.active_item_id == "settings"


def test_client_store_lives_in_navigation_dir(navigation_service, settings):
    store = navigation_service.client_store("browser-1")
    assert store.path == settings.navigation_dir / "browser-1.json"


@pytest.mark.parametrize("client_id", ["", "../etc", "a/b", "x" * 65])
def test_client_store_rejects_unsafe_ids(navigation_service, client_id):
    with pytest.raises(ValueError):
        navigation_service.client_store(client_id)


def test_menu_item_click_uses_menu_definition(navigation_service):
    reconciler = navigation_service.reconciler_for(MappingKeyValueStore())
    intent = navigation_service.menu_item_click(reconciler, "maintenance")
    assert intent.path == "/historiques"
    assert reconciler.state.expanded_group_ids == {"maintenance"}


def test_menu_item_click_on_unknown_item_is_a_leaf(navigation_service):
    reconciler = navigation_service.reconciler_for(MappingKeyValueStore())
    intent = navigation_service.menu_item_click(reconciler, "reports")
    assert intent.path == "/dashboard"
    assert reconciler.state == NavigationState("reports", frozenset())


def test_sidebar_marks_active_group_and_child(navigation_service):
    state = NavigationState("create-order", frozenset({"orders"}))
    sidebar = {entry["id"]: entry for entry in navigation_service.sidebar(state)}
    orders = sidebar["orders"]
    assert orders["active"] and orders["expanded"]
    assert [child["active"] for child in orders["children"]] == [False, True, False]
    assert not sidebar["dashboard"]["active"]
    assert not sidebar["users"]["expanded"]


def test_describe_helpers(navigation_service):
    state = NavigationState("iot", frozenset({"users", "equipment"}))
    assert navigation_service.describe_state(state) == {
        "active_item": "iot",
        "expanded_groups": ["equipment", "users"],
    }
    assert navigation_service.describe_intent(None) is None
