"""Keeps the sidebar selection in step with the displayed page."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, Union

from mxlab.navigation import NavigationConfig, SubItem
from mxlab.navigation_state import NavigationIntent, NavigationState
from mxlab.services.logging_service import logging_service

logger = logging_service.get_logger(__name__)

ChildRef = Union[str, SubItem]


class RouteExpansion(Enum):
    """How a route change treats groups that are already expanded."""

    ADDITIVE = "additive"
    EXCLUSIVE = "exclusive"


def _child_id(child: ChildRef) -> str:
    return child if isinstance(child, str) else child.id


class NavigationReconciler:
    """Applies route changes and menu clicks to a :class:`NavigationState`.

    Every transition hands the new state to ``on_state_change``, which is
    where persistence hooks in. Navigation intents are returned to the
    caller; the reconciler never talks to the router itself.
    """

    def __init__(
        self,
        config: NavigationConfig,
        state: Optional[NavigationState] = None,
        on_state_change: Optional[Callable[[NavigationState], None]] = None,
        route_expansion: RouteExpansion | str = RouteExpansion.ADDITIVE,
    ) -> None:
        self.config = config
        self._state = state or NavigationState(active_item_id=config.default_item_id)
        self._callback = on_state_change
        self.route_expansion = RouteExpansion(route_expansion)

    @property
    def state(self) -> NavigationState:
        return self._state

    def _transition(self, state: NavigationState) -> None:
        self._state = state
        if self._callback is not None:
            self._callback(state)

    def _intent(self, item_id: str) -> NavigationIntent:
        path = self.config.route_for(item_id)
        if path is None:
            logger.debug("No route for %s, using %s", item_id, self.config.default_item_id)
            path = self.config.route_for(self.config.default_item_id) or "/"
        return NavigationIntent(item_id=item_id, path=path)

    def on_route_changed(self, path: str) -> None:
        item_id = self.config.resolve_path(path)
        if item_id is None:
            logger.debug("Unknown path %s, falling back to %s", path, self.config.default_item_id)
            item_id = self.config.default_item_id
        expanded: Iterable[str] = self._state.expanded_group_ids
        parent = self.config.parent_of(item_id)
        if parent is not None:
            if self.route_expansion is RouteExpansion.EXCLUSIVE:
                expanded = {parent}
            else:
                expanded = set(expanded) | {parent}
        logger.debug("Route %s -> active=%s parent=%s", path, item_id, parent)
        self._transition(NavigationState(item_id, frozenset(expanded)))

    def on_menu_item_clicked(
        self,
        item_id: str,
        has_children: bool,
        children: Sequence[ChildRef] = (),
    ) -> Optional[NavigationIntent]:
        if has_children and children:
            if self._state.is_expanded(item_id):
                logger.debug("Collapsing group %s", item_id)
                self._transition(
                    self._state.with_expanded(self._state.expanded_group_ids - {item_id})
                )
                return None
            first_child = _child_id(children[0])
            logger.debug("Expanding group %s, activating %s", item_id, first_child)
            self._transition(NavigationState(first_child, frozenset({item_id})))
            return self._intent(first_child)

        logger.debug("Activating leaf %s", item_id)
        self._transition(NavigationState(item_id, frozenset()))
        return self._intent(item_id)

    def on_sub_item_clicked(self, sub_item_id: str) -> NavigationIntent:
        expanded = set(self._state.expanded_group_ids)
        parent = self.config.parent_of(sub_item_id)
        if parent is not None:
            expanded.add(parent)
        logger.debug("Activating sub-item %s under %s", sub_item_id, parent)
        self._transition(NavigationState(sub_item_id, frozenset(expanded)))
        return self._intent(sub_item_id)
