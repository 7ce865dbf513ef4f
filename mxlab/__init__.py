"""Sidebar navigation service for the MX Lab CMMS front-end."""

from .navigation import NavigationConfig, build_navigation_config
from .navigation_state import NavigationIntent, NavigationState
from .reconciler import NavigationReconciler, RouteExpansion

__all__ = [
    "NavigationConfig",
    "NavigationIntent",
    "NavigationReconciler",
    "NavigationState",
    "RouteExpansion",
    "build_navigation_config",
]
