"""Manage persistent configuration for the navigation service."""
from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

from mxlab.navigation import build_navigation_config
from mxlab.services.logging_service import logging_service
from mxlab.utils.json_store import load_json, save_json
from mxlab.utils.paths import LOG_DIR, NAVIGATION_DIR, SETTINGS_FILE

ROUTE_EXPANSION_POLICIES = ("additive", "exclusive")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "navigation": {
        "default_item": "dashboard",
        "route_expansion": "additive",
    },
    "storage": {
        "navigation_dir": str(NAVIGATION_DIR),
    },
    "logging": {
        "level": "INFO",
        "file": str(LOG_DIR / "mxlab.log"),
    },
    "flask": {
        "secret_key": "mxlab-development-key",
    },
}


class SettingsManager:
    """Load and save the settings file, merged over the defaults."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else SETTINGS_FILE
        self._settings: Dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
        self._logger = logging_service.get_logger(__name__)

    def load(self) -> Dict[str, Any]:
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            self._logger.warning("Ignoring settings file %s: not a JSON object", self.path)
            raw = {}
        merged = self._merge_with_defaults(raw)
        try:
            self._validate(merged)
        except ValueError as exc:
            self._logger.warning("Invalid settings in %s (%s), using defaults", self.path, exc)
            merged = deepcopy(DEFAULT_SETTINGS)
        self._settings = merged
        return self._settings

    def save(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``payload`` over the current settings and write the result."""
        merged = self._deep_update(deepcopy(self._settings), payload)
        self._validate(merged)
        save_json(self.path, merged)
        self._settings = merged
        self._logger.info("Settings saved to %s", self.path)
        return self._settings

    def get(self) -> Dict[str, Any]:
        return self._settings

    @property
    def default_item(self) -> str:
        return self._settings["navigation"]["default_item"]

    @property
    def route_expansion(self) -> str:
        return self._settings["navigation"]["route_expansion"]

    @property
    def navigation_dir(self) -> Path:
        return Path(self._settings["storage"]["navigation_dir"])

    @property
    def secret_key(self) -> str:
        return self._settings["flask"]["secret_key"]

    def _merge_with_defaults(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        merged = deepcopy(DEFAULT_SETTINGS)
        self._deep_update(merged, settings)
        return merged

    def _deep_update(self, target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in updates.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                self._deep_update(target[key], value)
            else:
                target[key] = value
        return target

    @staticmethod
    def _validate(settings: Dict[str, Any]) -> None:
        navigation = settings.get("navigation")
        if not isinstance(navigation, dict):
            raise ValueError("navigation settings must be an object")
        policy = navigation.get("route_expansion")
        if policy not in ROUTE_EXPANSION_POLICIES:
            raise ValueError(
                f"route_expansion must be one of {', '.join(ROUTE_EXPANSION_POLICIES)}"
            )
        default_item = navigation.get("default_item")
        if not isinstance(default_item, str) or not default_item:
            raise ValueError("default_item must be a non-empty string")
        build_navigation_config(default_item)
