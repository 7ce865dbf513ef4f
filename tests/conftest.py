from __future__ import annotations

from pathlib import Path

import pytest

from mxlab.config.settings_manager import SettingsManager
from mxlab.navigation import NavigationConfig, build_navigation_config
from mxlab.services.navigation_service import NavigationService


@pytest.fixture
def config() -> NavigationConfig:
    return build_navigation_config()


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings" / "mxlab.json"


@pytest.fixture
def settings(tmp_path: Path, settings_path: Path) -> SettingsManager:
    manager = SettingsManager(settings_path)
    manager.save(
        {
            "storage": {"navigation_dir": str(tmp_path / "navigation")},
            "logging": {"file": str(tmp_path / "logs" / "mxlab.log")},
        }
    )
    return manager


@pytest.fixture
def navigation_service(settings: SettingsManager) -> NavigationService:
    return NavigationService(settings)
