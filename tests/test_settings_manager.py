from __future__ import annotations

import json

import pytest

from mxlab.config.settings_manager import DEFAULT_SETTINGS, SettingsManager


def test_missing_file_uses_defaults(tmp_path):
    manager = SettingsManager(tmp_path / "missing.json")
    assert manager.load() == DEFAULT_SETTINGS
    assert manager.route_expansion == "additive"
    assert manager.default_item == "dashboard"


def test_partial_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"navigation": {"route_expansion": "exclusive"}}), encoding="utf-8")
    manager = SettingsManager(path)
    manager.load()
    assert manager.route_expansion == "exclusive"
    assert manager.default_item == "dashboard"


@pytest.mark.parametrize("content", ["{oops", "[]", json.dumps({"navigation": {"route_expansion": "x"}})])
def test_unusable_file_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    manager = SettingsManager(path)
    assert manager.load() == DEFAULT_SETTINGS


def test_save_persists_and_validates(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager(path)
    manager.save({"navigation": {"default_item": "settings"}})
    assert json.loads(path.read_text(encoding="utf-8"))["navigation"]["default_item"] == "settings"
    with pytest.raises(ValueError):
        manager.save({"navigation": {"route_expansion": "random"}})
    assert manager.default_item == "settings"


def test_save_rejects_empty_default_item(tmp_path):
    with pytest.raises(ValueError):
        SettingsManager(tmp_path / "s.json").save({"navigation": {"default_item": ""}})


def test_default_item_outside_menu_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"navigation": {"default_item": "nowhere"}}), encoding="utf-8")
    manager = SettingsManager(path)
    assert manager.load() == DEFAULT_SETTINGS
    assert manager.default_item == "dashboard"


def test_save_rejects_default_item_outside_menu(tmp_path):
    manager = SettingsManager(tmp_path / "settings.json")
    with pytest.raises(ValueError):
        manager.save({"navigation": {"default_item": "nowhere"}})
    assert not (tmp_path / "settings.json").exists()
