from __future__ import annotations

from pathlib import Path

from setuptools import find_namespace_packages

ROOT = Path(__file__).resolve().parent.parent


def test_pyproject_discovers_namespace_subpackages():
    assert "namespaces = true" in (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    packages = set(find_namespace_packages(where=str(ROOT), include=["mxlab*"]))
    assert {"mxlab", "mxlab.config", "mxlab.routes", "mxlab.services", "mxlab.utils"} <= packages
