from __future__ import annotations

from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = PACKAGE_DIR.parent
DATA_DIR = ROOT_DIR / "data"
SETTINGS_FILE = DATA_DIR / "settings" / "mxlab.json"
NAVIGATION_DIR = DATA_DIR / "navigation"
LOG_DIR = DATA_DIR / "logs"
TEMPLATE_DIR = ROOT_DIR / "frontend" / "templates"
COMPONENT_DIR = ROOT_DIR / "frontend" / "components"
