"""Application wide logging helpers."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from mxlab.utils.paths import LOG_DIR

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class LoggingService:
    """Central logging configuration helper."""

    def __init__(self) -> None:
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def configure(self, level: str | int = logging.INFO, log_file: Optional[Path] = None) -> None:
        if self._configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                level = logging.INFO
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
        self._configured = True

    def configure_from_settings(self, settings: dict) -> None:
        logging_cfg = settings.get("logging", {})
        log_file = logging_cfg.get("file")
        self.configure(
            level=logging_cfg.get("level", "INFO"),
            log_file=Path(log_file) if log_file else LOG_DIR / "mxlab.log",
        )

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        return logging.getLogger(name)


logging_service = LoggingService()
