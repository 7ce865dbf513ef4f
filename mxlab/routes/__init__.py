"""Router registration helpers."""
from __future__ import annotations

from fastapi import APIRouter

from .navigation import router as navigation_router
from .settings import router as settings_router


def get_routers() -> list[APIRouter]:
    return [
        navigation_router,
        settings_router,
    ]
