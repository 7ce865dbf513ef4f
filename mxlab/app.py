from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mxlab.config.settings_manager import SettingsManager
from mxlab.routes import get_routers
from mxlab.services.logging_service import logging_service
from mxlab.services.navigation_service import NavigationService


def create_app(settings_manager: Optional[SettingsManager] = None) -> FastAPI:
    settings = settings_manager or SettingsManager()
    settings.load()
    navigation_service = NavigationService(settings)

    app = FastAPI(title="MX Lab Navigation Backend")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.navigation_service = navigation_service

    @app.on_event("startup")
    async def startup_event() -> None:
        logging_service.configure_from_settings(settings.get())
        settings.navigation_dir.mkdir(parents=True, exist_ok=True)
        logger = logging_service.get_logger(__name__)
        logger.info(
            "Navigation backend ready (default item %s, route expansion %s)",
            settings.default_item,
            settings.route_expansion,
        )

    for router in get_routers():
        app.include_router(router)

    return app


app = create_app()
