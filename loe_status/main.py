from __future__ import annotations

import logging

from fastapi import FastAPI

from loe_status.api.routes import router as api_router
from loe_status.config import Settings, load_settings
from loe_status.observability.metrics import Metrics


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    app = FastAPI(title="loe-power-status", version="0.1.0")
    app.state.settings = app_settings
    app.state.metrics = Metrics()

    app.include_router(api_router)
    logging.getLogger("loe.app").info(
        "Serving schedules in %s, default group %s",
        app_settings.timezone_name,
        app_settings.default_group,
    )
    return app


app = create_app()
