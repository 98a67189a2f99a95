from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from ontax.config import Settings, get_settings
from ontax.core.federal import FEDERAL_BRACKETS_2021
from ontax.core.provinces import supported_provinces


def _open_telemetry_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    if not settings.file_logging:
        return None
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(settings.log_level_value)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logger.addHandler(handler)
    return handler


def build_application_lifespan(app_label: str) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("ontax")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        base_logger.setLevel(settings.log_level_value)
        logger = base_logger.getChild(app_label)
        telemetry_handler = _open_telemetry_sink(base_logger, settings, app_label)
        provinces = supported_provinces()

        app.state.settings = settings
        app.state.telemetry_handler = telemetry_handler
        app.state.app_label = app_label

        logger.info(
            "Startup complete: provinces=%s federal_brackets=%s default_field=%s",
            ",".join(sorted(provinces)),
            len(FEDERAL_BRACKETS_2021),
            settings.default_field.value,
        )

        try:
            yield
        finally:
            logger.info("Shutdown complete")
            if telemetry_handler is not None:
                base_logger.removeHandler(telemetry_handler)
                telemetry_handler.close()
            for attr in ("settings", "telemetry_handler", "app_label"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)

    return _lifespan
