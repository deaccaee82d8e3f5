"""
clacks.demo.main

Purpose:
    FastAPI demo service wrapped by ClacksMiddleware.
    Every route (and 404s/validation errors) answers with X-Clacks-Overhead.

Run:
    uvicorn clacks.demo.main:app

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from clacks.middleware.clacks import ClacksMiddleware
from clacks.demo.settings import get_settings
from clacks.demo.routes.greetings import router as greetings_router
from clacks.demo.routes.health import router as health_router
from clacks.demo.routes.v1 import v1_router

from clacks.demo.logging.logging_config import configure_logging
from clacks.demo.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    app.add_middleware(ClacksMiddleware)

    register_error_handlers(app)

    app.include_router(greetings_router)
    app.include_router(health_router)
    app.include_router(v1_router)

    logger.info("created %s %s", settings.service_name, settings.service_version)
    return app


app = create_app()
