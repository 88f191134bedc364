"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spothunt.api.dependencies import set_hunt_manager
from spothunt.api.hunt_manager import HuntManager
from spothunt.api.routes import api_router
from spothunt.config import HuntConfig
from spothunt.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: HuntConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = HuntConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_hunt_manager(HuntManager(_config))
        logger.info("API server started — hunt ready.")
        yield
        set_hunt_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Spot Hunt",
        description=(
            "Target selection for a moving spot hunted across a grid.\n\n"
            "## API Groups\n\n"
            "- **State** — Live hunt: mover, players, goals, events\n"
            "- **Control** — Step or reset the hunt\n"
            "- **Config** — Read-only hunt configuration\n"
            "- **Pick** — Rank an arbitrary set of goal spots\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
