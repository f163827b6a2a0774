"""Application factory for the HR candidate server.

This module exposes `create_app(config: Config) -> FastAPI` which performs
all setup (logging, settings, storage selection, store composition and
router registration). Avoids performing side-effects at import time so
tests can construct isolated apps.

To create an app for production or local runs:

    from hr_lib.main import create_app, Config
    app = create_app(Config())
"""
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from hr_lib.bootstrap import bootstrap_server, load_initial_candidates
from hr_lib.candidates import CandidateStore
from hr_lib.config.config import Settings, load_settings
from hr_lib.logging_config import configure_logging
from hr_lib.services import ServiceContainer
from hr_lib.storage import create_storage


@dataclass
class Config:
    config_path: Optional[Path] = None
    # Overrides the backend chosen from settings ('memory' for dev runs)
    storage_backend: Optional[str] = None
    # Pre-built settings; skips reading the YAML file and environment
    settings: Optional[Settings] = None
    # Seconds to wait for in-flight write-backs at shutdown
    shutdown_flush_timeout: float = 10.0


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    if config.settings is not None:
        settings = config.settings
        logger = configure_logging(config.config_path, level=settings.log_level)
    else:
        logger = configure_logging(config.config_path)
        cfg_path = bootstrap_server(logger, config.config_path)
        settings = load_settings(cfg_path)
    if config.storage_backend is not None:
        settings = replace(settings, storage_backend=config.storage_backend)

    # Backend is selected once; there is no switching at runtime.
    storage = create_storage(settings)
    initial = load_initial_candidates(storage, logger)
    store = CandidateStore(storage=storage, candidates=initial)
    storage.start(store)
    if not storage.enabled:
        logger.warning("Persistence is not durable (%s); candidates are kept in memory only", storage.name)

    container = ServiceContainer()
    container.register_singleton("settings", settings)
    container.register_singleton("candidate_storage", storage)
    container.register_singleton("candidate_store", store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if not store.flush(config.shutdown_flush_timeout):
            logger.warning("Shutdown with candidate write-backs still in progress")

    app = FastAPI(title="HR Candidate Server", lifespan=lifespan)
    # Expose only the explicit service container on app.state.
    app.state.container = container

    # Router registration: import routers here to avoid import-time side-effects
    from hr_lib.server.api import router as server_router
    from hr_lib.candidates.api import router as candidates_router

    app.include_router(server_router, prefix='')
    app.include_router(candidates_router, prefix='/api')

    return app
