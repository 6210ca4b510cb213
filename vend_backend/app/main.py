# main.py — backend entrypoint
from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vend_backend.app.config import (
    APP_ENV,
    CORS_ORIGINS,
    SEED_RANDOM_SEED,
    SEED_SAMPLE_DATA,
)
from vend_backend.app.observability.logging_setup import configure_logging
from vend_backend.app.routers import analytics, brews, dash, machines, user_settings
from vend_backend.app.services.data_stores import FleetStore, seed_sample_fleet
from vend_backend.app.services.lifecycle import Scheduler, ThreadingScheduler

log = logging.getLogger("vend.api")


def create_app(
    store: Optional[FleetStore] = None,
    *,
    scheduler: Optional[Scheduler] = None,
    seed: Optional[bool] = None,
) -> FastAPI:
    """
    Composition root: builds the scheduler and store (unless given), seeds demo
    data, and mounts the routers under /api.
    """
    configure_logging()

    if store is None:
        store = FleetStore(scheduler or ThreadingScheduler())
    do_seed = SEED_SAMPLE_DATA if seed is None else seed
    if do_seed:
        seed_sample_fleet(store, rng=random.Random(SEED_RANDOM_SEED))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("fleet backend up (%s): %d machine(s)", APP_ENV, len(store.list_machines()))
        yield
        # pending brew timers are dropped with the process state
        store.scheduler.cancel_all()

    app = FastAPI(title="Vend Fleet API", lifespan=lifespan)
    app.state.store = store

    # --- CORS for Vite dev ---------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Routers under /api --------------------------------------------------
    for module in (machines, brews, analytics, user_settings, dash):
        app.include_router(module.router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def _invalid(request: Request, exc: RequestValidationError):
        # the dashboard reads any malformed body or query as "invalid data"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request data", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        log.exception("%s %s failed", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # --- Health ----------------------------------------------------------------
    @app.get("/health")
    async def health():
        return {"ok": True}

    @app.get("/api/health")
    async def api_health():
        # mirror the non-prefixed /health so the FE's /api/health succeeds
        return {"ok": True}

    return app


app = create_app()
