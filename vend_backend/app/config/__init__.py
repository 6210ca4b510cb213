# vend_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Env settings live in manifest.py
from .manifest import (
    APP_ENV,
    DEBUG_MODE,
    LOG_LEVEL,
    BREWING_DELAY_S,
    COMPLETION_DELAY_S,
    LOW_STOCK_THRESHOLD,
    SEED_SAMPLE_DATA,
    SEED_RANDOM_SEED,
    CORS_ORIGINS,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    APP_ROOT,
    FLEET_DATA_DIR,
    resolve_fleet_file,
)

__all__ = [
    # manifest
    "APP_ENV",
    "DEBUG_MODE",
    "LOG_LEVEL",
    "BREWING_DELAY_S",
    "COMPLETION_DELAY_S",
    "LOW_STOCK_THRESHOLD",
    "SEED_SAMPLE_DATA",
    "SEED_RANDOM_SEED",
    "CORS_ORIGINS",
    # paths
    "REPO_ROOT",
    "APP_ROOT",
    "FLEET_DATA_DIR",
    "resolve_fleet_file",
]
