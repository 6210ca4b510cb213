# vend_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import List, Optional

# ---- environment mode ----
APP_ENV: str = os.getenv("APP_ENV", "development")
DEBUG_MODE: bool = os.getenv("DEBUG", "0") not in ("", "0", "false", "False")
LOG_LEVEL: str = os.getenv("VEND_LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO").upper()

# ---- brew lifecycle timing (seconds) ----
BREWING_DELAY_S: float = float(os.getenv("VEND_BREWING_DELAY_S", "1.0"))
COMPLETION_DELAY_S: float = float(os.getenv("VEND_COMPLETION_DELAY_S", "30.0"))

# ---- dashboard ----
LOW_STOCK_THRESHOLD: int = int(os.getenv("VEND_LOW_STOCK_THRESHOLD", "30"))

# ---- sample data ----
SEED_SAMPLE_DATA: bool = os.getenv("VEND_SEED_SAMPLE_DATA", "1") not in ("", "0", "false", "False")
_seed_raw = os.getenv("VEND_SEED_RANDOM_SEED", "").strip()
SEED_RANDOM_SEED: Optional[int] = int(_seed_raw) if _seed_raw else None

# ---- CORS for the Vite dev server ----
CORS_ORIGINS: List[str] = [
    o.strip()
    for o in os.getenv("VEND_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if o.strip()
]


__all__ = [
    "APP_ENV", "DEBUG_MODE", "LOG_LEVEL",
    "BREWING_DELAY_S", "COMPLETION_DELAY_S",
    "LOW_STOCK_THRESHOLD",
    "SEED_SAMPLE_DATA", "SEED_RANDOM_SEED",
    "CORS_ORIGINS",
]
