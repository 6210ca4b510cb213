# vend_backend/app/config/paths.py
from __future__ import annotations

"""
Central path resolution for the fleet backend.

Env overrides:
    VEND_FLEET_DATA_DIR

Defaults:
    <repo_root>/vend_backend/app/fleet

Exports:
    - constants: REPO_ROOT, APP_ROOT, FLEET_DATA_DIR
    - resolvers: resolve_fleet_file()
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "vend_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()
APP_ROOT: Path = REPO_ROOT / "vend_backend" / "app"

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_fleet = APP_ROOT / "fleet"

FLEET_DATA_DIR: Path = (_env_path("VEND_FLEET_DATA_DIR") or _default_fleet).resolve()

# ── Resolvers
def resolve_fleet_file(name: str) -> Path:
    """Return absolute path under the fleet data dir for a given filename."""
    return FLEET_DATA_DIR / name

__all__ = ["REPO_ROOT", "APP_ROOT", "FLEET_DATA_DIR", "resolve_fleet_file"]
