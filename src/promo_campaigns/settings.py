from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # "file" persists across restarts; "memory" is process-local
    storage_backend: str = "file"
    state_dir: str = "/tmp/promo-campaigns-state"
    storage_group: str = "group.promo-campaigns"
    # ISO-8601 timestamp pinning the clock, useful for previewing a schedule
    fixed_now: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            storage_backend=os.getenv("PROMO_STORAGE_BACKEND", cls.storage_backend).lower(),
            state_dir=os.getenv("PROMO_STATE_DIR", cls.state_dir),
            storage_group=os.getenv("PROMO_STORAGE_GROUP", cls.storage_group),
            fixed_now=os.getenv("PROMO_FIXED_NOW") or None,
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
