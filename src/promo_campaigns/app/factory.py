from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from promo_campaigns.adapters.clock.fixed_clock import FixedClock
from promo_campaigns.adapters.clock.system_clock import SystemClock
from promo_campaigns.adapters.storage.in_memory_dismissal_store import InMemoryDismissalStore
from promo_campaigns.adapters.storage.json_file_dismissal_store import JsonFileDismissalStore
from promo_campaigns.application.engine import CampaignDecisionEngine
from promo_campaigns.domain.campaigns.catalog import CampaignCatalog
from promo_campaigns.ports.clock import Clock
from promo_campaigns.ports.dismissal_store import DismissalStore
from promo_campaigns.settings import Settings, get_settings


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp. Accepts a trailing Z; naive values are taken as UTC."""
    if value is None:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def create_adapters(
    settings: Optional[Settings] = None,
    as_of: Optional[datetime] = None,
) -> tuple[Clock, DismissalStore]:
    """
    Build the clock and dismissal store from settings.

    PROMO_STORAGE_BACKEND=file persists to JSON under PROMO_STATE_DIR, the default
    "memory" keeps state in process. ``as_of`` (or PROMO_FIXED_NOW) pins the clock.
    """
    settings = settings or get_settings()

    fixed_now = as_of or parse_datetime(settings.fixed_now)
    clock: Clock = FixedClock(fixed_now) if fixed_now else SystemClock()

    if settings.storage_backend == "file":
        store: DismissalStore = JsonFileDismissalStore(
            state_dir=settings.state_dir, storage_group=settings.storage_group
        )
    elif settings.storage_backend == "memory":
        store = InMemoryDismissalStore(storage_group=settings.storage_group)
    else:
        raise ValueError(
            f"Unknown PROMO_STORAGE_BACKEND {settings.storage_backend!r}, expected 'memory' or 'file'"
        )

    return clock, store


def create_engine(
    settings: Optional[Settings] = None,
    as_of: Optional[datetime] = None,
    catalog: Optional[CampaignCatalog] = None,
) -> CampaignDecisionEngine:
    clock, store = create_adapters(settings=settings, as_of=as_of)
    return CampaignDecisionEngine(clock=clock, store=store, catalog=catalog)
