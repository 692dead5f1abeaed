from __future__ import annotations

from datetime import datetime, timezone

from promo_campaigns.ports.clock import Clock


class SystemClock(Clock):
    def get_date(self) -> datetime:
        return datetime.now(timezone.utc)
