from __future__ import annotations

from datetime import datetime, timedelta

from promo_campaigns.ports.clock import Clock


class FixedClock(Clock):
    """Clock pinned to a given instant. Can be moved with set() or advance()."""

    def __init__(self, now: datetime) -> None:
        self._now = self._validated(now)

    @staticmethod
    def _validated(now: datetime) -> datetime:
        if now.tzinfo is None or now.utcoffset() is None:
            raise ValueError(f"FixedClock requires a timezone-aware datetime, got {now.isoformat()}")
        return now

    def get_date(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = self._validated(now)

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta
