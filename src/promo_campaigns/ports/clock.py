from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def get_date(self) -> datetime: ...
