from __future__ import annotations

from typing import Any, Dict, Optional

from promo_campaigns.ports.dismissal_store import (
    HAS_DISMISSED_BANNER_KEY,
    LAST_SEEN_CAMPAIGN_ID_KEY,
    DismissalStore,
)


class InMemoryDismissalStore(DismissalStore):
    """Process-local store. Stores built over the same ``groups`` dict share state per group."""

    def __init__(self, storage_group: str = "default", groups: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self.storage_group = storage_group
        self._groups = groups if groups is not None else {}
        self._slots = self._groups.setdefault(storage_group, {})

    def _set(self, key: str, value: Any) -> None:
        if value is None:
            self._slots.pop(key, None)
        else:
            self._slots[key] = value

    def get_has_dismissed_banner(self) -> Optional[bool]:
        return self._slots.get(HAS_DISMISSED_BANNER_KEY)

    def set_has_dismissed_banner(self, value: Optional[bool]) -> None:
        self._set(HAS_DISMISSED_BANNER_KEY, value)

    def get_last_seen_campaign_id(self) -> Optional[str]:
        return self._slots.get(LAST_SEEN_CAMPAIGN_ID_KEY)

    def set_last_seen_campaign_id(self, value: Optional[str]) -> None:
        self._set(LAST_SEEN_CAMPAIGN_ID_KEY, value)
