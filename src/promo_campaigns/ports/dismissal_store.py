from __future__ import annotations

from typing import Optional, Protocol

HAS_DISMISSED_BANNER_KEY = "hasDismissedBanner"
LAST_SEEN_CAMPAIGN_ID_KEY = "lastSeenCampaignId"


class DismissalStore(Protocol):
    """Synchronous key-value slots shared by every surface in a storage group."""

    def get_has_dismissed_banner(self) -> Optional[bool]: ...

    def set_has_dismissed_banner(self, value: Optional[bool]) -> None: ...

    def get_last_seen_campaign_id(self) -> Optional[str]: ...

    def set_last_seen_campaign_id(self, value: Optional[str]) -> None: ...
