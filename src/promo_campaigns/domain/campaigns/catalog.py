from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional

from promo_campaigns.domain.campaigns.errors import CatalogError
from promo_campaigns.domain.campaigns.model import (
    BannerIcon,
    CampaignDefinition,
    CampaignDisplay,
    IndefiniteAfter,
    LimitedTime,
)


class CampaignCatalog:
    """Ordered, immutable list of campaign definitions. First match wins."""

    def __init__(self, definitions: Iterable[CampaignDefinition]) -> None:
        self._definitions: tuple[CampaignDefinition, ...] = tuple(definitions)
        seen: set[str] = set()
        for definition in self._definitions:
            if definition.campaign_id in seen:
                raise CatalogError(f"Duplicate campaign id in catalog: {definition.campaign_id}")
            seen.add(definition.campaign_id)

    @property
    def definitions(self) -> tuple[CampaignDefinition, ...]:
        return self._definitions

    def __iter__(self) -> Iterator[CampaignDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def get(self, campaign_id: str) -> Optional[CampaignDefinition]:
        for definition in self._definitions:
            if definition.campaign_id == campaign_id:
                return definition
        return None

    def active_definition_at(self, now: datetime) -> Optional[CampaignDefinition]:
        for definition in self._definitions:
            if definition.is_active(now):
                return definition
        return None


_BLACK_FRIDAY_BACKGROUND = "#D8FF00"
_BLACK_FRIDAY_TINT = "#291C5D"

# Black Friday stage 1 -> stage 2 is a price drop, so stage 2 re-shows the
# banner for users who dismissed stage 1.
DEFAULT_CAMPAIGNS: tuple[CampaignDefinition, ...] = (
    CampaignDefinition(
        campaign_id="bf-25-stage-1",
        activation_rule=LimitedTime(
            start=datetime(2025, 11, 3, 11, 0, tzinfo=timezone.utc),  # 12:00 CET
            end=datetime(2025, 11, 18, 11, 0, tzinfo=timezone.utc),
        ),
        display=CampaignDisplay(
            background_color=_BLACK_FRIDAY_BACKGROUND,
            tint_color=_BLACK_FRIDAY_TINT,
            icon=BannerIcon.DISCOUNT,
            text="Black Friday: 50% off",
        ),
        resets_previous_dismissal=False,
    ),
    CampaignDefinition(
        campaign_id="bf-25-stage-2",
        activation_rule=LimitedTime(
            start=datetime(2025, 11, 18, 11, 0, tzinfo=timezone.utc),
            end=datetime(2025, 12, 3, 11, 0, tzinfo=timezone.utc),
        ),
        display=CampaignDisplay(
            background_color=_BLACK_FRIDAY_BACKGROUND,
            tint_color=_BLACK_FRIDAY_TINT,
            icon=BannerIcon.DISCOUNT,
            text="Black Friday: 80% off",
        ),
        resets_previous_dismissal=True,
    ),
    CampaignDefinition(
        campaign_id="upgrade-drive-plus",
        activation_rule=IndefiniteAfter(start=datetime(2025, 12, 3, 11, 0, tzinfo=timezone.utc)),
        display=CampaignDisplay(
            background_color="#6D4AFF",
            tint_color="#FFFFFF",
            icon=BannerIcon.DRIVE_PLUS,
            text="Upgrade to Drive Plus",
        ),
        resets_previous_dismissal=False,
    ),
)


def default_catalog() -> CampaignCatalog:
    return CampaignCatalog(DEFAULT_CAMPAIGNS)
