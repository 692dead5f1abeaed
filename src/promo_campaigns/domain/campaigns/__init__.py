from __future__ import annotations

from promo_campaigns.domain.campaigns.catalog import DEFAULT_CAMPAIGNS, CampaignCatalog, default_catalog
from promo_campaigns.domain.campaigns.errors import CatalogError, InvalidActivationRule
from promo_campaigns.domain.campaigns.model import (
    ActivationRule,
    Always,
    BannerIcon,
    CampaignDefinition,
    CampaignDisplay,
    DismissalState,
    IndefiniteAfter,
    LimitedTime,
)
from promo_campaigns.domain.campaigns.rules import should_reset_dismissal

__all__ = [
    "ActivationRule",
    "Always",
    "BannerIcon",
    "CampaignCatalog",
    "CampaignDefinition",
    "CampaignDisplay",
    "CatalogError",
    "DEFAULT_CAMPAIGNS",
    "DismissalState",
    "IndefiniteAfter",
    "InvalidActivationRule",
    "LimitedTime",
    "default_catalog",
    "should_reset_dismissal",
]
