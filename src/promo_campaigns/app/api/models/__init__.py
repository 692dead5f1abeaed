"""Pydantic models for API responses."""

from promo_campaigns.app.api.models.campaigns import (
    ActivationRuleModel,
    CampaignDisplayModel,
    CampaignModel,
    CatalogEntryModel,
    CatalogResponse,
    DecisionResponse,
    DismissalStateModel,
)

__all__ = [
    "ActivationRuleModel",
    "CampaignDisplayModel",
    "CampaignModel",
    "CatalogEntryModel",
    "CatalogResponse",
    "DecisionResponse",
    "DismissalStateModel",
]
