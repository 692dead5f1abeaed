"""Pydantic models for campaign API responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ActivationRuleModel(BaseModel):
    kind: str = Field(..., description="limited_time | indefinite_after | always")
    start: datetime | None = None
    end: datetime | None = None


class CampaignDisplayModel(BaseModel):
    background_color: str
    tint_color: str
    icon: str
    image_name: str
    text: str


class CampaignModel(BaseModel):
    campaign_id: str
    activation_rule: ActivationRuleModel
    resets_previous_dismissal: bool
    display: CampaignDisplayModel


class CatalogEntryModel(CampaignModel):
    is_active: bool


class CatalogResponse(BaseModel):
    as_of: datetime
    items: list[CatalogEntryModel]


class DismissalStateModel(BaseModel):
    has_dismissed_banner: bool | None = None
    last_seen_campaign_id: str | None = None


class DecisionResponse(BaseModel):
    """Current banner decision. ``campaign`` is null when nothing should be shown."""

    as_of: datetime
    campaign: CampaignModel | None = None
    dismissal: DismissalStateModel
