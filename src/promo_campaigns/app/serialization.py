from __future__ import annotations

from typing import Any, Optional

from promo_campaigns.domain.campaigns.model import (
    ActivationRule,
    CampaignDefinition,
    DismissalState,
    IndefiniteAfter,
    LimitedTime,
)


def activation_rule_to_dict(rule: ActivationRule) -> dict[str, Any]:
    start = rule.start.isoformat() if isinstance(rule, (LimitedTime, IndefiniteAfter)) else None
    end = rule.end.isoformat() if isinstance(rule, LimitedTime) else None
    return {"kind": rule.kind, "start": start, "end": end}


def campaign_to_dict(campaign: Optional[CampaignDefinition]) -> Optional[dict[str, Any]]:
    if campaign is None:
        return None
    return {
        "campaign_id": campaign.campaign_id,
        "activation_rule": activation_rule_to_dict(campaign.activation_rule),
        "resets_previous_dismissal": campaign.resets_previous_dismissal,
        "display": {
            "background_color": campaign.display.background_color,
            "tint_color": campaign.display.tint_color,
            "icon": campaign.display.icon.value,
            "image_name": campaign.display.icon.image_name,
            "text": campaign.display.text,
        },
    }


def dismissal_state_to_dict(state: DismissalState) -> dict[str, Any]:
    return {
        "has_dismissed_banner": state.has_dismissed_banner,
        "last_seen_campaign_id": state.last_seen_campaign_id,
    }
