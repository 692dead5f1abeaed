from __future__ import annotations

from typing import Optional

from promo_campaigns.domain.campaigns.model import CampaignDefinition, DismissalState


def should_reset_dismissal(candidate: Optional[CampaignDefinition], state: DismissalState) -> bool:
    """
    Decide whether a standing dismissal should be forgotten for ``candidate``.

    Only a campaign that opts in via ``resets_previous_dismissal`` and differs
    from the last campaign the user saw can bring the banner back. Absent
    persisted values never trigger a reset.
    """
    if candidate is None or state.last_seen_campaign_id is None:
        return False
    if state.has_dismissed_banner is not True:
        return False
    return candidate.resets_previous_dismissal and candidate.campaign_id != state.last_seen_campaign_id
