from __future__ import annotations

import logging
from typing import Optional

from promo_campaigns.application.observable import CurrentValueSubject, ObservableValue
from promo_campaigns.domain.campaigns.catalog import CampaignCatalog, default_catalog
from promo_campaigns.domain.campaigns.model import CampaignDefinition, DismissalState
from promo_campaigns.domain.campaigns.rules import should_reset_dismissal
from promo_campaigns.ports.clock import Clock
from promo_campaigns.ports.dismissal_store import DismissalStore

logger = logging.getLogger(__name__)

Decision = Optional[CampaignDefinition]


class CampaignDecisionEngine:
    """
    Decides which campaign banner, if any, should be shown right now.

    One instance is meant to be built at start-up and handed to every consumer.
    Calls are synchronous; callers sharing an instance across threads must
    serialize refresh() and dismiss() themselves.
    """

    def __init__(
        self,
        clock: Clock,
        store: DismissalStore,
        catalog: Optional[CampaignCatalog] = None,
    ) -> None:
        self.clock = clock
        self.store = store
        self.catalog = catalog if catalog is not None else default_catalog()
        self._current = CurrentValueSubject[Decision](None)
        self.refresh()

    @property
    def active_campaign(self) -> ObservableValue[Decision]:
        return self._current.as_observable()

    @property
    def dismissal_state(self) -> DismissalState:
        return DismissalState(
            has_dismissed_banner=self.store.get_has_dismissed_banner(),
            last_seen_campaign_id=self.store.get_last_seen_campaign_id(),
        )

    def refresh(self, force_reset_dismissal: bool = False) -> None:
        candidate = self.catalog.active_definition_at(self.clock.get_date())

        if force_reset_dismissal or should_reset_dismissal(candidate, self.dismissal_state):
            logger.info(
                f"Resetting banner dismissal (forced={force_reset_dismissal}, "
                f"campaign={candidate.campaign_id if candidate else None})"
            )
            self.store.set_has_dismissed_banner(False)

        # While dismissed, last_seen_campaign_id is not updated.
        if self.store.get_has_dismissed_banner() is True:
            self._publish(None)
            return

        self.store.set_last_seen_campaign_id(candidate.campaign_id if candidate else None)
        self._publish(candidate)

    def dismiss(self) -> None:
        logger.info(f"Banner dismissed (last_seen={self.store.get_last_seen_campaign_id()})")
        self.store.set_has_dismissed_banner(True)
        self._publish(None)

    def _publish(self, decision: Decision) -> None:
        logger.debug(f"Publishing decision: {decision.campaign_id if decision else None}")
        self._current.send(decision)
