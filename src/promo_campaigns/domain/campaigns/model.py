from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from promo_campaigns.domain.campaigns.errors import InvalidActivationRule


def _require_aware(value: datetime, field_name: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidActivationRule(f"{field_name} must be timezone-aware, got {value.isoformat()}")


@dataclass(frozen=True)
class LimitedTime:
    """Active while start <= now < end."""

    start: datetime
    end: datetime

    kind = "limited_time"

    def __post_init__(self) -> None:
        _require_aware(self.start, "start")
        _require_aware(self.end, "end")
        if self.end <= self.start:
            raise InvalidActivationRule(
                f"end ({self.end.isoformat()}) must be after start ({self.start.isoformat()})"
            )

    def is_active(self, now: datetime) -> bool:
        return self.start <= now < self.end


@dataclass(frozen=True)
class IndefiniteAfter:
    """Active from start onwards."""

    start: datetime

    kind = "indefinite_after"

    def __post_init__(self) -> None:
        _require_aware(self.start, "start")

    def is_active(self, now: datetime) -> bool:
        return self.start <= now


@dataclass(frozen=True)
class Always:
    """Always active. Handy for previews and tests."""

    kind = "always"

    def is_active(self, now: datetime) -> bool:
        return True


ActivationRule = Union[LimitedTime, IndefiniteAfter, Always]


class BannerIcon(str, Enum):
    DRIVE_PLUS = "drivePlus"
    DISCOUNT = "discount"

    @property
    def image_name(self) -> str:
        if self is BannerIcon.DRIVE_PLUS:
            return "Promo/ic-drive-plus"
        return "Promo/ic-promo-discount"


@dataclass(frozen=True)
class CampaignDisplay:
    """Opaque banner payload carried through to the UI."""

    background_color: str
    tint_color: str
    icon: BannerIcon
    text: str


@dataclass(frozen=True)
class CampaignDefinition:
    campaign_id: str
    activation_rule: ActivationRule
    display: CampaignDisplay
    resets_previous_dismissal: bool = False

    def is_active(self, now: datetime) -> bool:
        return self.activation_rule.is_active(now)


@dataclass(frozen=True)
class DismissalState:
    """Snapshot of the persisted dismissal slots. None means never written."""

    has_dismissed_banner: Optional[bool] = None
    last_seen_campaign_id: Optional[str] = None
