from datetime import datetime, timedelta, timezone

import pytest

from promo_campaigns.domain.campaigns.catalog import DEFAULT_CAMPAIGNS, CampaignCatalog, default_catalog
from promo_campaigns.domain.campaigns.errors import CatalogError
from promo_campaigns.domain.campaigns.model import (
    Always,
    BannerIcon,
    CampaignDefinition,
    CampaignDisplay,
    IndefiniteAfter,
    LimitedTime,
)

DISPLAY = CampaignDisplay(background_color="#000000", tint_color="#FFFFFF", icon=BannerIcon.DISCOUNT, text="Promo")


def make_campaign(campaign_id: str, rule, resets: bool = False) -> CampaignDefinition:
    return CampaignDefinition(
        campaign_id=campaign_id, activation_rule=rule, display=DISPLAY, resets_previous_dismissal=resets
    )


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_returns_none_before_any_campaign():
    assert default_catalog().active_definition_at(utc(2025, 1, 1)) is None


def test_returns_none_for_empty_catalog():
    assert CampaignCatalog([]).active_definition_at(utc(2025, 1, 1)) is None


@pytest.mark.parametrize(
    "now, expected_id",
    [
        (utc(2025, 11, 3, 11, 0), "bf-25-stage-1"),
        (utc(2025, 11, 10), "bf-25-stage-1"),
        (utc(2025, 11, 18, 11, 0), "bf-25-stage-2"),
        (utc(2025, 12, 3, 10, 59), "bf-25-stage-2"),
        (utc(2025, 12, 3, 11, 0), "upgrade-drive-plus"),
        (utc(2027, 6, 1), "upgrade-drive-plus"),
    ],
)
def test_default_schedule(now, expected_id):
    active = default_catalog().active_definition_at(now)
    assert active is not None
    assert active.campaign_id == expected_id


def test_first_matching_entry_wins():
    catalog = CampaignCatalog(
        [
            make_campaign("limited", LimitedTime(start=utc(2025, 1, 1), end=utc(2025, 2, 1))),
            make_campaign("fallback", Always()),
        ]
    )
    assert catalog.active_definition_at(utc(2025, 1, 15)).campaign_id == "limited"
    assert catalog.active_definition_at(utc(2025, 3, 1)).campaign_id == "fallback"


def test_always_first_shadows_later_entries():
    catalog = CampaignCatalog(
        [
            make_campaign("always", Always()),
            make_campaign("later", IndefiniteAfter(start=utc(2020, 1, 1))),
        ]
    )
    assert catalog.active_definition_at(utc(2025, 1, 1)).campaign_id == "always"


def test_overlapping_ranges_pick_declaration_order():
    catalog = CampaignCatalog(
        [
            make_campaign("indefinite", IndefiniteAfter(start=utc(2025, 1, 10))),
            make_campaign("wide", LimitedTime(start=utc(2025, 1, 1), end=utc(2025, 12, 31))),
        ]
    )
    assert catalog.active_definition_at(utc(2025, 1, 5)).campaign_id == "wide"
    assert catalog.active_definition_at(utc(2025, 1, 10)).campaign_id == "indefinite"


def test_duplicate_ids_rejected():
    with pytest.raises(CatalogError):
        CampaignCatalog([make_campaign("dup", Always()), make_campaign("dup", Always())])


def test_get_and_iteration_preserve_order():
    catalog = default_catalog()
    assert [c.campaign_id for c in catalog] == ["bf-25-stage-1", "bf-25-stage-2", "upgrade-drive-plus"]
    assert len(catalog) == 3
    assert catalog.get("bf-25-stage-2") is DEFAULT_CAMPAIGNS[1]
    assert catalog.get("missing") is None


def test_default_catalog_reset_flags_and_display():
    stage_1, stage_2, upgrade = DEFAULT_CAMPAIGNS
    assert stage_1.resets_previous_dismissal is False
    assert stage_2.resets_previous_dismissal is True
    assert upgrade.resets_previous_dismissal is False
    assert stage_2.display.text == "Black Friday: 80% off"
    assert upgrade.display.icon.image_name == "Promo/ic-drive-plus"
    assert stage_1.display.icon.image_name == "Promo/ic-promo-discount"


def test_default_stages_are_contiguous():
    stage_1, stage_2, upgrade = DEFAULT_CAMPAIGNS
    assert stage_1.activation_rule.end == stage_2.activation_rule.start
    assert stage_2.activation_rule.end == upgrade.activation_rule.start
    assert stage_1.activation_rule.end - stage_1.activation_rule.start == timedelta(days=15)
