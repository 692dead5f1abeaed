"""Integration tests for the campaign API, run against an in-memory engine."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from promo_campaigns.adapters.clock.fixed_clock import FixedClock
from promo_campaigns.adapters.storage.in_memory_dismissal_store import InMemoryDismissalStore
from promo_campaigns.app.main import create_app
from promo_campaigns.application.engine import CampaignDecisionEngine

STAGE_1 = datetime(2025, 11, 10, tzinfo=timezone.utc)
STAGE_2 = datetime(2025, 11, 20, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return FixedClock(STAGE_1)


@pytest.fixture
def client(clock):
    engine = CampaignDecisionEngine(clock=clock, store=InMemoryDismissalStore())
    return TestClient(create_app(engine))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_active_campaign(client):
    response = client.get("/v1/campaigns/active")
    assert response.status_code == 200
    body = response.json()
    assert body["campaign"]["campaign_id"] == "bf-25-stage-1"
    assert body["campaign"]["display"]["text"] == "Black Friday: 50% off"
    assert body["dismissal"] == {"has_dismissed_banner": None, "last_seen_campaign_id": "bf-25-stage-1"}


def test_dismiss_then_refresh_same_campaign(client):
    response = client.post("/v1/campaigns/dismiss")
    assert response.status_code == 200
    assert response.json()["campaign"] is None

    response = client.post("/v1/campaigns/refresh")
    assert response.json()["campaign"] is None
    assert response.json()["dismissal"]["has_dismissed_banner"] is True


def test_refresh_into_flagged_stage_resets_dismissal(client, clock):
    client.post("/v1/campaigns/dismiss")
    clock.set(STAGE_2)
    body = client.post("/v1/campaigns/refresh").json()
    assert body["campaign"]["campaign_id"] == "bf-25-stage-2"
    assert body["dismissal"] == {"has_dismissed_banner": False, "last_seen_campaign_id": "bf-25-stage-2"}


def test_force_reset_query_param(client):
    client.post("/v1/campaigns/dismiss")
    body = client.post("/v1/campaigns/refresh", params={"force_reset_dismissal": "true"}).json()
    assert body["campaign"]["campaign_id"] == "bf-25-stage-1"


def test_active_does_not_recompute(client, clock):
    clock.set(STAGE_2)
    body = client.get("/v1/campaigns/active").json()
    assert body["campaign"]["campaign_id"] == "bf-25-stage-1"


def test_list_campaigns_flags_active_entry(client):
    body = client.get("/v1/campaigns").json()
    assert [item["campaign_id"] for item in body["items"]] == [
        "bf-25-stage-1",
        "bf-25-stage-2",
        "upgrade-drive-plus",
    ]
    assert [item["is_active"] for item in body["items"]] == [True, False, False]


def test_corrupt_state_file_maps_to_500(tmp_path, clock):
    from promo_campaigns.adapters.storage.json_file_dismissal_store import JsonFileDismissalStore

    store = JsonFileDismissalStore(state_dir=str(tmp_path), storage_group="g")
    client = TestClient(create_app(CampaignDecisionEngine(clock=clock, store=store)))
    store.path.write_text("[", encoding="utf-8")

    response = client.post("/v1/campaigns/dismiss")
    assert response.status_code == 500
    assert "Error dismissing campaign" in response.json()["detail"]


def test_undecodable_state_file_maps_to_500(tmp_path, clock):
    from promo_campaigns.adapters.storage.json_file_dismissal_store import JsonFileDismissalStore

    store = JsonFileDismissalStore(state_dir=str(tmp_path), storage_group="g")
    client = TestClient(create_app(CampaignDecisionEngine(clock=clock, store=store)))
    store.path.write_bytes(b'{"lastSeenCampaignId": "\xff"}')

    response = client.post("/v1/campaigns/dismiss")
    assert response.status_code == 500
    assert "Error dismissing campaign" in response.json()["detail"]


def test_app_is_only_built_on_demand(monkeypatch, clock):
    from promo_campaigns.app import main

    assert not hasattr(main, "app")

    engine = CampaignDecisionEngine(clock=clock, store=InMemoryDismissalStore())
    monkeypatch.setattr(main, "create_engine", lambda: engine)
    assert main.create_app().state.engine is engine
