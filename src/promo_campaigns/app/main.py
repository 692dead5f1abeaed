from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from promo_campaigns.app.api.routers import campaigns_router
from promo_campaigns.app.factory import create_engine
from promo_campaigns.app.health import router as health_router
from promo_campaigns.application.engine import CampaignDecisionEngine
from promo_campaigns.observability.logging import configure_logging


def create_app(engine: Optional[CampaignDecisionEngine] = None) -> FastAPI:
    """
    Build the API around a single engine instance.

    When no engine is passed one is created from environment settings. Serve
    with `uvicorn promo_campaigns.app.main:create_app --factory`.
    """
    app = FastAPI(title="Promo Campaigns")
    app.state.engine = engine if engine is not None else create_engine()
    app.include_router(health_router)
    app.include_router(campaigns_router, prefix="/v1", tags=["campaigns"])
    return app


configure_logging()
