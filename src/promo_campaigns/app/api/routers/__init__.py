"""API routers for UI-facing endpoints."""

from promo_campaigns.app.api.routers.campaigns import router as campaigns_router

__all__ = ["campaigns_router"]
