"""Router for campaign decision endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from promo_campaigns.app.api.models.campaigns import CatalogEntryModel, CatalogResponse, DecisionResponse
from promo_campaigns.app.serialization import campaign_to_dict, dismissal_state_to_dict
from promo_campaigns.application.engine import CampaignDecisionEngine
from promo_campaigns.application.errors import StateFileError

router = APIRouter()


def get_engine(request: Request) -> CampaignDecisionEngine:
    """Dependency to provide the engine built at app start-up."""
    return request.app.state.engine


def _decision_response(engine: CampaignDecisionEngine) -> DecisionResponse:
    return DecisionResponse.model_validate(
        {
            "as_of": engine.clock.get_date(),
            "campaign": campaign_to_dict(engine.active_campaign.value),
            "dismissal": dismissal_state_to_dict(engine.dismissal_state),
        }
    )


@router.get("/campaigns", response_model=CatalogResponse)
def list_campaigns(engine: CampaignDecisionEngine = Depends(get_engine)) -> CatalogResponse:
    """List every catalog entry in evaluation order, flagging which ones are active now."""
    now = engine.clock.get_date()
    items = [
        CatalogEntryModel.model_validate({**campaign_to_dict(definition), "is_active": definition.is_active(now)})
        for definition in engine.catalog
    ]
    return CatalogResponse(as_of=now, items=items)


@router.get("/campaigns/active", response_model=DecisionResponse)
def get_active_campaign(engine: CampaignDecisionEngine = Depends(get_engine)) -> DecisionResponse:
    """Return the last published decision without recomputing it."""
    try:
        return _decision_response(engine)
    except StateFileError as e:
        raise HTTPException(status_code=500, detail=f"Error reading dismissal state: {str(e)}")


@router.post("/campaigns/refresh", response_model=DecisionResponse)
def refresh_campaign(
    force_reset_dismissal: bool = Query(False, description="Clear any standing dismissal first"),
    engine: CampaignDecisionEngine = Depends(get_engine),
) -> DecisionResponse:
    """Recompute the active campaign against the current time and dismissal state."""
    try:
        engine.refresh(force_reset_dismissal=force_reset_dismissal)
        return _decision_response(engine)
    except StateFileError as e:
        raise HTTPException(status_code=500, detail=f"Error refreshing campaign: {str(e)}")


@router.post("/campaigns/dismiss", response_model=DecisionResponse)
def dismiss_campaign(engine: CampaignDecisionEngine = Depends(get_engine)) -> DecisionResponse:
    """Dismiss the banner until a reset condition is met."""
    try:
        engine.dismiss()
        return _decision_response(engine)
    except StateFileError as e:
        raise HTTPException(status_code=500, detail=f"Error dismissing campaign: {str(e)}")
