from fastapi import APIRouter, Request

from app.core.rate_limit import limiter, recommend_limit
from app.schemas.network import RecommendationRequest, RecommendationResponse
from app.services.catalog import get_all_apps
from app.services.catalog_filter import filter_apps
from app.services.cortensor import cortensor_client

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])


@router.post("", response_model=RecommendationResponse)
@limiter.limit(recommend_limit)
async def recommend_apps(request: Request, body: RecommendationRequest):
    """
    Ask the Cortensor network which catalog apps fit a free-text query.

    available=false means the Router could not answer; the caller should fall
    back to plain search.
    """
    apps = filter_apps(get_all_apps(), "", body.category)
    recommendation = await cortensor_client.get_app_recommendation(
        body.query,
        apps,
        session_id=body.session_id,
    )
    return RecommendationResponse(
        query=body.query,
        available=recommendation is not None,
        recommendation=recommendation,
    )
