from fastapi import APIRouter

from app.schemas.network import NetworkStatsSnapshot
from app.services.status_poller import network_stats_poller

router = APIRouter(prefix="/network", tags=["Network"])


@router.get("/stats", response_model=NetworkStatsSnapshot)
async def network_stats(live: bool = False):
    """
    Latest network summary.

    Returns the summary last resolved by the background poller. With
    live=true the Router is queried before responding.
    """
    if live:
        await network_stats_poller.refresh()
    return network_stats_poller.snapshot()
