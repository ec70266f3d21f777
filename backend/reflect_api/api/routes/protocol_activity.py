"""Protocol Activity Routes — TVL statistics and protocol event feeds.

Invariants:
    - /stats and /events respond with the standard envelope
    - by-signer defaults the signer to "unknown" when omitted
"""

from fastapi import APIRouter

from reflect_api.api.responses import render
from reflect_api.core.handle_protocol_activity import (
    handle_events_by_signer,
    handle_historical_tvl_and_volume,
    handle_protocol_statistics,
    handle_recent_events,
)

stats_router = APIRouter(prefix="/stats", tags=["stats"])
events_router = APIRouter(prefix="/events", tags=["events"])


@stats_router.get("/protocol")
async def get_protocol_statistics():
    return render(handle_protocol_statistics(), "stats/protocol")


@stats_router.get("/historical")
async def get_historical_tvl_and_volume():
    return render(handle_historical_tvl_and_volume(), "stats/historical")


@events_router.get("/recent")
async def get_recent_events():
    return render(handle_recent_events(), "events/recent")


@events_router.get("/by-signer")
async def get_events_by_signer(signer: str | None = None):
    return render(handle_events_by_signer(signer), "events/by-signer")
