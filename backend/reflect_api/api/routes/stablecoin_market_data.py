"""Stablecoin Market Data Routes — listing, supply caps, APY and exchange rates.

Invariants:
    - Path and query integers parsed by FastAPI; unparseable text -> 400 envelope
    - Routes never validate or transform: core handlers own every rule
    - GET /exchange-rates without `days` is the latest snapshot; with `days`
      it is the historical series (same as /exchange-rates/historical)
"""

from fastapi import APIRouter

from reflect_api.api.responses import render
from reflect_api.core.domain_types import DEFAULT_HISTORY_DAYS, SUPPORTED_STABLECOIN_INDEX
from reflect_api.core.handle_market_data import (
    handle_all_apy,
    handle_historical_apy,
    handle_historical_exchange_rates,
    handle_latest_exchange_rates,
    handle_list_stablecoins,
    handle_realtime_exchange_rate,
    handle_specific_apy,
    handle_supply_caps,
)
from reflect_api.schemas.stablecoin import IndexPath, Int64Query, OptionalInt64Query

router = APIRouter(prefix="/stablecoin", tags=["stablecoin"])


# ─── Catalogue ──────────────────────────────────────────────────

@router.get("/types")
async def get_available_stablecoins():
    """List every stablecoin the protocol supports."""
    return render(handle_list_stablecoins(), "types")


@router.get("/supply-caps")
async def get_supply_caps():
    return render(handle_supply_caps(), "supply-caps")


# ─── APY ────────────────────────────────────────────────────────

@router.get("/apy")
async def get_all_apy():
    """Current APY in basis points for all stablecoins."""
    return render(handle_all_apy(), "apy")


@router.get("/{index}/apy")
async def get_specific_apy(index: IndexPath):
    return render(handle_specific_apy(index), "apy")


@router.get("/{index}/apy/historical")
async def get_historical_apy(index: IndexPath, days: Int64Query = DEFAULT_HISTORY_DAYS):
    """Historical APY for one stablecoin over `days` (default 365, >= 1)."""
    return render(handle_historical_apy(index, days), "apy/historical")


# ─── Exchange Rates ─────────────────────────────────────────────

@router.get("/exchange-rates")
async def get_exchange_rates(
    stablecoin: Int64Query = SUPPORTED_STABLECOIN_INDEX,
    days: OptionalInt64Query = None,
):
    """Latest snapshot, or the historical series when `days` is given."""
    if days is None:
        return render(handle_latest_exchange_rates(), "exchange-rates")
    return render(handle_historical_exchange_rates(stablecoin, days), "exchange-rates")


@router.get("/exchange-rates/latest")
async def get_latest_exchange_rates():
    return render(handle_latest_exchange_rates(), "exchange-rates/latest")


@router.get("/exchange-rates/historical")
async def get_historical_exchange_rates(stablecoin: Int64Query, days: Int64Query):
    """Historical base/receipt USD values (bps) for a stablecoin."""
    return render(
        handle_historical_exchange_rates(stablecoin, days),
        "exchange-rates/historical",
    )


@router.get("/{index}/exchange-rate")
async def get_realtime_exchange_rate(index: IndexPath):
    """Realtime base/receipt value. Only index 0 is valid (400 otherwise)."""
    return render(handle_realtime_exchange_rate(index), "exchange-rate")
