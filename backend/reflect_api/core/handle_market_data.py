"""Market Data Handlers — stablecoin listing, APY and exchange-rate payloads.

Invariants:
    - Handlers are TOTAL and PURE: fresh dicts per call, no shared state mutated
    - Listing and rate timestamps use iso_millis; historical APY uses iso_seconds
    - Historical APY echoes the path index and validates only `days`
    - Historical exchange rates echo `stablecoin` into every row
    - Realtime rate reports an unsupported index as INVALID_AMOUNT (HTTP 400);
      specific APY reports it as UNSUPPORTED_INDEX (HTTP 404)
    - apy/not-found is the one failure whose status does not come from its kind

Design Decisions:
    - Canned rows copied into new dicts: the immutable tables in simulated_data
      never leave this module, so callers cannot alias them
"""

from typing import Mapping

from reflect_api.core.domain_types import DEFAULT_HISTORY_DAYS
from reflect_api.core.envelope import HandlerResult, fail, respond_fail, respond_ok
from reflect_api.core.errors import ErrorKind
from reflect_api.core.format_timestamps import iso_millis, iso_seconds
from reflect_api.core.simulated_data import (
    APY_SNAPSHOTS,
    HISTORICAL_APY,
    HISTORICAL_EXCHANGE_RATES,
    LATEST_EXCHANGE_RATES,
    REALTIME_EXCHANGE_RATE,
    SPECIFIC_APY,
    STABLECOINS,
    SUPPLY_CAPS,
)
from reflect_api.core.validation_rules import check_days, check_stablecoin_index

HTTP_NOT_FOUND = 404


# ─── Catalogue ──────────────────────────────────────────────────

def handle_list_stablecoins() -> HandlerResult:
    return respond_ok([dict(row) for row in STABLECOINS])


def handle_supply_caps() -> HandlerResult:
    return respond_ok([dict(row) for row in SUPPLY_CAPS])


# ─── APY ────────────────────────────────────────────────────────

def handle_all_apy() -> HandlerResult:
    """Current APY (basis points) for every stablecoin."""
    return respond_ok([_apy_row(row) for row in APY_SNAPSHOTS])


def handle_specific_apy(index: int) -> HandlerResult:
    """Current APY (fraction) for one stablecoin, keyed by symbol; unknown index -> 404."""
    failure = check_stablecoin_index(index)
    if failure is not None:
        return respond_fail(failure)
    return respond_ok({"symbol": str(index), "apy": SPECIFIC_APY})


def handle_apy_not_found() -> HandlerResult:
    """Canned not-found failure: 404 status paired with the InvalidAmount message."""
    return HTTP_NOT_FOUND, fail(ErrorKind.INVALID_AMOUNT)


def handle_historical_apy(
    index: int, days: int | None = DEFAULT_HISTORY_DAYS,
) -> HandlerResult:
    """Historical APY point (percent) for the requested index and period."""
    failure = check_days(days)
    if failure is not None:
        return respond_fail(failure)
    return respond_ok({
        "index": index,
        "apy": HISTORICAL_APY["apy"],
        "timestamp": iso_seconds(HISTORICAL_APY["timestamp"]),
    })


# ─── Exchange Rates ─────────────────────────────────────────────

def handle_latest_exchange_rates() -> HandlerResult:
    return respond_ok([_rate_row(row, row["stablecoin"]) for row in LATEST_EXCHANGE_RATES])


def handle_historical_exchange_rates(stablecoin: int, days: int | None) -> HandlerResult:
    """Historical snapshots; the requested stablecoin is echoed into each row."""
    failure = check_days(days)
    if failure is not None:
        return respond_fail(failure)
    return respond_ok([_rate_row(row, stablecoin) for row in HISTORICAL_EXCHANGE_RATES])


def handle_realtime_exchange_rate(index: int) -> HandlerResult:
    """Current base/receipt value in bps. Unsupported index -> 400, not 404."""
    failure = check_stablecoin_index(index, on_unsupported=ErrorKind.INVALID_AMOUNT)
    if failure is not None:
        return respond_fail(failure)
    return respond_ok(dict(REALTIME_EXCHANGE_RATE))


def _apy_row(row: Mapping) -> dict:
    return {
        "index": row["index"],
        "apy": row["apy"],
        "timestamp": iso_millis(row["timestamp"]),
    }


def _rate_row(row: Mapping, stablecoin: int) -> dict:
    return {
        "id": row["id"],
        "stablecoin": stablecoin,
        "base_usd_value_bps": row["base_usd_value_bps"],
        "receipt_usd_value_bps": row["receipt_usd_value_bps"],
        "timestamp": iso_millis(row["timestamp"]),
    }
