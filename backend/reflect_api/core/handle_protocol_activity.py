"""Protocol Activity Handlers — TVL statistics and recent protocol events.

Invariants:
    - No validation rules apply: every request succeeds with a canned payload
    - events_by_signer echoes the signer, defaulting to "unknown"
"""

from reflect_api.core.envelope import HandlerResult, respond_ok
from reflect_api.core.simulated_data import (
    HISTORICAL_TVL_AND_VOLUME,
    PROTOCOL_STATISTICS,
    RECENT_EVENTS,
    SIGNER_EVENTS,
    UNKNOWN_SIGNER,
)


def handle_protocol_statistics() -> HandlerResult:
    return respond_ok(dict(PROTOCOL_STATISTICS))


def handle_historical_tvl_and_volume() -> HandlerResult:
    return respond_ok([dict(row) for row in HISTORICAL_TVL_AND_VOLUME])


def handle_recent_events() -> HandlerResult:
    return respond_ok([dict(row) for row in RECENT_EVENTS])


def handle_events_by_signer(signer: str | None) -> HandlerResult:
    return respond_ok({
        "signer": signer or UNKNOWN_SIGNER,
        "events": [dict(row) for row in SIGNER_EVENTS],
    })
