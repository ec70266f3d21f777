"""Simulated Data — canned payloads returned until a real backend exists.

Invariants:
    - Every table is immutable (tuples of read-only mappings)
    - Values are fixed literals: identical requests yield identical payloads
    - Timestamps are stored as aware UTC datetimes; handlers pick the wire format
    - Basis-point values follow 100_000_000 bps = $1.00

Design Decisions:
    - Datetimes over preformatted strings: the millisecond and second-precision
      wire formats are both produced by format_timestamps from one source
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping

_UTC = timezone.utc

# Base64 serialized transaction placeholder shared by mint and burn.
SIMULATED_TRANSACTION: str = (
    "AQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAABAAED..."
)

STABLECOINS: tuple[Mapping, ...] = (
    MappingProxyType({"index": 0, "name": "USDC+"}),
)

# Caps are strings with underscore digit grouping.
SUPPLY_CAPS: tuple[Mapping, ...] = (
    MappingProxyType({"symbol": "rUSD", "cap": "10_000_000"}),
    MappingProxyType({"symbol": "rEUR", "cap": "5_000_000"}),
)

# ─── APY ─────────────────────────────────────────────────────────

APY_SNAPSHOTS: tuple[Mapping, ...] = (
    MappingProxyType({
        "index": 0,
        "apy": 224,  # bps, 2.24%
        "timestamp": datetime(2025, 12, 19, 16, 55, 42, 407_000, tzinfo=_UTC),
    }),
)

SPECIFIC_APY: float = 0.02  # fraction, 2%

HISTORICAL_APY: Mapping = MappingProxyType({
    "apy": 5.25,  # percent
    "timestamp": datetime(2023, 11, 7, 5, 31, 56, tzinfo=_UTC),
})

# ─── Exchange Rates ──────────────────────────────────────────────

LATEST_EXCHANGE_RATES: tuple[Mapping, ...] = (
    MappingProxyType({
        "id": 105511,
        "stablecoin": 0,
        "base_usd_value_bps": 1016789908,
        "receipt_usd_value_bps": 1016791576,
        "timestamp": datetime(2025, 12, 19, 17, 4, 8, 502_000, tzinfo=_UTC),
    }),
)

HISTORICAL_EXCHANGE_RATES: tuple[Mapping, ...] = (
    MappingProxyType({
        "id": 104135,
        "base_usd_value_bps": 1016733625,
        "receipt_usd_value_bps": 1016733625,
        "timestamp": datetime(2025, 12, 18, 17, 46, 10, 274_000, tzinfo=_UTC),
    }),
    MappingProxyType({
        "id": 104137,
        "base_usd_value_bps": 1016728666,
        "receipt_usd_value_bps": 1016728667,
        "timestamp": datetime(2025, 12, 18, 17, 47, 8, 161_000, tzinfo=_UTC),
    }),
)

REALTIME_EXCHANGE_RATE: Mapping = MappingProxyType({
    "base": 1016858791,
    "receipt": 1016858791,
})

# ─── Protocol Activity ───────────────────────────────────────────

PROTOCOL_STATISTICS: Mapping = MappingProxyType({
    "tvl": "2000000",
    "total_minted": "1500000",
})

HISTORICAL_TVL_AND_VOLUME: tuple[Mapping, ...] = (
    MappingProxyType({"date": "2025-12-13", "tvl": 1000000, "volume": 20000}),
    MappingProxyType({"date": "2025-12-14", "tvl": 1100000, "volume": 25000}),
)

RECENT_EVENTS: tuple[Mapping, ...] = (
    MappingProxyType({"id": "evt_100", "type": "mint"}),
    MappingProxyType({"id": "evt_101", "type": "burn"}),
)

SIGNER_EVENTS: tuple[Mapping, ...] = (
    MappingProxyType({"id": "evt_200"}),
    MappingProxyType({"id": "evt_201"}),
)

UNKNOWN_SIGNER: str = "unknown"
