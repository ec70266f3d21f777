"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SUPPORTED_STABLECOIN_INDEX is the single valid index (0 = USDC+), fixed at import
    - Request integers are signed 64-bit: INT64_MIN <= n <= INT64_MAX
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Final, NewType


# ─── Value Types ─────────────────────────────────────────────────

StablecoinIndex = NewType("StablecoinIndex", int)
QuoteResult = NewType("QuoteResult", int)       # 0 <= result <= deposit


# ─── Static Configuration ────────────────────────────────────────

SUPPORTED_STABLECOIN_INDEX: Final[StablecoinIndex] = StablecoinIndex(0)

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

DEFAULT_HISTORY_DAYS: Final[int] = 365


# ─── Enums ───────────────────────────────────────────────────────

class QuoteType(str, Enum):
    """Quote operation named by the /quote/{type} path parameter."""
    MINT = "mint"
    REDEEM = "redeem"


class Cluster(str, Enum):
    """Solana cluster a transaction would be built for."""
    MAINNET = "mainnet"
    DEVNET = "devnet"
