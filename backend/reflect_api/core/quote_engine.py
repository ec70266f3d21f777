"""Quote Engine — fee-adjusted output amount for mint and redeem quotes.

Invariants:
    - quote(n) == n - n // FEE_DIVISOR for every n > 0 (0.1% fee, floored)
    - 0 <= quote(n) <= n
    - Mint and redeem share one formula: QuoteType only labels the quote
    - Deterministic: no clock, no randomness, integers only

Design Decisions:
    - Floor division on the FEE, not on the result: 123_456 -> 123_456 - 123
    - Non-positive input raises ValueError: handlers validate first, so reaching
      it is a programming fault, not a request error
"""

from reflect_api.core.domain_types import QuoteResult, QuoteType

FEE_DIVISOR: int = 1000  # 0.1%


def fee(deposit_amount: int) -> int:
    """Protocol fee in smallest units, rounded down."""
    _require_positive(deposit_amount)
    return deposit_amount // FEE_DIVISOR


def quote(deposit_amount: int) -> QuoteResult:
    """Amount received for depositing deposit_amount, after the fee."""
    return QuoteResult(deposit_amount - fee(deposit_amount))


def quote_for(quote_type: QuoteType, deposit_amount: int) -> QuoteResult:
    """Quote for a labelled operation. Mint and redeem are symmetric."""
    return quote(deposit_amount)


def _require_positive(deposit_amount: int) -> None:
    if deposit_amount <= 0:
        raise ValueError(
            f"deposit_amount must be positive, got {deposit_amount}",
        )
