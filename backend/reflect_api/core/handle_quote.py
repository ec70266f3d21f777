"""Quote & Transaction Handlers — pure composition for the mint/redeem/burn routes.

Invariants:
    - Handlers are TOTAL: every input yields (status, Envelope), nothing raises
    - Rule order: amount positivity, then index support, then operation type
    - Quote routes accept any stablecoin index (it does not affect the price)
    - Mint and burn reject unsupported indices with 404 UNSUPPORTED_INDEX

Design Decisions:
    - Operation type parsed once via parse_quote_type; the handler only ever
      sees QuoteType or ErrorKind
    - Transaction payload is a fixed placeholder: no signing, no chain access
"""

from reflect_api.core.envelope import HandlerResult, respond_fail, respond_ok
from reflect_api.core.errors import ErrorKind
from reflect_api.core.quote_engine import quote_for
from reflect_api.core.simulated_data import SIMULATED_TRANSACTION
from reflect_api.core.validation_rules import (
    check_amount_positive,
    check_stablecoin_index,
    first_failure,
    parse_quote_type,
)


def handle_quote(raw_type: str, deposit_amount: int) -> HandlerResult:
    """POST /quote/{type} — output amount after the 0.1% fee."""
    parsed = parse_quote_type(raw_type)
    failure = first_failure(
        lambda: check_amount_positive(deposit_amount),
        lambda: parsed if isinstance(parsed, ErrorKind) else None,
    )
    if failure is not None:
        return respond_fail(failure)
    return respond_ok(quote_for(parsed, deposit_amount))


def handle_mint(stablecoin_index: int, deposit_amount: int) -> HandlerResult:
    """POST /mint — simulated deposit-collateral transaction."""
    return _simulated_transaction(stablecoin_index, deposit_amount)


def handle_burn(stablecoin_index: int, deposit_amount: int) -> HandlerResult:
    """POST /burn — simulated burn transaction, validated like mint."""
    return _simulated_transaction(stablecoin_index, deposit_amount)


def _simulated_transaction(
    stablecoin_index: int, deposit_amount: int,
) -> HandlerResult:
    failure = first_failure(
        lambda: check_amount_positive(deposit_amount),
        lambda: check_stablecoin_index(stablecoin_index),
    )
    if failure is not None:
        return respond_fail(failure)
    return respond_ok({"transaction": SIMULATED_TRANSACTION})
