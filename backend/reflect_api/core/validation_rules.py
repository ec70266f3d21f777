"""Validation Rules — pure predicates over request fields.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Return an ErrorKind on violation, None when the field is valid
    - Handlers apply rules in fixed precedence: amount, index, operation, days
    - first_failure() short-circuits — the first failing rule wins

Design Decisions:
    - Return values (not exceptions): expected failures flow through the same
      path as success, keeping handlers total
    - check_stablecoin_index takes the kind to report: the realtime-rate routes
      report an unsupported index as INVALID_AMOUNT (400) while mint/burn report
      UNSUPPORTED_INDEX (404); both conventions are kept per route
    - parse_quote_type is a parse step (str -> QuoteType | ErrorKind) so no
      handler compares operation strings itself
"""

from typing import Callable, Optional

from reflect_api.core.domain_types import (
    QuoteType, SUPPORTED_STABLECOIN_INDEX,
)
from reflect_api.core.errors import ErrorKind

Check = Callable[[], Optional[ErrorKind]]


def check_amount_positive(amount: int) -> ErrorKind | None:
    """Rule 1: deposit/burn amounts must be strictly positive."""
    if amount <= 0:
        return ErrorKind.INVALID_AMOUNT
    return None


def check_stablecoin_index(
    index: int,
    on_unsupported: ErrorKind = ErrorKind.UNSUPPORTED_INDEX,
) -> ErrorKind | None:
    """Rule 2: only the supported stablecoin index is accepted."""
    if index != SUPPORTED_STABLECOIN_INDEX:
        return on_unsupported
    return None


def parse_quote_type(raw: str) -> QuoteType | ErrorKind:
    """Rule 3: case-insensitive mint|redeem, anything else is unsupported."""
    try:
        return QuoteType(raw.lower())
    except ValueError:
        return ErrorKind.UNSUPPORTED_OPERATION


def check_days(days: int | None) -> ErrorKind | None:
    """Rule 4: a period, when given, covers at least one day."""
    if days is not None and days < 1:
        return ErrorKind.INVALID_AMOUNT
    return None


def first_failure(*checks: Check) -> ErrorKind | None:
    """Run checks lazily in order and return the first failure, if any."""
    for check in checks:
        kind = check()
        if kind is not None:
            return kind
    return None
