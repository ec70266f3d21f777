"""Stablecoin Schemas — request bodies for the quote, mint and burn routes.

Invariants:
    - Int64 fields are strict: "100", 1.0 and true are rejected, never coerced
    - Int64 fields are bounded to the signed 64-bit range
    - camelCase wire names (stablecoinIndex) and snake_case (stablecoin_index)
      are both accepted; burn clients historically send snake_case

Design Decisions:
    - Positivity is NOT a schema constraint: a non-positive amount must produce
      the InvalidAmount envelope from core rules, in rule order, not a generic
      schema error
"""

from typing import Annotated

from fastapi import Path, Query
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from reflect_api.core.domain_types import INT64_MAX, INT64_MIN

Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]

# Path and query values arrive as text; these parse base-10 and bound the result.
IndexPath = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]
Int64Query = Annotated[int, Query(ge=INT64_MIN, le=INT64_MAX)]
OptionalInt64Query = Annotated[int | None, Query(ge=INT64_MIN, le=INT64_MAX)]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuoteRequest(_WireModel):
    """Body of POST /stablecoin/quote/{type}."""
    stablecoin_index: Int64
    deposit_amount: Int64


class TransactionRequest(_WireModel):
    """Shared body of the transaction-building routes."""
    stablecoin_index: Int64
    deposit_amount: Int64
    signer: str
    minimum_received: Int64
    collateral_mint: str | None = None


class MintRequest(TransactionRequest):
    """Body of POST /stablecoin/mint — deposit collateral, receive stablecoin."""


class BurnRequest(TransactionRequest):
    """Body of POST /stablecoin/burn — burn stablecoin, receive collateral."""
