"""Stablecoin Transaction Routes — mint/redeem quotes and simulated mint/burn transactions.

Invariants:
    - Bodies validated by Pydantic before reaching the route (strict Int64)
    - Routes only unpack the body, call a core handler and render its envelope
    - `cluster` is accepted and logged; it never changes the simulated payload
"""

import logging

from fastapi import APIRouter

from reflect_api.api.responses import render
from reflect_api.core.domain_types import Cluster
from reflect_api.core.handle_quote import handle_burn, handle_mint, handle_quote
from reflect_api.schemas.stablecoin import BurnRequest, MintRequest, QuoteRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/stablecoin", tags=["stablecoin"])


@router.post("/quote/{quote_type}")
async def get_mint_redeem_quote(quote_type: str, body: QuoteRequest):
    """Quote the amount received for a mint or redeem (0.1% fee)."""
    return render(handle_quote(quote_type, body.deposit_amount), "quote")


@router.post("/mint")
async def generate_mint_transaction(body: MintRequest, cluster: Cluster | None = None):
    """Build a simulated mint transaction for the signer."""
    _log_cluster("mint", cluster)
    return render(handle_mint(body.stablecoin_index, body.deposit_amount), "mint")


@router.post("/burn")
async def generate_burn_transaction(body: BurnRequest, cluster: Cluster | None = None):
    """Build a simulated burn transaction for the signer."""
    _log_cluster("burn", cluster)
    return render(handle_burn(body.stablecoin_index, body.deposit_amount), "burn")


def _log_cluster(route: str, cluster: Cluster | None) -> None:
    logger.debug(
        f"{route} requested",
        extra={"route": route, "cluster": cluster.value if cluster else None},
    )
