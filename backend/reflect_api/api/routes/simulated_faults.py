"""Simulated Fault Hooks — test-only routes that force the failure paths.

Invariants:
    - GET /stablecoin/<route>/error and /stablecoin/historical-error raise
      SimulatedFaultError; the global handler renders the 500 envelope
    - GET /stablecoin/apy/not-found answers 404 with the InvalidAmount message
    - Hooks are hidden from the OpenAPI schema
    - Mounted only when settings.enable_fault_hooks is true

Design Decisions:
    - Raise instead of returning a Failure: the hooks exist to prove the exception
      path produces the same envelope shape as handled failures
"""

from fastapi import APIRouter

from reflect_api.api.responses import render
from reflect_api.core.errors import SimulatedFaultError
from reflect_api.core.handle_market_data import handle_apy_not_found

FAULT_HOOK_ROUTES: tuple[str, ...] = (
    "types",
    "supply-caps",
    "quote",
    "mint",
    "burn",
    "apy",
    "apy/historical",
    "exchange-rates",
    "exchange-rates/historical",
    "exchange-rate",
)

# Legacy spelling of the historical-APY hook, still used by client suites.
HISTORICAL_ERROR_PATH = "/historical-error"

router = APIRouter(prefix="/stablecoin", tags=["fault-hooks"])


def _fault_hook(route: str):
    async def raise_fault():
        raise SimulatedFaultError(route)
    raise_fault.__name__ = f"fault_{route.replace('/', '_').replace('-', '_')}"
    return raise_fault


for _route in FAULT_HOOK_ROUTES:
    router.add_api_route(
        f"/{_route}/error", _fault_hook(_route),
        methods=["GET"], include_in_schema=False,
    )

router.add_api_route(
    HISTORICAL_ERROR_PATH, _fault_hook("apy/historical"),
    methods=["GET"], include_in_schema=False,
)


@router.get("/apy/not-found", include_in_schema=False)
async def apy_not_found():
    return render(handle_apy_not_found(), "apy/not-found")
