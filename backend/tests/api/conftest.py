"""API test fixtures — FastAPI app driven through httpx over ASGI.

Invariants:
    - Every test gets its own AsyncClient against the real app (no mocks)
    - No lifespan run: handlers need no startup state

Design Decisions:
    - ASGITransport over a live server: in-process, no ports, same routing stack
"""

import pytest
from httpx import ASGITransport, AsyncClient

from reflect_api.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def mint_payload():
    return {
        "stablecoinIndex": 0,
        "depositAmount": 1_000_000,
        "signer": "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM",
        "minimumReceived": 999_000,
        "collateralMint": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    }
