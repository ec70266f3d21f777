"""Market Data Routes — listing, APY and exchange-rate endpoints over HTTP.

Invariants:
    - Canned payloads match the upstream API byte for byte
    - Index-validated routes keep their own failure convention
      (specific APY -> 404, realtime rate -> 400)
    - Repeated identical GETs return identical bytes
"""

import re

from tests.api.envelopes import INDEX_NOT_FOUND, INVALID_AMOUNT

SECONDS_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")

HISTORICAL_APY = {"index": 0, "apy": 5.25, "timestamp": "2023-11-07T05:31:56Z"}
LATEST_RATE = {
    "id": 105511,
    "stablecoin": 0,
    "base_usd_value_bps": 1016789908,
    "receipt_usd_value_bps": 1016791576,
    "timestamp": "2025-12-19T17:04:08.502Z",
}


# ─── Catalogue ──────────────────────────────────────────────────

async def test_types_lists_usdc_plus(client):
    res = await client.get("/stablecoin/types")
    assert res.status_code == 200
    assert res.content == b'{"success":true,"data":[{"index":0,"name":"USDC+"}]}'


async def test_supply_caps(client):
    res = await client.get("/stablecoin/supply-caps")
    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "data": [
            {"symbol": "rUSD", "cap": "10_000_000"},
            {"symbol": "rEUR", "cap": "5_000_000"},
        ],
    }


# ─── APY ────────────────────────────────────────────────────────

async def test_all_apy(client):
    res = await client.get("/stablecoin/apy")
    assert res.status_code == 200
    assert res.content == (
        b'{"success":true,"data":[{"index":0,"apy":224,'
        b'"timestamp":"2025-12-19T16:55:42.407Z"}]}'
    )


async def test_specific_apy(client):
    res = await client.get("/stablecoin/0/apy")
    assert res.status_code == 200
    assert res.content == b'{"success":true,"data":{"symbol":"0","apy":0.02}}'


async def test_specific_apy_unknown_index_is_404(client):
    res = await client.get("/stablecoin/7/apy")
    assert res.status_code == 404
    assert res.json() == INDEX_NOT_FOUND


async def test_historical_apy_default_days(client):
    res = await client.get("/stablecoin/0/apy/historical")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": HISTORICAL_APY}
    assert SECONDS_RE.match(res.json()["data"]["timestamp"])


async def test_historical_apy_custom_days(client):
    for days in (30, 90, 365, 7, 1):
        res = await client.get("/stablecoin/0/apy/historical", params={"days": days})
        assert res.status_code == 200
        assert res.json()["data"] == HISTORICAL_APY


async def test_historical_apy_rejects_days_below_one(client):
    for days in (0, -1, -100):
        res = await client.get("/stablecoin/0/apy/historical", params={"days": days})
        assert res.status_code == 400
        assert res.json() == INVALID_AMOUNT


async def test_historical_apy_rejects_non_numeric_days(client):
    res = await client.get("/stablecoin/0/apy/historical", params={"days": "week"})
    assert res.status_code == 400
    assert res.json() == INVALID_AMOUNT


async def test_historical_apy_echoes_index(client):
    for index in (0, 1, 5, 999):
        res = await client.get(f"/stablecoin/{index}/apy/historical")
        assert res.status_code == 200
        assert res.json()["data"]["index"] == index


# ─── Exchange Rates ─────────────────────────────────────────────

async def test_exchange_rates_without_days_is_latest(client):
    res = await client.get("/stablecoin/exchange-rates")
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": [LATEST_RATE]}


async def test_exchange_rates_latest_alias(client):
    first = await client.get("/stablecoin/exchange-rates")
    second = await client.get("/stablecoin/exchange-rates/latest")
    assert first.content == second.content


async def test_exchange_rates_with_days_is_historical(client):
    res = await client.get("/stablecoin/exchange-rates", params={"stablecoin": 0, "days": 7})
    assert res.status_code == 200
    data = res.json()["data"]
    assert [row["id"] for row in data] == [104135, 104137]


async def test_historical_exchange_rates_payload(client):
    res = await client.get(
        "/stablecoin/exchange-rates/historical", params={"stablecoin": 0, "days": 7},
    )
    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "data": [
            {
                "id": 104135,
                "stablecoin": 0,
                "base_usd_value_bps": 1016733625,
                "receipt_usd_value_bps": 1016733625,
                "timestamp": "2025-12-18T17:46:10.274Z",
            },
            {
                "id": 104137,
                "stablecoin": 0,
                "base_usd_value_bps": 1016728666,
                "receipt_usd_value_bps": 1016728667,
                "timestamp": "2025-12-18T17:47:08.161Z",
            },
        ],
    }


async def test_historical_exchange_rates_echo_stablecoin(client):
    for index in (0, 1, 42):
        res = await client.get(
            "/stablecoin/exchange-rates/historical", params={"stablecoin": index, "days": 30},
        )
        assert all(row["stablecoin"] == index for row in res.json()["data"])


async def test_historical_exchange_rates_require_days(client):
    res = await client.get("/stablecoin/exchange-rates/historical", params={"stablecoin": 0})
    assert res.status_code == 400
    assert res.json() == INVALID_AMOUNT


async def test_historical_exchange_rates_reject_days_below_one(client):
    res = await client.get(
        "/stablecoin/exchange-rates/historical", params={"stablecoin": 0, "days": 0},
    )
    assert res.status_code == 400
    assert res.json() == INVALID_AMOUNT


async def test_realtime_exchange_rate(client):
    res = await client.get("/stablecoin/0/exchange-rate")
    assert res.status_code == 200
    assert res.content == b'{"success":true,"data":{"base":1016858791,"receipt":1016858791}}'


async def test_realtime_unknown_index_is_400(client):
    for index in (1, 5, 99, 1000, -1):
        res = await client.get(f"/stablecoin/{index}/exchange-rate")
        assert res.status_code == 400
        assert res.json() == INVALID_AMOUNT


async def test_realtime_non_numeric_index_is_400(client):
    res = await client.get("/stablecoin/usdc/exchange-rate")
    assert res.status_code == 400
    assert res.json() == INVALID_AMOUNT


# ─── Idempotence ────────────────────────────────────────────────

async def test_repeated_gets_are_byte_identical(client):
    paths = [
        "/stablecoin/types",
        "/stablecoin/supply-caps",
        "/stablecoin/apy",
        "/stablecoin/0/apy",
        "/stablecoin/0/apy/historical?days=30",
        "/stablecoin/exchange-rates",
        "/stablecoin/exchange-rates/historical?stablecoin=0&days=1",
        "/stablecoin/0/exchange-rate",
    ]
    for path in paths:
        first = await client.get(path)
        second = await client.get(path)
        assert first.status_code == 200, path
        assert first.content == second.content, path
