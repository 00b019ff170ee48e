import pytest
import requests

WSOL_MINT = "So11111111111111111111111111111111111111112"


class FakeResponse:
    def __init__(self, status_code=200, body=None, bad_json=False):
        self.status_code = status_code
        self._body = body
        self._bad_json = bad_json

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session; answers by URL and records every call."""

    def __init__(self, get_routes=None, post_routes=None):
        self.get_routes = get_routes or {}
        self.post_routes = post_routes or {}
        self.calls = []

    def _answer(self, routes, url):
        answer = routes.get(url, FakeResponse(404, {}))
        if isinstance(answer, Exception):
            raise answer
        return answer

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"method": "GET", "url": url, "params": params, "timeout": timeout})
        return self._answer(self.get_routes, url)

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"method": "POST", "url": url, "json": json, "timeout": timeout})
        return self._answer(self.post_routes, url)


def rpc_mint_body(decimals=9, supply="1000000000000000000"):
    info = {"isInitialized": True, "mintAuthority": None, "freezeAuthority": None}
    if decimals is not None:
        info["decimals"] = decimals
    if supply is not None:
        info["supply"] = supply
    return {
        "jsonrpc": "2.0",
        "id": 1,
        "result": {
            "context": {"slot": 1},
            "value": {
                "data": {
                    "parsed": {"info": info, "type": "mint"},
                    "program": "spl-token",
                    "space": 82,
                },
                "executable": False,
                "lamports": 1461600,
                "owner": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
            },
        },
    }


def dex_pair(price="150.25", liquidity=1_250_000.5, volume=980_000, name="Wrapped SOL", symbol="SOL"):
    return {
        "chainId": "solana",
        "dexId": "raydium",
        "url": "https://dexscreener.com/solana/pairaddr",
        "pairAddress": "pairaddr",
        "baseToken": {"address": WSOL_MINT, "name": name, "symbol": symbol},
        "quoteToken": {"symbol": "USDC"},
        "priceNative": "1.0",
        "priceUsd": price,
        "volume": {"h24": volume, "h1": 1000},
        "liquidity": {"usd": liquidity, "base": 1, "quote": 2},
        "fdv": 1,
    }


@pytest.fixture
def fake_session():
    return FakeSession()
