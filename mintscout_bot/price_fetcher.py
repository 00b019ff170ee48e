# price_fetcher.py
import logging
from decimal import Decimal, InvalidOperation

import requests

from mintscout_bot.config import CONFIG, USDC_DECIMALS, USDC_MINT
from mintscout_bot.errors import QuoteUnavailable

logger = logging.getLogger(__name__)

# ---------- quote shapes ----------
# each returns the raw outAmount (base units of USDC) or None

def _first_route(routes):
    if isinstance(routes, list) and routes and isinstance(routes[0], dict):
        return routes[0].get("outAmount")
    return None

def _top_level_routes(body: dict):
    return _first_route(body.get("routes"))

def _nested_routes(body: dict):
    data = body.get("data")
    return _first_route(data.get("routes")) if isinstance(data, dict) else None

def _bare_out_amount(body: dict):
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    return body.get("outAmount") or data.get("outAmount")

QUOTE_SHAPES = (_top_level_routes, _nested_routes, _bare_out_amount)


def _to_amount(raw):
    if raw is None or raw == "":
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or value <= 0:
        return None
    return value


def parse_quote(body) -> Decimal:
    """Price in USDC per whole token from a quote response, or QuoteUnavailable."""
    if not isinstance(body, dict):
        raise QuoteUnavailable("quote body is not an object")
    for shape in QUOTE_SHAPES:
        out_amount = _to_amount(shape(body))
        if out_amount is not None:
            return out_amount / (Decimal(10) ** USDC_DECIMALS)
    raise QuoteUnavailable("no route with an output amount")


# ---------- public helpers ----------

def quote_amount(decimals: int) -> int:
    # one whole token in base units; python ints do not overflow
    return 10 ** decimals


def get_price_from_jupiter(mint: str, decimals, session=None):
    """
    Ask Jupiter for a 1 token -> USDC quote.
    Returns a Decimal price, or None when there is no usable route.
    """
    if decimals is None:
        return None

    http = session or requests
    params = {
        "inputMint": mint,
        "outputMint": USDC_MINT,
        "amount": str(quote_amount(decimals)),
        "slippageBps": CONFIG["QUOTE_SLIPPAGE_BPS"],
        "restrictIntermediateTokens": "true",
    }
    try:
        try:
            r = http.get(
                CONFIG["JUPITER_QUOTE_API"],
                params=params,
                headers=CONFIG.get("DEFAULT_HEADERS", {}),
                timeout=CONFIG["QUOTE_TIMEOUT"],
            )
        except requests.RequestException as e:
            raise QuoteUnavailable(f"request failed: {e}") from e
        if not r.ok:
            raise QuoteUnavailable(f"HTTP {r.status_code}")
        try:
            body = r.json()
        except ValueError as e:
            raise QuoteUnavailable("undecodable body") from e
        return parse_quote(body)
    except QuoteUnavailable as e:
        logger.debug("No Jupiter price for %s: %s", mint, e)
        return None
