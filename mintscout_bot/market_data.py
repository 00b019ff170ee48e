#market_data.py
"""
DexScreener lookups for price, liquidity and 24h volume.

DexScreener serves the same pair data under several paths and each path
answers with its own envelope (bare list, nested list, single object). The
fetcher walks the endpoints in order and hands every body to
``parse_market_payload``, which tries the known envelopes one by one. A new
envelope is one more entry in ``PAYLOAD_SHAPES``.
"""
import logging
import re
from decimal import Decimal, InvalidOperation

import requests

from mintscout_bot.config import CONFIG
from mintscout_bot.errors import MarketDataUnavailable
from mintscout_bot.models import MarketSnapshot

logger = logging.getLogger(__name__)

ENDPOINTS = (
    "{base}/tokens/v1/solana/{mint}",
    "{base}/latest/dex/pairs/solana/{mint}",
    "{base}/latest/dex/tokens/{mint}",
    "{base}/token-pairs/v1/solana/{mint}",
)

NESTED_LIST_KEYS = ("pairs", "pairsList", "data.pairs", "data")
FLAT_MARKERS = ("price", "priceUsd", "liquidity", "volume24h", "volume")

FIELD_ALIASES = {
    "name": ("name", "tokenName", "baseToken.name"),
    "symbol": ("symbol", "tokenSymbol", "baseToken.symbol"),
    "price": ("price", "priceUsd"),
    "liquidity": ("liquidity.usd", "liquidity"),
    "volume24h": ("volume24h", "volume.h24"),
    "url": ("dexScreenerUrl", "url"),
}

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def endpoint_urls(mint: str) -> list:
    base = CONFIG["DEXSCREENER_API"].rstrip("/")
    return [tpl.format(base=base, mint=mint) for tpl in ENDPOINTS]


# ---------- field extraction ----------

def _dig(obj, path: str):
    for key in path.split("."):
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj

def _first_scalar(obj: dict, aliases):
    for path in aliases:
        v = _dig(obj, path)
        if v is None or isinstance(v, (dict, list, bool)):
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None

def to_decimal(value):
    """Coerce '$1,234.5' style values; anything unparseable becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # str(1e-05) is scientific, keep it out of the character filter
        d = Decimal(str(value))
        return d if d.is_finite() else None
    cleaned = _NON_NUMERIC.sub("", str(value))
    if not cleaned:
        return None
    try:
        d = Decimal(cleaned)
    except InvalidOperation:
        return None
    return d if d.is_finite() else None

def _text(value):
    if value is None:
        return None
    s = str(value).strip()
    return s or None

def snapshot_from(entry: dict) -> MarketSnapshot:
    return MarketSnapshot(
        name=_text(_first_scalar(entry, FIELD_ALIASES["name"])),
        symbol=_text(_first_scalar(entry, FIELD_ALIASES["symbol"])),
        price=to_decimal(_first_scalar(entry, FIELD_ALIASES["price"])),
        liquidity=to_decimal(_first_scalar(entry, FIELD_ALIASES["liquidity"])),
        volume24h=to_decimal(_first_scalar(entry, FIELD_ALIASES["volume24h"])),
        url=_text(_first_scalar(entry, FIELD_ALIASES["url"])),
    )


# ---------- payload shapes ----------
# each takes the decoded body and returns the entry dict to read, or None

def _bare_list(body):
    if isinstance(body, list) and body and isinstance(body[0], dict):
        return body[0]
    return None

def _nested_list(body):
    if not isinstance(body, dict):
        return None
    for path in NESTED_LIST_KEYS:
        items = _dig(body, path)
        if isinstance(items, list) and items and isinstance(items[0], dict):
            return items[0]
    return None

def _single_pair(body):
    if isinstance(body, dict) and isinstance(body.get("pair"), dict):
        return body["pair"]
    return None

def _flat_object(body):
    if isinstance(body, dict) and any(body.get(k) for k in FLAT_MARKERS):
        return body
    return None

PAYLOAD_SHAPES = (_bare_list, _nested_list, _single_pair, _flat_object)


def parse_market_payload(body):
    """MarketSnapshot from the first recognised envelope, or None."""
    for shape in PAYLOAD_SHAPES:
        entry = shape(body)
        if entry is not None:
            return snapshot_from(entry)
    return None


# ---------- fetch ----------

def _fetch_json(url: str, http):
    try:
        r = http.get(url, headers=CONFIG.get("DEFAULT_HEADERS", {}), timeout=CONFIG["MARKET_TIMEOUT"])
    except requests.RequestException as e:
        raise MarketDataUnavailable(f"{url}: {e}") from e
    if not r.ok:
        raise MarketDataUnavailable(f"{url}: HTTP {r.status_code}")
    try:
        return r.json()
    except ValueError as e:
        raise MarketDataUnavailable(f"{url}: undecodable body") from e


def get_market_data(mint: str, session=None):
    http = session or requests
    for url in endpoint_urls(mint):
        try:
            body = _fetch_json(url, http)
        except MarketDataUnavailable as e:
            logger.debug("DexScreener candidate skipped: %s", e)
            continue
        snapshot = parse_market_payload(body)
        if snapshot is not None and snapshot.has_data():
            return snapshot
    logger.debug("No DexScreener data for %s", mint)
    return None
