# chain_rpc.py
import logging
from decimal import Decimal, InvalidOperation

import requests

from mintscout_bot.config import CONFIG
from mintscout_bot.errors import RpcUnavailable
from mintscout_bot.models import MintInfo

logger = logging.getLogger(__name__)


def rpc_call(method: str, params: list, session=None) -> dict:
    """POST one JSON-RPC request and return its `result` member."""
    http = session or requests
    payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
    try:
        r = http.post(
            CONFIG["SOLANA_RPC_URL"],
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=CONFIG["RPC_TIMEOUT"],
        )
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        raise RpcUnavailable(f"{method} failed: {e}") from e

    if not isinstance(data, dict):
        raise RpcUnavailable(f"{method}: unexpected body {type(data).__name__}")
    if data.get("error"):
        raise RpcUnavailable(f"{method}: {data['error']}")
    result = data.get("result")
    if not isinstance(result, dict):
        raise RpcUnavailable(f"{method}: missing result")
    return result


def _parsed_info(value: dict) -> dict:
    data = value.get("data")
    if not isinstance(data, dict):
        # raw base64 encoding comes back as a list: not a parsed token account
        return {}
    parsed = data.get("parsed")
    info = parsed.get("info") if isinstance(parsed, dict) else None
    return info if isinstance(info, dict) else {}


def _as_decimals(raw):
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        return None
    return raw


def _human_supply(raw, decimals):
    if raw is None or decimals is None:
        return None
    try:
        base_units = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    if not base_units.is_finite() or base_units < 0:
        return None
    return base_units / (Decimal(10) ** decimals)


def get_mint_info(mint: str, session=None):
    """
    Read decimals and supply of a mint account over jsonParsed getAccountInfo.
    Returns None when the RPC is unreachable or the account does not exist.
    """
    try:
        result = rpc_call(
            "getAccountInfo",
            [mint, {"encoding": "jsonParsed", "commitment": "confirmed"}],
            session=session,
        )
    except RpcUnavailable as e:
        logger.warning("Mint lookup for %s unavailable: %s", mint, e)
        return None

    value = result.get("value")
    if not value:
        logger.debug("No account found for %s", mint)
        return None
    if not isinstance(value, dict):
        logger.warning("Mint lookup for %s returned a malformed account: %r", mint, value)
        return None

    info = _parsed_info(value)
    decimals = _as_decimals(info.get("decimals"))
    supply = _human_supply(info.get("supply"), decimals)
    return MintInfo(decimals=decimals, supply=supply)
