# report.py
from decimal import Decimal

from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from telegram.helpers import escape_markdown

from mintscout_bot.models import TokenReport

NOT_AVAILABLE = "Not available"
UNKNOWN = "Unknown"

COPY_PREFIX = "copy:"

# ---------- small formatters ----------

def format_number(value) -> str:
    """
    >= 1 in magnitude: thousands separators, at most 2 decimals.
    below 1: 6 significant digits, never scientific notation.
    """
    if value is None:
        return "N/A"
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    if abs(d) >= 1:
        text = f"{d:,.2f}"
        return text.rstrip("0").rstrip(".") if "." in text else text
    if d == 0:
        return f"{d:.5f}"
    places = 5 - d.adjusted()
    rounded = d.quantize(Decimal(1).scaleb(-places))
    if rounded.adjusted() != d.adjusted():
        # rounding carried into the next digit, e.g. 0.9999999 -> 1.00000
        places = 5 - rounded.adjusted()
        rounded = d.quantize(Decimal(1).scaleb(-places))
    return f"{rounded:.{places}f}"

def _money(value) -> str:
    return NOT_AVAILABLE if value is None else f"${format_number(value)}"

def chart_url(mint: str) -> str:
    return f"https://dexscreener.com/solana/{mint}"

def swap_url(mint: str) -> str:
    return f"https://jup.ag/swap/{mint}-USDC"


# ---------- compose ----------

def build_report(mint: str, mint_info, price, market) -> TokenReport:
    """Merge the three lookups; the Jupiter quote wins over the DexScreener price."""
    return TokenReport(
        mint=mint,
        decimals=mint_info.decimals if mint_info else None,
        supply=mint_info.supply if mint_info else None,
        price=price if price is not None else (market.price if market else None),
        liquidity=market.liquidity if market else None,
        volume24h=market.volume24h if market else None,
        name=market.name if market else None,
        symbol=market.symbol if market else None,
        pair_url=market.url if market else None,
    )

def render_report(report: TokenReport) -> str:
    name = UNKNOWN
    if report.name or report.symbol:
        name = escape_markdown(report.name or report.symbol)
        if report.name and report.symbol:
            name += f" ({escape_markdown(report.symbol)})"

    decimals = str(report.decimals) if report.decimals is not None else UNKNOWN
    supply = format_number(report.supply) if report.supply is not None else UNKNOWN

    text = (
        "💎 *Token info*\n\n"
        f"🏷 Name: {name}\n"
        f"🔹 Mint: `{report.mint}`\n"
        f"🔢 Decimals: {decimals}\n"
        f"📦 Supply: {supply}\n\n"
        f"💰 Price (USD): {_money(report.price)}\n"
        f"💧 Liquidity: {_money(report.liquidity)}\n"
        f"📊 24h Volume: {_money(report.volume24h)}\n\n"
        f"🔗 Chart: {chart_url(report.mint)}\n"
    )
    if report.pair_url and report.pair_url != chart_url(report.mint):
        text += f"🧩 Pair: {report.pair_url}\n"
    text += "\n_Sources: Solana RPC (mint data) + Jupiter quote API (price) + DexScreener (liquidity/volume)._"
    return text

def build_keyboard(mint: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton("📈 Chart", url=chart_url(mint)),
            InlineKeyboardButton("🔄 Swap", url=swap_url(mint)),
        ],
        [InlineKeyboardButton("📋 Copy address", callback_data=f"{COPY_PREFIX}{mint}")],
    ])
