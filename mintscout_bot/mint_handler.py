# mint_handler.py
import asyncio
import logging

from telegram import Update
from telegram.constants import ParseMode
from telegram.error import BadRequest, TelegramError
from telegram.ext import (
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from mintscout_bot.chain_rpc import get_mint_info
from mintscout_bot.errors import InvalidAddress
from mintscout_bot.market_data import get_market_data
from mintscout_bot.price_fetcher import get_price_from_jupiter
from mintscout_bot.report import COPY_PREFIX, build_keyboard, build_report, render_report
from mintscout_bot.validator import looks_like_mint, parse_address

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Send a Solana token *mint address* and I will fetch decimals, supply (on-chain), "
    "price (via Jupiter → USDC) and liquidity/24h volume (via DexScreener if available)."
)

# ───────── aggregation ───────── #

def _onchain_lookup(mint: str, session):
    mint_info = get_mint_info(mint, session=session)
    decimals = mint_info.decimals if mint_info else None
    price = get_price_from_jupiter(mint, decimals, session=session)
    return mint_info, price

async def collect_report(mint: str, session=None):
    """
    Run the mint+quote pair and the DexScreener lookup side by side.
    Whatever fails turns into an empty field, never into a failed reply.
    """
    onchain, market = await asyncio.gather(
        asyncio.to_thread(_onchain_lookup, mint, session),
        asyncio.to_thread(get_market_data, mint, session),
        return_exceptions=True,
    )
    if isinstance(onchain, Exception):
        logger.error("On-chain lookup crashed for %s: %s", mint, onchain)
        onchain = (None, None)
    if isinstance(market, Exception):
        logger.error("Market lookup crashed for %s: %s", mint, market)
        market = None

    mint_info, price = onchain
    return build_report(mint, mint_info, price, market)

# ───────── /commands ───────── #

async def cmd_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(HELP_TEXT, parse_mode=ParseMode.MARKDOWN)

# ───────── text/input handler (mints) ───────── #

async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if update.message is None:
        return
    text = (update.message.text or "").strip()
    if not text:
        return

    if not looks_like_mint(text):
        await update.message.reply_text("Please send a valid-looking Solana mint address (base58).")
        return

    try:
        mint = parse_address(text)
    except InvalidAddress:
        await update.message.reply_text("Invalid Solana public key format.")
        return

    loading = await update.message.reply_text(
        f"Fetching data for `{mint}` …", parse_mode=ParseMode.MARKDOWN
    )

    report = await collect_report(mint, session=context.bot_data.get("http"))
    logger.info("Report ready for %s (price=%s)", mint, report.price)

    reply = render_report(report)
    keyboard = build_keyboard(mint)
    try:
        await loading.edit_text(
            reply,
            parse_mode=ParseMode.MARKDOWN,
            reply_markup=keyboard,
            disable_web_page_preview=True,
        )
    except BadRequest as e:
        # upstream names/urls can break Markdown entities; fall back to plain text
        logger.warning("Markdown rejected for %s (%s), sending plain text", mint, e)
        try:
            await loading.edit_text(reply, reply_markup=keyboard, disable_web_page_preview=True)
        except TelegramError as retry_err:
            logger.error("Could not deliver report for %s: %s", mint, retry_err)
    except TelegramError as e:
        logger.error("Could not deliver report for %s: %s", mint, e)

async def button_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    data = query.data or ""
    if data.startswith(COPY_PREFIX):
        await query.answer(text=data[len(COPY_PREFIX):])
        return
    await query.answer()

async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE):
    logger.error("Unhandled error while processing %s", update, exc_info=context.error)

# ───────── app handlers ───────── #

def register_handlers(app):
    app.add_handler(CommandHandler(["start", "help"], cmd_start, filters=filters.UpdateType.MESSAGE))
    app.add_handler(CallbackQueryHandler(button_handler))
    app.add_handler(MessageHandler(filters.UpdateType.MESSAGE & filters.TEXT & ~filters.COMMAND, handle_text))
    app.add_error_handler(on_error)
