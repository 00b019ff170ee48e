# telegram_bot.py
import logging

import requests
from telegram import Update
from telegram.ext import Application, ApplicationBuilder

from mintscout_bot.config import CONFIG, require_bot_token
from mintscout_bot.mint_handler import register_handlers

logger = logging.getLogger(__name__)


async def _open_session(app: Application):
    session = requests.Session()
    session.headers.update(CONFIG.get("DEFAULT_HEADERS", {}))
    app.bot_data["http"] = session

async def _close_session(app: Application):
    session = app.bot_data.pop("http", None)
    if session is not None:
        session.close()


def build_application(token: str) -> Application:
    app = (
        ApplicationBuilder()
        .token(token)
        .post_init(_open_session)
        .post_shutdown(_close_session)
        .build()
    )
    register_handlers(app)
    return app


def main():
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=CONFIG.get("LOG_LEVEL", "INFO"),
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    token = require_bot_token()

    logger.info("✅ Starting MintScout (%s)…", CONFIG.get("ENVIRONMENT"))
    app = build_application(token)
    app.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == "__main__":
    main()
