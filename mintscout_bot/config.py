#config.py

import os
from dotenv import load_dotenv

load_dotenv()

CONFIG = {
    "TELEGRAM_BOT_TOKEN": os.getenv("TELEGRAM_BOT_TOKEN"),
    "SOLANA_RPC_URL": os.getenv("SOLANA_RPC_URL", "https://api.mainnet-beta.solana.com"),
    "JUPITER_QUOTE_API": os.getenv("JUPITER_QUOTE_API", "https://lite-api.jup.ag/swap/v1/quote"),
    "DEXSCREENER_API": os.getenv("DEXSCREENER_API", "https://api.dexscreener.com"),
    "ENVIRONMENT": os.getenv("ENVIRONMENT", "development"),
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),

    # per-request timeouts (seconds)
    "RPC_TIMEOUT": float(os.getenv("RPC_TIMEOUT", "10")),
    "QUOTE_TIMEOUT": float(os.getenv("QUOTE_TIMEOUT", "10")),
    "MARKET_TIMEOUT": float(os.getenv("MARKET_TIMEOUT", "8")),

    "QUOTE_SLIPPAGE_BPS": int(os.getenv("QUOTE_SLIPPAGE_BPS", "50")),

    "DEFAULT_HEADERS": {
        "User-Agent": "MintScout/1.0"
    }
}

# Circle's USDC mint on Solana mainnet
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDC_DECIMALS = 6


def require_bot_token() -> str:
    token = CONFIG.get("TELEGRAM_BOT_TOKEN") or ""
    if not token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN missing")
    return token
