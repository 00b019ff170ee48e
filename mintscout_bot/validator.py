# validator.py
from solders.pubkey import Pubkey

from mintscout_bot.errors import InvalidAddress


def looks_like_mint(text) -> bool:
    if not text or not isinstance(text, str):
        return False
    t = text.strip()
    return 32 <= len(t) <= 44  # base58 pubkey length


def parse_address(text: str) -> str:
    """Decode a base58 mint address and return its canonical form."""
    try:
        pubkey = Pubkey.from_string(text.strip())
    except ValueError as e:
        raise InvalidAddress(f"not a Solana public key: {text!r}") from e
    return str(pubkey)
