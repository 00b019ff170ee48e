# models.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class MintInfo:
    """Decimals and human-unit supply read from the mint account."""
    decimals: Optional[int] = None
    supply: Optional[Decimal] = None


@dataclass(frozen=True)
class MarketSnapshot:
    name: Optional[str] = None
    symbol: Optional[str] = None
    price: Optional[Decimal] = None
    liquidity: Optional[Decimal] = None
    volume24h: Optional[Decimal] = None
    url: Optional[str] = None

    def has_data(self) -> bool:
        # url alone does not make a snapshot useful
        return any(v not in (None, "") for v in (
            self.name, self.symbol, self.price, self.liquidity, self.volume24h
        ))


@dataclass(frozen=True)
class TokenReport:
    """
    Merged view handed to the renderer.
    Sources are independent; price comes from the quote when there is one.
    """
    mint: str
    decimals: Optional[int] = None
    supply: Optional[Decimal] = None
    price: Optional[Decimal] = None
    liquidity: Optional[Decimal] = None
    volume24h: Optional[Decimal] = None
    name: Optional[str] = None
    symbol: Optional[str] = None
    pair_url: Optional[str] = None
