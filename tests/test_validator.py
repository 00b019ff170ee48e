import pytest

from mintscout_bot.errors import InvalidAddress
from mintscout_bot.validator import looks_like_mint, parse_address

USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WSOL = "So11111111111111111111111111111111111111112"


@pytest.mark.parametrize("text", ["", "   ", "abc", "x" * 31, "x" * 45, None, 12345])
def test_looks_like_mint_rejects_bad_lengths(text):
    assert looks_like_mint(text) is False


def test_looks_like_mint_trims_before_measuring():
    assert looks_like_mint(f"  {USDC}\n") is True
    assert looks_like_mint("x" * 32) is True
    assert looks_like_mint("x" * 44) is True


def test_parse_address_returns_canonical_base58():
    assert parse_address(f" {WSOL} ") == WSOL
    assert parse_address(USDC) == USDC


@pytest.mark.parametrize("text", ["0" * 40, "O" * 40, "I" * 40, "l" * 40])
def test_parse_address_rejects_non_base58(text):
    assert looks_like_mint(text)
    with pytest.raises(InvalidAddress):
        parse_address(text)


def test_invalid_address_is_a_value_error():
    with pytest.raises(ValueError):
        parse_address("not-a-key-but-long-enough-to-pass-length-check")
