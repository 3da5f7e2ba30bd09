"""
Amount conversion between BAN and raw.

Banano balances are integers of *raw*, the smallest indivisible unit:

    1 BAN = 10**29 raw

Amounts are passed around as decimal strings so that no precision is
lost to floats.
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

from banano_core.errors import ParseError

BAN_DECIMALS: int = 29

RAW_PER_BAN: int = 10 ** BAN_DECIMALS

# raw -> BAN keeps 30 fractional digits.
DIVISION_PLACES: int = 30


def _context(prec: int) -> Context:
    """Context wide enough that *prec* digits are never rounded away."""
    return Context(prec=max(prec, 1), rounding=ROUND_HALF_UP,
                   Emax=MAX_EMAX, Emin=MIN_EMIN)


def _parse(value: str, what: str) -> Decimal:
    if not isinstance(value, str):
        raise ParseError(f"Could not parse {what} {value!r}: not a string")
    if not value.isascii() or "_" in value or value != value.strip():
        raise ParseError(f"Could not parse {what} {value!r}")
    try:
        with localcontext(Context()):
            d = Decimal(value)
    except InvalidOperation as e:
        raise ParseError(f"Could not parse {what} {value!r}") from e
    if not d.is_finite():
        raise ParseError(f"Could not parse {what} {value!r}: not a finite number")
    return d


def _format(d: Decimal, ctx: Context) -> str:
    """Plain notation, no exponent, no trailing fractional zeros."""
    d = d.normalize(ctx)
    if d == 0:
        return "0"
    return format(d, "f")


def ban_to_raw(amount: str) -> str:
    """
    Convert a BAN amount to raw. The result is exact.

    >>> ban_to_raw("1")
    '100000000000000000000000000000'
    >>> ban_to_raw("0.01")
    '1000000000000000000000000000'
    """
    ban = _parse(amount, "BAN amount")
    ctx = _context(len(ban.as_tuple().digits) + BAN_DECIMALS + 1)
    with localcontext(ctx):
        return _format(ban * RAW_PER_BAN, ctx)


def raw_to_ban(raw: str) -> str:
    """
    Convert a raw amount to BAN, rounded to 30 decimal places.

    >>> raw_to_ban("100000000000000000000000000000")
    '1'
    >>> raw_to_ban("1")
    '0.00000000000000000000000000001'
    """
    d = _parse(raw, "raw amount")
    # integer digits of the quotient plus the kept fraction
    ctx = _context(len(d.as_tuple().digits) + max(d.adjusted(), 0) + DIVISION_PLACES + 2)
    with localcontext(ctx):
        ban = (d / RAW_PER_BAN).quantize(Decimal(1).scaleb(-DIVISION_PLACES))
        return _format(ban, ctx)
