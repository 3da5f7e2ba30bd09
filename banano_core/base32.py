"""
Base32 codec used by Banano (and Nano) account addresses.

This is *not* RFC 4648.  The input bytes are read as one big-endian
unsigned integer and rewritten in radix 32, most significant symbol
first, over the alphabet::

    13456789abcdefghijkmnopqrstuwxyz

(digits 1 and 3-9, lowercase letters without l and v; ``0`` and ``2``
are also missing).  ``'1'`` is value 0, so left-padding with it never
changes the encoded number.
"""

from __future__ import annotations

from banano_core.errors import InvalidSymbolError, LengthError

ALPHABET = "13456789abcdefghijkmnopqrstuwxyz"
FILLER = ALPHABET[0]

_SYMBOL_VALUES: dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}


def encoded_length(size: int) -> int:
    """Number of symbols needed for *size* bytes (32 -> 52, 5 -> 8)."""
    return (size * 8 + 4) // 5


def encode(data: bytes) -> str:
    """
    Encode *data* with the minimal number of symbols.

    A zero value encodes to the empty string; callers pad to a fixed
    width with :data:`FILLER` (see :func:`encode_padded`).
    """
    value = int.from_bytes(data, "big")
    symbols = []
    while value:
        value, digit = divmod(value, 32)
        symbols.append(ALPHABET[digit])
    return "".join(reversed(symbols))


def encode_padded(data: bytes, width: int | None = None) -> str:
    """Encode *data* and left-pad to *width* (default: the full width for ``len(data)``)."""
    if width is None:
        width = encoded_length(len(data))
    text = encode(data)
    if len(text) > width:
        raise LengthError(f"Encoded value needs {len(text)} symbols, wider than {width}")
    return text.rjust(width, FILLER)


def decode(text: str, size: int) -> bytes:
    """
    Decode *text* into exactly *size* big-endian bytes.

    Raises :class:`InvalidSymbolError` for characters outside the alphabet
    and :class:`LengthError` when the symbol count does not match *size*
    or the value does not fit in *size* bytes.
    """
    expected = encoded_length(size)
    if len(text) != expected:
        raise LengthError(
            f"Expected {expected} symbols for {size} bytes, got {len(text)}"
        )
    value = 0
    for pos, ch in enumerate(text):
        digit = _SYMBOL_VALUES.get(ch)
        if digit is None:
            raise InvalidSymbolError(ch, pos)
        value = (value << 5) | digit
    try:
        return value.to_bytes(size, "big")
    except OverflowError:
        raise LengthError(f"Encoded value does not fit in {size} bytes") from None


def revert_bytes(data: bytes) -> bytes:
    """Reverse byte order (applied to address checksums, never to keys)."""
    return bytes(reversed(data))
