"""
Error hierarchy for banano_core.

Every error is a ``ValueError`` so existing ``except ValueError`` call
sites keep catching them.
"""

from __future__ import annotations


class BananoError(ValueError):
    """Base class for all banano_core errors."""


class DecodeError(BananoError):
    """Hex or Base32 input is not well-formed."""


class InvalidSymbolError(DecodeError):
    """A character is outside the Base32 alphabet."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Invalid base32 symbol {symbol!r} at position {position}")


class LengthError(BananoError):
    """Decoded byte count does not match the width of the target entity."""


class FormatError(BananoError):
    """Address text does not have the expected prefix/length shape."""


class CurveError(BananoError):
    """The Ed25519 arithmetic primitive reported a failure."""


class ParseError(BananoError):
    """Malformed decimal amount."""


class IndexRangeError(BananoError):
    """Key index is outside the unsigned 32-bit range."""
