"""
Banano account addresses.

Layout (64 characters)::

    ban_ <52 symbols: public key> <8 symbols: checksum>

The checksum is BLAKE2b-40 of the public key, byte-reversed before
encoding.  Both fields are left-padded with ``'1'``.  Parsing also
accepts a 65-character form with a 5-character prefix.
"""

from __future__ import annotations

import binascii
import logging
import re

from banano_core import base32
from banano_core.errors import BananoError, DecodeError, FormatError, LengthError
from banano_core.hashing import CHECKSUM_SIZE, hash40

logger = logging.getLogger("banano_core.address")

PREFIX = "ban_"
PUBLIC_KEY_SIZE = 32

KEY_FIELD_WIDTH = base32.encoded_length(PUBLIC_KEY_SIZE)      # 52
CHECKSUM_FIELD_WIDTH = base32.encoded_length(CHECKSUM_SIZE)   # 8

ADDRESS_LENGTH = len(PREFIX) + KEY_FIELD_WIDTH + CHECKSUM_FIELD_WIDTH   # 64
LEGACY_ADDRESS_LENGTH = ADDRESS_LENGTH + 1                               # 65

ADDRESS_PATTERN = re.compile(
    r"^ban_[13][" + base32.ALPHABET + r"]{"
    + str(KEY_FIELD_WIDTH + CHECKSUM_FIELD_WIDTH - 1) + r"}$"
)


def _check_public_key(public_key: bytes) -> None:
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise LengthError(
            f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}"
        )


def compute_checksum(public_key: bytes) -> str:
    """Return the 8-symbol checksum field for *public_key*."""
    _check_public_key(public_key)
    digest = base32.revert_bytes(hash40(public_key))
    return base32.encode_padded(digest, CHECKSUM_FIELD_WIDTH)


def public_key_to_address(public_key: bytes) -> str:
    """Encode a 32-byte public key as a ``ban_`` address."""
    _check_public_key(public_key)
    key_field = base32.encode_padded(public_key, KEY_FIELD_WIDTH)
    return PREFIX + key_field + compute_checksum(public_key)


def address_to_public_key(address: str) -> bytes:
    """
    Extract the public key from *address*.

    Only the shape is checked here (4-char prefix with 64 characters, or
    5-char prefix with 65); use :func:`address_is_valid` to verify the
    checksum.
    """
    if not isinstance(address, str):
        raise FormatError(f"Address must be a string, got {type(address).__name__}")
    if len(address) == ADDRESS_LENGTH:
        prefix_len = len(PREFIX)
    elif len(address) == LEGACY_ADDRESS_LENGTH:
        prefix_len = len(PREFIX) + 1
    else:
        raise FormatError(
            f"Address must be {ADDRESS_LENGTH} or {LEGACY_ADDRESS_LENGTH} "
            f"characters, got {len(address)}"
        )
    if address[prefix_len - 1] != "_":
        raise FormatError(f"Address prefix {address[:prefix_len]!r} lacks the '_' separator")
    payload = address[prefix_len:prefix_len + KEY_FIELD_WIDTH]
    return base32.decode(payload, PUBLIC_KEY_SIZE)


def address_is_valid(address: str) -> bool:
    """True if *address* is well-formed and its checksum matches. Never raises."""
    if not isinstance(address, str) or not address:
        return False
    if len(address) != ADDRESS_LENGTH:
        logger.debug(f"Rejected address of length {len(address)}")
        return False
    if not ADDRESS_PATTERN.match(address):
        logger.debug(f"Rejected malformed address {address!r}")
        return False

    try:
        public_key = address_to_public_key(address)
        expected = compute_checksum(public_key)
    except BananoError as e:
        logger.debug(f"Rejected address {address!r}: {e}")
        return False

    if address[-CHECKSUM_FIELD_WIDTH:] != expected:
        logger.debug(f"Checksum mismatch for {address!r}")
        return False
    return True


def public_key_to_hex(public_key: bytes) -> str:
    _check_public_key(public_key)
    return public_key.hex()


def public_key_from_hex(text: str) -> bytes:
    try:
        public_key = binascii.unhexlify(text)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DecodeError(f"Public key is not valid hex: {e}") from e
    _check_public_key(public_key)
    return public_key
