"""
Deterministic key derivation for Banano accounts.

    seed (32 bytes) + index (uint32 BE)
        --BLAKE2b-256-->  private key (32 bytes)
        --BLAKE2b-512, clamp low half-->  Ed25519 scalar
        --scalar * B-->  public key (32 bytes)
        --base32 + checksum-->  ban_ address

The private key is never used as a scalar directly; it is always
expanded with BLAKE2b-512 first (Ed25519 with BLAKE2b instead of SHA-512).
"""

from __future__ import annotations

import binascii
import os
import struct
from typing import Any

from banano_core.address import public_key_to_address, public_key_to_hex
from banano_core.curve import Ed25519Curve, get_curve
from banano_core.errors import DecodeError, IndexRangeError, LengthError
from banano_core.hashing import hash256, hash512

SEED_SIZE = 32
PRIVATE_KEY_SIZE = 32
MAX_INDEX = 0xFFFFFFFF


def generate_seed() -> str:
    """Fresh random seed as 64 lowercase hex characters."""
    return os.urandom(SEED_SIZE).hex()


def _decode_seed(seed_hex: str) -> bytes:
    try:
        seed = binascii.unhexlify(seed_hex)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DecodeError(f"Could not decode seed: {e}") from e
    if len(seed) != SEED_SIZE:
        raise LengthError(f"Seed must be {SEED_SIZE} bytes, got {len(seed)}")
    return seed


def derive_private_key(seed_hex: str, index: int) -> bytes:
    """
    Derive the private key at *index* from a hex-encoded 32-byte seed.

    Raises :class:`DecodeError` for bad hex, :class:`LengthError` for a
    seed that is not 32 bytes and :class:`IndexRangeError` for an index
    outside ``0 .. 2**32 - 1``.
    """
    seed = _decode_seed(seed_hex)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= MAX_INDEX:
        raise IndexRangeError(f"Index must be between 0 and {MAX_INDEX}, got {index!r}")
    return hash256(seed + struct.pack(">I", index))


def clamp_scalar(candidate: bytes) -> bytes:
    """Apply Ed25519 clamping to a 32-byte scalar candidate."""
    if len(candidate) != 32:
        raise LengthError(f"Scalar candidate must be 32 bytes, got {len(candidate)}")
    scalar = bytearray(candidate)
    scalar[0] &= 248
    scalar[31] &= 127
    scalar[31] |= 64
    return bytes(scalar)


def derive_public_key(private_key: bytes,
                      curve: str | Ed25519Curve | None = None) -> bytes:
    """Derive the 32-byte Ed25519 public key for *private_key*."""
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise LengthError(
            f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
        )
    scalar = clamp_scalar(hash512(private_key)[:32])
    return get_curve(curve).scalar_base_mult(scalar)


class KeyPair:
    """A derived private/public key pair and its address."""

    def __init__(self, private_key: bytes, public_key: bytes,
                 index: int | None = None):
        self.private_key = private_key
        self.public_key = public_key
        self.index = index
        self.address = public_key_to_address(public_key)

    @classmethod
    def from_private_key(cls, private_key: bytes,
                         curve: str | Ed25519Curve | None = None) -> KeyPair:
        return cls(private_key, derive_public_key(private_key, curve))

    @classmethod
    def from_seed(cls, seed_hex: str, index: int = 0,
                  curve: str | Ed25519Curve | None = None) -> KeyPair:
        """Derive the account at *index* of *seed_hex*."""
        private_key = derive_private_key(seed_hex, index)
        return cls(private_key, derive_public_key(private_key, curve), index=index)

    def to_dict(self, include_private: bool = False) -> dict[str, Any]:
        """Hex-encoded view; the private key is only included on request."""
        d: dict[str, Any] = {
            "address": self.address,
            "public_key": public_key_to_hex(self.public_key),
        }
        if self.index is not None:
            d["index"] = self.index
        if include_private:
            d["private_key"] = self.private_key.hex()
        return d

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self.private_key == other.private_key and self.public_key == other.public_key

    def __hash__(self) -> int:
        return hash(self.public_key)

    def __repr__(self) -> str:
        return f"KeyPair(address={self.address!r})"
