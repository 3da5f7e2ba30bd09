"""
BLAKE2b helpers.

The ledger uses unkeyed BLAKE2b with three output sizes:

  - 5 bytes   address checksum
  - 32 bytes  private key derivation (seed || index)
  - 64 bytes  Ed25519 scalar expansion of a private key
"""

from __future__ import annotations

import hashlib

CHECKSUM_SIZE = 5
KEY_SIZE = 32
EXPANDED_SIZE = 64


def blake2b_digest(data: bytes, size: int) -> bytes:
    """BLAKE2b of *data* truncated to *size* bytes (1..64)."""
    if not 1 <= size <= 64:
        raise ValueError(f"BLAKE2b digest size must be 1..64, got {size}")
    return hashlib.blake2b(data, digest_size=size).digest()


def hash40(data: bytes) -> bytes:
    return blake2b_digest(data, CHECKSUM_SIZE)


def hash256(data: bytes) -> bytes:
    return blake2b_digest(data, KEY_SIZE)


def hash512(data: bytes) -> bytes:
    return blake2b_digest(data, EXPANDED_SIZE)
