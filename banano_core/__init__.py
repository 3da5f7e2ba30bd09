"""
banano_core - key derivation and account addresses for the Banano ledger.

- Seed + index -> private key (BLAKE2b-256)
- Private key -> Ed25519 public key (BLAKE2b-512 expansion, libsodium or ecdsa backend)
- Public key <-> ``ban_`` address (custom Base32 with BLAKE2b-40 checksum)
- Address validation
- BAN <-> raw amount conversion
"""

from banano_core.address import (
    address_is_valid,
    address_to_public_key,
    public_key_to_address,
)
from banano_core.errors import (
    BananoError,
    CurveError,
    DecodeError,
    FormatError,
    IndexRangeError,
    InvalidSymbolError,
    LengthError,
    ParseError,
)
from banano_core.keys import KeyPair, derive_private_key, derive_public_key, generate_seed
from banano_core.units import ban_to_raw, raw_to_ban

__version__ = "0.1.0"
__all__ = [
    "address_is_valid",
    "address_to_public_key",
    "public_key_to_address",
    "derive_private_key",
    "derive_public_key",
    "generate_seed",
    "KeyPair",
    "ban_to_raw",
    "raw_to_ban",
    "BananoError",
    "CurveError",
    "DecodeError",
    "FormatError",
    "IndexRangeError",
    "InvalidSymbolError",
    "LengthError",
    "ParseError",
]
