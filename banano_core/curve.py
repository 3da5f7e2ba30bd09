"""
Ed25519 base-point multiplication backends.

Key derivation only needs one curve operation: multiply the base point
by an already clamped 32-byte scalar and return the canonical point
encoding.  Two interchangeable backends provide it:

  - **sodium** – libsodium through PyNaCl (constant time, default)
  - **ecdsa**  – pure-Python Edwards arithmetic from the ``ecdsa`` package

Both reduce the scalar modulo the group order ``L`` first and must
produce bit-identical encodings.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from banano_core.errors import CurveError, LengthError

logger = logging.getLogger("banano_core.curve")

# Order of the Ed25519 prime-order subgroup.
GROUP_ORDER: int = 2 ** 252 + 27742317777372353535851937790883648493

SCALAR_SIZE = 32
POINT_SIZE = 32


def reduce_scalar(scalar: bytes) -> int:
    """Interpret *scalar* as a little-endian integer modulo ``L``."""
    if len(scalar) != SCALAR_SIZE:
        raise LengthError(f"Scalar must be {SCALAR_SIZE} bytes, got {len(scalar)}")
    k = int.from_bytes(scalar, "little") % GROUP_ORDER
    if k == 0:
        raise CurveError("Scalar reduces to zero modulo the group order")
    return k


class Ed25519Curve(ABC):
    """Capability interface for base-point scalar multiplication."""

    name = "abstract"

    @abstractmethod
    def scalar_base_mult(self, scalar: bytes) -> bytes:
        """Return the 32-byte encoding of ``scalar * B``."""


class SodiumCurve(Ed25519Curve):
    """libsodium ``crypto_scalarmult_ed25519_base_noclamp`` via PyNaCl."""

    name = "sodium"

    def scalar_base_mult(self, scalar: bytes) -> bytes:
        from nacl import bindings
        from nacl.exceptions import CryptoError

        k = reduce_scalar(scalar)
        try:
            point = bindings.crypto_scalarmult_ed25519_base_noclamp(
                k.to_bytes(SCALAR_SIZE, "little")
            )
        except CryptoError as e:
            raise CurveError(f"libsodium base-point multiplication failed: {e}") from e
        return bytes(point)


class EcdsaCurve(Ed25519Curve):
    """Edwards arithmetic from the ``ecdsa`` package."""

    name = "ecdsa"

    def scalar_base_mult(self, scalar: bytes) -> bytes:
        from ecdsa.eddsa import generator_ed25519
        from ecdsa.ellipticcurve import INFINITY

        k = reduce_scalar(scalar)
        point = generator_ed25519 * k
        if point == INFINITY:
            raise CurveError("Base-point multiplication produced the identity")
        return encode_point(point.x(), point.y())


def encode_point(x: int, y: int) -> bytes:
    """Canonical encoding: ``y`` little-endian, sign of ``x`` in bit 255."""
    encoded = bytearray(y.to_bytes(POINT_SIZE, "little"))
    encoded[31] |= (x & 1) << 7
    return bytes(encoded)


_BACKENDS: dict[str, Ed25519Curve] = {
    SodiumCurve.name: SodiumCurve(),
    EcdsaCurve.name: EcdsaCurve(),
}


def available_curves() -> list[str]:
    return sorted(_BACKENDS)


def get_curve(curve: str | Ed25519Curve | None = None) -> Ed25519Curve:
    """
    Resolve a backend.

    *curve* may be a backend instance, a registered name, or ``None`` for
    the configured default (``BANANO_CURVE`` or ``"sodium"``).
    """
    if isinstance(curve, Ed25519Curve):
        return curve
    if curve is None:
        from banano_core.config import default_curve_name
        curve = default_curve_name()
    try:
        backend = _BACKENDS[curve.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown curve backend {curve!r}; expected one of {available_curves()}"
        ) from None
    logger.debug(f"Using {backend.name} Ed25519 backend")
    return backend
