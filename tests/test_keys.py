"""
Test suite for banano_core.keys — seed / private / public key derivation.

Covers:
  - Zero-seed regression vector
  - Determinism and index separation
  - Seed and index validation
  - Ed25519 clamping
  - KeyPair construction and serialisation
"""

import unittest

import pytest

from banano_core.address import address_is_valid
from banano_core.errors import DecodeError, IndexRangeError, LengthError
from banano_core.keys import (
    MAX_INDEX,
    KeyPair,
    clamp_scalar,
    derive_private_key,
    derive_public_key,
    generate_seed,
)
from tests.vectors import (
    ZERO_SEED,
    ZERO_SEED_ADDRESS,
    ZERO_SEED_PRIVATE,
    ZERO_SEED_PUBLIC,
)

SEED = "b5c8a5e3f2d17a0c9b4e6f8a1d2c3b4a5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b"


class TestDerivePrivateKey(unittest.TestCase):

    def test_zero_seed_vector(self):
        self.assertEqual(derive_private_key(ZERO_SEED, 0).hex(), ZERO_SEED_PRIVATE)

    def test_length(self):
        self.assertEqual(len(derive_private_key(SEED, 7)), 32)

    def test_deterministic(self):
        self.assertEqual(derive_private_key(SEED, 3), derive_private_key(SEED, 3))

    def test_index_separation(self):
        self.assertNotEqual(derive_private_key(SEED, 0), derive_private_key(SEED, 1))
        self.assertNotEqual(derive_private_key(ZERO_SEED, 0), derive_private_key(ZERO_SEED, 1))

    def test_uppercase_seed(self):
        self.assertEqual(derive_private_key(SEED.upper(), 0), derive_private_key(SEED, 0))

    def test_max_index(self):
        self.assertEqual(len(derive_private_key(SEED, MAX_INDEX)), 32)

    def test_bad_hex(self):
        with self.assertRaises(DecodeError):
            derive_private_key("zz" * 32, 0)

    def test_odd_length_hex(self):
        with self.assertRaises(DecodeError):
            derive_private_key("0" * 63, 0)

    def test_whitespace_rejected(self):
        with self.assertRaises(DecodeError):
            derive_private_key("00 " * 32, 0)

    def test_short_seed(self):
        with self.assertRaises(LengthError):
            derive_private_key("00" * 31, 0)

    def test_long_seed(self):
        with self.assertRaises(LengthError):
            derive_private_key("00" * 33, 0)

    def test_negative_index(self):
        with self.assertRaises(IndexRangeError):
            derive_private_key(SEED, -1)

    def test_index_too_large(self):
        with self.assertRaises(IndexRangeError):
            derive_private_key(SEED, MAX_INDEX + 1)

    def test_non_int_index(self):
        with self.assertRaises(IndexRangeError):
            derive_private_key(SEED, "0")
        with self.assertRaises(IndexRangeError):
            derive_private_key(SEED, True)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            derive_private_key("not hex", 0)


class TestClamp(unittest.TestCase):

    def test_clamp_bits(self):
        s = clamp_scalar(b"\xff" * 32)
        self.assertEqual(s[0] & 7, 0)
        self.assertEqual(s[31] & 0x80, 0)
        self.assertEqual(s[31] & 0x40, 0x40)
        self.assertEqual(s[1:31], b"\xff" * 30)

    def test_clamp_sets_bit_254(self):
        s = clamp_scalar(b"\x00" * 32)
        self.assertEqual(s, b"\x00" * 31 + b"\x40")

    def test_clamp_idempotent(self):
        s = clamp_scalar(bytes(range(32)))
        self.assertEqual(clamp_scalar(s), s)

    def test_clamp_wrong_length(self):
        with self.assertRaises(LengthError):
            clamp_scalar(b"\x00" * 31)


class TestDerivePublicKey:

    def test_zero_seed_vector(self, curve_name):
        pub = derive_public_key(bytes.fromhex(ZERO_SEED_PRIVATE), curve_name)
        assert pub.hex() == ZERO_SEED_PUBLIC

    def test_deterministic(self, curve_name):
        priv = derive_private_key(SEED, 5)
        assert derive_public_key(priv, curve_name) == derive_public_key(priv, curve_name)

    def test_backends_agree(self):
        for index in range(8):
            priv = derive_private_key(SEED, index)
            assert derive_public_key(priv, "sodium") == derive_public_key(priv, "ecdsa")

    def test_default_backend(self):
        priv = bytes.fromhex(ZERO_SEED_PRIVATE)
        assert derive_public_key(priv).hex() == ZERO_SEED_PUBLIC

    def test_wrong_length(self):
        with pytest.raises(LengthError):
            derive_public_key(b"\x00" * 31)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown curve backend"):
            derive_public_key(b"\x00" * 32, "openssl")


class TestKeyPair(unittest.TestCase):

    def test_from_seed_vector(self):
        kp = KeyPair.from_seed(ZERO_SEED, 0)
        self.assertEqual(kp.private_key.hex(), ZERO_SEED_PRIVATE)
        self.assertEqual(kp.public_key.hex(), ZERO_SEED_PUBLIC)
        self.assertEqual(kp.address, ZERO_SEED_ADDRESS)
        self.assertEqual(kp.index, 0)

    def test_from_private_key(self):
        kp = KeyPair.from_private_key(bytes.fromhex(ZERO_SEED_PRIVATE))
        self.assertEqual(kp.address, ZERO_SEED_ADDRESS)
        self.assertIsNone(kp.index)

    def test_equality(self):
        self.assertEqual(KeyPair.from_seed(SEED, 2), KeyPair.from_seed(SEED, 2))
        self.assertNotEqual(KeyPair.from_seed(SEED, 2), KeyPair.from_seed(SEED, 3))

    def test_derived_addresses_valid(self):
        for index in range(10):
            self.assertTrue(address_is_valid(KeyPair.from_seed(SEED, index).address))

    def test_to_dict_hides_private_key(self):
        d = KeyPair.from_seed(ZERO_SEED, 0).to_dict()
        self.assertNotIn("private_key", d)
        self.assertEqual(d["address"], ZERO_SEED_ADDRESS)
        self.assertEqual(d["public_key"], ZERO_SEED_PUBLIC)
        self.assertEqual(d["index"], 0)

    def test_to_dict_with_private_key(self):
        d = KeyPair.from_seed(ZERO_SEED, 0).to_dict(include_private=True)
        self.assertEqual(d["private_key"], ZERO_SEED_PRIVATE)

    def test_repr_has_no_secret(self):
        kp = KeyPair.from_seed(ZERO_SEED, 0)
        self.assertNotIn(ZERO_SEED_PRIVATE, repr(kp))


class TestGenerateSeed(unittest.TestCase):

    def test_format(self):
        seed = generate_seed()
        self.assertEqual(len(seed), 64)
        int(seed, 16)

    def test_usable(self):
        self.assertTrue(address_is_valid(KeyPair.from_seed(generate_seed(), 0).address))

    def test_unique(self):
        self.assertNotEqual(generate_seed(), generate_seed())
