"""Tests for did_key.crypto: PyNaCl key objects to and from did:key."""

import pytest
from nacl.public import PrivateKey
from nacl.signing import SigningKey

from did_key import KeyType, KeyTypeMismatchError, key_type_of
from did_key.crypto import (
    did_from_verify_key,
    did_from_x25519_public_key,
    verify_key_from_did,
    x25519_public_key_from_did,
)


class TestVerifyKey:
    def test_roundtrip_generated_key(self):
        verify_key = SigningKey.generate().verify_key
        did = did_from_verify_key(verify_key)
        assert did.startswith('did:key:z6Mk')
        assert key_type_of(did) is KeyType.ED25519
        assert bytes(verify_key_from_did(did)) == bytes(verify_key)

    def test_known_seed(self):
        verify_key = SigningKey(b'\x00' * 32).verify_key
        assert did_from_verify_key(verify_key) == 'did:key:z6MkiTBz1ymuepAQ4HEHYSF1H8quG5GLVVQR3djdX3mDooWp'

    def test_rejects_x25519_did(self):
        did = did_from_x25519_public_key(PrivateKey.generate().public_key)
        with pytest.raises(KeyTypeMismatchError):
            verify_key_from_did(did)


class TestX25519PublicKey:
    def test_roundtrip_generated_key(self):
        public_key = PrivateKey.generate().public_key
        did = did_from_x25519_public_key(public_key)
        assert did.startswith('did:key:z6LS')
        assert bytes(x25519_public_key_from_did(did)) == bytes(public_key)

    def test_rejects_ed25519_did(self):
        did = did_from_verify_key(SigningKey.generate().verify_key)
        with pytest.raises(KeyTypeMismatchError):
            x25519_public_key_from_did(did)
