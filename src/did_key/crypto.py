from nacl.public import PublicKey
from nacl.signing import VerifyKey

from .did import encode, public_key_from_did
from .registry import KeyType


def did_from_verify_key(verify_key: VerifyKey) -> str:
    """
    did:key identifier for a PyNaCl Ed25519 verify key.
    """
    return encode(KeyType.ED25519, bytes(verify_key))


def verify_key_from_did(did: str) -> VerifyKey:
    """
    Rebuild the PyNaCl verify key embedded in an Ed25519 did:key.
    Raises KeyTypeMismatchError for any other key type.
    """
    return VerifyKey(public_key_from_did(did, KeyType.ED25519))


def did_from_x25519_public_key(public_key: PublicKey) -> str:
    return encode(KeyType.X25519, bytes(public_key))


def x25519_public_key_from_did(did: str) -> PublicKey:
    return PublicKey(public_key_from_did(did, KeyType.X25519))
