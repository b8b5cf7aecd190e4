import logging
from typing import Optional, Tuple

from .errors import (
    DIDKeyError,
    EmptyDataError,
    EmptyIdentifierError,
    EmptyKeyBytesError,
    EmptyMultibaseStringError,
    InvalidPrefixError,
    KeyTypeMismatchError,
    NoKeyDataAfterVarintError,
)
from .multibase import decode_multibase, encode_multibase
from .registry import KeyType, tag_for_type, type_for_tag, validate_size
from .varint import decode_varint, encode_varint

LOGGER = logging.getLogger(__name__)

DID_KEY_PREFIX = 'did:key:'


def encode(key_type: KeyType, key: bytes) -> str:
    """
    Create a did:key identifier:
    did:key:MULTIBASE(base58-btc, MULTICODEC(key_type, key))
    """
    key = bytes(memoryview(key))
    if not key:
        raise EmptyKeyBytesError()
    validate_size(key_type, key)
    tagged = encode_varint(tag_for_type(key_type)) + key
    return DID_KEY_PREFIX + encode_multibase(tagged)


def decode(did: str) -> Tuple[KeyType, bytes]:
    """
    Split a did:key identifier into its key type and raw public key bytes.
    The first failing check raises; nothing is returned on error.
    """
    if not isinstance(did, str):
        raise InvalidPrefixError(DID_KEY_PREFIX)
    if not did:
        raise EmptyIdentifierError(DID_KEY_PREFIX)
    if not did.startswith(DID_KEY_PREFIX):
        raise InvalidPrefixError(DID_KEY_PREFIX)

    multibase = did[len(DID_KEY_PREFIX):]
    if not multibase:
        raise EmptyMultibaseStringError()

    tagged = decode_multibase(multibase)
    if not tagged:
        raise EmptyDataError()

    tag, consumed = decode_varint(tagged)
    key = tagged[consumed:]
    if not key:
        raise NoKeyDataAfterVarintError(tag)

    key_type = type_for_tag(tag)
    validate_size(key_type, key)
    return key_type, key


def is_valid_did_key(did: str) -> bool:
    try:
        decode(did)
    except DIDKeyError as e:
        LOGGER.debug('Rejected did:key (%s): %s', type(e).__name__, e)
        return False
    return True


def key_type_of(did: str) -> KeyType:
    key_type, _ = decode(did)
    return key_type


def did_from_public_key(public_key: bytes) -> str:
    """
    Create did:key identifier for a raw 32-byte Ed25519 public key (multicodec 0xed01).
    """
    return encode(KeyType.ED25519, public_key)


def public_key_from_did(did: str, key_type: Optional[KeyType] = None) -> bytes:
    """
    Extract the raw public key from a did:key identifier.
    When `key_type` is given the identifier must carry that type.
    """
    actual, key = decode(did)
    if key_type is not None and actual is not key_type:
        raise KeyTypeMismatchError(key_type, actual)
    return key
