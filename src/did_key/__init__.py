import logging

from .registry import KeyType, supported_key_types
from .did import (
    DID_KEY_PREFIX,
    decode,
    did_from_public_key,
    encode,
    is_valid_did_key,
    key_type_of,
    public_key_from_did,
)
from .types import DIDKey
from .crypto import (
    did_from_verify_key,
    did_from_x25519_public_key,
    verify_key_from_did,
    x25519_public_key_from_did,
)
from .errors import (
    DIDKeyError,
    EmptyDataError,
    EmptyIdentifierError,
    EmptyKeyBytesError,
    EmptyMultibaseStringError,
    InvalidBase58CharacterError,
    InvalidKeySizeError,
    InvalidPrefixError,
    KeyTypeMismatchError,
    MalformedVarintError,
    NoKeyDataAfterVarintError,
    UnsupportedKeyTypeError,
    UnsupportedMultibaseSchemeError,
    VarintOverflowError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'DID_KEY_PREFIX',
    'KeyType',
    'DIDKey',
    'supported_key_types',
    'encode',
    'decode',
    'is_valid_did_key',
    'key_type_of',
    'did_from_public_key',
    'public_key_from_did',
    'did_from_verify_key',
    'verify_key_from_did',
    'did_from_x25519_public_key',
    'x25519_public_key_from_did',
    'DIDKeyError',
    'EmptyDataError',
    'EmptyIdentifierError',
    'EmptyKeyBytesError',
    'EmptyMultibaseStringError',
    'InvalidBase58CharacterError',
    'InvalidKeySizeError',
    'InvalidPrefixError',
    'KeyTypeMismatchError',
    'MalformedVarintError',
    'NoKeyDataAfterVarintError',
    'UnsupportedKeyTypeError',
    'UnsupportedMultibaseSchemeError',
    'VarintOverflowError',
]
