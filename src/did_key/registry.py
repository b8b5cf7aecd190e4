from enum import Enum
from typing import Dict, Tuple

from .errors import InvalidKeySizeError, UnsupportedKeyTypeError


class KeyType(Enum):
    """
    Public-key families that can appear in a did:key identifier.
    Each member is (label, multicodec tag, raw key size, multicodec name).
    """

    ED25519 = ('Ed25519', 0xED, 32, 'ed25519-pub')
    X25519 = ('X25519', 0xEC, 32, 'x25519-pub')
    SECP256K1 = ('secp256k1', 0xE7, 33, 'secp256k1-pub')  # compressed
    BLS12381_G1 = ('BLS12381G1', 0xEA, 48, 'bls12_381-g1-pub')
    BLS12381_G2 = ('BLS12381G2', 0xEB, 96, 'bls12_381-g2-pub')
    P256 = ('P-256', 0x1200, 33, 'p256-pub')  # compressed
    P384 = ('P-384', 0x1201, 49, 'p384-pub')  # compressed

    def __init__(self, label: str, codec: int, key_size: int, codec_name: str):
        self.label = label
        self.codec = codec
        self.key_size = key_size
        self.codec_name = codec_name

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_name(cls, name: str) -> 'KeyType':
        """
        Look up a key type by its label ('P-256') or multicodec name ('p256-pub').
        """
        for key_type in cls:
            if name in (key_type.label, key_type.codec_name):
                return key_type
        raise UnsupportedKeyTypeError(name)


_TYPES_BY_TAG: Dict[int, KeyType] = {key_type.codec: key_type for key_type in KeyType}


def supported_key_types() -> Tuple[KeyType, ...]:
    return tuple(KeyType)


def _require_key_type(key_type) -> KeyType:
    if not isinstance(key_type, KeyType):
        raise UnsupportedKeyTypeError(key_type)
    return key_type


def tag_for_type(key_type: KeyType) -> int:
    return _require_key_type(key_type).codec


def type_for_tag(tag: int) -> KeyType:
    try:
        return _TYPES_BY_TAG[tag]
    except KeyError:
        raise UnsupportedKeyTypeError(tag=tag) from None


def expected_length(key_type: KeyType) -> int:
    return _require_key_type(key_type).key_size


def validate_size(key_type: KeyType, data: bytes) -> None:
    """
    Raise InvalidKeySizeError unless `data` is exactly the size of a `key_type` key.
    """
    expected = expected_length(key_type)
    if len(data) != expected:
        raise InvalidKeySizeError(key_type, expected, len(data))
