from dataclasses import dataclass

from .did import DID_KEY_PREFIX, decode, encode
from .registry import KeyType, validate_size


@dataclass(frozen=True)
class DIDKey:
    key_type: KeyType
    key: bytes

    @classmethod
    def from_bytes(cls, key_type: KeyType, key: bytes) -> 'DIDKey':
        """
        Build a DIDKey from raw key bytes, checking the size for `key_type`.
        The bytes are copied.
        """
        key = bytes(memoryview(key))
        validate_size(key_type, key)
        return cls(key_type, key)

    @classmethod
    def parse(cls, did: str) -> 'DIDKey':
        key_type, key = decode(did)
        return cls(key_type, key)

    @property
    def did(self) -> str:
        return encode(self.key_type, self.key)

    @property
    def fingerprint(self) -> str:
        """
        Multibase part of the identifier, also used as the verification method fragment.
        """
        return self.did[len(DID_KEY_PREFIX):]

    @property
    def key_id(self) -> str:
        return f'{self.did}#{self.fingerprint}'

    def to_bytes(self) -> bytes:
        return bytes(self.key)

    def __str__(self) -> str:
        return self.did
