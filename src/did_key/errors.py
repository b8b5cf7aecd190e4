from typing import Optional


class DIDKeyError(ValueError):
    """
    Base class for every did:key encode/decode failure.
    `stage` names the pipeline step that rejected the input.
    """

    stage = 'did:key'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f'did:key {self.stage}: {self.message}'


class EmptyKeyBytesError(DIDKeyError):
    stage = 'encode'

    def __init__(self):
        super().__init__('key bytes cannot be empty')


class InvalidPrefixError(DIDKeyError):
    stage = 'decode'

    def __init__(self, expected: str, message: Optional[str] = None):
        super().__init__(message or f"invalid DID key prefix, expected '{expected}'")
        self.expected = expected


class EmptyIdentifierError(InvalidPrefixError):
    def __init__(self, expected: str):
        super().__init__(expected, 'empty DID key identifier')


class EmptyMultibaseStringError(DIDKeyError):
    stage = 'decode'

    def __init__(self):
        super().__init__('empty multibase string')


class InvalidBase58CharacterError(DIDKeyError):
    stage = 'base58'

    def __init__(self, character: str, position: int):
        super().__init__(f"invalid character {character!r} at position {position} in base58 string")
        self.character = character
        self.position = position


class UnsupportedMultibaseSchemeError(DIDKeyError):
    stage = 'multibase'

    def __init__(self, prefix: str, expected: str):
        found = repr(prefix) if prefix else 'nothing'
        super().__init__(f"expected base58-btc multibase prefix '{expected}', got {found}")
        self.prefix = prefix
        self.expected = expected


class MalformedVarintError(DIDKeyError):
    stage = 'varint'

    def __init__(self, consumed: int):
        super().__init__(f'incomplete varint: input ended after {consumed} byte(s) without a terminating byte')
        self.consumed = consumed


class VarintOverflowError(DIDKeyError):
    stage = 'varint'

    def __init__(self, limit: int, message: Optional[str] = None):
        super().__init__(message or f'varint value does not fit in {limit} bits')
        self.limit = limit


class EmptyDataError(DIDKeyError):
    stage = 'decode'

    def __init__(self):
        super().__init__('empty data after multibase decoding')


class NoKeyDataAfterVarintError(DIDKeyError):
    stage = 'decode'

    def __init__(self, tag: int):
        super().__init__(f'no key data after multicodec tag 0x{tag:x}')
        self.tag = tag


class UnsupportedKeyTypeError(DIDKeyError):
    stage = 'validate'

    def __init__(self, key_type=None, tag: Optional[int] = None):
        if tag is not None:
            message = f'unsupported multicodec: 0x{tag:x}'
        else:
            message = f'unsupported key type: {key_type!r}'
        super().__init__(message)
        self.key_type = key_type
        self.tag = tag


class InvalidKeySizeError(DIDKeyError):
    stage = 'validate'

    def __init__(self, key_type, expected: int, actual: int):
        super().__init__(f'invalid key size for {key_type}: expected {expected} bytes, got {actual}')
        self.key_type = key_type
        self.expected = expected
        self.actual = actual


class KeyTypeMismatchError(DIDKeyError):
    stage = 'validate'

    def __init__(self, expected, actual):
        super().__init__(f'expected a {expected} key, got {actual}')
        self.expected = expected
        self.actual = actual
