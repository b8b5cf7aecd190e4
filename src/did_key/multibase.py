from .base58 import decode_base58, encode_base58
from .errors import UnsupportedMultibaseSchemeError

# base58-btc, no padding; the only multibase scheme did:key uses
MULTIBASE_BASE58BTC_PREFIX = 'z'


def encode_multibase(data: bytes) -> str:
    return MULTIBASE_BASE58BTC_PREFIX + encode_base58(data)


def decode_multibase(text: str) -> bytes:
    """
    Decode a base58-btc multibase string. Any other multibase scheme is rejected.
    """
    if not text.startswith(MULTIBASE_BASE58BTC_PREFIX):
        raise UnsupportedMultibaseSchemeError(text[:1], MULTIBASE_BASE58BTC_PREFIX)
    return decode_base58(text[len(MULTIBASE_BASE58BTC_PREFIX):])
