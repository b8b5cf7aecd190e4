from .errors import InvalidBase58CharacterError

BASE58_ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'

_ALPHABET_BYTES = BASE58_ALPHABET.encode('ascii')
_ALPHABET_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


def encode_base58(data: bytes) -> str:
    """
    Encode bytes as base58-btc (Bitcoin alphabet, no multibase prefix).
    Every leading zero byte is kept as a leading '1'.
    """
    data = bytes(memoryview(data))
    zeros = len(data) - len(data.lstrip(b'\x00'))
    num = int.from_bytes(data, 'big')
    enc = bytearray()
    while num > 0:
        num, rem = divmod(num, 58)
        enc.append(_ALPHABET_BYTES[rem])
    # one leading alphabet[0] per leading zero byte
    enc.extend(_ALPHABET_BYTES[:1] * zeros)
    enc.reverse()
    return enc.decode('ascii')


def decode_base58(text: str) -> bytes:
    """
    Decode base58-btc text. Raises InvalidBase58CharacterError on the first
    character outside the alphabet (the check is case-sensitive).
    """
    num = 0
    for position, char in enumerate(text):
        index = _ALPHABET_INDEX.get(char)
        if index is None:
            raise InvalidBase58CharacterError(char, position)
        num = num * 58 + index
    zeros = len(text) - len(text.lstrip(BASE58_ALPHABET[0]))
    body = num.to_bytes((num.bit_length() + 7) // 8, 'big')
    return b'\x00' * zeros + body
