from typing import Tuple

from .errors import MalformedVarintError, VarintOverflowError

MAX_UINT64 = (1 << 64) - 1
MAX_VARINT_BYTES = 10


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned LEB128 varint (multicodec tag): 7 value bits per byte,
    least significant group first, high bit set on every byte but the last.
    """
    if value < 0:
        raise ValueError(f'varint value must be unsigned, got {value}')
    if value > MAX_UINT64:
        raise VarintOverflowError(64)
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_varint(data: bytes) -> Tuple[int, int]:
    """
    Decode the varint at the start of `data`.
    Returns (value, bytes_consumed); trailing bytes are left untouched.
    """
    value = 0
    shift = 0
    for i, byte in enumerate(data):
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            if value > MAX_UINT64:
                raise VarintOverflowError(64)
            return value, i + 1
        shift += 7
        if i + 1 >= MAX_VARINT_BYTES:
            raise VarintOverflowError(64, f'varint longer than {MAX_VARINT_BYTES} bytes')
    raise MalformedVarintError(len(data))
