"""SHA-1 message digest used to store user passwords."""

from __future__ import annotations

import struct

ONE_BLOCK_SIZE_BYTES = 64
ONE_BLOCK_SIZE_UINTS = 16
BLOCK_EXPAND_SIZE_UINTS = 80

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

H = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)


def cycle_shift_left(val: int, bit_count: int) -> int:
    """Rotate a 32-bit value left by ``bit_count`` bits."""
    val &= _MASK32
    return ((val << bit_count) | (val >> (32 - bit_count))) & _MASK32


def _round_function(j: int, b: int, c: int, d: int) -> tuple[int, int]:
    if j < 20:
        return (b & c) | (~b & d), 0x5A827999
    if j < 40:
        return b ^ c ^ d, 0x6ED9EBA1
    if j < 60:
        return (b & c) | (b & d) | (c & d), 0x8F1BBCDC
    return b ^ c ^ d, 0xCA62C1D6


def _pad(message: bytes) -> bytes:
    padded = bytearray(message)
    padded.append(0x80)
    padded.extend(b"\x00" * ((56 - len(padded) % ONE_BLOCK_SIZE_BYTES) % ONE_BLOCK_SIZE_BYTES))
    padded += struct.pack(">Q", (len(message) * 8) & _MASK64)
    return bytes(padded)


def sha1(data: bytes | bytearray | memoryview) -> bytes:
    """Return the 20-byte SHA-1 digest of ``data``."""
    if isinstance(data, str):
        raise TypeError("sha1() expects bytes, not str")
    padded = _pad(bytes(data))
    state = list(H)

    for offset in range(0, len(padded), ONE_BLOCK_SIZE_BYTES):
        block = padded[offset:offset + ONE_BLOCK_SIZE_BYTES]
        w = list(struct.unpack(">16I", block))
        for j in range(ONE_BLOCK_SIZE_UINTS, BLOCK_EXPAND_SIZE_UINTS):
            w.append(cycle_shift_left(w[j - 3] ^ w[j - 8] ^ w[j - 14] ^ w[j - 16], 1))

        a, b, c, d, e = state
        for j, word in enumerate(w):
            f, k = _round_function(j, b, c, d)
            temp = (cycle_shift_left(a, 5) + f + e + k + word) & _MASK32
            e, d, c, b, a = d, c, cycle_shift_left(b, 30), a, temp

        state = [(x + y) & _MASK32 for x, y in zip(state, (a, b, c, d, e))]

    return struct.pack(">5I", *state)