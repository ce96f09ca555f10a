"""An incremental SHA-1 implementation."""

from __future__ import annotations

from typing import Tuple, Union

_MASK = 0xFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def left_rotate(value: int, count: int) -> int:
    """Rotate a 32-bit value left by count bits."""
    value &= _MASK
    return ((value << count) ^ (value >> (32 - count))) & _MASK


class Sha1:
    """SHA-1 hasher fed incrementally; digests do not disturb the running state."""

    def __init__(self, data: Union[bytes, bytearray, memoryview] = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> "Sha1":
        self._h = list(_INITIAL)
        self._block = bytearray()
        self._byte_count = 0
        return self

    def update(self, data: Union[bytes, bytearray, memoryview]) -> "Sha1":
        data = bytes(data)
        self._byte_count += len(data)
        self._block.extend(data)
        whole = len(self._block) - len(self._block) % 64
        for start in range(0, whole, 64):
            self._process(self._block[start : start + 64])
        del self._block[:whole]
        return self

    def copy(self) -> "Sha1":
        other = Sha1()
        other._h = list(self._h)
        other._block = bytearray(self._block)
        other._byte_count = self._byte_count
        return other

    def _process(self, block: bytes) -> None:
        w = [int.from_bytes(block[i : i + 4], "big") for i in range(0, 64, 4)]
        for i in range(16, 80):
            w.append(left_rotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
        a, b, c, d, e = self._h
        for i, word in enumerate(w):
            if i < 20:
                f, k = (b & c) | (~b & d), 0x5A827999
            elif i < 40:
                f, k = b ^ c ^ d, 0x6ED9EBA1
            elif i < 60:
                f, k = (b & c) | (b & d) | (c & d), 0x8F1BBCDC
            else:
                f, k = b ^ c ^ d, 0xCA62C1D6
            temp = (left_rotate(a, 5) + (f & _MASK) + e + k + word) & _MASK
            a, b, c, d, e = temp, a, left_rotate(b, 30), c, d
        self._h = [(x + y) & _MASK for x, y in zip(self._h, (a, b, c, d, e))]

    def digest_words(self) -> Tuple[int, int, int, int, int]:
        """Return the digest as five 32-bit words."""
        final = self.copy()
        bit_count = (self._byte_count * 8) & _MASK
        padding = b"\x80" + b"\x00" * ((55 - self._byte_count) % 64)
        final.update(padding + b"\x00\x00\x00\x00" + bit_count.to_bytes(4, "big"))
        return tuple(final._h)  # type: ignore[return-value]

    def digest(self) -> bytes:
        return b"".join(word.to_bytes(4, "big") for word in self.digest_words())

    def hexdigest(self) -> str:
        return self.digest().hex()