"""Incremental SipHash.

SipHash-c-d (Aumasson & Bernstein) over Python ints masked to 64 bits.
SipHash-1-3 with an all-zero key is the default hasher of the Rust standard
library, which makes bucket assignments reproducible across both ecosystems.
"""

from typing import Tuple

from jumphash.hashing.jump import MASK64

# Initialization constants ("somepseudorandomlygeneratedbytes")
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & MASK64


def _sipround(v0: int, v1: int, v2: int, v3: int) -> Tuple[int, int, int, int]:
    v0 = (v0 + v1) & MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


class SipHasher:
    """
    Incremental SipHash-c-d with a 128-bit key.

    Input may be split across update() calls at any byte boundary without
    changing the digest. Reading the digest does not modify the state.
    """

    def __init__(
        self,
        k0: int = 0,
        k1: int = 0,
        c_rounds: int = 1,
        d_rounds: int = 3,
    ):
        """
        Initialize hasher.

        Args:
            k0: Low 64 bits of the key
            k1: High 64 bits of the key
            c_rounds: Compression rounds per message word
            d_rounds: Finalization rounds
        """
        if not (0 <= k0 <= MASK64 and 0 <= k1 <= MASK64):
            raise ValueError("k0 and k1 must be uint64")
        if c_rounds <= 0 or d_rounds <= 0:
            raise ValueError(
                f"round counts must be positive, got c={c_rounds}, d={d_rounds}"
            )

        self.c_rounds = c_rounds
        self.d_rounds = d_rounds
        self._v0 = k0 ^ _INIT_V0
        self._v1 = k1 ^ _INIT_V1
        self._v2 = k0 ^ _INIT_V2
        self._v3 = k1 ^ _INIT_V3
        self._tail = b""  # pending bytes, always < 8
        self._length = 0

    @classmethod
    def from_key(cls, key: bytes, c_rounds: int = 1, d_rounds: int = 3) -> "SipHasher":
        """
        Create hasher from a 16-byte key.

        Args:
            key: 16-byte key, read as two little-endian u64 halves
            c_rounds: Compression rounds per message word
            d_rounds: Finalization rounds

        Returns:
            New SipHasher
        """
        if len(key) != 16:
            raise ValueError(f"SipHash key must be 16 bytes, got {len(key)}")
        k0 = int.from_bytes(key[:8], "little")
        k1 = int.from_bytes(key[8:], "little")
        return cls(k0, k1, c_rounds=c_rounds, d_rounds=d_rounds)

    def update(self, data: bytes) -> None:
        """
        Feed bytes into the hash state.

        Args:
            data: Bytes-like input chunk
        """
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing")
        data = bytes(memoryview(data))
        self._length += len(data)

        buf = self._tail + data
        end = len(buf) - (len(buf) % 8)

        v0, v1, v2, v3 = self._v0, self._v1, self._v2, self._v3
        for i in range(0, end, 8):
            m = int.from_bytes(buf[i : i + 8], "little")
            v3 ^= m
            for _ in range(self.c_rounds):
                v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
            v0 ^= m

        self._v0, self._v1, self._v2, self._v3 = v0, v1, v2, v3
        self._tail = buf[end:]

    def intdigest(self) -> int:
        """
        Compute the 64-bit digest of all input so far.

        Returns:
            Unsigned 64-bit digest
        """
        # Last word: length mod 256 in the top byte, pending bytes below
        b = ((self._length & 0xFF) << 56) | int.from_bytes(self._tail, "little")

        v0, v1, v2, v3 = self._v0, self._v1, self._v2, self._v3
        v3 ^= b
        for _ in range(self.c_rounds):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= b

        v2 ^= 0xFF
        for _ in range(self.d_rounds):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)

        return v0 ^ v1 ^ v2 ^ v3

    def digest(self) -> bytes:
        """Return the digest as 8 little-endian bytes."""
        return self.intdigest().to_bytes(8, "little")

    def hexdigest(self) -> str:
        """Return the digest as a hex string of digest()."""
        return self.digest().hex()

    def copy(self) -> "SipHasher":
        """Return an independent copy of the hash state."""
        other = SipHasher.__new__(SipHasher)
        other.__dict__.update(self.__dict__)
        return other


def siphash13(data: bytes, k0: int = 0, k1: int = 0) -> int:
    """One-shot SipHash-1-3 (Rust DefaultHasher when k0 = k1 = 0)."""
    hasher = SipHasher(k0, k1, c_rounds=1, d_rounds=3)
    hasher.update(data)
    return hasher.intdigest()


def siphash24(data: bytes, k0: int = 0, k1: int = 0) -> int:
    """One-shot SipHash-2-4."""
    hasher = SipHasher(k0, k1, c_rounds=2, d_rounds=4)
    hasher.update(data)
    return hasher.intdigest()
