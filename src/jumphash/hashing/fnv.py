"""Incremental FNV-1a 64-bit hash."""

from jumphash.hashing.jump import MASK64

FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3


class Fnv1a64:
    """Incremental FNV-1a (64-bit). Small and fast, weak avalanche on short keys."""

    def __init__(self):
        self._h = FNV64_OFFSET_BASIS

    def update(self, data: bytes) -> None:
        if isinstance(data, str):
            raise TypeError("Strings must be encoded before hashing")
        h = self._h
        for byte in bytes(memoryview(data)):
            h = ((h ^ byte) * FNV64_PRIME) & MASK64
        self._h = h

    def intdigest(self) -> int:
        return self._h

    def copy(self) -> "Fnv1a64":
        other = Fnv1a64()
        other._h = self._h
        return other
