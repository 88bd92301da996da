"""Incremental hash interface."""

from typing import Protocol, TypeVar

T = TypeVar("T", bound="IncrementalHash")


class IncrementalHash(Protocol):
    """
    Protocol for incremental hash algorithms fed into JumpHasher.

    An incremental hash consumes bytes in any number of chunks and yields a
    64-bit digest. Reading the digest must not change the hash state, so it
    can be read more than once. ``xxhash.xxh64`` objects satisfy this as-is.
    """

    def update(self, data: bytes) -> None:
        """
        Feed bytes into the hash state.

        Args:
            data: Bytes-like chunk of input
        """
        ...

    def intdigest(self) -> int:
        """
        Read the 64-bit digest of all bytes fed so far.

        Returns:
            Unsigned 64-bit integer digest
        """
        ...

    def copy(self: T) -> T:
        """Return an independent copy of the hash state."""
        ...
