"""Incremental hasher adapter returning jump hash buckets."""

from typing import Any, Optional, Union

from jumphash.hashing.base import IncrementalHash
from jumphash.hashing.jump import Slots, jump_hash
from jumphash.hashing.keys import key_bytes
from jumphash.hashing.registry import DEFAULT_HASHER, new_hasher

EMPTY = "empty"
ACCUMULATING = "accumulating"
FINALIZED = "finalized"


class JumpHasher:
    """
    Turns any 64-bit incremental hash into a Jump Consistent Hash bucket picker.

    Bytes go into the wrapped hasher. finalize() maps its 64-bit digest to a
    bucket in [0, slots). The slot count is fixed for the adapter's lifetime.
    Changing the shard count means building a new adapter.

    An adapter is owned by a single caller and is not safe for concurrent use.

    Example:
        >>> hasher = JumpHasher(1000)
        >>> hasher.update_value("test").finalize()
        677
    """

    def __init__(
        self,
        slots: Union[Slots, int],
        hasher: Optional[Union[IncrementalHash, str]] = None,
    ):
        """
        Initialize adapter.

        Args:
            slots: Number of buckets (> 0), plain int or Slots
            hasher: Wrapped incremental hash instance, or a registered hasher
                name. Defaults to SipHash-1-3 with a zero key (Rust
                DefaultHasher).

        Raises:
            ValueError: If slots is zero or otherwise invalid
        """
        self._slots = Slots.coerce(slots)

        if hasher is None:
            hasher = DEFAULT_HASHER
        if isinstance(hasher, str):
            hasher = new_hasher(hasher)
        self._hasher = hasher
        self._state = EMPTY

    @classmethod
    def new(cls, slots: Union[Slots, int], hasher: str = DEFAULT_HASHER) -> "JumpHasher":
        """Create an adapter over a fresh registered hasher."""
        return cls(slots, hasher)

    @property
    def slots(self) -> Slots:
        """Fixed bucket count."""
        return self._slots

    @property
    def state(self) -> str:
        """Lifecycle state: "empty", "accumulating" or "finalized"."""
        return self._state

    def update(self, data: bytes) -> None:
        """
        Feed bytes into the wrapped hasher.

        Args:
            data: bytes, bytearray or memoryview

        Raises:
            TypeError: If data is not bytes-like
            RuntimeError: If called after finalize()
        """
        if self._state == FINALIZED:
            raise RuntimeError(
                "JumpHasher already finalized; create a new adapter to hash more input"
            )
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"update() expects bytes-like data, got {type(data).__name__}"
            )
        self._hasher.update(data)
        self._state = ACCUMULATING

    def update_value(self, value: Any) -> "JumpHasher":
        """
        Encode a value with key_bytes() and feed it.

        Args:
            value: bytes-like, str, bool, int, or a tuple/list of those

        Returns:
            self, for chaining
        """
        self.update(key_bytes(value))
        return self

    def finalize(self) -> int:
        """
        Map the wrapped hasher's digest to a bucket.

        Idempotent: repeated calls return the same bucket.

        Returns:
            Bucket index in [0, slots)
        """
        self._state = FINALIZED
        return jump_hash(self._hasher.intdigest(), self._slots)

    # hashlib-style alias
    intdigest = finalize

    def copy(self) -> "JumpHasher":
        """Return an independent adapter with a copy of the hash state."""
        other = JumpHasher.__new__(JumpHasher)
        other._slots = self._slots
        other._hasher = self._hasher.copy()
        other._state = self._state
        return other

    def __repr__(self) -> str:
        return (
            f"JumpHasher(slots={self._slots.value}, "
            f"hasher={type(self._hasher).__name__}, state={self._state!r})"
        )
