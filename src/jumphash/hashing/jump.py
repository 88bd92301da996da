"""Jump Consistent Hash.

Implements the algorithm from Lamping & Veach, "A Fast, Minimal Memory,
Consistent Hash Algorithm" (https://arxiv.org/abs/1406.2294). All arithmetic
runs on Python ints masked to 64 bits, so results are bit-exact with any other
implementation of the published algorithm.
"""

import numbers
from dataclasses import dataclass
from typing import Union

# 64-bit mask for uint64 wrap semantics
MASK64 = (1 << 64) - 1  # 0xFFFFFFFFFFFFFFFF

# Largest slot count representable as u32
MAX_SLOTS = (1 << 32) - 1

# LCG multiplier from the published algorithm
JUMP_MULTIPLIER = 2862933555777941757


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 64-bit integer (value modulo 2^64)
    """
    return x & MASK64


@dataclass(frozen=True, order=True)
class Slots:
    """Validated number of buckets (also called "slots").

    A thin wrapper over a u32 bucket count. Construction fails fast for a
    count that does not describe a usable bucket space, so a bucket index is
    never computed for zero slots.

    Attributes:
        value: Number of buckets, 1 <= value <= 2^32 - 1
    """

    value: int

    def __post_init__(self) -> None:
        """Validate slot count."""
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Integral):
            raise ValueError(
                f"slots must be an integer, got {type(self.value).__name__}"
            )
        # numpy integers are stored as plain int
        object.__setattr__(self, "value", int(self.value))
        if self.value <= 0:
            raise ValueError(f"slots must be greater than 0, got {self.value}")
        if self.value > MAX_SLOTS:
            raise ValueError(
                f"slots must fit in u32 (<= {MAX_SLOTS}), got {self.value}"
            )

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    @classmethod
    def coerce(cls, slots: Union["Slots", int]) -> "Slots":
        """Return slots as a validated Slots instance.

        Args:
            slots: Existing Slots (returned as-is) or a plain integer

        Returns:
            Validated Slots

        Raises:
            ValueError: If the integer is not a valid slot count
        """
        if isinstance(slots, cls):
            return slots
        return cls(slots)


def jump_hash(key: int, slots: Union[Slots, int]) -> int:
    """Compute the Jump Consistent Hash bucket for a 64-bit key.

    Same key and slot count always map to the same bucket. When slots grows
    from n to n+1, only ~1/(n+1) of keys move, all of them to the new bucket.

    Args:
        key: 64-bit key (reduced modulo 2^64, so negative ints use their
            two's complement bit pattern)
        slots: Number of buckets (> 0), plain int or Slots

    Returns:
        Bucket index in [0, slots)

    Raises:
        ValueError: If slots is zero or otherwise invalid

    Example:
        >>> jump_hash(123456, 1000)
        984
    """
    n = Slots.coerce(slots).value
    key = u64(key)

    b, j = -1, 0
    while j < n:
        b = j
        key = u64(key * JUMP_MULTIPLIER + 1)
        j = int(float(b + 1) * (float(1 << 31) / float((key >> 33) + 1)))

    # b < n <= MAX_SLOTS, see while condition
    return b
