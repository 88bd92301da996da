"""Quick start guide for jumphash.

Demonstrates:
1. Low-level bucket assignment for 64-bit keys
2. Hashing arbitrary values through JumpHasher
3. Resizing: only ~1/(n+1) of keys move when adding a bucket
4. Zero slot count is rejected
"""

from jumphash import JumpHasher, Slots, jump_hash, jump_hash_array
from jumphash.hashing import load_summary, remap_fraction, sample_keys


def example_1_low_level():
    """Example 1: map a 64-bit key to one of 1000 buckets."""
    print("=" * 60)
    print("Example 1: Low-level jump_hash")
    print("=" * 60)

    bucket = jump_hash(123456, 1000)
    print(f"jump_hash(123456, 1000) = {bucket}")
    print()


def example_2_adapter():
    """Example 2: hash strings and tuples with the default SipHash-1-3 hasher."""
    print("=" * 60)
    print("Example 2: JumpHasher over arbitrary values")
    print("=" * 60)

    hasher = JumpHasher(1000)
    hasher.update_value("test")
    print(f'"test" -> bucket {hasher.finalize()}')

    bucket = JumpHasher(1000, "xxh64").update_value(("user", 42)).finalize()
    print(f'("user", 42) with xxh64 -> bucket {bucket}')
    print()


def example_3_resize():
    """Example 3: grow from 10 to 11 shards and measure movement."""
    print("=" * 60)
    print("Example 3: Resizing")
    print("=" * 60)

    keys = sample_keys(100_000)
    summary = load_summary(jump_hash_array(keys, 10), 10)
    print(f"Load at 10 shards: max/mean = {summary['max_over_mean']:.3f}")

    moved = remap_fraction(keys, 10, 11)
    print(f"Moved when growing 10 -> 11: {moved:.4f} (expected {1 / 11:.4f})")
    print()


def example_4_invalid_slots():
    """Example 4: zero slots fails fast."""
    print("=" * 60)
    print("Example 4: Invalid slot count")
    print("=" * 60)

    try:
        Slots(0)
    except ValueError as e:
        print(f"Rejected: {e}")
    print()


if __name__ == "__main__":
    example_1_low_level()
    example_2_adapter()
    example_3_resize()
    example_4_invalid_slots()
