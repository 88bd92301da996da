"""Vectorized jump hash over numpy arrays and torch tensors.

Both paths are bit-exact with the scalar jump_hash(). Keys stay in the loop
only while their candidate bucket is below the slot count, so each pass
shrinks the working set.
"""

from typing import TYPE_CHECKING, Union

import numpy as np

from jumphash.hashing.jump import JUMP_MULTIPLIER, Slots, u64

if TYPE_CHECKING:
    import torch

# 2^31 as float64, numerator of the jump step
_JUMP_SCALE = float(1 << 31)

# Mask applied after arithmetic right shift of int64 state (keeps 31 bits)
_MASK31 = (1 << 31) - 1


def to_int64(key: int) -> int:
    """Reinterpret a uint64 bit pattern as a signed int64 value.

    Args:
        key: Integer key (reduced modulo 2^64 first)

    Returns:
        Value in [-2^63, 2^63) with the same 64-bit pattern
    """
    key = u64(key)
    return key - (1 << 64) if key >= (1 << 63) else key


def _as_uint64(keys) -> np.ndarray:
    arr = np.asarray(keys)
    if arr.dtype == np.uint64:
        return arr.copy()
    if arr.dtype.kind == "u":
        return arr.astype(np.uint64)
    if arr.dtype.kind == "i":
        # Two's complement view, same as u64() on Python ints
        return arr.astype(np.int64).view(np.uint64)
    if arr.dtype.kind == "O" or arr.size == 0:
        flat = [u64(int(k)) for k in arr.ravel()]
        return np.array(flat, dtype=np.uint64).reshape(arr.shape)
    raise TypeError(f"keys must be integers, got dtype {arr.dtype}")


def jump_hash_array(keys, slots: Union[Slots, int]) -> np.ndarray:
    """Compute jump hash buckets for an array of 64-bit keys.

    Args:
        keys: Array-like of integer keys, any shape (uint64 bit patterns;
            signed values are read as two's complement)
        slots: Number of buckets (> 0), plain int or Slots

    Returns:
        int64 array of bucket indices in [0, slots), same shape as keys

    Raises:
        ValueError: If slots is zero or otherwise invalid
    """
    n = Slots.coerce(slots).value
    state = _as_uint64(keys)
    shape = state.shape
    state = state.ravel()

    b = np.full(state.shape, -1, dtype=np.int64)
    j = np.zeros(state.shape, dtype=np.int64)

    multiplier = np.uint64(JUMP_MULTIPLIER)
    one = np.uint64(1)
    shift = np.uint64(33)

    pending = np.arange(state.size)
    while pending.size:
        b[pending] = j[pending]
        # uint64 array arithmetic wraps modulo 2^64
        s = state[pending] * multiplier + one
        state[pending] = s
        denom = ((s >> shift) + one).astype(np.float64)
        j[pending] = ((b[pending] + 1).astype(np.float64) * (_JUMP_SCALE / denom)).astype(
            np.int64
        )
        pending = pending[j[pending] < n]

    return b.reshape(shape)


def jump_hash_tensor(keys: "torch.Tensor", slots: Union[Slots, int]) -> "torch.Tensor":
    """Compute jump hash buckets for a tensor of 64-bit keys.

    Keys are int64 tensors holding uint64 bit patterns (see to_int64()).
    Runs on the tensor's device. Fully vectorized: no Python loops over keys.

    Args:
        keys: Integer tensor of any shape
        slots: Number of buckets (> 0), plain int or Slots

    Returns:
        LongTensor of bucket indices in [0, slots), same shape and device

    Raises:
        ValueError: If slots is zero or otherwise invalid
    """
    import torch

    n = Slots.coerce(slots).value
    if keys.is_floating_point() or keys.is_complex():
        raise TypeError(f"keys must be an integer tensor, got {keys.dtype}")

    state = keys.long().flatten().clone()
    b = torch.full_like(state, -1)
    j = torch.zeros_like(state)

    pending = torch.arange(state.numel(), device=state.device)
    while pending.numel() > 0:
        b[pending] = j[pending]
        # int64 multiply wraps, same bit pattern as uint64
        s = state[pending] * JUMP_MULTIPLIER + 1
        state[pending] = s
        # >> is arithmetic on int64; mask back to the logical shift result
        denom = (((s >> 33) & _MASK31) + 1).double()
        j[pending] = ((b[pending] + 1).double() * (_JUMP_SCALE / denom)).long()
        pending = pending[j[pending] < n]

    return b.view(keys.shape)
