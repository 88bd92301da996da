"""Hashing modules for jumphash."""

from .base import IncrementalHash
from .jump import MASK64, MAX_SLOTS, Slots, jump_hash, u64
from .jump_hasher import JumpHasher
from .keys import key_bytes
from .fnv import Fnv1a64
from .siphash import SipHasher, siphash13, siphash24
from .registry import DEFAULT_HASHER, available_hashers, new_hasher, register_hasher
from .vectorized import jump_hash_array, jump_hash_tensor, to_int64
from .diagnostics import (
    bucket_loads,
    expected_remap_fraction,
    gini_of_load,
    load_summary,
    moved_only_to_new_buckets,
    remap_fraction,
    sample_keys,
)

__all__ = [
    "IncrementalHash",
    "MASK64",
    "MAX_SLOTS",
    "Slots",
    "jump_hash",
    "u64",
    "JumpHasher",
    "key_bytes",
    "Fnv1a64",
    "SipHasher",
    "siphash13",
    "siphash24",
    "DEFAULT_HASHER",
    "available_hashers",
    "new_hasher",
    "register_hasher",
    "jump_hash_array",
    "jump_hash_tensor",
    "to_int64",
    "bucket_loads",
    "expected_remap_fraction",
    "gini_of_load",
    "load_summary",
    "moved_only_to_new_buckets",
    "remap_fraction",
    "sample_keys",
]
