"""jumphash: Jump Consistent Hash for sharding keys across resizable buckets."""

from .config import JumpConfig, load_config
from .hashing import (
    DEFAULT_HASHER,
    MAX_SLOTS,
    Fnv1a64,
    IncrementalHash,
    JumpHasher,
    SipHasher,
    Slots,
    available_hashers,
    bucket_loads,
    expected_remap_fraction,
    jump_hash,
    jump_hash_array,
    jump_hash_tensor,
    key_bytes,
    load_summary,
    new_hasher,
    register_hasher,
    remap_fraction,
    siphash13,
    siphash24,
)
from .utils import Timer, get_logger

__version__ = "0.1.0"

# Low-level entry point, named after the published function
hash = jump_hash

__all__ = [
    # Core
    "hash",
    "jump_hash",
    "Slots",
    "MAX_SLOTS",
    "JumpHasher",
    # Incremental hashers
    "IncrementalHash",
    "SipHasher",
    "Fnv1a64",
    "siphash13",
    "siphash24",
    "DEFAULT_HASHER",
    "available_hashers",
    "new_hasher",
    "register_hasher",
    "key_bytes",
    # Batch
    "jump_hash_array",
    "jump_hash_tensor",
    # Diagnostics
    "bucket_loads",
    "load_summary",
    "remap_fraction",
    "expected_remap_fraction",
    # Config
    "JumpConfig",
    "load_config",
    # Utils
    "get_logger",
    "Timer",
]
