"""Named incremental hash factories."""

import logging
from typing import Callable, Dict, List

import xxhash

from jumphash.hashing.base import IncrementalHash
from jumphash.hashing.fnv import Fnv1a64
from jumphash.hashing.siphash import SipHasher

logger = logging.getLogger(__name__)

DEFAULT_HASHER = "siphash13"

_FACTORIES: Dict[str, Callable[[], IncrementalHash]] = {
    # Rust std DefaultHasher: SipHash-1-3 keyed with (0, 0)
    "siphash13": lambda: SipHasher(0, 0, c_rounds=1, d_rounds=3),
    "siphash24": lambda: SipHasher(0, 0, c_rounds=2, d_rounds=4),
    "fnv1a64": Fnv1a64,
    "xxh64": lambda: xxhash.xxh64(seed=0),
}


def register_hasher(name: str, factory: Callable[[], IncrementalHash]) -> None:
    """
    Register a named hasher factory.

    Args:
        name: Name used by new_hasher() and JumpConfig
        factory: Zero-argument callable returning a fresh IncrementalHash
    """
    if not callable(factory):
        raise ValueError(f"factory for {name!r} must be callable")
    if name in _FACTORIES:
        logger.debug("Replacing hasher factory %r", name)
    _FACTORIES[name] = factory


def available_hashers() -> List[str]:
    """Return registered hasher names, sorted."""
    return sorted(_FACTORIES)


def new_hasher(name: str = DEFAULT_HASHER) -> IncrementalHash:
    """
    Create a fresh hasher by name.

    Args:
        name: Registered hasher name

    Returns:
        New IncrementalHash with empty state

    Raises:
        ValueError: If name is not registered
    """
    if name not in _FACTORIES:
        raise ValueError(
            f"Unknown hasher {name!r}, must be one of {available_hashers()}"
        )
    return _FACTORIES[name]()
