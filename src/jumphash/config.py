"""Configuration loading utilities."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from jumphash.hashing.jump import Slots
from jumphash.hashing.jump_hasher import JumpHasher
from jumphash.hashing.registry import DEFAULT_HASHER, available_hashers

logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


@dataclass(frozen=True)
class JumpConfig:
    """Configuration for a JumpHasher.

    Attributes:
        slots: Number of buckets (> 0, fits in u32)
        hasher: Registered incremental hasher name
    """

    slots: int
    hasher: str = DEFAULT_HASHER

    def __post_init__(self) -> None:
        """Validate parameters."""
        Slots(self.slots)
        if self.hasher not in available_hashers():
            raise ValueError(
                f"hasher must be one of {available_hashers()}, got {self.hasher!r}"
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "JumpConfig":
        """
        Build config from a dictionary, ignoring unknown keys.

        Args:
            config: Mapping with "slots" and optionally "hasher"

        Returns:
            Validated JumpConfig
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", unknown)
        return cls(**{k: v for k, v in config.items() if k in known})

    @classmethod
    def from_yaml(cls, config_path: Path) -> "JumpConfig":
        """Load and validate config from a YAML file."""
        return cls.from_dict(load_config(config_path))

    def new_hasher(self) -> JumpHasher:
        """Create a fresh JumpHasher for this configuration."""
        return JumpHasher(self.slots, self.hasher)
