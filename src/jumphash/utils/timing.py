"""Timing utilities for benchmarks."""

import logging
import time
from contextlib import contextmanager
from typing import Dict, Generator, List

logger = logging.getLogger(__name__)


class Timer:
    """Collects wall-clock laps for one benchmark path.

    Each lap() block is timed separately. On cuda, pending GPU work is
    synchronized before and after the lap so kernel time is included.
    """

    def __init__(self, name: str, device: str = "cpu"):
        """
        Initialize timer.

        Args:
            name: Benchmark path name (e.g. "numpy")
            device: "cpu" or "cuda"
        """
        if device not in ("cpu", "cuda"):
            raise ValueError(f"device must be 'cpu' or 'cuda', got {device}")
        self.name = name
        self.device = device
        self.laps: List[float] = []

    def _sync(self) -> None:
        if self.device == "cuda":
            import torch

            torch.cuda.synchronize()

    @contextmanager
    def lap(self) -> Generator[None, None, None]:
        """Time one trial and append it to laps."""
        self._sync()
        start = time.perf_counter()
        yield
        self._sync()
        elapsed = time.perf_counter() - start
        self.laps.append(elapsed)
        logger.debug("%s lap %d: %.4fs", self.name, len(self.laps), elapsed)

    @property
    def avg_time(self) -> float:
        """Mean lap time in seconds."""
        if not self.laps:
            raise ValueError(f"Timer {self.name!r} has no laps recorded")
        return sum(self.laps) / len(self.laps)

    def summary(self, num_items: int) -> Dict[str, float]:
        """
        Summarize laps as average time and items per second.

        Args:
            num_items: Items processed per lap

        Returns:
            Dictionary with avg_time, throughput and trials
        """
        avg = self.avg_time
        return {
            "avg_time": avg,
            "throughput": num_items / avg if avg > 0 else 0.0,
            "trials": len(self.laps),
        }
