"""Logger setup for benchmarks and scripts."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Get a named logger writing to stderr and optionally a file.

    Calling again with the same name reuses the existing handlers, so
    repeated calls do not duplicate output.

    Args:
        name: Logger name
        log_file: Optional path of a log file (parent dirs are created)
        level: Logging level

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(_FORMAT)

    if not any(getattr(h, "_jumphash_stream", False) for h in logger.handlers):
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(formatter)
        stream._jumphash_stream = True
        logger.addHandler(stream)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        existing = {
            getattr(h, "baseFilename", None)
            for h in logger.handlers
            if isinstance(h, logging.FileHandler)
        }
        if str(log_path) not in existing:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logger.propagate = False
    return logger
