"""
Utilities for the output directory of compressed images.
"""
import os
import time
import logging
import threading
import contextlib
from pathlib import Path
from typing import BinaryIO, Iterator, Tuple

from squeeze.core.exceptions import StorageError

# Set up logging
logger = logging.getLogger(__name__)

_clock_lock = threading.Lock()
_last_timestamp = 0


def next_timestamp() -> int:
    """
    Return the current time in nanoseconds, strictly increasing per process.

    Two calls landing on the same clock tick (or a clock stepping backwards)
    get the previous value plus one instead of a repeat.
    """
    global _last_timestamp
    with _clock_lock:
        now = time.time_ns()
        if now <= _last_timestamp:
            now = _last_timestamp + 1
        _last_timestamp = now
        return now


def ensure_output_dir(directory: Path) -> Path:
    """Create the output directory if needed and return its absolute path."""
    directory = Path(directory).resolve()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


@contextlib.contextmanager
def output_file(directory: Path, suffix: str = ".jpg") -> Iterator[Tuple[Path, BinaryIO]]:
    """
    Create a new ``<unix-nanos><suffix>`` file in ``directory``.

    The file is opened exclusively, so a name already on disk (for instance
    from another worker process) is skipped, never overwritten. The handle is
    closed on exit; whatever was written stays on disk even if the body fails.

    Yields:
        Tuple of (path, writable binary handle)

    Raises:
        StorageError: If the file cannot be created
    """
    while True:
        path = Path(directory) / f"{next_timestamp()}{suffix}"
        try:
            handle = open(path, "xb")
        except FileExistsError:
            logger.warning(f"Output file {path.name} already exists, picking a new name")
            continue
        except OSError as e:
            logger.error(f"Failed to create output file {path}: {e}")
            raise StorageError("Failed to create output file") from e
        break

    try:
        yield path, handle
    finally:
        handle.close()


def is_writable(directory: Path) -> bool:
    return os.access(directory, os.W_OK)
