"""Block I/O: write / read a file in fixed-size buffer calls.

Every write pass allocates a fresh zeroed junk buffer; every read pass reuses
one buffer for all of its `readinto` calls.  Handles are closed on all exit
paths and OSError propagates unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from filecycle.logging_config import get_logger

BUFFER_SIZE = 128
WRITES_PER_PASS = 10000
DTYPE = np.uint8

log = get_logger(__name__)


@dataclass
class ReadStats:
    n_bytes: int = 0
    n_reads: int = 0         # calls that returned data
    n_calls: int = 0         # includes the final zero-byte read


def new_buffer(buffer_size: int = BUFFER_SIZE) -> np.ndarray:
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    return np.zeros(buffer_size, dtype=DTYPE)


def write_file(
    path: str | Path,
    buffer_size: int = BUFFER_SIZE,
    n_writes: int = WRITES_PER_PASS,
) -> int:
    """Create/truncate `path` and write the junk buffer `n_writes` times.

    Returns the number of bytes written.
    """
    junk = new_buffer(buffer_size)
    written = 0
    with open(path, "wb") as f:
        for _ in range(n_writes):
            written += f.write(junk)
    log.debug("wrote %d bytes to %s in %d calls", written, path, n_writes)
    return written


def read_file(path: str | Path, buffer_size: int = BUFFER_SIZE) -> ReadStats:
    """Read `path` to end of stream in `buffer_size` chunks, discarding data."""
    buf = new_buffer(buffer_size)
    stats = ReadStats()
    with open(path, "rb") as f:
        while True:
            count = f.readinto(buf)
            stats.n_calls += 1
            if not count:
                break
            stats.n_reads += 1
            stats.n_bytes += count
    log.debug(
        "read %d bytes from %s (%d reads, %d calls)",
        stats.n_bytes, path, stats.n_reads, stats.n_calls,
    )
    return stats
