"""
Configuration for the file write/read cycle benchmark.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BenchConfig:
    """Configuration for one benchmark run."""

    # Temp file, relative to the working directory
    path: str = "tmp"

    # I/O shape
    buffer_size: int = 128  # bytes per write / read call
    writes_per_pass: int = 10000  # write calls per write pass

    # Outer loop
    repetitions: int = 10  # write+read cycles per run

    # Report prefix
    label: str = "Python"

    @property
    def file_path(self) -> Path:
        return Path(self.path)

    @property
    def bytes_per_pass(self) -> int:
        """Size of the temp file after one write pass."""
        return self.buffer_size * self.writes_per_pass

    @property
    def total_ops(self) -> int:
        """File operations per run: one write and one read per repetition."""
        return 2 * self.repetitions

    def validate(self) -> None:
        if not self.path:
            raise ValueError("path must be a non-empty string")
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.writes_per_pass <= 0:
            raise ValueError(
                f"writes_per_pass must be positive, got {self.writes_per_pass}"
            )
        if self.repetitions <= 0:
            raise ValueError(f"repetitions must be positive, got {self.repetitions}")


# Default configuration instance
DEFAULT_CONFIG = BenchConfig()
