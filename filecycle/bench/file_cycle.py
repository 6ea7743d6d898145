"""Benchmark: repeated sequential write + read cycles on one temp file.

Each repetition writes `writes_per_pass` junk buffers to the temp file and
reads it back to end of stream in buffer-sized chunks.  The whole loop is
timed once; the result is printed as a single line and the temp file removed.

An I/O error aborts the run: nothing is printed and the temp file is left.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from filecycle.bench.stopwatch import Stopwatch
from filecycle.config import BenchConfig, DEFAULT_CONFIG
from filecycle.logging_config import get_logger, setup_logging
from filecycle.storage.block_io import read_file, write_file

log = get_logger(__name__)


@dataclass
class BenchResult:
    label: str
    elapsed_ms: int
    bytes_written: int = 0
    bytes_read: int = 0
    ops: List[Tuple[str, str]] = field(default_factory=list)


def format_report(label: str, elapsed_ms: int) -> str:
    return f"{label} methods completed in {elapsed_ms} ms"


def run_benchmark(config: BenchConfig | None = None) -> BenchResult:
    """Run all repetitions, print the report line, delete the temp file."""
    cfg = config or DEFAULT_CONFIG
    cfg.validate()
    path = cfg.file_path

    log.info(
        "starting %d cycles on %s (%d x %d bytes per pass)",
        cfg.repetitions, path, cfg.writes_per_pass, cfg.buffer_size,
    )
    written = [0] * cfg.repetitions
    reads = [None] * cfg.repetitions

    # timed region holds only the I/O calls
    sw = Stopwatch().start()
    for i in range(cfg.repetitions):
        written[i] = write_file(path, cfg.buffer_size, cfg.writes_per_pass)
        reads[i] = read_file(path, cfg.buffer_size)
    sw.stop()

    result = BenchResult(label=cfg.label, elapsed_ms=sw.elapsed_ms)
    name = str(path)
    for i, (n_written, stats) in enumerate(zip(written, reads)):
        result.bytes_written += n_written
        result.bytes_read += stats.n_bytes
        result.ops.append(("write", name))
        result.ops.append(("read", name))
        log.debug(
            "cycle %d/%d: wrote %d, read %d in %d calls",
            i + 1, cfg.repetitions, n_written, stats.n_bytes, stats.n_calls,
        )

    print(format_report(cfg.label, result.elapsed_ms))

    path.unlink()
    log.info("removed %s", path)
    return result


def main() -> int:
    setup_logging(level=logging.WARNING)
    run_benchmark()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
