"""
Parallel generation of consecutive Fibonacci numbers.

The requested range is split into one chunk per worker. Each chunk is seeded
with fast doubling and then filled by plain addition, so the cost per value
is a single big-integer add. Chunks run on a process pool because CPython
threads cannot run integer arithmetic in parallel; results come back through
``Executor.map`` and are therefore merged in chunk order whatever order the
workers finish in.
"""
from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from .config import Config
from .doubling import fib_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Chunk:
    """Inclusive sub-range of indices computed by one worker."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start + 1


def plan_chunks(start: int, end: int, workers: int) -> List[Chunk]:
    """Partition [start, end] into contiguous chunks for ``workers`` workers.

    Returns an empty list for an inverted range. The last chunk may be
    shorter than the others.
    """
    if end < start:
        return []
    total_count = end - start + 1
    chunk_size = max(1, total_count // max(1, workers))
    num_chunks = -(-total_count // chunk_size)
    chunks = []
    for i in range(num_chunks):
        chunk_start = start + i * chunk_size
        chunk_end = min(chunk_start + chunk_size - 1, end)
        chunks.append(Chunk(chunk_start, chunk_end))
    return chunks


def compute_chunk(chunk: Chunk) -> List[int]:
    """Return [F(chunk.start), ..., F(chunk.end)]."""
    a, b = fib_pair(chunk.start)
    values = []
    for _ in range(len(chunk)):
        values.append(a)
        a, b = b, a + b
    return values


def fib_range(start: int, end: int, workers: Optional[int] = None) -> List[int]:
    """Return F(start) through F(end) inclusive, or [] if end < start."""
    if workers is None:
        workers = Config.worker_count()
    chunks = plan_chunks(start, end, workers)
    if not chunks:
        return []

    total_count = end - start + 1
    parallel = (
        workers > 1
        and len(chunks) > 1
        and total_count >= Config.SERIAL_THRESHOLD
    )
    logger.debug(
        "range %d..%d: %d values in %d chunk(s), %s",
        start, end, total_count, len(chunks),
        f"{workers} processes" if parallel else "in-process",
    )

    if parallel:
        with ProcessPoolExecutor(max_workers=min(workers, len(chunks))) as pool:
            parts = list(pool.map(compute_chunk, chunks))
    else:
        parts = [compute_chunk(chunk) for chunk in chunks]

    result = []
    for part in parts:
        result.extend(part)
    return result
