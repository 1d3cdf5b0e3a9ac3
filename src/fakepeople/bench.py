"""Timing helpers behind ``fakepeople bench``.

Two comparisons: drawing names one ``random.choice`` call per row versus a
single vectorized draw, and writing the same partitions with different worker
counts. Numbers are machine-specific and only printed, never checked.
"""
from __future__ import annotations

from pathlib import Path
import random
import tempfile
import time
from typing import Dict, Iterable, List

from loguru import logger

from fakepeople.config import GeneratorConfig
from fakepeople.reference import ReferenceData
from fakepeople.sampler import CategoricalSampler
from fakepeople.writer import PartitionedWriter


def naive_sample(values, n: int, seed: int | None = None) -> list:
    rnd = random.Random(seed)
    return [rnd.choice(values) for _ in range(n)]


def time_sampling(reference: ReferenceData, n: int, seed: int | None = 0) -> Dict[str, float]:
    names = reference.last_names
    values = list(names)

    t0 = time.perf_counter()
    naive_sample(values, n, seed)
    t1 = time.perf_counter()
    CategoricalSampler(seed).sample(names, n)
    t2 = time.perf_counter()

    return {'naive': t1 - t0, 'vectorized': t2 - t1}


def time_workers(reference: ReferenceData, rows: int, files: int, worker_counts: Iterable[int],
                 seed: int | None = 0, compression: str = 'snappy') -> Dict[int, float]:
    """Write the same partitions once per worker count into scratch dirs."""
    timings = {}
    for workers in worker_counts:
        config = GeneratorConfig(workers=workers, seed=seed, compression=compression)
        writer = PartitionedWriter(reference, config)
        with tempfile.TemporaryDirectory() as tmpdir:
            t0 = time.perf_counter()
            writer.write_all(rows, files, Path(tmpdir))
            timings[workers] = time.perf_counter() - t0
        logger.debug(f'{workers} worker(s): {timings[workers]:.2f}s')
    return timings


def format_report(sampling: Dict[str, float], workers: Dict[int, float], rows: int) -> List[str]:
    lines = [f'Sampling {rows:,} names:']
    for name, secs in sampling.items():
        lines.append(f'  {name:<11} {secs:8.3f}s')
    if sampling.get('vectorized'):
        lines.append(f'  speedup     {sampling["naive"] / sampling["vectorized"]:8.1f}x')
    if workers:
        lines.append('Partitioned write:')
        for count, secs in workers.items():
            rate = rows / secs if secs else float('inf')
            lines.append(f'  {count:>3} worker(s) {secs:8.2f}s  ({rate:,.0f} rows/sec)')
    return lines
