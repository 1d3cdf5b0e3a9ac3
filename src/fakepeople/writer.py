"""Generate fake people into one Parquet file per partition.

Partitions are independent units of work (build a batch, write it), so they
run on a plain thread pool. Each partition gets its own RandomState and Faker
instance; the only shared state is the read-only reference data.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
import math
from pathlib import Path
import time
from typing import List, NamedTuple

import numpy as np
from loguru import logger

from fakepeople.batch import RecordBatchBuilder
from fakepeople.config import GeneratorConfig
from fakepeople.errors import (
    InvalidArgumentError, OutputDirectoryError, PartitionWriteError, PartitionedWriteError,
)
from fakepeople.fields import FieldGenerator
from fakepeople.io import write_batch
from fakepeople.reference import ReferenceData
from fakepeople.sampler import CategoricalSampler


class OutputPartition(NamedTuple):
    index: int
    size: int
    path: Path


class PartitionResult(NamedTuple):
    index: int
    path: Path
    rows: int
    seconds: float


def plan_partitions(total_records: int, num_partitions: int | None = None,
                    batch_size: int | None = None) -> List[int]:
    """Return the row count of each partition.

    Without `batch_size` the total is split evenly, with any remainder going
    one row each to the leading partitions. With `batch_size` every partition
    holds that many rows except a smaller last one.
    """
    if total_records < 0:
        raise InvalidArgumentError(f'total_records must be >= 0, got {total_records}')

    if batch_size is not None:
        if batch_size < 1:
            raise InvalidArgumentError(f'batch_size must be >= 1, got {batch_size}')
        count = max(1, math.ceil(total_records / batch_size))
        if num_partitions is not None and num_partitions != count:
            raise InvalidArgumentError(
                f'{total_records} records in batches of {batch_size} needs {count} partitions, '
                f'not {num_partitions}')
        sizes = [batch_size] * (count - 1)
        sizes.append(total_records - batch_size * (count - 1))
        return sizes

    if num_partitions is None or num_partitions < 1:
        raise InvalidArgumentError(f'num_partitions must be >= 1, got {num_partitions}')
    base, extra = divmod(total_records, num_partitions)
    return [base + 1 if i < extra else base for i in range(num_partitions)]


def partition_path(output_dir: Path, prefix: str, index: int, num_partitions: int) -> Path:
    # pad to the digit count of the partition count so name order == index order
    width = len(str(num_partitions))
    return Path(output_dir) / f'{prefix}-{index:0{width}d}.parquet'


def partition_seed(seed: int | None, index: int) -> int | None:
    """Per-partition seed mixed from (seed, index); None stays None so each
    partition seeds from OS entropy."""
    if seed is None:
        return None
    return int(np.random.SeedSequence([seed, index]).generate_state(1)[0])


class PartitionedWriter:
    def __init__(self, reference: ReferenceData, config: GeneratorConfig | None = None):
        self.reference = reference
        self.config = config if config is not None else GeneratorConfig()

    def plan(self, total_records: int, num_partitions: int | None,
             output_dir: Path, batch_size: int | None = None) -> List[OutputPartition]:
        sizes = plan_partitions(total_records, num_partitions, batch_size)
        return [
            OutputPartition(i, size, partition_path(output_dir, self.config.file_prefix, i, len(sizes)))
            for i, size in enumerate(sizes)
        ]

    def write_partition(self, part: OutputPartition) -> PartitionResult:
        """Build and write one partition. Any failure is wrapped in
        PartitionWriteError carrying the partition index and path."""
        t0 = time.perf_counter()
        try:
            sampler = CategoricalSampler(partition_seed(self.config.seed, part.index))
            gen = FieldGenerator(self.reference, sampler, string_ids=self.config.string_ids)
            batch = RecordBatchBuilder(gen).build(part.size)
            write_batch(part.path, batch, compression=self.config.compression,
                        row_group_size=self.config.row_group_size)
        except Exception as e:
            raise PartitionWriteError(part.index, part.path, str(e) or type(e).__name__) from e
        return PartitionResult(part.index, part.path, batch.num_rows, time.perf_counter() - t0)

    def write_all(self, total_records: int, num_partitions: int | None = None,
                  output_dir: str | Path | None = None, batch_size: int | None = None) -> List[PartitionResult]:
        """Generate `total_records` rows across partitions and write them.

        Returns results ordered by partition index. If any partition fails the
        others still run to completion, then PartitionedWriteError is raised
        listing the failures and the partitions that were written.
        """
        out = Path(output_dir) if output_dir is not None else self.config.output_dir
        parts = self.plan(total_records, num_partitions, out, batch_size)
        try:
            out.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(out, e.strerror or str(e)) from e

        workers = min(self.config.workers, len(parts))
        logger.info(f'Writing {total_records:,} rows to {len(parts)} file(s) in {out} '
                    f'with {workers} worker(s)')
        t0 = time.perf_counter()

        results: List[PartitionResult] = []
        failures: List[PartitionWriteError] = []
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self.write_partition, p) for p in parts]
            for fut in as_completed(futures):
                try:
                    res = fut.result()
                except PartitionWriteError as e:
                    logger.error(str(e))
                    failures.append(e)
                    continue
                results.append(res)
                logger.debug(f'Wrote {res.rows:,} rows to {res.path.name} in {res.seconds:.2f}s')

        results.sort(key=lambda r: r.index)
        if failures:
            failures.sort(key=lambda f: f.index)
            raise PartitionedWriteError(failures, results)

        logger.info(f'Wrote {sum(r.rows for r in results):,} rows in {time.perf_counter() - t0:.2f}s')
        return results
