from __future__ import annotations

import os
from pathlib import Path
import uuid

import pyarrow as pa
import pyarrow.parquet as pq

from fakepeople.errors import InvalidArgumentError

COMPRESSIONS = ('snappy', 'zstd', 'gzip', 'brotli', 'lz4', 'none')


def check_compression(compression: str | None) -> str:
    """Normalise a compression name; None means no compression."""
    if compression is None:
        return 'none'
    name = compression.lower()
    if name not in COMPRESSIONS:
        raise InvalidArgumentError(
            f'unknown compression {compression!r}; expected one of {", ".join(COMPRESSIONS)}')
    return name


def write_batch(path: str | Path, batch: pa.RecordBatch, compression: str | None = 'snappy',
                row_group_size: int | None = None) -> Path:
    """Write a RecordBatch to a Parquet file at `path`, all or nothing.

    The data goes to a hidden temp file in the destination directory first and
    is moved into place with ``os.replace``, so readers never see a partial
    file. On any failure the temp file is removed and the error re-raised.

    Args:
        path: destination parquet file path
        batch: pyarrow.RecordBatch to write
        compression: parquet codec name, or None / 'none' for uncompressed
        row_group_size: maximum rows per row group (pyarrow default if None)
    """
    path = Path(path)
    codec = check_compression(compression)
    tmp = path.with_name(f'.{path.name}.{uuid.uuid4().hex}.tmp')
    table = pa.Table.from_batches([batch], schema=batch.schema)
    try:
        pq.write_table(table, tmp.as_posix(), compression=codec, row_group_size=row_group_size)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return path


def read_table(path: str | Path) -> pa.Table:
    """Read a Parquet file and return a pyarrow.Table."""
    return pq.read_table(Path(path).as_posix())


def count_rows(path: str | Path) -> int:
    """Row count from the Parquet footer, without reading any column data."""
    return pq.ParquetFile(Path(path).as_posix()).metadata.num_rows
