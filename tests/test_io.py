import os

import pyarrow as pa
import pytest

from fakepeople import io
from fakepeople.errors import InvalidArgumentError


def _batch():
    return pa.RecordBatch.from_pydict({
        'id': pa.array([1, 2], type=pa.int64()),
        'first_name': ['Alice', 'Bob'],
    })


def test_write_and_read_roundtrip(tmp_path):
    path = tmp_path / 't.parquet'
    io.write_batch(path, _batch())

    df = io.read_table(path).to_pandas()
    assert list(df['id']) == [1, 2]
    assert list(df['first_name']) == ['Alice', 'Bob']
    assert io.count_rows(path) == 2


def test_write_leaves_no_temp_files(tmp_path):
    io.write_batch(tmp_path / 'a.parquet', _batch(), compression='zstd')
    assert os.listdir(tmp_path) == ['a.parquet']


def test_failed_write_leaves_nothing_behind(tmp_path, monkeypatch):
    def boom(*args, **kwargs):
        raise OSError('disk full')

    monkeypatch.setattr(io.pq, 'write_table', boom)
    with pytest.raises(OSError, match='disk full'):
        io.write_batch(tmp_path / 'a.parquet', _batch())
    assert os.listdir(tmp_path) == []


def test_compression_names():
    assert io.check_compression(None) == 'none'
    assert io.check_compression('ZSTD') == 'zstd'
    with pytest.raises(InvalidArgumentError):
        io.check_compression('lzma')
