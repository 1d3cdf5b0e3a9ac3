"""Command line entry point.

Usage examples:
  fakepeople generate --rows 1000000 --files 8 --out ./out --workers 4
  fakepeople generate --rows 10 --files 2 --seed 42 --compression zstd
  fakepeople bench --rows 200000 --files 4 --workers 1 2 4
  fakepeople inspect ./out
"""
from __future__ import annotations

import argparse
from pathlib import Path
import time

from fakepeople import bench
from fakepeople.config import GeneratorConfig
from fakepeople.errors import FakePeopleError, InvalidArgumentError, PartitionedWriteError
from fakepeople.io import COMPRESSIONS, count_rows
from fakepeople.log import configure_logging
from fakepeople.reference import load_reference_data
from fakepeople.writer import PartitionedWriter


def cmd_generate(args) -> int:
    config = GeneratorConfig.from_env(
        output_dir=args.out,
        workers=args.workers,
        compression=args.compression,
        seed=args.seed,
        string_ids=args.string_ids or None,
        file_prefix=args.prefix,
        row_group_size=args.row_group_size,
        reference_dir=args.reference_dir,
    )
    reference = load_reference_data(config.reference_dir)
    writer = PartitionedWriter(reference, config)

    t0 = time.time()
    results = writer.write_all(args.rows, args.files, config.output_dir, batch_size=args.batch_size)
    elapsed = time.time() - t0
    total = sum(r.rows for r in results)
    print(f'Wrote {total:,} rows to {len(results)} file(s) in {config.output_dir} ({elapsed:.2f}s)')
    return 0


def cmd_bench(args) -> int:
    reference = load_reference_data(args.reference_dir)
    sampling = bench.time_sampling(reference, args.rows, seed=args.seed)
    workers = bench.time_workers(reference, args.rows, args.files, args.workers, seed=args.seed)
    for line in bench.format_report(sampling, workers, args.rows):
        print(line)
    return 0


def cmd_inspect(args) -> int:
    files = sorted(Path(args.directory).glob('*.parquet'))
    if not files:
        print(f'No parquet files in {args.directory}')
        return 1
    total = 0
    for path in files:
        rows = count_rows(path)
        total += rows
        print(f'{path.name}\t{rows:,}')
    print(f'Total rows: {total:,}')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='fakepeople', description='Generate fake person records as Parquet files')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    gen = sub.add_parser('generate', help='Generate records into partitioned Parquet files')
    gen.add_argument('--rows', type=int, required=True, help='Total number of records')
    gen.add_argument('--files', type=int, default=None, help='Number of output files (partitions)')
    gen.add_argument('--batch-size', type=int, default=None,
                     help='Rows per file; the file count follows from --rows')
    gen.add_argument('--out', type=Path, default=None, help='Output directory (or FAKEPEOPLE_OUTPUT_DIR)')
    gen.add_argument('--workers', type=int, default=None, help='Worker threads (or FAKEPEOPLE_WORKERS)')
    gen.add_argument('--compression', choices=COMPRESSIONS, default=None,
                     help='Parquet codec (or FAKEPEOPLE_COMPRESSION, default snappy)')
    gen.add_argument('--seed', type=int, default=None, help='Random seed (or FAKEPEOPLE_SEED)')
    gen.add_argument('--string-ids', action='store_true', help='Write ids as numeric strings')
    gen.add_argument('--prefix', default=None, help='File name prefix (default: people)')
    gen.add_argument('--row-group-size', type=int, default=None, help='Parquet row-group size')
    gen.add_argument('--reference-dir', type=Path, default=None, help='Directory of reference tables')
    gen.set_defaults(func=cmd_generate)

    b = sub.add_parser('bench', help='Compare naive vs vectorized sampling and worker counts')
    b.add_argument('--rows', type=int, default=100_000)
    b.add_argument('--files', type=int, default=4)
    b.add_argument('--workers', type=int, nargs='+', default=[1, 2, 4])
    b.add_argument('--seed', type=int, default=0)
    b.add_argument('--reference-dir', type=Path, default=None)
    b.set_defaults(func=cmd_bench)

    ins = sub.add_parser('inspect', help='Print row counts of Parquet files in a directory')
    ins.add_argument('directory', type=Path)
    ins.set_defaults(func=cmd_inspect)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except InvalidArgumentError as e:
        print(f'error: {e}')
        return 2
    except PartitionedWriteError as e:
        for failure in e.failures:
            print(f'error: {failure}')
        print(f'{len(e.completed)} partition(s) written, {len(e.failures)} failed')
        return 1
    except FakePeopleError as e:
        print(f'error: {e}')
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
