"""Generate a few partitions of fake people and print them back.

Usage:
  python examples/generate_people.py --rows 20 --files 2 --seed 7
"""
from __future__ import annotations

import argparse
from pathlib import Path
import tempfile

# When running this example directly ensure the project's `src/` directory is
# on sys.path so the `fakepeople` package can be imported without installing.
import sys
_root = Path(__file__).resolve().parents[1]
_src = str((_root / 'src').resolve())
if _src not in sys.path:
    sys.path.insert(0, _src)

from fakepeople import io
from fakepeople.config import GeneratorConfig
from fakepeople.reference import load_reference_data
from fakepeople.writer import PartitionedWriter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument('--rows', type=int, default=20)
    parser.add_argument('--files', type=int, default=2)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args(argv)

    reference = load_reference_data()
    writer = PartitionedWriter(reference, GeneratorConfig(workers=2, seed=args.seed))

    with tempfile.TemporaryDirectory() as tmpdir:
        for res in writer.write_all(args.rows, args.files, Path(tmpdir)):
            print(f'{res.path.name}: {res.rows} rows')
            print(io.read_table(res.path).to_pandas())
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
