"""Reference tables the generators sample from.

Tables are plain UTF-8 text files with one value per line; blank lines are
ignored. The package ships a default set under ``data/``. A caller can point
:func:`load_reference_data` at any directory holding files with the same names.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import numpy as np

from fakepeople.errors import InvalidArgumentError

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / 'data'

TABLE_NAMES = (
    'first_names_male',
    'first_names_female',
    'last_names',
    'email_domains',
    'company_suffixes',
    'phone_formats',
)


@dataclass(frozen=True)
class ReferenceTable:
    name: str
    values: tuple
    _array: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        arr = np.array(self.values, dtype=str)
        arr.flags.writeable = False
        # frozen dataclass: bypass __setattr__ once for the cached array
        object.__setattr__(self, '_array', arr)

    @classmethod
    def from_values(cls, name: str, values: Iterable[str]) -> 'ReferenceTable':
        return cls(name, tuple(values))

    @property
    def array(self) -> np.ndarray:
        """Read-only numpy view of the values."""
        return self._array

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __add__(self, other: 'ReferenceTable') -> 'ReferenceTable':
        return ReferenceTable(f'{self.name}+{other.name}', self.values + other.values)


@dataclass(frozen=True)
class ReferenceData:
    """The full set of tables, loaded once and shared read-only by all workers."""

    first_names_male: ReferenceTable
    first_names_female: ReferenceTable
    last_names: ReferenceTable
    email_domains: ReferenceTable
    company_suffixes: ReferenceTable
    phone_formats: ReferenceTable

    def __getitem__(self, name: str) -> ReferenceTable:
        if name not in TABLE_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    @property
    def first_names(self) -> ReferenceTable:
        return self.first_names_male + self.first_names_female

    @classmethod
    def from_mapping(cls, tables: dict) -> 'ReferenceData':
        missing = [n for n in TABLE_NAMES if n not in tables]
        if missing:
            raise InvalidArgumentError(f'missing reference tables: {", ".join(missing)}')
        return cls(**{n: ReferenceTable.from_values(n, tables[n]) for n in TABLE_NAMES})


def read_table_file(path: Path) -> list[str]:
    with open(path, encoding='utf-8') as fh:
        return [line.strip() for line in fh if line.strip()]


def load_reference_data(directory: str | Path | None = None) -> ReferenceData:
    """Load every reference table from `directory` (default: bundled data)."""
    base = Path(directory) if directory is not None else DEFAULT_DATA_DIR
    tables = {}
    for name in TABLE_NAMES:
        path = base / f'{name}.txt'
        if not path.is_file():
            raise InvalidArgumentError(f'reference file not found: {path}')
        tables[name] = read_table_file(path)
    return ReferenceData.from_mapping(tables)
