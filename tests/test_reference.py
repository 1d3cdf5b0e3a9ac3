import numpy as np
import pytest

from fakepeople.errors import InvalidArgumentError
from fakepeople.reference import TABLE_NAMES, ReferenceData, ReferenceTable, load_reference_data


def test_bundled_tables_load(reference):
    for name in TABLE_NAMES:
        assert len(reference[name]) > 0
    assert '@gmail.com' in reference.email_domains.values


def test_first_names_combine_both_tables(reference):
    combined = reference.first_names
    assert len(combined) == len(reference.first_names_male) + len(reference.first_names_female)
    assert 'James' in combined.values and 'Mary' in combined.values


def test_table_array_is_read_only():
    table = ReferenceTable.from_values('x', ['a', 'b'])
    with pytest.raises(ValueError):
        table.array[0] = 'c'


def test_unknown_table_name(reference):
    with pytest.raises(KeyError):
        reference['nicknames']


def test_load_from_directory(tmp_path):
    for name in TABLE_NAMES:
        (tmp_path / f'{name}.txt').write_text('one\n\ntwo\n', encoding='utf-8')
    ref = load_reference_data(tmp_path)
    assert ref.last_names.values == ('one', 'two')
    assert isinstance(ref.last_names.array, np.ndarray)


def test_missing_file_is_invalid_argument(tmp_path):
    with pytest.raises(InvalidArgumentError, match='not found'):
        load_reference_data(tmp_path)


def test_missing_table_in_mapping():
    with pytest.raises(InvalidArgumentError, match='phone_formats'):
        ReferenceData.from_mapping({n: ['a'] for n in TABLE_NAMES if n != 'phone_formats'})
