from __future__ import annotations

import pyarrow as pa

from fakepeople.errors import InvalidArgumentError
from fakepeople.fields import FieldGenerator

COLUMNS = ('id', 'first_name', 'last_name', 'company', 'phone', 'email')


def build_schema(string_ids: bool = False) -> pa.Schema:
    return pa.schema([
        pa.field('id', pa.string() if string_ids else pa.int64(), nullable=False),
        pa.field('first_name', pa.string(), nullable=False),
        pa.field('last_name', pa.string(), nullable=False),
        pa.field('company', pa.string(), nullable=False),
        pa.field('phone', pa.string(), nullable=False),
        pa.field('email', pa.string(), nullable=False),
    ])


class RecordBatchBuilder:
    """Assemble generated columns into a single pyarrow RecordBatch."""

    def __init__(self, generator: FieldGenerator):
        self.generator = generator
        self.schema = build_schema(generator.string_ids)

    def build(self, n: int) -> pa.RecordBatch:
        if n < 0:
            raise InvalidArgumentError(f'batch size must be >= 0, got {n}')
        gen = self.generator
        data = {}
        data['id'] = gen.generate_ids(n)
        data['first_name'] = gen.generate_first_names(n)
        data['last_name'] = gen.generate_last_names(n)
        data['company'] = gen.generate_companies(n)
        data['phone'] = gen.generate_phones(n)
        # email reads the name columns, so it goes last
        data['email'] = gen.generate_emails(data['first_name'], data['last_name'])

        bad = {name: len(col) for name, col in data.items() if len(col) != n}
        if bad:
            raise InvalidArgumentError(f'column lengths differ from batch size {n}: {bad}')

        arrays = [pa.array(data[field.name], type=field.type) for field in self.schema]
        return pa.RecordBatch.from_arrays(arrays, schema=self.schema)
