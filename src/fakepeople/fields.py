"""Column generators for fake person records.

Every ``generate_*`` method returns a numpy array of exactly the requested
length. Per-row variation (email username format, company format) is drawn
as one vector of variant indexes; each variant is a pure function over the
rows that selected it.
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np
from faker import Faker

from fakepeople.errors import InvalidArgumentError
from fakepeople.reference import ReferenceData
from fakepeople.sampler import CategoricalSampler

ID_MIN = 1000
ID_MAX = 9_999_999_999_999


def _join(*parts) -> np.ndarray:
    out = parts[0]
    for p in parts[1:]:
        out = np.char.add(out, p)
    return out


def _first_dot_last(first, last):
    return _join(first, '.', last)


def _last_dot_first(last, first):
    return _join(last, '.', first)


def _first_with_number(first, number):
    return np.char.add(first, number.astype(str))


def _initial_last(first, last):
    # casting to U1 keeps only the first character
    return np.char.add(first.astype('U1'), last)


def _last_with_suffix(last1, suffix):
    return _join(last1, ' ', suffix)


def _hyphenated(last1, last2):
    return _join(last1, '-', last2)


def _partners(last1, last2, last3):
    return _join(last1, ', ', last2, ' and ', last3)


class _Strategy(Enum):
    def __init__(self, compose, inputs):
        self.compose = compose
        self.inputs = inputs

    @classmethod
    def apply(cls, choice: np.ndarray, columns: dict) -> np.ndarray:
        """Apply the variant picked by `choice` row-wise.

        `columns` maps input names to arrays of the same length as `choice`.
        """
        out = np.empty(len(choice), dtype=object)
        for i, variant in enumerate(cls):
            mask = choice == i
            if not mask.any():
                continue
            out[mask] = variant.compose(*(columns[name][mask] for name in variant.inputs))
        return out.astype(str)


class EmailFormat(_Strategy):
    FIRST_DOT_LAST = (_first_dot_last, ('first', 'last'))
    LAST_DOT_FIRST = (_last_dot_first, ('last', 'first'))
    FIRST_NUMBER = (_first_with_number, ('first', 'number'))
    INITIAL_LAST = (_initial_last, ('first', 'last'))


class CompanyFormat(_Strategy):
    LAST_SUFFIX = (_last_with_suffix, ('last1', 'suffix'))
    HYPHENATED = (_hyphenated, ('last1', 'last2'))
    PARTNERS = (_partners, ('last1', 'last2', 'last3'))


class FieldGenerator:
    def __init__(self, reference: ReferenceData, sampler: CategoricalSampler | None = None,
                 seed: int | None = None, string_ids: bool = False, locale: str = 'en_US'):
        self.reference = reference
        if sampler is not None and seed is not None:
            raise InvalidArgumentError('pass either sampler or seed, not both')
        self.sampler = sampler if sampler is not None else CategoricalSampler(seed)
        self.string_ids = string_ids
        self.first_names = reference.first_names
        self.faker = Faker(locale)
        # derive the Faker seed from our own stream so one seed fixes all columns
        self.faker.seed_instance(int(self.sampler.rs.randint(0, 2**31 - 1)))

    def generate_ids(self, n: int) -> np.ndarray:
        ids = self.sampler.integers(ID_MIN, ID_MAX, n)
        if self.string_ids:
            return ids.astype(str)
        return ids

    def generate_first_names(self, n: int) -> np.ndarray:
        return self.sampler.sample(self.first_names, n)

    def generate_last_names(self, n: int) -> np.ndarray:
        return self.sampler.sample(self.reference.last_names, n)

    def generate_companies(self, n: int) -> np.ndarray:
        columns = {
            'last1': self.generate_last_names(n),
            'last2': self.generate_last_names(n),
            'last3': self.generate_last_names(n),
            'suffix': self.sampler.sample(self.reference.company_suffixes, n),
        }
        choice = self.sampler.choose(len(CompanyFormat), n)
        return CompanyFormat.apply(choice, columns)

    def generate_phones(self, n: int) -> np.ndarray:
        formats = self.sampler.sample(self.reference.phone_formats, n)
        # Faker fills one pattern per call; formats are still drawn vectorized
        return np.array([self.faker.numerify(f) for f in formats], dtype=str)

    def generate_emails(self, first_names: Sequence[str], last_names: Sequence[str]) -> np.ndarray:
        if len(first_names) != len(last_names):
            raise InvalidArgumentError(
                f'first_names and last_names differ in length: {len(first_names)} != {len(last_names)}')
        n = len(first_names)
        columns = {
            'first': np.asarray(first_names, dtype=str),
            'last': np.asarray(last_names, dtype=str),
            'number': self.sampler.integers(10, 99, n),
        }
        choice = self.sampler.choose(len(EmailFormat), n)
        local = EmailFormat.apply(choice, columns)
        domains = self.sampler.sample(self.reference.email_domains, n)
        return np.char.lower(np.char.add(local, domains))
