import numpy as np
import pytest

from fakepeople.errors import InvalidArgumentError
from fakepeople.reference import ReferenceTable
from fakepeople.sampler import CategoricalSampler


def test_sample_length_and_membership():
    ref = ReferenceTable.from_values('colors', ['red', 'green', 'blue'])
    out = CategoricalSampler(1).sample(ref, 500)
    assert len(out) == 500
    assert set(out) <= {'red', 'green', 'blue'}
    # with 500 draws every value shows up
    assert set(out) == {'red', 'green', 'blue'}


def test_sample_zero():
    assert len(CategoricalSampler(1).sample(['a'], 0)) == 0


def test_sample_plain_sequence():
    out = CategoricalSampler(1).sample(['x', 'y'], 10)
    assert set(out) <= {'x', 'y'}


def test_empty_reference_rejected():
    with pytest.raises(InvalidArgumentError, match='empty'):
        CategoricalSampler(1).sample(ReferenceTable.from_values('empty', []), 3)


def test_negative_n_rejected():
    with pytest.raises(InvalidArgumentError):
        CategoricalSampler(1).sample(['a'], -1)


def test_seed_reproducible():
    ref = [str(i) for i in range(100)]
    a = CategoricalSampler(42).sample(ref, 50)
    b = CategoricalSampler(42).sample(ref, 50)
    c = CategoricalSampler(43).sample(ref, 50)
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)


def test_integers_inclusive_range():
    out = CategoricalSampler(3).integers(10, 11, 200)
    assert out.dtype == np.int64
    assert set(out.tolist()) == {10, 11}


@pytest.mark.parametrize('seed', [-1, 2**32, 2**33])
def test_seed_out_of_range(seed):
    with pytest.raises(InvalidArgumentError, match='seed must be in'):
        CategoricalSampler(seed)


def test_seed_and_random_state_together():
    with pytest.raises(InvalidArgumentError, match='not both'):
        CategoricalSampler(1, random_state=np.random.RandomState(1))
