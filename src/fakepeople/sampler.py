from __future__ import annotations

from typing import Sequence

import numpy as np

from fakepeople.errors import InvalidArgumentError
from fakepeople.reference import ReferenceTable


class CategoricalSampler:
    """Uniform sampling with replacement from a reference vector.

    One call draws all `n` indexes at once with ``RandomState.randint`` and
    gathers them with fancy indexing, instead of one ``random.choice`` per row.
    Each sampler owns its RandomState, so samplers in different threads never
    share state.
    """

    def __init__(self, seed: int | None = None, random_state: np.random.RandomState | None = None):
        if random_state is not None and seed is not None:
            raise InvalidArgumentError('pass either seed or random_state, not both')
        if seed is not None and not 0 <= seed < 2**32:
            raise InvalidArgumentError(f'seed must be in [0, 2**32), got {seed}')
        self.rs = random_state if random_state is not None else np.random.RandomState(seed)

    def sample(self, reference: Sequence | ReferenceTable | np.ndarray, n: int) -> np.ndarray:
        if n < 0:
            raise InvalidArgumentError(f'sample size must be >= 0, got {n}')
        if isinstance(reference, ReferenceTable):
            arr = reference.array
        else:
            arr = np.asarray(reference)
        if len(arr) == 0:
            name = getattr(reference, 'name', 'reference')
            raise InvalidArgumentError(f'cannot sample from empty table {name!r}')
        idx = self.rs.randint(0, len(arr), size=n)
        return arr[idx]

    def choose(self, k: int, n: int) -> np.ndarray:
        """Draw `n` variant indexes in [0, k)."""
        if n < 0:
            raise InvalidArgumentError(f'sample size must be >= 0, got {n}')
        return self.rs.randint(0, k, size=n)

    def integers(self, low: int, high: int, n: int) -> np.ndarray:
        """Draw `n` int64 values in [low, high] (both ends inclusive)."""
        if n < 0:
            raise InvalidArgumentError(f'sample size must be >= 0, got {n}')
        return self.rs.randint(low, high + 1, size=n, dtype=np.int64)
