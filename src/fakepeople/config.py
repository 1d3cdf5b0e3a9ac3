"""Run configuration.

Values come from CLI flags, then ``FAKEPEOPLE_*`` environment variables, then
the defaults below.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping

from fakepeople.errors import InvalidArgumentError
from fakepeople.io import check_compression

ENV_PREFIX = 'FAKEPEOPLE_'


def default_workers() -> int:
    return os.cpu_count() or 4


@dataclass(frozen=True)
class GeneratorConfig:
    output_dir: Path = Path('out')
    workers: int = 4
    compression: str = 'snappy'
    seed: int | None = None
    string_ids: bool = False
    file_prefix: str = 'people'
    row_group_size: int | None = None
    reference_dir: Path | None = None

    def __post_init__(self):
        if self.workers < 1:
            raise InvalidArgumentError(f'workers must be >= 1, got {self.workers}')
        if self.seed is not None and self.seed < 0:
            raise InvalidArgumentError(f'seed must be >= 0, got {self.seed}')
        if self.row_group_size is not None and self.row_group_size < 1:
            raise InvalidArgumentError(f'row_group_size must be >= 1, got {self.row_group_size}')
        if not self.file_prefix:
            raise InvalidArgumentError('file_prefix must not be empty')
        object.__setattr__(self, 'output_dir', Path(self.output_dir))
        object.__setattr__(self, 'compression', check_compression(self.compression))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> 'GeneratorConfig':
        """Build a config from the environment; keyword overrides that are not
        None win over the environment."""
        env = os.environ if environ is None else environ
        values = {'workers': default_workers()}
        if env.get(ENV_PREFIX + 'OUTPUT_DIR'):
            values['output_dir'] = Path(env[ENV_PREFIX + 'OUTPUT_DIR'])
        if env.get(ENV_PREFIX + 'WORKERS'):
            values['workers'] = _int_env(env, 'WORKERS')
        if env.get(ENV_PREFIX + 'COMPRESSION'):
            values['compression'] = env[ENV_PREFIX + 'COMPRESSION']
        if env.get(ENV_PREFIX + 'SEED'):
            values['seed'] = _int_env(env, 'SEED')
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_options(self, **changes) -> 'GeneratorConfig':
        return replace(self, **changes)


def _int_env(env: Mapping[str, str], name: str) -> int:
    raw = env[ENV_PREFIX + name]
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f'{ENV_PREFIX}{name} must be an integer, got {raw!r}') from None
