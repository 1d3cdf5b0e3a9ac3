"""Shared fixtures. `src/` goes on sys.path so tests run without installing
the package."""
from pathlib import Path
import re
import sys

import pytest

_root = Path(__file__).resolve().parents[1]
_src = str((_root / 'src').resolve())
if _src not in sys.path:
    sys.path.insert(0, _src)

from fakepeople.reference import load_reference_data  # noqa: E402


@pytest.fixture(scope='session')
def reference():
    return load_reference_data()


def _username_matches(email, first, last):
    """True if the local part is one of the four username formats for (first, last)."""
    local = email.split('@')[0]
    first, last = first.lower(), last.lower()
    return (
        local == f'{first}.{last}'
        or local == f'{last}.{first}'
        or re.fullmatch(re.escape(first) + r'\d{2}', local) is not None
        or local == first[0] + last
    )


@pytest.fixture
def username_matches():
    return _username_matches
