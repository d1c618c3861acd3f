import sys
from pathlib import Path

import pytest

# Make 'src' importable so the tests run without installing primordia
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from primordia.core.random import RandomSource  # noqa: E402


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource(1234)
