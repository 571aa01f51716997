import os
import pathlib
import sys

import pytest

# Ensure matplotlib uses a non-interactive backend for headless test runs.
os.environ.setdefault("MPLBACKEND", "Agg")

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class RecordingSource:
    """Seeded source that remembers every witness range it was asked for."""

    def __init__(self, seed=0):
        from primes.random_source import SeededRandomSource

        self._inner = SeededRandomSource(seed)
        self.ranges = []

    def random_bits(self, bits):
        return self._inner.random_bits(bits)

    def random_range(self, lo, hi):
        self.ranges.append((lo, hi))
        return self._inner.random_range(lo, hi)


class StuckSource:
    """Broken source that always returns the smallest value of the requested size."""

    def random_bits(self, bits):
        return 1 << (bits - 1)

    def random_range(self, lo, hi):
        return lo


@pytest.fixture
def seeded():
    from primes.random_source import SeededRandomSource

    return SeededRandomSource(20240601)


@pytest.fixture
def recording_source():
    return RecordingSource(seed=7)


@pytest.fixture
def stuck_source():
    return StuckSource()
