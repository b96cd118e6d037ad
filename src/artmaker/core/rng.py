"""Central RNG helpers using PCG64DXSM."""
from __future__ import annotations

from numpy.random import Generator, PCG64DXSM


def make_rng(seed: int | None = None) -> Generator:
    """Return a fresh generator; ``None`` seeds from OS entropy."""
    return Generator(PCG64DXSM(seed))


def ensure_rng(rng: Generator | None) -> Generator:
    return rng if rng is not None else make_rng()
