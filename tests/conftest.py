"""Shared fixtures; puts src/ on the import path without installing the package."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure():
    root = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(root))


@pytest.fixture
def schema():
    from artmaker.genetics.proteins import default_schema

    return default_schema()


@pytest.fixture
def rng():
    from artmaker.core.rng import make_rng

    return make_rng(1234)


@pytest.fixture
def sample_genome() -> str:
    # drawing | frame_rate | background | ellipse x1 | linegrid x2
    return "12" + "40" + "999000500" + "1" + "10999000999" + "2" + "00030" + "00045"


@pytest.fixture
def short_genome() -> str:
    # no ellipses, one linegrid
    return "55" + "00" + "000000000" + "0" + "1" + "12345"
