"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


@pytest.fixture
def rng():
    """Seeded random generator, so that every test is reproducible."""
    return np.random.default_rng(12345)


@pytest.fixture
def default_config():
    """Configuration with all default values."""
    from neatcore.run.config import Config
    return Config()


@pytest.fixture
def sample_genome(rng):
    """A fully connected genome with 3 inputs and 2 outputs."""
    from neatcore.genotype.genome import Genome
    return Genome.create(0, 3, 2, rng)
