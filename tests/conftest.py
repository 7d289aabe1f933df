"""
Pytest fixtures and configuration for the allocation simulation test suite.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the flat packages (agent, env, utils) are importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from env.SimulationEngine import SimulationEngine


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(2024)


@pytest.fixture
def engine():
    """Seeded engine, still Idle."""
    return SimulationEngine(seed=7)


@pytest.fixture
def ready_engine(engine):
    """Seeded engine initialized with 3 regions and a budget of 30."""
    engine.initialize(3, 30)
    return engine


@pytest.fixture
def run_to_end():
    """Step an engine until its budget is exhausted, return the last snapshot."""
    def _run(engine):
        snapshot = engine.get_snapshot()
        while not snapshot.is_exhausted:
            snapshot = engine.step()
        return snapshot
    return _run
