"""
Tests for the uniform allocation baseline.
"""

import numpy as np
import pytest

import agent.algo.UniformAllocation as uniform_allocation
from agent.algo.UniformAllocation import attempts_per_region, simulate_uniform
from env.slot_machine.Region import Region


class TestUniformAllocation:
    """Test simulate_uniform."""

    def test_floor_division(self):
        """Remainder units are dropped."""
        assert attempts_per_region(9, 3) == 3
        assert attempts_per_region(10, 3) == 3
        assert attempts_per_region(100, 7) == 14

    def test_trial_count(self, monkeypatch):
        """9 units over 3 regions runs exactly 3 trials per region."""
        calls = []

        def fake_trial(p, rng=None):
            calls.append(p)
            return True

        monkeypatch.setattr(uniform_allocation, "simulate_trial", fake_trial)
        regions = [Region.create(i, p) for i, p in enumerate([0.2, 0.5, 0.8])]

        successes = simulate_uniform(regions, 9)

        assert successes == 9
        assert sorted(calls) == [0.2] * 3 + [0.5] * 3 + [0.8] * 3

    def test_remainder_not_redistributed(self, monkeypatch):
        """10 units over 3 regions still gives 9 trials."""
        calls = []
        monkeypatch.setattr(uniform_allocation, "simulate_trial", lambda p, rng=None: calls.append(p) or False)
        regions = [Region.create(i, 0.5) for i in range(3)]

        assert simulate_uniform(regions, 10) == 0
        assert len(calls) == 9

    def test_expected_successes(self):
        """Average over many baselines approaches sum(p) * attempts."""
        rng = np.random.default_rng(12)
        regions = [Region.create(0, 0.9), Region.create(1, 0.1)]

        totals = [simulate_uniform(regions, 100, rng=rng) for _ in range(500)]

        assert np.mean(totals) == pytest.approx(50, abs=1.0)

    def test_does_not_touch_posteriors(self):
        """Regions keep their posterior state."""
        regions = [Region.create(i, 0.5) for i in range(2)]
        before = list(regions)

        simulate_uniform(regions, 50, rng=np.random.default_rng(0))

        assert regions == before
