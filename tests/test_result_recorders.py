"""
Tests for RewardHistory, SimulationResults and ComparisonResult.
"""

import logging

import numpy as np
import pytest

from agent.result_recorder.ComparisonResult import ComparisonResult
from agent.result_recorder.RewardHistory import RewardHistory
from agent.result_recorder.SimulationResults import SimulationResults


def make_history(rewards, region_id=1):
    history = RewardHistory()
    for reward in rewards:
        history.update(region_id, reward)
    return history


class TestRewardHistory:
    """Test RewardHistory."""

    def test_update(self):
        """Actions and rewards are appended in order."""
        history = RewardHistory()
        history.update(2, 1)
        history.update(1, 0)

        assert history.get_actions() == (2, 1)
        assert history.get_rewards() == (1, 0)
        assert len(history) == 2
        assert str(history) == "2*,1"
        assert history.get_summary() == {"steps": 2, "successes": 1}

    def test_rejects_non_binary(self):
        """Rewards are 0 or 1."""
        with pytest.raises(AssertionError):
            RewardHistory().update(1, 2)

    def test_moving_average_partial_windows(self):
        """First entries average over what is available."""
        history = make_history([1, 0, 1, 1])

        assert np.allclose(history.moving_average(window=2), [1.0, 0.5, 0.5, 1.0])
        assert np.allclose(history.moving_average(window=10), [1.0, 0.5, 2 / 3, 0.75])

    def test_moving_average_default_window(self):
        """Default window is 10 steps."""
        history = make_history([0] * 10 + [1] * 10)

        assert history.moving_average()[-1] == 1.0
        assert history.moving_average()[14] == 0.5

    def test_cumulative_success_rate(self):
        """Running success rate over the whole history."""
        history = make_history([1, 0, 0, 1])

        assert np.allclose(history.cumulative_success_rate(), [1.0, 0.5, 1 / 3, 0.5])

    def test_empty(self):
        """Empty history gives empty series."""
        history = RewardHistory()

        assert history.moving_average().size == 0
        assert history.cumulative_success_rate().size == 0


class TestSimulationResults:
    """Test SimulationResults."""

    def test_improvement(self):
        """Relative gain in percent."""
        results = SimulationResults(thompson_sampling_successes=75, uniform_allocation_successes=50,
                                    total_attempts=100, uniform_attempts=100)

        assert results.improvement == pytest.approx(50.0)
        assert results.thompson_won

    def test_improvement_without_uniform_successes(self):
        """No baseline success, no ratio."""
        results = SimulationResults(3, 0, 10, 9)

        assert results.improvement is None
        assert results.to_dict()["improvement"] is None

    def test_frozen(self):
        """Results can't be changed once computed."""
        results = SimulationResults(1, 1, 2, 2)

        with pytest.raises(AttributeError):
            results.thompson_sampling_successes = 5


class TestComparisonResult:
    """Test ComparisonResult."""

    def test_summary(self):
        """Wins and averages over the recorded runs."""
        comparison = ComparisonResult("ThompsonSampling")
        comparison.update(SimulationResults(80, 50, 100, 100))
        comparison.update(SimulationResults(40, 60, 100, 100))

        win_perc, average_thompson, average_uniform = comparison.get_summary()

        assert win_perc == 0.5
        assert average_thompson == 60.0
        assert average_uniform == 55.0
        assert comparison.get_average_improvement() == pytest.approx((60.0 - 100 / 3) / 2)
        assert comparison.get_summary_dict()["nb_runs"] == 2
        assert list(comparison.get_results()) == [0, 1]

    def test_empty_summary(self):
        """Summary needs at least one run."""
        with pytest.raises(AssertionError):
            ComparisonResult().get_summary()

    def test_log(self, caplog, capsys):
        """log writes to logging and prints on display."""
        comparison = ComparisonResult("ThompsonSampling")
        comparison.update(SimulationResults(80, 50, 100, 100), env_snap={"state": "exhausted"})

        with caplog.at_level(logging.INFO):
            comparison.log(display=True)

        assert "Win percentage: 100.0%" in caplog.text
        assert "Agent name:ThompsonSampling" in capsys.readouterr().out
        assert comparison.get_env_snaps() == {0: {"state": "exhausted"}}
