"""
Tests for the Beta-Bernoulli posterior model: Gamma-ratio sampling, the posterior update and the density curve.
"""

import numpy as np
import pytest

from agent.algo.BetaPosterior import sample_beta, update_region, beta_pdf_curve
from env.slot_machine.Region import Region


class TestSampleBeta:
    """Test sample_beta."""

    def test_mean_matches_analytic_mean(self, rng):
        """Beta(2, 2) draws average to 0.5."""
        draws = np.array([sample_beta(2, 2, rng=rng) for _ in range(10000)])

        assert abs(draws.mean() - 0.5) < 0.02
        assert np.all((draws >= 0) & (draws <= 1))

    def test_skewed_mean(self, rng):
        """Beta(8, 2) draws average to 0.8."""
        draws = np.array([sample_beta(8, 2, rng=rng) for _ in range(10000)])

        assert abs(draws.mean() - 0.8) < 0.02

    def test_variance_of_sharp_posterior(self, rng):
        """Variance follows ab / ((a+b)^2 (a+b+1)), which the uniform-power shortcut misses."""
        a, b = 30.0, 10.0
        draws = np.array([sample_beta(a, b, rng=rng) for _ in range(20000)])
        expected = a * b / ((a + b) ** 2 * (a + b + 1))

        assert draws.var() == pytest.approx(expected, rel=0.1)

    def test_uses_gamma_ratio(self):
        """The draw is X / (X + Y) of two Gamma variates from the same generator."""
        draw = sample_beta(3, 5, rng=np.random.default_rng(11))
        reference = np.random.default_rng(11)
        x = reference.gamma(3, 1.0)
        y = reference.gamma(5, 1.0)

        assert draw == pytest.approx(x / (x + y))

    def test_invalid_parameters(self):
        """Non-positive parameters are rejected."""
        with pytest.raises(AssertionError):
            sample_beta(0, 1)
        with pytest.raises(AssertionError):
            sample_beta(1, -2)


class TestUpdateRegion:
    """Test update_region."""

    def test_success(self):
        """A success bumps alpha and the success count."""
        region = Region.create(0, 0.5)

        updated = update_region(region, True)

        assert (updated.alpha, updated.beta) == (2, 1)
        assert (updated.success_count, updated.total_attempts) == (1, 1)

    def test_failure(self):
        """A failure bumps beta only."""
        region = Region.create(0, 0.5)

        updated = update_region(region, False)

        assert (updated.alpha, updated.beta) == (1, 2)
        assert (updated.success_count, updated.total_attempts) == (0, 1)

    def test_pure(self):
        """The original region is left untouched."""
        region = Region.create(1, 0.4)

        updated = update_region(region, True)

        assert region.alpha == 1 and region.total_attempts == 0
        assert updated.id == region.id
        assert updated.hidden_effectiveness == region.hidden_effectiveness

    def test_counts_stay_consistent(self, rng):
        """alpha = 1 + successes and beta = 1 + failures after any sequence of outcomes."""
        region = Region.create(0, 0.3)
        for outcome in rng.random(50) < 0.3:
            region = update_region(region, bool(outcome))

        assert region.alpha == 1 + region.success_count
        assert region.beta == 1 + region.total_attempts - region.success_count


class TestBetaPdfCurve:
    """Test beta_pdf_curve."""

    def test_uniform_prior_is_flat(self):
        """Beta(1, 1) has density 1 everywhere."""
        x, pdf = beta_pdf_curve(1, 1)

        assert len(x) == 100
        assert np.allclose(pdf, 1.0)

    def test_integrates_to_one(self):
        """Midpoint rule over the curve gives ~1."""
        x, pdf = beta_pdf_curve(5, 3, points=1000)

        assert pdf.sum() / 1000 == pytest.approx(1.0, abs=1e-3)

    def test_peak_at_mode(self):
        """Peak is near the mode (a-1)/(a+b-2)."""
        x, pdf = beta_pdf_curve(9, 3, points=1000)

        assert x[np.argmax(pdf)] == pytest.approx(0.8, abs=0.01)
