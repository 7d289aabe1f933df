"""
Tests for the driver plots, rendered off screen.
"""

import matplotlib

matplotlib.use("Agg")

from utils.plotting import plot_general, plot_learning_curve, plot_beta_distributions


class TestPlotting:
    """Test utils.plotting."""

    def test_plots_written(self, ready_engine, run_to_end, tmp_path):
        """Each helper writes its png."""
        snapshot = run_to_end(ready_engine)

        plot_learning_curve(ready_engine.get_history(), path=str(tmp_path / "learning.png"))
        plot_beta_distributions(snapshot.regions, path=str(tmp_path / "beta.png"))
        plot_general([1, 3, 2], path=str(tmp_path / "general.png"), title="gain")

        for name in ("learning.png", "beta.png", "general.png"):
            assert (tmp_path / name).stat().st_size > 0
