"""Tests for the weekly profit chart."""

import matplotlib
matplotlib.use("Agg")

from trader_insights.models import StrategyResult
from trader_insights.visualization import create_visualizations


def test_saves_chart(tmp_path):
    results = [
        StrategyResult(1, "alice", "0xA", 45.0, 2, "..."),
        StrategyResult(2, "bob", "0xB", -3.5, 7, "..."),
    ]

    path = create_visualizations(results, output_dir=str(tmp_path), show=False)

    assert path.exists()
    assert path.suffix == ".png"
    assert path.parent == tmp_path


def test_empty_results_still_render(tmp_path):
    path = create_visualizations([], output_dir=str(tmp_path), show=False)

    assert path.exists()
