"""Tests for the convenience chart functions."""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.colors import to_rgba

import almanac_plots as ap
from almanac_plots.palettes import ECONOMIST_BG, SOLARIZED


def _frame_names(ax):
    return sorted(line.get_gid() for line in ax.lines if line.get_gid())


class TestFigureAndSave:
    """figure() and save()."""

    def test_figure_applies_theme(self):
        fig, ax = ap.figure(ap.theme_economist())
        assert plt.rcParams["axes.facecolor"] == ECONOMIST_BG["ebg"]
        assert ax.get_facecolor() == to_rgba(ECONOMIST_BG["ebg"])

    def test_save_writes_and_closes(self, tmp_path):
        fig, _ = ap.figure()
        path = ap.save(fig, "chart.png", output_dir=tmp_path / "out")
        assert path == tmp_path / "out" / "chart.png"
        assert path.exists()
        assert not plt.fignum_exists(fig.number)


class TestCharts:
    """line(), scatter() and bar()."""

    def test_scatter_groups_and_rangeframe(self):
        x = np.array([0.3, 1.1, 2.7, 4.0])
        y = np.array([1.0, 3.0, 2.0, 5.0])
        fig, ax = ap.scatter(x, y, groups=["a", "b", "a", "b"], theme=ap.theme_tufte())

        assert _frame_names(ax) == ["range_x_b", "range_y_l"]
        assert not any(spine.get_visible() for spine in ax.spines.values())
        labels = [text.get_text() for text in ax.get_legend().get_texts()]
        assert labels == ["a", "b"]

    def test_scatter_without_rangeframe(self):
        fig, ax = ap.scatter([1, 2], [3, 4], rangeframe=None)
        assert _frame_names(ax) == []
        assert ax.get_legend() is None

    def test_line_series_use_scale_colors(self):
        scale = ap.scale_colour_solarized(["blue", "red"])
        fig, ax = ap.line([0, 1, 2], {"up": [0, 1, 2], "down": [2, 1, 0]}, scale=scale, rangeframe="l")
        colors = {line.get_label(): line.get_color() for line in ax.lines if not line.get_gid()}
        assert colors == {"down": SOLARIZED["blue"], "up": SOLARIZED["red"]}
        assert _frame_names(ax) == ["range_y_l"]

    def test_line_single_series(self, tmp_path):
        fig, ax = ap.line([0, 1], [1, 2], title="T", filename="line.png", output_dir=tmp_path)
        assert ax.get_title() == "T"
        assert ax.lines[0].get_color() == SOLARIZED["yellow"]
        assert (tmp_path / "line.png").exists()

    def test_grouped_bar(self):
        fig, ax = ap.bar([0, 1, 2], {"a": [1, 2, 3], "b": [3, 2, 1]}, scale=ap.scale_fill_stata())
        assert len(ax.patches) == 6
        assert len(ax.get_legend().get_patches()) == 2

    def test_series_outside_limits_get_na_color(self):
        scale = ap.scale_colour_solarized(limits=["a"], na_value="#000000")
        fig, ax = ap.line([0, 1], {"a": [0, 1], "b": [1, 0]}, scale=scale)
        colors = {line.get_label(): line.get_color() for line in ax.lines}
        assert colors == {"a": SOLARIZED["yellow"], "b": "#000000"}

    def test_bar_series_outside_limits_get_na_color(self):
        scale = ap.scale_fill_solarized(limits=["b"])
        fig, ax = ap.bar([0, 1], {"a": [1, 2], "b": [2, 1]}, scale=scale)
        assert ax.patches[0].get_facecolor() == to_rgba(scale.na_value)
        assert ax.patches[2].get_facecolor() == to_rgba(SOLARIZED["yellow"])

    @pytest.mark.parametrize("chart", ["line", "scatter", "bar"])
    def test_shape_scale_is_rejected(self, chart):
        figures_before = plt.get_fignums()
        with pytest.raises(ap.InvalidVariantError, match="scale"):
            if chart == "scatter":
                ap.scatter([0, 1], [0, 1], groups=["a", "b"], scale=ap.scale_shape_tremmel())
            else:
                getattr(ap, chart)([0, 1], {"a": [0, 1]}, scale=ap.scale_shape_tremmel())
        assert plt.get_fignums() == figures_before
