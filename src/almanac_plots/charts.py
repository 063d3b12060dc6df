"""Convenience chart functions: figure(), save(), line(), scatter(), bar()."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import ArrayLike

from .exceptions import InvalidVariantError
from .rangeframe import geom_rangeframe
from .scales import DiscreteScale, scale_colour_solarized, scale_fill_solarized
from .themes import Theme, apply

# Default output directory (relative to the working directory)
_CHARTS_DIR = Path("charts")


def _labels(
    ax: plt.Axes,
    title: str | None,
    xlabel: str | None,
    ylabel: str | None,
) -> None:
    if title:
        ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)


def _rangeframe(ax: plt.Axes, sides: str | None, x: ArrayLike, y: ArrayLike) -> None:
    """Swap the spines for a range frame on the requested sides."""
    if sides is None:
        return
    for spine in ax.spines.values():
        spine.set_visible(False)
    geom_rangeframe(ax, x=x, y=y, sides=sides, color=plt.rcParams["axes.edgecolor"])


def _color_scale(scale: DiscreteScale | None, default: Callable[[], DiscreteScale]) -> DiscreteScale:
    """The given colour or fill scale, or the default one."""
    if scale is None:
        return default()
    if scale.aesthetic not in ("colour", "fill"):
        raise InvalidVariantError("scale", scale.aesthetic, ("colour", "fill"))
    return scale


def figure(
    theme: Theme | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a (fig, ax) pair, applying ``theme`` first when given."""
    if theme is not None:
        apply(theme)
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to ./charts/ (or a custom directory) and close it.

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _CHARTS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    return path


def line(
    x: ArrayLike,
    y: ArrayLike | dict[str, ArrayLike],
    *,
    theme: Theme | None = None,
    scale: DiscreteScale | None = None,
    rangeframe: str | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Line chart. Pass a dict of {label: y_values} for multiple lines."""
    scale = _color_scale(scale, scale_colour_solarized)
    fig, ax = figure(theme, figsize=figsize)

    if isinstance(y, dict):
        colors = dict(zip(y, scale.map(list(y))))
        for label, y_data in y.items():
            ax.plot(x, y_data, color=colors[label], label=label, **kwargs)
        ax.legend()
        all_y = np.concatenate([np.ravel(np.asarray(v, dtype=float)) for v in y.values()])
    else:
        ax.plot(x, y, color=scale.palette_for(1)[0], **kwargs)
        all_y = y

    _rangeframe(ax, rangeframe, x, all_y)
    _labels(ax, title, xlabel, ylabel)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax


def scatter(
    x: ArrayLike,
    y: ArrayLike,
    groups: ArrayLike | None = None,
    *,
    theme: Theme | None = None,
    scale: DiscreteScale | None = None,
    rangeframe: str | None = "bl",
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Scatter plot, colored by ``groups`` when given, with a range frame."""
    scale = _color_scale(scale, scale_colour_solarized)
    fig, ax = figure(theme, figsize=figsize)

    if groups is not None:
        groups = list(groups)
        ax.scatter(x, y, c=scale.map(groups), **kwargs)
        ax.legend(handles=scale.legend_handles(groups))
    else:
        ax.scatter(x, y, **kwargs)

    _rangeframe(ax, rangeframe, x, y)
    _labels(ax, title, xlabel, ylabel)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax


def bar(
    x: ArrayLike,
    y: ArrayLike | dict[str, ArrayLike],
    *,
    theme: Theme | None = None,
    scale: DiscreteScale | None = None,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    bar_width: float = 0.8,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Bar chart. Pass a dict of {label: y_values} for grouped bars."""
    scale = _color_scale(scale, scale_fill_solarized)
    fig, ax = figure(theme, figsize=figsize)

    x_arr = np.asarray(x)

    if isinstance(y, dict):
        n = len(y)
        width = bar_width / n
        offsets = np.linspace(-(n - 1) / 2 * width, (n - 1) / 2 * width, n)
        fills = dict(zip(y, scale.map(list(y))))
        for offset, (label, y_data) in zip(offsets, y.items()):
            ax.bar(x_arr + offset, y_data, width=width, color=fills[label], **kwargs)
        ax.legend(handles=scale.legend_handles(y))
    else:
        ax.bar(x_arr, y, width=bar_width, color=scale.palette_for(1)[0], **kwargs)

    _labels(ax, title, xlabel, ylabel)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
