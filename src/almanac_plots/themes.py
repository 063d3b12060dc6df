"""Translate palette constants into matplotlib rcParams themes.

Every builder returns a fresh rcParams dict. Pass it to ``apply`` to restyle
matplotlib globally, or to ``theme_context`` for a ``with`` block. Elements
matplotlib has no rcParam for (facet strips, legend key boxes) keep the
matplotlib defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import matplotlib as mpl
import matplotlib.pyplot as plt

from .exceptions import InvalidVariantError, UnknownThemeError
from .palettes import ECONOMIST_BG, LAYOUT, STATA, solarized_rebase

logger = logging.getLogger(__name__)

Theme = dict[str, Any]


def _check_flag(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise InvalidVariantError(name, value, [True, False])


def theme_base(base_size: float = LAYOUT["base_size"], base_family: str = "") -> Theme:
    """Bordered, gridded base theme on white that the other themes override."""
    small = base_size * LAYOUT["tick_scale"]
    return {
        # Text
        "font.family": base_family or "sans-serif",
        "font.size": base_size,
        "text.color": "black",

        # Figure
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": "white",
        "figure.edgecolor": "white",
        "figure.titlesize": base_size * LAYOUT["title_scale"],
        "savefig.facecolor": "auto",
        "savefig.edgecolor": "auto",

        # Axes (panel)
        "axes.facecolor": "white",
        "axes.edgecolor": "#333333",
        "axes.linewidth": LAYOUT["line_width"],
        "axes.titlesize": base_size * LAYOUT["title_scale"],
        "axes.titlecolor": "black",
        "axes.titleweight": "normal",
        "axes.titlelocation": "center",
        "axes.labelsize": base_size,
        "axes.labelcolor": "black",
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.spines.top": True,
        "axes.spines.right": True,
        "axes.grid": True,
        "axes.grid.axis": "both",
        "axes.axisbelow": True,

        # Grid
        "grid.color": "#ebebeb",
        "grid.linestyle": "-",
        "grid.linewidth": LAYOUT["grid_width"],
        "grid.alpha": 1.0,

        # Ticks
        "xtick.color": "#333333",
        "ytick.color": "#333333",
        "xtick.labelcolor": "#4d4d4d",
        "ytick.labelcolor": "#4d4d4d",
        "xtick.labelsize": small,
        "ytick.labelsize": small,
        "xtick.direction": "out",
        "ytick.direction": "out",
        "xtick.major.size": LAYOUT["tick_length"],
        "ytick.major.size": LAYOUT["tick_length"],
        "xtick.bottom": True,
        "ytick.left": True,

        # Legend
        "legend.frameon": True,
        "legend.facecolor": "white",
        "legend.edgecolor": "none",
        "legend.framealpha": 1.0,
        "legend.fontsize": small,
        "legend.title_fontsize": base_size,
        "legend.loc": "best",
    }


def theme_solarized(
    base_size: float = LAYOUT["base_size"],
    base_family: str = "",
    light: bool = True,
) -> Theme:
    """Solarized theme, light or dark.

    Both variants draw on the same eight base tones; the dark variant reads
    the ramp in the opposite direction, so background and foreground swap.
    The legend has no border; matplotlib has no rcParam for the outlined
    per-key boxes, so those keep the matplotlib default.
    """
    rebase = solarized_rebase(light)
    theme = theme_base(base_size, base_family)
    theme.update({
        "text.color": rebase["rebase0"],
        "axes.labelcolor": rebase["rebase0"],
        "xtick.labelcolor": rebase["rebase0"],
        "ytick.labelcolor": rebase["rebase0"],
        "axes.titlecolor": rebase["rebase1"],
        "xtick.color": rebase["rebase0"],
        "ytick.color": rebase["rebase0"],
        "figure.facecolor": rebase["rebase03"],
        "figure.edgecolor": rebase["rebase0"],
        "axes.facecolor": rebase["rebase03"],
        "axes.edgecolor": rebase["rebase01"],
        "grid.color": rebase["rebase01"],
        "legend.facecolor": "inherit",
    })
    return theme


def _economist_layout(
    theme: Theme,
    base_size: float,
    horizontal: bool,
    background: str,
    panel: str,
    grid: str,
) -> Theme:
    # Only the category axis keeps its line; value ticks are dropped.
    value_axis, category_axis = ("y", "x") if horizontal else ("x", "y")
    category_spine = "bottom" if horizontal else "left"
    theme.update({
        "text.color": "black",
        "axes.labelcolor": "black",
        "axes.titlecolor": "black",
        "xtick.labelcolor": "black",
        "ytick.labelcolor": "black",
        "xtick.color": "black",
        "ytick.color": "black",
        "xtick.labelsize": base_size,
        "ytick.labelsize": base_size,
        "figure.facecolor": background,
        "figure.edgecolor": background,
        "axes.facecolor": panel,
        "axes.edgecolor": "black",
        "axes.linewidth": LAYOUT["line_width"] * 0.8,
        "axes.spines.left": False,
        "axes.spines.bottom": False,
        "axes.spines.top": False,
        "axes.spines.right": False,
        f"axes.spines.{category_spine}": True,
        "axes.grid.axis": value_axis,
        "grid.color": grid,
        "grid.linewidth": LAYOUT["grid_width"] * 1.75,
        f"{category_axis}tick.direction": "in",
        f"{category_axis}tick.major.size": base_size * 0.5,
        f"{value_axis}tick.major.size": 0,
        "axes.titlesize": base_size * 1.5,
        "axes.titleweight": "bold",
        "axes.titlelocation": "left",
        "legend.loc": "upper center",
        "legend.frameon": False,
        "legend.facecolor": "inherit",
    })
    return theme


def theme_economist(
    base_size: float = 10,
    base_family: str = "sans-serif",
    horizontal: bool = True,
    dkpanel: bool = False,
) -> Theme:
    """Theme after the charts in The Economist.

    The legend is placed along the top edge inside the panel, without a frame.

    Args:
        horizontal: Grid lines run horizontally (value axis is y)
        dkpanel: Darker panel than the surrounding figure
    """
    _check_flag("horizontal", horizontal)
    _check_flag("dkpanel", dkpanel)
    panel = ECONOMIST_BG["edkbg"] if dkpanel else ECONOMIST_BG["ebg"]
    return _economist_layout(
        theme_base(base_size, base_family),
        base_size,
        horizontal,
        background=ECONOMIST_BG["ebg"],
        panel=panel,
        grid="white",
    )


def theme_economist_white(
    base_size: float = 11,
    base_family: str = "sans-serif",
    gray_bg: bool = True,
    horizontal: bool = True,
) -> Theme:
    """Economist layout on a white or light gray background."""
    _check_flag("gray_bg", gray_bg)
    _check_flag("horizontal", horizontal)
    background = ECONOMIST_BG["ltgray"] if gray_bg else "white"
    return _economist_layout(
        theme_base(base_size, base_family),
        base_size,
        horizontal,
        background=background,
        panel=background,
        grid=ECONOMIST_BG["dkgray"],
    )


# graph region, plot region, grid
_STATA_SCHEMES = {
    "s2color": ("ltbluishgray", "white", "ltbluishgray"),
    "s1color": ("white", "white", "ltbluishgray"),
    "s2mono": ("gs15", "white", "gs13"),
    "s1mono": ("white", "white", "gs13"),
}


def theme_stata(
    base_size: float = 11,
    base_family: str = "sans-serif",
    scheme: str = "s2color",
) -> Theme:
    """Theme after the default Stata graph schemes."""
    if scheme not in _STATA_SCHEMES:
        raise InvalidVariantError("scheme", scheme, _STATA_SCHEMES)
    background, panel, grid = (STATA[name] for name in _STATA_SCHEMES[scheme])

    theme = theme_base(base_size, base_family)
    theme.update({
        "text.color": "black",
        "axes.labelcolor": "black",
        "axes.titlecolor": "black",
        "xtick.labelcolor": "black",
        "ytick.labelcolor": "black",
        "xtick.color": "black",
        "ytick.color": "black",
        "figure.facecolor": background,
        "figure.edgecolor": background,
        "axes.facecolor": panel,
        "axes.edgecolor": "black",
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid.axis": "y",
        "grid.color": grid,
        "legend.facecolor": "white",
        "legend.edgecolor": "black",
        "legend.loc": "lower center",
    })
    return theme


def theme_tufte(
    base_size: float = 11,
    base_family: str = "serif",
    ticks: bool = True,
) -> Theme:
    """Minimal ink: no frame, no grid, no background.

    Pair with ``geom_rangeframe`` to draw axis lines that only span the data.
    """
    _check_flag("ticks", ticks)
    tick_length = LAYOUT["tick_length"] if ticks else 0
    theme = theme_base(base_size, base_family)
    theme.update({
        "axes.spines.left": False,
        "axes.spines.bottom": False,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": False,
        "xtick.color": "black",
        "ytick.color": "black",
        "xtick.labelcolor": "black",
        "ytick.labelcolor": "black",
        "xtick.major.size": tick_length,
        "ytick.major.size": tick_length,
        "legend.frameon": False,
    })
    return theme


# -- Registry -- #

_THEMES: dict[str, tuple[Callable[..., Theme], str]] = {
    "base": (theme_base, "White panel with a light grid and a full frame"),
    "solarized": (
        theme_solarized,
        "Solarized base tones; light=False gives the dark variant",
    ),
    "economist": (
        theme_economist,
        "Blue-gray background with white value grid lines, as in The Economist",
    ),
    "economist_white": (
        theme_economist_white,
        "Economist layout on a light gray or white background",
    ),
    "stata": (theme_stata, "Stata graph schemes s2color, s1color, s2mono and s1mono"),
    "tufte": (theme_tufte, "No frame or grid; pairs with range frames"),
}


def get_theme(name: str, **kwargs: Any) -> Theme:
    """Build a registered theme by name.

    Raises:
        UnknownThemeError: If no theme is registered under ``name``
    """
    key = name.lower() if isinstance(name, str) else name
    if key not in _THEMES:
        raise UnknownThemeError(name, _THEMES)
    builder, _ = _THEMES[key]
    return builder(**kwargs)


def list_themes() -> list[str]:
    return list(_THEMES)


def list_themes_with_descriptions() -> dict[str, str]:
    return {name: description for name, (_, description) in _THEMES.items()}


# -- Application -- #

def apply(theme: Theme) -> None:
    """Apply a theme to matplotlib globally."""
    plt.rcParams.update(theme)
    logger.debug("Applied theme with %d rcParams", len(theme))


def theme_context(theme: Theme):
    """Context manager applying a theme only inside a ``with`` block."""
    return mpl.rc_context(theme)
