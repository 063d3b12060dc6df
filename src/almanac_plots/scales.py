"""Palette functions and discrete colour, fill and shape scales.

A scale assigns palette entries to the distinct values of a categorical
variable in a fixed order, so the same category always gets the same color
across plots that share the scale.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

import matplotlib as mpl
from matplotlib.colors import ListedColormap
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from .exceptions import ConfigurationError, InvalidVariantError, UnknownColorError
from .palettes import ECONOMIST_FG, SHAPES, SOLARIZED, STATA, STATA_SCHEMES, pick

logger = logging.getLogger(__name__)

AESTHETICS = ("colour", "fill", "shape")

# grey50
NA_COLOR = "#7f7f7f"


# -- Palette functions -- #

def solarized_pal(colors: Sequence[str] | None = None) -> list[str]:
    """Solarized accent colors, in canonical order or in the order given."""
    return pick(
        SOLARIZED,
        colors,
        exclude=lambda name: name.startswith("base"),
        palette="solarized accents",
    )


def economist_pal(colors: Sequence[str] | None = None) -> list[str]:
    """Data colors used in The Economist charts."""
    return pick(ECONOMIST_FG, colors, palette="economist")


def stata_pal(scheme: str = "s2color") -> list[str]:
    """The p1..p15 colors of a Stata graph scheme."""
    if scheme not in STATA_SCHEMES:
        raise InvalidVariantError("scheme", scheme, STATA_SCHEMES)
    return pick(STATA, STATA_SCHEMES[scheme], palette="stata")


def shape_pal(name: str = "cleveland") -> list[tuple[str, str]]:
    """A named marker sequence as (marker, fillstyle) pairs."""
    if name not in SHAPES:
        raise UnknownColorError(name, "shape palettes", SHAPES, parameter="name")
    return list(SHAPES[name])


def cleveland_shape_pal(overlap: bool = True) -> list[tuple[str, str]]:
    """Cleveland's symbols; letters when points overlap, shapes otherwise."""
    if not isinstance(overlap, bool):
        raise InvalidVariantError("overlap", overlap, [True, False])
    return shape_pal("cleveland_overlap" if overlap else "cleveland")


def circlefill_shape_pal() -> list[tuple[str, str]]:
    return shape_pal("circlefill")


def tremmel_shape_pal() -> list[tuple[str, str]]:
    return shape_pal("tremmel")


# -- Scales -- #

def _is_null(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


class DiscreteScale:
    """Map categorical values onto a fixed palette.

    Args:
        aesthetic: "colour", "fill" or "shape"
        scale_name: Name used for the colormap and in log messages
        palette: Ordered palette entries (hex colors, or (marker, fillstyle)
            pairs for shapes)
        limits: Explicit ordered levels; defaults to the sorted distinct
            values seen by each call
        na_value: Entry used for nulls and values outside the levels
    """

    def __init__(
        self,
        aesthetic: str,
        scale_name: str,
        palette: Sequence[Any],
        limits: Sequence[Any] | None = None,
        na_value: Any = None,
    ):
        if aesthetic not in AESTHETICS:
            raise InvalidVariantError("aesthetic", aesthetic, AESTHETICS)
        if not palette:
            raise ConfigurationError(
                f"Scale '{scale_name}' needs at least one palette entry",
                parameter="palette",
                value=palette,
            )
        self.aesthetic = aesthetic
        self.scale_name = scale_name
        self.palette = list(palette)
        self.limits = list(limits) if limits is not None else None
        if na_value is None and aesthetic != "shape":
            na_value = NA_COLOR
        self.na_value = na_value

    def __repr__(self) -> str:
        return (
            f"DiscreteScale(aesthetic={self.aesthetic!r}, "
            f"scale_name={self.scale_name!r}, n={len(self.palette)})"
        )

    def levels(self, values: Iterable[Any] = ()) -> list[Any]:
        """Ordered levels: the limits if set, else sorted distinct non-null values."""
        if self.limits is not None:
            return list(self.limits)

        seen = list(dict.fromkeys(v for v in values if not _is_null(v)))
        try:
            return sorted(seen)
        except TypeError:
            # mixed types have no natural order; keep first appearance
            return seen

    def palette_for(self, n: int) -> list[Any]:
        """First ``n`` palette entries, cycling when ``n`` exceeds the palette."""
        available = len(self.palette)
        if n <= available:
            return self.palette[:max(n, 0)]

        logger.warning(
            "Scale '%s' has %d values but %d levels were requested; recycling entries",
            self.scale_name,
            available,
            n,
        )
        return [self.palette[i % available] for i in range(n)]

    def mapping(self, values: Iterable[Any] = ()) -> dict[Any, Any]:
        """Level -> palette entry."""
        levels = self.levels(values)
        return dict(zip(levels, self.palette_for(len(levels))))

    def map(self, values: Iterable[Any]) -> list[Any]:
        """One palette entry per value."""
        values = list(values)
        lookup = self.mapping(values)
        return [
            self.na_value if _is_null(v) else lookup.get(v, self.na_value)
            for v in values
        ]

    def cycler(self):
        """A matplotlib property cycler over the palette."""
        if self.aesthetic == "shape":
            return mpl.cycler(marker=[marker for marker, _ in self.palette])
        return mpl.cycler(color=self.palette)

    def rc(self) -> dict[str, Any]:
        """rcParams fragment that makes the palette the default cycle."""
        return {"axes.prop_cycle": self.cycler()}

    def colormap(self) -> ListedColormap:
        if self.aesthetic == "shape":
            raise ConfigurationError(
                "Shape scales have no colormap", parameter="aesthetic", value=self.aesthetic
            )
        return ListedColormap(self.palette, name=self.scale_name)

    def legend_handles(self, values: Iterable[Any] = ()) -> list[Any]:
        """Legend keys, one per level, labelled with the level."""
        handles = []
        for level, entry in self.mapping(values).items():
            label = str(level)
            if self.aesthetic == "fill":
                handles.append(Patch(facecolor=entry, edgecolor="none", label=label))
            elif self.aesthetic == "shape":
                marker, fillstyle = entry
                handles.append(Line2D(
                    [], [], linestyle="none", marker=marker,
                    fillstyle=fillstyle, color="black", label=label,
                ))
            else:
                handles.append(Line2D([], [], color=entry, label=label))
        return handles


# -- Scale constructors -- #

def scale_colour_solarized(colors: Sequence[str] | None = None, **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("colour", "solarized", solarized_pal(colors), **kwargs)


def scale_fill_solarized(colors: Sequence[str] | None = None, **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("fill", "solarized", solarized_pal(colors), **kwargs)


def scale_colour_economist(colors: Sequence[str] | None = None, **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("colour", "economist", economist_pal(colors), **kwargs)


def scale_fill_economist(colors: Sequence[str] | None = None, **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("fill", "economist", economist_pal(colors), **kwargs)


def scale_colour_stata(scheme: str = "s2color", **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("colour", "stata", stata_pal(scheme), **kwargs)


def scale_fill_stata(scheme: str = "s2color", **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("fill", "stata", stata_pal(scheme), **kwargs)


def scale_shape_cleveland(overlap: bool = True, **kwargs: Any) -> DiscreteScale:
    return DiscreteScale("shape", "cleveland", cleveland_shape_pal(overlap), **kwargs)


def scale_shape_circlefill(**kwargs: Any) -> DiscreteScale:
    return DiscreteScale("shape", "circlefill", circlefill_shape_pal(), **kwargs)


def scale_shape_tremmel(**kwargs: Any) -> DiscreteScale:
    return DiscreteScale("shape", "tremmel", tremmel_shape_pal(), **kwargs)


scale_color_solarized = scale_colour_solarized
scale_color_economist = scale_colour_economist
scale_color_stata = scale_colour_stata
