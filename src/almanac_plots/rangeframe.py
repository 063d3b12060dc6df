"""Range frames: axis lines that extend only over the range of the data.

Tufte, The Visual Display of Quantitative Information (2001), chapter 6.

A range frame replaces an axis line with a segment running from the
minimum to the maximum of the plotted values on that axis. Segments sit on
the panel edge (axes fraction 0 or 1) and span data coordinates along it,
so they follow the axis limits and scale of the Axes they are drawn on.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from matplotlib.colors import to_rgba
from matplotlib.lines import Line2D

from .exceptions import InvalidSidesError
from .palettes import LAYOUT

if TYPE_CHECKING:
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)

SIDES = "trbl"

# (side, channel, position along the other axis, segment name)
_PLACEMENT = [
    ("b", "x", 0.0, "range_x_b"),
    ("t", "x", 1.0, "range_x_t"),
    ("l", "y", 0.0, "range_y_l"),
    ("r", "y", 1.0, "range_y_r"),
]


@dataclass(frozen=True)
class Segment:
    """One frame line.

    ``channel`` is the data axis the segment spans. Along that axis the
    endpoints are data coordinates; across it they are axes fractions.
    """

    name: str
    side: str
    channel: str
    x0: float
    x1: float
    y0: float
    y1: float


@dataclass(frozen=True)
class FrameStyle:
    color: Any = "black"
    alpha: float | None = None
    linewidth: float = LAYOUT["line_width"]
    linestyle: Any = "solid"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, (float, np.floating)) and np.isnan(value))


def _first(data: Mapping[str, Any], key: str, default: Any) -> Any:
    """First row of a style column; a tuple is one value, not a column.

    Missing values (None, NaN) fall back to ``default``.
    """
    if key not in data:
        return default
    values = data[key]
    if values is None or isinstance(values, (str, int, float, tuple, np.generic)):
        first = values
    elif isinstance(values, np.ndarray):
        if values.ndim == 0:
            first = values.item()
        elif values.shape[0] == 0:
            return default
        else:
            first = values[0]
            if isinstance(first, np.ndarray):
                # one row of an (N, 3) or (N, 4) color array
                first = tuple(first.tolist())
    elif hasattr(values, "iloc"):
        if len(values) == 0:
            return default
        first = values.iloc[0]
    else:
        values = list(values)
        if not values:
            return default
        first = values[0]
    return default if _is_missing(first) else first


class RangeFrame:
    """Range-frame geometry for one panel.

    Args:
        sides: Any combination of 't', 'r', 'b' and 'l' (top, right,
            bottom, left)
        na_rm: Drop non-finite values silently instead of logging a warning
    """

    def __init__(self, sides: str = "bl", na_rm: bool = False):
        self.sides = self.validate_sides(sides)
        self.na_rm = na_rm

    def __repr__(self) -> str:
        sides = "".join(s for s in SIDES if s in self.sides)
        return f"RangeFrame(sides={sides!r}, na_rm={self.na_rm!r})"

    @staticmethod
    def validate_sides(sides: Any) -> frozenset[str]:
        """Parse a side selection string.

        Raises:
            InvalidSidesError: If ``sides`` is not a non-empty string made
                only of 't', 'r', 'b' and 'l'
        """
        if not isinstance(sides, str) or not sides or not set(sides) <= set(SIDES):
            raise InvalidSidesError(sides)
        return frozenset(sides)

    def validate(self) -> None:
        self.validate_sides("".join(self.sides))

    @property
    def required_channels(self) -> tuple[str, ...]:
        channels = []
        if self.sides & {"t", "b"}:
            channels.append("x")
        if self.sides & {"l", "r"}:
            channels.append("y")
        return tuple(channels)

    def extent(self, data: Mapping[str, Any], channel: str) -> tuple[float, float] | None:
        """(min, max) of the finite values of ``channel``, or None."""
        if channel not in data or data[channel] is None:
            logger.debug("No '%s' values; skipping its range frame", channel)
            return None

        values = np.asarray(data[channel], dtype=float).ravel()
        finite = values[np.isfinite(values)]
        dropped = values.size - finite.size
        if dropped and not self.na_rm:
            logger.warning(
                "Removed %d rows containing non-finite '%s' values (geom_rangeframe)",
                dropped,
                channel,
            )
        if finite.size == 0:
            logger.debug("No finite '%s' values; skipping its range frame", channel)
            return None
        return float(finite.min()), float(finite.max())

    def segments(self, data: Mapping[str, Any]) -> list[Segment]:
        """Draw commands: one segment per requested side that has data."""
        extents = {channel: self.extent(data, channel) for channel in self.required_channels}

        segments = []
        for side, channel, position, name in _PLACEMENT:
            if side not in self.sides or extents[channel] is None:
                continue
            low, high = extents[channel]
            if channel == "x":
                segments.append(Segment(name, side, channel, low, high, position, position))
            else:
                segments.append(Segment(name, side, channel, position, position, low, high))
        return segments

    def style(self, data: Mapping[str, Any]) -> FrameStyle:
        """Line style from the first row; the frame is one aggregate line per side."""
        default = FrameStyle()
        return FrameStyle(
            color=_first(data, "color", default.color),
            alpha=_first(data, "alpha", default.alpha),
            linewidth=_first(data, "linewidth", default.linewidth),
            linestyle=_first(data, "linestyle", default.linestyle),
        )

    def draw(self, ax: "Axes", data: Mapping[str, Any]) -> list[Line2D]:
        """Add the frame lines to ``ax`` and return them.

        The lines are not clipped, so they stay visible on the panel edge.
        """
        style = self.style(data)
        color = to_rgba(style.color, style.alpha)

        lines = []
        for segment in self.segments(data):
            if segment.channel == "x":
                transform = ax.get_xaxis_transform()
            else:
                transform = ax.get_yaxis_transform()
            line = Line2D(
                [segment.x0, segment.x1],
                [segment.y0, segment.y1],
                transform=transform,
                color=color,
                linewidth=style.linewidth,
                linestyle=style.linestyle,
                solid_capstyle="butt",
                clip_on=False,
                gid=segment.name,
            )
            ax.add_line(line)
            lines.append(line)
        return lines


def geom_rangeframe(
    ax: "Axes",
    data: Mapping[str, Any] | None = None,
    *,
    x: Any = None,
    y: Any = None,
    sides: str = "bl",
    na_rm: bool = False,
    color: Any = None,
    alpha: float | None = None,
    linewidth: float | None = None,
    linestyle: Any = None,
) -> list[Line2D]:
    """Draw a range frame on ``ax``.

    Values come from ``data`` (a dict of columns or a DataFrame) or from the
    keyword arguments, which take precedence.

    Example:
        >>> fig, ax = plt.subplots()
        >>> ax.scatter(x, y)
        >>> geom_rangeframe(ax, x=x, y=y)
    """
    frame = RangeFrame(sides, na_rm=na_rm)
    columns = dict(data.items()) if data is not None else {}
    overrides = {
        "x": x, "y": y, "color": color, "alpha": alpha,
        "linewidth": linewidth, "linestyle": linestyle,
    }
    columns.update({k: v for k, v in overrides.items() if v is not None})
    return frame.draw(ax, columns)
