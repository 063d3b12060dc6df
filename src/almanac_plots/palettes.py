"""Pure data: palettes, marker sequences, and layout constants.

No plotting imports. The tables are plain ordered dicts so they can be read
by anything that understands hex colors; insertion order is the canonical
order used when no explicit list of names is given.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from .exceptions import InvalidVariantError, UnknownColorError

# Solarized, http://ethanschoonover.com/solarized
# The eight base tones form a ramp from darkest to lightest.
SOLARIZED = {
    "base03": "#002b36",
    "base02": "#073642",
    "base01": "#586e75",
    "base00": "#657b83",
    "base0": "#839496",
    "base1": "#93a1a1",
    "base2": "#eee8d5",
    "base3": "#fdf6e3",
    "yellow": "#b58900",
    "orange": "#cb4b16",
    "red": "#dc322f",
    "magenta": "#d33682",
    "violet": "#6c71c4",
    "blue": "#268bd2",
    "cyan": "#2aa198",
    "green": "#859900",
}

SOLARIZED_BASE = [name for name in SOLARIZED if name.startswith("base")]
SOLARIZED_ACCENTS = [name for name in SOLARIZED if not name.startswith("base")]

# The Economist: chart backgrounds and data colors
ECONOMIST_BG = {
    "ebg": "#d5e4eb",
    "edkbg": "#c3d6df",
    "red": "#ed111a",
    "ltgray": "#ebebeb",
    "dkgray": "#c9c9c9",
}

ECONOMIST_FG = {
    "blue_gray": "#6794a7",
    "dark_blue": "#014d64",
    "light_green": "#76c0c1",
    "mid_blue": "#01a2d9",
    "light_blue": "#7ad2f6",
    "dark_green": "#00887d",
    "gray": "#adadad",
    "pale_blue": "#7bd3f6",
    "dark_red": "#7c260b",
    "light_red": "#ee8f71",
    "brown": "#a18376",
}

# Stata named colors (RGB from the color-*.style files).
# gsN is a 16-step gray scale from gs0 (black) to gs16 (white).
STATA = {
    "navy": "#1a476f",
    "maroon": "#90353b",
    "forest_green": "#55752f",
    "dkorange": "#e37e00",
    "teal": "#6e8e84",
    "cranberry": "#c10534",
    "lavender": "#938dd2",
    "khaki": "#cac27e",
    "sienna": "#a0522d",
    "emidblue": "#7b92a8",
    "emerald": "#2d6d66",
    "brown": "#9c8847",
    "erose": "#bfa19c",
    "gold": "#ffd200",
    "bluishgray": "#d9e6eb",
    "ltbluishgray": "#eaf2f3",
    "black": "#000000",
    "gs1": "#101010",
    "gs2": "#202020",
    "gs3": "#303030",
    "gs4": "#404040",
    "gs5": "#505050",
    "gs6": "#606060",
    "gs7": "#707070",
    "gs8": "#808080",
    "gs9": "#909090",
    "gs10": "#a0a0a0",
    "gs11": "#b0b0b0",
    "gs12": "#c0c0c0",
    "gs13": "#d0d0d0",
    "gs14": "#e0e0e0",
    "gs15": "#f0f0f0",
    "white": "#ffffff",
}

_STATA_COLOR_ORDER = [
    "navy", "maroon", "forest_green", "dkorange", "teal",
    "cranberry", "lavender", "khaki", "sienna", "emidblue",
    "emerald", "brown", "erose", "gold", "bluishgray",
]

# p1..p15 for each scheme
STATA_SCHEMES = {
    "s2color": _STATA_COLOR_ORDER,
    "s1color": _STATA_COLOR_ORDER,
    "mono": [
        "gs6", "gs10", "gs8", "gs4", "black",
        "gs12", "gs2", "gs7", "gs9", "gs11",
        "gs13", "gs5", "gs3", "gs14", "gs15",
    ],
}

# Marker sequences after Cleveland, The Elements of Graphing Data (1985).
# Open markers are written as (marker, "none") so callers can set the face.
SHAPES = {
    # distinct symbols for data that do not overlap much
    "cleveland": [
        ("o", "full"), ("o", "none"), ("+", "full"), ("x", "full"), ("^", "none"),
    ],
    # letters stay legible when points pile up
    "cleveland_overlap": [
        ("o", "none"), ("+", "full"), ("$S$", "full"), ("$T$", "full"), ("$U$", "full"),
    ],
    "circlefill": [("o", "full"), ("o", "none")],
    # Tremmel (1995): circle, plus and triangle are the most separable trio
    "tremmel": [("o", "none"), ("+", "full"), ("^", "none")],
}

# Default sizes shared by the theme builders
LAYOUT = {
    "figsize": (7.0, 4.5),
    "dpi": 100,
    "base_size": 12,
    "title_scale": 1.2,
    "tick_scale": 0.8,
    "line_width": 0.5 * 72.27 / 25.4,  # 0.5 mm in points
    "grid_width": 0.8,
    "tick_length": 3.5,
}


def pick(
    table: Mapping[str, str],
    names: Iterable[str] | None = None,
    *,
    exclude: Callable[[str], bool] | None = None,
    palette: str = "palette",
) -> list[str]:
    """Return the values for ``names`` from ``table``, in the order given.

    With no names, every entry is returned in table order, skipping names
    for which ``exclude`` is true. Unknown names raise UnknownColorError.
    """
    if names is None:
        return [v for k, v in table.items() if not (exclude and exclude(k))]

    if isinstance(names, str):
        names = [names]

    available = [k for k in table if not (exclude and exclude(k))]
    values = []
    for name in names:
        if name not in available:
            raise UnknownColorError(name, palette, available)
        values.append(table[name])
    return values


def solarized_rebase(light: bool = True) -> dict[str, str]:
    """Relabel the base ramp as rebase03..rebase3 for a light or dark theme.

    rebase03 is always the background tone and rebase3 the strongest
    foreground, so a light theme reads the ramp backwards.
    """
    if not isinstance(light, bool):
        raise InvalidVariantError("light", light, [True, False])

    order = SOLARIZED_BASE[::-1] if light else SOLARIZED_BASE
    labels = ["rebase03", "rebase02", "rebase01", "rebase00",
              "rebase0", "rebase1", "rebase2", "rebase3"]
    return {label: SOLARIZED[name] for label, name in zip(labels, order)}
