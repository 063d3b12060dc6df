"""almanac-plots — Solarized, Economist, Stata and Tufte styles for matplotlib."""

from .charts import bar, figure, line, save, scatter
from .exceptions import (
    AlmanacPlotsError,
    ConfigurationError,
    InvalidSidesError,
    InvalidVariantError,
    UnknownColorError,
    UnknownThemeError,
)
from .palettes import (
    ECONOMIST_BG,
    ECONOMIST_FG,
    LAYOUT,
    SHAPES,
    SOLARIZED,
    STATA,
    STATA_SCHEMES,
    solarized_rebase,
)
from .rangeframe import RangeFrame, Segment, geom_rangeframe
from .scales import (
    DiscreteScale,
    circlefill_shape_pal,
    cleveland_shape_pal,
    economist_pal,
    scale_color_economist,
    scale_color_solarized,
    scale_color_stata,
    scale_colour_economist,
    scale_colour_solarized,
    scale_colour_stata,
    scale_fill_economist,
    scale_fill_solarized,
    scale_fill_stata,
    scale_shape_circlefill,
    scale_shape_cleveland,
    scale_shape_tremmel,
    shape_pal,
    solarized_pal,
    stata_pal,
    tremmel_shape_pal,
)
from .themes import (
    apply,
    get_theme,
    list_themes,
    list_themes_with_descriptions,
    theme_base,
    theme_context,
    theme_economist,
    theme_economist_white,
    theme_solarized,
    theme_stata,
    theme_tufte,
)

__all__ = [
    "bar",
    "figure",
    "line",
    "save",
    "scatter",
    "AlmanacPlotsError",
    "ConfigurationError",
    "InvalidSidesError",
    "InvalidVariantError",
    "UnknownColorError",
    "UnknownThemeError",
    "ECONOMIST_BG",
    "ECONOMIST_FG",
    "LAYOUT",
    "SHAPES",
    "SOLARIZED",
    "STATA",
    "STATA_SCHEMES",
    "solarized_rebase",
    "RangeFrame",
    "Segment",
    "geom_rangeframe",
    "DiscreteScale",
    "circlefill_shape_pal",
    "cleveland_shape_pal",
    "economist_pal",
    "scale_color_economist",
    "scale_color_solarized",
    "scale_color_stata",
    "scale_colour_economist",
    "scale_colour_solarized",
    "scale_colour_stata",
    "scale_fill_economist",
    "scale_fill_solarized",
    "scale_fill_stata",
    "scale_shape_circlefill",
    "scale_shape_cleveland",
    "scale_shape_tremmel",
    "shape_pal",
    "solarized_pal",
    "stata_pal",
    "tremmel_shape_pal",
    "apply",
    "get_theme",
    "list_themes",
    "list_themes_with_descriptions",
    "theme_base",
    "theme_context",
    "theme_economist",
    "theme_economist_white",
    "theme_solarized",
    "theme_stata",
    "theme_tufte",
]
