"""Example: two series on the Economist theme."""

import numpy as np

import almanac_plots as ap

years = np.arange(2000, 2021)
exports = 100 * 1.04 ** (years - 2000)
imports = 100 * 1.05 ** (years - 2000) - 8

ap.line(
    years,
    {"Exports": exports, "Imports": imports},
    theme=ap.theme_economist(),
    scale=ap.scale_colour_economist(["dark_blue", "mid_blue"]),
    title="Trade, index 2000=100",
    filename="economist-lines.png",
)
