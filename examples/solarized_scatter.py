"""Example: grouped scatter on the dark solarized theme."""

import numpy as np

import almanac_plots as ap

rng = np.random.default_rng(11)
groups = rng.choice(["north", "south", "east"], size=120)
x = rng.normal(0, 1, size=groups.size)
y = 0.8 * x + rng.normal(0, 0.5, size=groups.size)

ap.scatter(
    x,
    y,
    groups=groups,
    theme=ap.theme_solarized(light=False),
    scale=ap.scale_colour_solarized(["blue", "orange", "green"]),
    rangeframe=None,
    title="Solarized (dark)",
    xlabel="Predictor",
    ylabel="Response",
    filename="solarized-scatter.png",
)
