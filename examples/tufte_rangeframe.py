"""Example: Tufte theme with range frames instead of axis lines."""

import matplotlib.pyplot as plt
import numpy as np

import almanac_plots as ap

rng = np.random.default_rng(7)
weight = rng.uniform(1.5, 5.5, size=32)
mpg = 37 - 5 * weight + rng.normal(0, 2, size=weight.size)

fig, ax = ap.figure(ap.theme_tufte())
ax.scatter(weight, mpg, color="black", s=12)
ap.geom_rangeframe(ax, x=weight, y=mpg, sides="bl")
ax.set_xlabel("Weight (1000 lbs)")
ax.set_ylabel("Miles per gallon")

plt.tight_layout()

ap.save(fig, "tufte-rangeframe.png")
