"""Pytest configuration and fixtures.

Forces the headless Agg backend and restores matplotlib's global rcParams
after every test, since themes are applied globally.
"""

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_rcparams():
    with matplotlib.rc_context():
        yield
    plt.close("all")


@pytest.fixture
def ax():
    """A fresh Axes on its own figure."""
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)
