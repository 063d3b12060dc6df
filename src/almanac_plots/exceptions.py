"""Exceptions raised for invalid theme, palette, and range-frame configuration.

Missing data is never an error here: a range-frame side with nothing to draw
is simply left out.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class AlmanacPlotsError(Exception):
    """Base class for all almanac_plots errors."""


class ConfigurationError(AlmanacPlotsError, ValueError):
    """Raised when a caller passes an invalid configuration value."""

    def __init__(self, message: str, parameter: str | None = None, value: Any = None):
        self.parameter = parameter
        self.value = value
        super().__init__(message)


def _available(names: Iterable[str]) -> str:
    return ", ".join(names)


class UnknownColorError(ConfigurationError):
    """Raised when a color or shape name is not in the requested palette."""

    def __init__(
        self, name: str, palette: str, available: Iterable[str], parameter: str = "colors"
    ):
        message = (
            f"Unknown name '{name}' in {palette}. "
            f"Available: {_available(available)}."
        )
        super().__init__(message, parameter=parameter, value=name)
        self.palette = palette


class UnknownThemeError(ConfigurationError):
    """Raised when a theme name is not registered."""

    def __init__(self, name: str, available: Iterable[str]):
        message = f"Unknown theme '{name}'. Available themes: {_available(available)}."
        super().__init__(message, parameter="name", value=name)


class InvalidVariantError(ConfigurationError):
    """Raised when a theme or palette variant flag has an unsupported value."""

    def __init__(self, parameter: str, value: Any, allowed: Iterable[Any]):
        choices = _available(str(a) for a in allowed)
        message = f"Invalid value {value!r} for '{parameter}'. Expected one of: {choices}."
        super().__init__(message, parameter=parameter, value=value)


class InvalidSidesError(ConfigurationError):
    """Raised when a range-frame side selection is malformed."""

    def __init__(self, value: Any):
        message = (
            f"'sides' must be a non-empty string made of 't', 'r', 'b' and 'l'; "
            f"got {value!r}."
        )
        super().__init__(message, parameter="sides", value=value)


__all__ = [
    "AlmanacPlotsError",
    "ConfigurationError",
    "UnknownColorError",
    "UnknownThemeError",
    "InvalidVariantError",
    "InvalidSidesError",
]
