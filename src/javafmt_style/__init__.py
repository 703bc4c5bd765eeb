"""
javafmt-style - style presets for the Java source formatter

This package provides:
- The closed set of named style presets and their layout parameters
- An immutable FormatterOptions value object
- A chainable Builder for selecting a preset
"""

__version__ = "0.1.0"

from .exceptions import ConfigError, JavaFmtStyleError, UnknownStyleError
from .models import (
    Builder,
    FormatterOptions,
    StyleParameters,
    StylePreset,
    builder,
    default_options,
)

__all__ = [
    "Builder",
    "FormatterOptions",
    "StyleParameters",
    "StylePreset",
    "builder",
    "default_options",
    "JavaFmtStyleError",
    "UnknownStyleError",
    "ConfigError",
]
