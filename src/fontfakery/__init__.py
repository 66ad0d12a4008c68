"""
fontfakery - Variable font axis merging and fake bold/italic decisions

Given the axes a font face supports, the variation settings of the selected
face, a caller override and the requested text style, fontfakery computes the
variation settings to apply and whether bold or italic must be synthesized.
"""

__version__ = "1.0.0"

from .api import resolve_fakery
from .core.merge import merge
from .core.models import (
    AxisRangeEntry,
    AxisTable,
    AxisVariation,
    FontFakery,
    FontStyle,
    FontWeight,
    Slant,
    VariationSettings,
)
from .core.styles import StyleNames, parse_style
from .core.tags import TAG_ital, TAG_opsz, TAG_slnt, TAG_wdth, TAG_wght, AxisTag
from .parsers.axis_parser import AxisTableError, AxisTableParser, load_axis_table, parse_axis_table
from .parsers.variation_parser import VariationParser, parse_variation_settings
from .writers.variation_writer import format_variation_settings

# Public API
__all__ = [
    # Version
    "__version__",
    # Core models
    "AxisTag",
    "AxisVariation",
    "VariationSettings",
    "AxisRangeEntry",
    "AxisTable",
    "FontStyle",
    "FontWeight",
    "Slant",
    "FontFakery",
    # Tags
    "TAG_ital",
    "TAG_slnt",
    "TAG_wght",
    "TAG_wdth",
    "TAG_opsz",
    # Merge engine
    "merge",
    # Parsers and writer
    "VariationParser",
    "AxisTableParser",
    "AxisTableError",
    "StyleNames",
    "parse_variation_settings",
    "parse_axis_table",
    "load_axis_table",
    "parse_style",
    "format_variation_settings",
    # High-level API
    "resolve_fakery",
]
