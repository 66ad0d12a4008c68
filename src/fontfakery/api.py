"""
fontfakery Public API

High-level functions for integrating fontfakery into other projects. Every
argument may be given either as a model object or in its text form.
"""

from typing import Dict, Union

from .core.merge import merge
from .core.models import AxisTable, FontFakery, FontStyle, VariationSettings
from .core.styles import parse_style
from .parsers.axis_parser import load_axis_table, parse_axis_table
from .parsers.variation_parser import parse_variation_settings

AxisTableLike = Union[AxisTable, str, Dict]
VariationsLike = Union[VariationSettings, str, Dict, None]
StyleLike = Union[FontStyle, str, int, None]


def _as_axis_table(axis_table: AxisTableLike) -> AxisTable:
    if isinstance(axis_table, AxisTable):
        return axis_table
    if isinstance(axis_table, str):
        return parse_axis_table(axis_table)
    return AxisTable.from_mapping(axis_table)


def _as_variations(variations: VariationsLike) -> VariationSettings:
    if isinstance(variations, VariationSettings):
        return variations
    if variations is None or isinstance(variations, str):
        return parse_variation_settings(variations or "")
    return VariationSettings(variations)


def resolve_fakery(
    axis_table: AxisTableLike,
    base: VariationsLike = "",
    target: VariationsLike = "",
    base_style: StyleLike = "Regular",
    target_style: StyleLike = "Regular",
) -> FontFakery:
    """
    Merge variation settings for a face and decide on fake bold / fake italic.

    Args:
        axis_table: AxisTable, text like "wght 100:400:900, slnt -10:0:0",
            or a {tag: (min, max, default)} mapping
        base: Variation settings of the selected face
        target: Caller override variation settings
        base_style: Style of the selected face ("Regular", "Bold Italic", 700, FontStyle)
        target_style: Requested style

    Returns:
        FontFakery result

    Example:
        import fontfakery

        result = fontfakery.resolve_fakery(
            "wght 100:400:900, slnt -10:0:0",
            base="'wght' 650",
            target="'wght' 750",
            target_style="Italic",
        )
        str(result.variation_settings)  # "'slnt' -10, 'wght' 750"
    """
    return merge(
        _as_axis_table(axis_table),
        _as_variations(base),
        _as_variations(target),
        parse_style(base_style),
        parse_style(target_style),
    )


__all__ = [
    "resolve_fakery",
    "load_axis_table",
    "parse_axis_table",
    "parse_variation_settings",
    "parse_style",
]
