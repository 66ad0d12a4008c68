"""
Variation settings writer

Renders variations in the same notation the variation parser reads:
'wght' 700, 'ital' 1
"""

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..core.models import AxisVariation


def format_value(value: float) -> str:
    """Format an axis value with up to six significant digits (700, -10, 0.5)"""
    return f"{value:g}"


def format_variation(variation: "AxisVariation") -> str:
    return f"'{variation.axis_tag}' {format_value(variation.value)}"


def format_variation_settings(variations: Iterable["AxisVariation"]) -> str:
    """Join variations with ', ' in the order given (ascending tag order for VariationSettings)"""
    return ", ".join(format_variation(variation) for variation in variations)
