"""
Variation merge engine

Combines the variation settings baked into a face selection (base) with the
caller's override (target) and the axis values implied by the requested style,
then decides whether fake bold or fake italic has to be synthesized on top.
"""

from enum import Enum
from typing import List, NamedTuple

from .models import AxisTable, AxisVariation, FontFakery, FontStyle, VariationSettings
from .tags import TAG_ital, TAG_slnt, TAG_wght
from ..utils.logging import FontFakeryLogger

# Fake bold needs a heavy request that the face falls short of by this much
FAKE_BOLD_MIN_WEIGHT = 600
FAKE_BOLD_WEIGHT_GAP = 200

ITALIC_SLANT_VALUE = -10
ITALIC_FLAG_VALUE = 1

# Compares greater than every 32-bit tag
_END = 1 << 32


class Source(Enum):
    BASE = "base"
    TARGET = "target"
    STYLE = "style"


class MergeStep(NamedTuple):
    """Which source supplies the value, and which cursors move forward"""
    source: Source
    advance_base: bool
    advance_target: bool
    advance_style: bool


def _sign(delta: int) -> int:
    return (delta > 0) - (delta < 0)


# Keyed by (sign(base - target), sign(style - min(base, target))).
# Target beats base beats style when tags tie.
MERGE_DECISIONS = {
    (-1, -1): MergeStep(Source.STYLE, False, False, True),
    (-1, 0): MergeStep(Source.BASE, True, False, True),
    (-1, 1): MergeStep(Source.BASE, True, False, False),
    (1, -1): MergeStep(Source.STYLE, False, False, True),
    (1, 0): MergeStep(Source.TARGET, False, True, True),
    (1, 1): MergeStep(Source.TARGET, False, True, False),
    (0, -1): MergeStep(Source.STYLE, False, False, True),
    (0, 0): MergeStep(Source.TARGET, True, True, True),
    (0, 1): MergeStep(Source.TARGET, True, True, False),
}


def decide_step(base_tag: int, target_tag: int, style_tag: int) -> MergeStep:
    """Pick the source for the smallest of the three current tags"""
    pivot = min(base_tag, target_tag)
    return MERGE_DECISIONS[(_sign(base_tag - target_tag), _sign(style_tag - pivot))]


def style_variations(axis_table: AxisTable, style: FontStyle) -> List[AxisVariation]:
    """Axis values implied by a style, limited to the axes the face supports

    At most one of slnt/ital is produced (slnt preferred), followed by wght.
    Since ital < slnt < wght the list is ascending by tag.
    """
    variations = []
    if TAG_slnt in axis_table:
        variations.append(AxisVariation(TAG_slnt, ITALIC_SLANT_VALUE if style.is_italic else 0))
    elif TAG_ital in axis_table:
        variations.append(AxisVariation(TAG_ital, ITALIC_FLAG_VALUE if style.is_italic else 0))
    if TAG_wght in axis_table:
        variations.append(AxisVariation(TAG_wght, float(style.weight)))
    return variations


def merge(
    axis_table: AxisTable,
    base: VariationSettings,
    target: VariationSettings,
    base_style: FontStyle,
    target_style: FontStyle,
) -> FontFakery:
    """Merge base, target and style-implied variations for a face

    Args:
        axis_table: Axes supported by the face
        base: Variation settings of the selected face
        target: Caller override, wins over base for the same axis
        base_style: Style the selected face was registered with
        target_style: Style requested by the caller

    Returns:
        FontFakery with the clamped, supported variations and the fake bold /
        fake italic flags
    """
    has_ital = TAG_ital in axis_table
    has_slnt = TAG_slnt in axis_table
    has_wght = TAG_wght in axis_table

    implied = style_variations(axis_table, target_style)

    merged: List[AxisVariation] = []
    clamped_weight = None
    base_idx = target_idx = style_idx = 0

    while base_idx < len(base) or target_idx < len(target) or style_idx < len(implied):
        base_tag = base[base_idx].axis_tag if base_idx < len(base) else _END
        target_tag = target[target_idx].axis_tag if target_idx < len(target) else _END
        style_tag = implied[style_idx].axis_tag if style_idx < len(implied) else _END

        step = decide_step(base_tag, target_tag, style_tag)
        if step.source is Source.TARGET:
            chosen = target[target_idx]
        elif step.source is Source.BASE:
            chosen = base[base_idx]
        else:
            chosen = implied[style_idx]

        base_idx += step.advance_base
        target_idx += step.advance_target
        style_idx += step.advance_style

        entry = axis_table.get(chosen.axis_tag)
        if entry is None:
            FontFakeryLogger.debug(f"Dropping unsupported axis '{chosen.axis_tag}'")
            continue

        if step.source is Source.STYLE and chosen.value == entry.default_value:
            continue

        clamped = entry.clamp(chosen.value)
        merged.append(AxisVariation(chosen.axis_tag, clamped))
        if chosen.axis_tag == TAG_wght:
            clamped_weight = clamped

    if not has_wght:
        reference_weight = base_style.weight
    elif clamped_weight is not None:
        reference_weight = clamped_weight
    else:
        # wght was elided as a style default, so the face renders at its default weight
        reference_weight = axis_table.get(TAG_wght).default_value
    fake_bold = (
        target_style.weight >= FAKE_BOLD_MIN_WEIGHT
        and target_style.weight - reference_weight >= FAKE_BOLD_WEIGHT_GAP
    )

    fake_italic = False
    if target_style.is_italic and not (has_ital or has_slnt):
        fake_italic = not base_style.is_italic

    result = FontFakery(fake_bold, fake_italic, VariationSettings.from_sorted(merged))
    FontFakeryLogger.debug(f"Merged {base_style} -> {target_style}: {result}")
    return result
