"""
Data models for fontfakery

This module contains the value types consumed and produced by the merge engine:
axis variations, variation settings, per-face axis tables, font styles and the
fakery result.
"""

import math
import struct
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .tags import AxisTag
from ..writers.variation_writer import format_variation, format_variation_settings


def to_float32(value: float) -> float:
    """Round a Python float to the nearest 32-bit float"""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class AxisVariation:
    """A single axis tag / value pair

    Ordering compares tags only, equality compares tag and value.
    """
    axis_tag: AxisTag
    value: float

    def __post_init__(self):
        object.__setattr__(self, "axis_tag", AxisTag(self.axis_tag))
        object.__setattr__(self, "value", to_float32(float(self.value)))

    def __lt__(self, other: "AxisVariation") -> bool:
        if not isinstance(other, AxisVariation):
            return NotImplemented
        return self.axis_tag < other.axis_tag

    def __gt__(self, other: "AxisVariation") -> bool:
        if not isinstance(other, AxisVariation):
            return NotImplemented
        return self.axis_tag > other.axis_tag

    def __le__(self, other: "AxisVariation") -> bool:
        if not isinstance(other, AxisVariation):
            return NotImplemented
        return self.axis_tag <= other.axis_tag

    def __ge__(self, other: "AxisVariation") -> bool:
        if not isinstance(other, AxisVariation):
            return NotImplemented
        return self.axis_tag >= other.axis_tag

    def __str__(self) -> str:
        return format_variation(self)


VariationSource = Union[
    "VariationSettings",
    Dict[Union[AxisTag, str, int], float],
    Iterable[Union[AxisVariation, Tuple[Union[AxisTag, str, int], float]]],
]


class VariationSettings:
    """Immutable variation settings, sorted ascending by axis tag, one entry per tag

    When the source contains the same tag more than once, the last value wins.
    """

    __slots__ = ("_variations",)

    def __init__(self, variations: Optional[VariationSource] = None):
        if variations is None:
            self._variations: Tuple[AxisVariation, ...] = ()
            return
        if isinstance(variations, VariationSettings):
            self._variations = variations._variations
            return
        if isinstance(variations, dict):
            variations = variations.items()

        by_tag: Dict[AxisTag, AxisVariation] = {}
        for item in variations:
            if not isinstance(item, AxisVariation):
                tag, value = item
                item = AxisVariation(tag, value)
            by_tag[item.axis_tag] = item
        self._variations = tuple(sorted(by_tag.values()))

    @classmethod
    def from_sorted(cls, variations: List[AxisVariation]) -> "VariationSettings":
        """Wrap a list that is already ascending and tag-unique without re-sorting"""
        settings = cls()
        settings._variations = tuple(variations)
        return settings

    def __len__(self) -> int:
        return len(self._variations)

    def __getitem__(self, index: int) -> AxisVariation:
        return self._variations[index]

    def __iter__(self) -> Iterator[AxisVariation]:
        return iter(self._variations)

    def __bool__(self) -> bool:
        return bool(self._variations)

    def is_empty(self) -> bool:
        return not self._variations

    def get(self, tag: Union[AxisTag, str, int]) -> Optional[float]:
        """Get the value for an axis tag, or None if the tag is not set"""
        tag = AxisTag(tag)
        for variation in self._variations:
            if variation.axis_tag == tag:
                return variation.value
        return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, VariationSettings):
            return NotImplemented
        return self._variations == other._variations

    def __hash__(self) -> int:
        return hash(self._variations)

    def __str__(self) -> str:
        return format_variation_settings(self)

    def __repr__(self) -> str:
        return f"VariationSettings({str(self)!r})"


@dataclass(frozen=True)
class AxisRangeEntry:
    """Supported range of one axis in a font face"""
    min_value: float
    max_value: float
    default_value: float

    def __post_init__(self):
        for name in ("min_value", "max_value", "default_value"):
            object.__setattr__(self, name, to_float32(float(getattr(self, name))))

    def clamp(self, value: float) -> float:
        """Clamp a value into [min_value, max_value]"""
        return min(max(value, self.min_value), self.max_value)


AxisRangeSource = Union[AxisRangeEntry, Tuple[float, float, float], Dict[str, float]]


class AxisTable:
    """Read-only mapping from axis tag to the axis range supported by a face"""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Dict[Union[AxisTag, str, int], AxisRangeSource]] = None):
        self._entries: Dict[AxisTag, AxisRangeEntry] = {}
        for tag, source in (entries or {}).items():
            self._entries[AxisTag(tag)] = self._to_entry(source)

    @staticmethod
    def _to_entry(source: AxisRangeSource) -> AxisRangeEntry:
        if isinstance(source, AxisRangeEntry):
            return source
        if isinstance(source, dict):
            return AxisRangeEntry(
                min_value=source["minimum"],
                max_value=source["maximum"],
                default_value=source["default"],
            )
        min_value, max_value, default_value = source
        return AxisRangeEntry(min_value, max_value, default_value)

    @classmethod
    def from_mapping(cls, mapping: Dict[Union[AxisTag, str, int], AxisRangeSource]) -> "AxisTable":
        """Build a table from a mapping of tag to range

        Ranges may be AxisRangeEntry objects, (min, max, default) tuples or
        dicts with 'minimum', 'default' and 'maximum' keys.
        """
        return cls(mapping)

    @classmethod
    def from_fvar(cls, fvar) -> "AxisTable":
        """Build a table from a fontTools 'fvar' table"""
        entries = {}
        for axis in fvar.axes:
            entries[AxisTag(axis.axisTag)] = AxisRangeEntry(
                min_value=axis.minValue,
                max_value=axis.maxValue,
                default_value=axis.defaultValue,
            )
        return cls(entries)

    @classmethod
    def from_designspace(cls, ds_doc) -> "AxisTable":
        """Build a table from the axes of a fontTools DesignSpaceDocument (user space)"""
        entries = {}
        for axis in ds_doc.axes:
            # Discrete axes carry a list of values instead of minimum/maximum
            if getattr(axis, "values", None):
                values = list(axis.values)
                minimum = min(values)
                maximum = max(values)
            else:
                minimum = axis.minimum
                maximum = axis.maximum
            default = axis.default if axis.default is not None else minimum
            entries[AxisTag(axis.tag)] = AxisRangeEntry(minimum, maximum, default)
        return cls(entries)

    def __contains__(self, tag) -> bool:
        try:
            return AxisTag(tag) in self._entries
        except (TypeError, ValueError):
            return False

    def get(self, tag) -> Optional[AxisRangeEntry]:
        """Look up an axis; None means the face does not support it"""
        return self._entries.get(AxisTag(tag))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AxisTag]:
        return iter(sorted(self._entries))

    def items(self) -> List[Tuple[AxisTag, AxisRangeEntry]]:
        return [(tag, self._entries[tag]) for tag in self]

    def __eq__(self, other) -> bool:
        if not isinstance(other, AxisTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        ranges = ", ".join(
            f"{tag} {entry.min_value:g}:{entry.default_value:g}:{entry.max_value:g}"
            for tag, entry in self.items()
        )
        return f"AxisTable({ranges!r})"


class FontWeight(IntEnum):
    """Named weights on the usual 100-900 scale"""
    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    NORMAL = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class Slant(Enum):
    UPRIGHT = "upright"
    ITALIC = "italic"


@dataclass(frozen=True)
class FontStyle:
    """Requested text style: numeric weight and slant"""
    weight: int = FontWeight.NORMAL
    slant: Slant = Slant.UPRIGHT

    def __post_init__(self):
        object.__setattr__(self, "weight", int(self.weight))

    @property
    def is_italic(self) -> bool:
        return self.slant == Slant.ITALIC

    def __str__(self) -> str:
        return f"{self.weight} {self.slant.value}"


@dataclass(frozen=True)
class FontFakery:
    """Result of merging: synthesis flags plus the variation settings to apply"""
    fake_bold: bool = False
    fake_italic: bool = False
    variation_settings: VariationSettings = field(default_factory=VariationSettings)

    def __str__(self) -> str:
        return (
            f"FontFakery(fake_bold={self.fake_bold}, fake_italic={self.fake_italic}, "
            f"variations={str(self.variation_settings)!r})"
        )
