"""
Axis table parser

Builds AxisTable objects from text, data files, designspace documents and fonts.

Text notation follows the DSSketch axis range syntax, one axis per line or
comma separated:

    wght 100:400:900
    slnt -10:0:0
    ital binary        # same as 0:0:1
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from fontTools.designspaceLib import DesignSpaceDocument
from fontTools.ttLib import TTFont

from ..core.models import AxisRangeEntry, AxisTable
from ..core.tags import AxisTag
from ..utils.logging import FontFakeryLogger

FONT_SUFFIXES = {".ttf", ".otf", ".woff", ".woff2"}

_AXIS_PATTERN = re.compile(
    r"""
    ^(?:(?P<quote>['"])(?P<quoted>[^'"]{4})(?P=quote)|(?P<bare>[A-Za-z0-9_]{1,4}))
    \s+(?P<range>\S+)$
    """,
    re.VERBOSE,
)

_BINARY_KEYWORDS = ("binary", "discrete")


class AxisTableError(ValueError):
    """Raised when an axis table description cannot be used"""


class AxisTableParser:
    """Parse axis tables; strict mode raises on bad entries, otherwise they are skipped"""

    def __init__(self, strict_mode: bool = True):
        self.strict_mode = strict_mode
        self.errors: List[str] = []

    def _report(self, message: str) -> None:
        if self.strict_mode:
            raise AxisTableError(message)
        self.errors.append(message)
        FontFakeryLogger.warning(f"Skipping axis: {message}")

    @staticmethod
    def parse_range(range_part: str) -> Tuple[float, float, float]:
        """Parse 'min:default:max' (or 'binary') into (min, default, max)"""
        if range_part.lower() in _BINARY_KEYWORDS:
            return 0.0, 0.0, 1.0
        parts = range_part.split(":")
        if len(parts) != 3:
            raise AxisTableError(f"Axis range must be min:default:max, got '{range_part}'")
        try:
            minimum, default, maximum = (float(p) for p in parts)
        except ValueError as e:
            raise AxisTableError(f"Axis range values must be numbers, got '{range_part}'") from e
        return minimum, default, maximum

    def _add_entry(self, entries: Dict[AxisTag, AxisRangeEntry], tag: str,
                   minimum: float, default: float, maximum: float) -> None:
        if not minimum <= default <= maximum:
            self._report(
                f"Axis '{tag}' range {minimum:g}:{default:g}:{maximum:g} "
                f"must satisfy min <= default <= max"
            )
            return
        try:
            axis_tag = AxisTag(tag)
        except ValueError as e:
            self._report(str(e))
            return
        if axis_tag in entries:
            FontFakeryLogger.warning(f"Axis '{tag}' defined more than once, last definition wins")
        entries[axis_tag] = AxisRangeEntry(minimum, maximum, default)

    def parse(self, content: str) -> AxisTable:
        """Parse axis table text notation"""
        self.errors = []
        entries: Dict[AxisTag, AxisRangeEntry] = {}

        for line in content.split("\n"):
            if "#" in line:
                line = line[: line.index("#")]
            for item in line.split(","):
                item = item.strip()
                if not item:
                    continue
                match = _AXIS_PATTERN.match(item)
                if not match:
                    self._report(f"Cannot parse axis definition '{item}'")
                    continue
                tag = match.group("quoted") if match.group("quote") else match.group("bare")
                try:
                    minimum, default, maximum = self.parse_range(match.group("range"))
                except AxisTableError as e:
                    self._report(f"Axis '{tag}': {e}")
                    continue
                self._add_entry(entries, tag, minimum, default, maximum)

        return AxisTable(entries)

    def parse_mapping(self, data: Dict[str, Any]) -> AxisTable:
        """Parse a YAML/JSON style mapping

        Either {tag: ...} or {"axes": {tag: ...}}; values are "min:default:max"
        strings or dicts with minimum/default/maximum keys.
        """
        self.errors = []
        if isinstance(data.get("axes"), dict):
            data = data["axes"]

        entries: Dict[AxisTag, AxisRangeEntry] = {}
        for tag, value in data.items():
            tag = str(tag)
            try:
                if isinstance(value, str):
                    minimum, default, maximum = self.parse_range(value)
                elif isinstance(value, dict):
                    minimum = float(value["minimum"])
                    default = float(value["default"])
                    maximum = float(value["maximum"])
                else:
                    raise AxisTableError(
                        "expected 'min:default:max' or a mapping with minimum/default/maximum"
                    )
            except (KeyError, TypeError, ValueError) as e:
                self._report(f"Axis '{tag}': {e}")
                continue
            self._add_entry(entries, tag, minimum, default, maximum)

        return AxisTable(entries)

    def parse_file(self, filepath: str) -> AxisTable:
        """Load an axis table from a data file, designspace or font

        The format is picked by extension: .yaml/.yml/.json, .designspace,
        .ttf/.otf/.woff/.woff2; anything else is read as text notation.
        """
        path = Path(filepath)
        suffix = path.suffix.lower()

        if suffix in FONT_SUFFIXES:
            if not path.exists():
                raise FileNotFoundError(f"Font file not found: {path}")
            try:
                font = TTFont(str(path), lazy=True)
                try:
                    if "fvar" not in font:
                        FontFakeryLogger.info(f"{path.name} has no fvar table, no axes supported")
                        return AxisTable()
                    return AxisTable.from_fvar(font["fvar"])
                finally:
                    font.close()
            except Exception as e:
                raise AxisTableError(f"Cannot read axes from font {path}: {e}") from e

        if suffix == ".designspace":
            try:
                ds_doc = DesignSpaceDocument.fromfile(str(path))
            except OSError:
                raise
            except Exception as e:
                raise AxisTableError(f"Cannot read designspace {path}: {e}") from e
            return AxisTable.from_designspace(ds_doc)

        with open(path, encoding="utf-8") as f:
            content = f.read()

        if suffix in (".yaml", ".yml", ".json"):
            try:
                data = json.loads(content) if suffix == ".json" else yaml.safe_load(content)
            except (ValueError, yaml.YAMLError) as e:
                raise AxisTableError(f"Cannot read axis table {path}: {e}") from e
            if data is None:
                return AxisTable()
            if not isinstance(data, dict):
                raise AxisTableError(f"Axis table {path} must contain a mapping")
            return self.parse_mapping(data)

        return self.parse(content)


def parse_axis_table(content: str, strict_mode: bool = True) -> AxisTable:
    """Parse axis table text such as 'wght 100:400:900, slnt -10:0:0'"""
    return AxisTableParser(strict_mode=strict_mode).parse(content)


def load_axis_table(filepath: str, strict_mode: bool = True) -> AxisTable:
    """Load an axis table from a file (see AxisTableParser.parse_file)"""
    return AxisTableParser(strict_mode=strict_mode).parse_file(filepath)
