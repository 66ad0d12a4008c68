"""
Style names

Resolves style strings such as "Bold Italic", "SemiBold" or "700 Oblique" into
FontStyle values. Names are loaded from style-names.yaml (with user overrides
through the data manager).
"""

import re
from typing import Any, Dict, List, Optional, Union

from .models import FontStyle, Slant
from ..config import load_style_names


def _normalize(name: str) -> str:
    return re.sub(r"[\s_\-]", "", name).lower()


class StyleNames:
    """Style name lookup: weight names -> numeric weight, slant names -> Slant"""

    # Loaded from style-names.yaml, keyed by normalized name
    MAPPINGS: Dict[str, Dict[str, Dict[str, Any]]] = {}
    DEFAULTS: Dict[str, Any] = {}

    _FALLBACK = {
        "weight": {
            "Thin": {"value": 100},
            "ExtraLight": {"value": 200},
            "Light": {"value": 300},
            "Regular": {"value": 400},
            "Normal": {"alias_of": "Regular"},
            "Medium": {"value": 500},
            "SemiBold": {"value": 600},
            "Bold": {"value": 700},
            "ExtraBold": {"value": 800},
            "Black": {"value": 900},
        },
        "slant": {
            "Upright": {"value": "upright"},
            "Italic": {"value": "italic"},
            "Oblique": {"alias_of": "Italic"},
        },
    }

    @classmethod
    def _load_mappings(cls):
        if cls.MAPPINGS:  # Already loaded
            return

        data = load_style_names()
        if not data.get("weight") and not data.get("slant"):
            data = cls._FALLBACK

        cls.MAPPINGS = {
            section: {_normalize(str(name)): dict(entry or {}) for name, entry in entries.items()}
            for section, entries in data.items()
            if section in ("weight", "slant") and isinstance(entries, dict)
        }
        cls.DEFAULTS = data.get("metadata", {}).get("defaults", {"weight": 400, "slant": "upright"})

    @classmethod
    def reload(cls):
        """Drop cached names so the next lookup re-reads the data files"""
        cls.MAPPINGS = {}
        cls.DEFAULTS = {}

    @classmethod
    def _resolve(cls, name: str, section: str) -> Optional[Any]:
        cls._load_mappings()
        entries = cls.MAPPINGS.get(section, {})
        key = _normalize(name)
        seen = set()
        while key in entries and key not in seen:
            seen.add(key)
            entry = entries[key]
            if "alias_of" not in entry:
                return entry.get("value")
            key = _normalize(str(entry["alias_of"]))
        return None

    @classmethod
    def get_weight(cls, name: str) -> Optional[int]:
        """Numeric weight for a weight name, or None if unknown"""
        value = cls._resolve(name, "weight")
        return int(value) if value is not None else None

    @classmethod
    def get_slant(cls, name: str) -> Optional[Slant]:
        """Slant for a slant name, or None if unknown"""
        value = cls._resolve(name, "slant")
        return Slant(str(value).lower()) if value is not None else None

    @classmethod
    def default_style(cls) -> FontStyle:
        cls._load_mappings()
        return FontStyle(
            int(cls.DEFAULTS.get("weight", 400)),
            Slant(str(cls.DEFAULTS.get("slant", "upright")).lower()),
        )


def _split_words(text: str) -> List[str]:
    return re.findall(r"\d+|[^\W\d_]+", text)


def parse_style(text: Union[str, int, FontStyle, None]) -> FontStyle:
    """Parse a style description into a FontStyle

    Accepts weight names, numeric weights and slant names in any order:
    "Bold Italic", "Semi Bold", "700 Oblique", "Italic". Missing parts fall
    back to the configured defaults (400, upright).

    Raises:
        ValueError: on unknown words or when more than one weight or slant is given
    """
    if isinstance(text, FontStyle):
        return text
    default = StyleNames.default_style()
    if text is None:
        return default
    if isinstance(text, int):
        return FontStyle(text, default.slant)

    words = _split_words(text)
    weight = None
    slant = None
    i = 0
    while i < len(words):
        word = words[i]
        if word.isdigit():
            matched_weight, matched_slant, length = int(word), None, 1
        else:
            matched_weight = matched_slant = None
            length = 0
            # Longest run of words forming a known name wins: "Semi Bold" before "Semi"
            for j in range(len(words), i, -1):
                candidate = "".join(words[i:j])
                if any(w.isdigit() for w in words[i:j]):
                    continue
                matched_weight = StyleNames.get_weight(candidate)
                matched_slant = StyleNames.get_slant(candidate) if matched_weight is None else None
                if matched_weight is not None or matched_slant is not None:
                    length = j - i
                    break
            if not length:
                raise ValueError(f"Unknown style word '{word}' in '{text}'")

        if matched_weight is not None:
            if weight is not None:
                raise ValueError(f"Style '{text}' names more than one weight")
            weight = matched_weight
        else:
            if slant is not None:
                raise ValueError(f"Style '{text}' names more than one slant")
            slant = matched_slant
        i += length

    return FontStyle(
        weight if weight is not None else default.weight,
        slant if slant is not None else default.slant,
    )
