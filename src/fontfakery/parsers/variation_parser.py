"""
Variation settings parser

Parses the comma-separated notation used for font variation settings:

    'wght' 700, 'ital' 1
    wght=700, slnt=-10

Each token is a tag (quoted with exactly four characters, or bare with up to
four alphanumerics padded with spaces) followed by an optional '=' and a float.
Tokens that don't parse are skipped; the remaining tokens still form a valid set.
"""

import re
from typing import List, Optional

from ..core.models import AxisVariation, VariationSettings
from ..core.tags import AxisTag
from ..utils.logging import FontFakeryLogger

_VARIATION_PATTERN = re.compile(
    r"""
    ^\s*
    (?:
        (?P<quote>['"])(?P<quoted>[^'"]{4})(?P=quote)
      | (?P<bare>[A-Za-z0-9_]{1,4})
    )
    \s*=?\s*
    (?P<value>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
    \s*$
    """,
    re.VERBOSE,
)


class VariationParser:
    """Lenient parser for variation settings strings"""

    def __init__(self):
        self.skipped: List[str] = []

    @staticmethod
    def parse_variation(token: str) -> Optional[AxisVariation]:
        """Parse one "'wght' 700" token, returning None if it is malformed"""
        match = _VARIATION_PATTERN.match(token)
        if not match:
            return None
        tag = match.group("quoted") if match.group("quote") else match.group("bare")
        try:
            return AxisVariation(AxisTag(tag), float(match.group("value")))
        except ValueError:
            # Non latin-1 characters in a quoted tag
            return None

    def parse(self, content: str) -> VariationSettings:
        """Parse a full settings string; the last value given for a tag wins"""
        self.skipped = []
        variations = []
        for token in content.split(","):
            if not token.strip():
                continue
            variation = self.parse_variation(token)
            if variation is None:
                self.skipped.append(token.strip())
                FontFakeryLogger.warning(f"Skipping unparseable variation '{token.strip()}'")
                continue
            variations.append(variation)
        return VariationSettings(variations)


def parse_variation_settings(content: str) -> VariationSettings:
    """Parse a variation settings string, e.g. 'wght' 700, 'ital' 1"""
    return VariationParser().parse(content or "")
