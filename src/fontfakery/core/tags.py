"""
Axis tags

OpenType axis tags are four ASCII characters packed big-endian into a 32-bit
unsigned integer. The integer value is the sort key used everywhere in fontfakery.
"""

import struct

from fontTools.misc.textTools import tobytes, tostr


class AxisTag(int):
    """A 32-bit axis tag that prints as its four characters"""

    def __new__(cls, value=0):
        if isinstance(value, AxisTag):
            return value
        if isinstance(value, (str, bytes)):
            return cls.from_string(value)
        value = int(value)
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Axis tag out of 32-bit range: {value:#x}")
        return super().__new__(cls, value)

    @classmethod
    def from_string(cls, tag) -> "AxisTag":
        """Pack a tag string such as 'wght'

        Tags shorter than four characters are padded with spaces.
        """
        data = tobytes(tag, encoding="latin-1")
        if not 1 <= len(data) <= 4:
            raise ValueError(f"Axis tag must be 1 to 4 characters: {tag!r}")
        data = data.ljust(4, b" ")
        return super().__new__(cls, struct.unpack(">L", data)[0])

    @classmethod
    def make(cls, c1: str, c2: str, c3: str, c4: str) -> "AxisTag":
        return cls.from_string(c1 + c2 + c3 + c4)

    def __str__(self) -> str:
        return tostr(struct.pack(">L", self), encoding="latin-1")

    def __repr__(self) -> str:
        return f"AxisTag({str(self)!r})"


# Registered axes receiving special treatment during merging
TAG_ital = AxisTag("ital")
TAG_slnt = AxisTag("slnt")
TAG_wght = AxisTag("wght")
TAG_wdth = AxisTag("wdth")
TAG_opsz = AxisTag("opsz")
