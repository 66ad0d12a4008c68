"""Tests for axis tags and the value types used by the merge engine"""

import pytest
from fontTools.designspaceLib import DesignSpaceDocument
from fontTools.ttLib.tables._f_v_a_r import Axis, table__f_v_a_r

from fontfakery.core.models import (
    AxisRangeEntry,
    AxisTable,
    AxisVariation,
    FontFakery,
    FontStyle,
    FontWeight,
    Slant,
    VariationSettings,
    to_float32,
)
from fontfakery.core.tags import TAG_ital, TAG_slnt, TAG_wght, AxisTag


class TestAxisTag:
    """Test packing and ordering of axis tags"""

    def test_packs_big_endian(self):
        """'wght' packs to its four ASCII bytes, first character highest"""
        assert AxisTag("wght") == 0x77676874
        assert TAG_wght == 0x77676874

    def test_make_from_characters(self):
        """make() builds the same tag as the string form"""
        assert AxisTag.make("A", "B", "C", "D") == 0x41424344
        assert AxisTag.make("A", "B", "C", "D") == AxisTag("ABCD")

    def test_str_and_repr(self):
        """A tag prints as its four characters"""
        assert str(TAG_slnt) == "slnt"
        assert repr(TAG_slnt) == "AxisTag('slnt')"
        assert str(AxisTag(0x41424344)) == "ABCD"

    def test_short_tag_padded_with_spaces(self):
        """Short tags are padded with spaces like OpenType tags"""
        assert str(AxisTag("ab")) == "ab  "

    def test_invalid_tags(self):
        """Tags must be 1-4 characters and fit in 32 bits"""
        with pytest.raises(ValueError):
            AxisTag("toolong")
        with pytest.raises(ValueError):
            AxisTag("")
        with pytest.raises(ValueError):
            AxisTag(1 << 32)

    def test_registered_tag_order(self):
        """ital < slnt < wght, which keeps style-implied values sorted"""
        assert TAG_ital < TAG_slnt < TAG_wght

    def test_uppercase_sorts_before_lowercase(self):
        """Tags are ordered as unsigned integers"""
        assert AxisTag("ABCD") < AxisTag("abcd")


class TestAxisVariation:
    """Test AxisVariation comparison semantics"""

    def test_ordering_uses_tag_only(self):
        """Variations with the same tag are neither smaller nor larger"""
        low = AxisVariation("wght", 100)
        high = AxisVariation("wght", 900)
        assert not low < high
        assert not low > high
        assert low <= high
        assert low >= high

    def test_ordering_between_tags(self):
        """Different tags order by tag value regardless of value"""
        assert AxisVariation("ital", 100) < AxisVariation("wght", 1)
        assert AxisVariation("wght", 1) > AxisVariation("ital", 100)

    def test_equality_uses_tag_and_value(self):
        """Same tag with different values is not equal"""
        assert AxisVariation("wght", 400) == AxisVariation(TAG_wght, 400.0)
        assert AxisVariation("wght", 400) != AxisVariation("wght", 500)
        assert AxisVariation("wght", 400) != AxisVariation("wdth", 400)

    def test_value_rounded_to_float32(self):
        """Values are stored with 32-bit float precision"""
        variation = AxisVariation("wght", 0.1)
        assert variation.value == to_float32(0.1)
        assert variation.value != 0.1

    def test_tag_coerced(self):
        """String tags are converted to AxisTag"""
        assert isinstance(AxisVariation("wght", 1).axis_tag, AxisTag)

    def test_str(self):
        assert str(AxisVariation("slnt", -10)) == "'slnt' -10"


class TestVariationSettings:
    """Test sorting, dedup and access on VariationSettings"""

    def test_sorted_by_tag(self):
        """Construction sorts by tag"""
        settings = VariationSettings([AxisVariation("wght", 400), AxisVariation("ital", 1)])
        assert len(settings) == 2
        assert settings[0].axis_tag == TAG_ital
        assert settings[0].value == 1
        assert settings[1].axis_tag == TAG_wght
        assert settings[1].value == 400

    def test_last_duplicate_wins(self):
        """When a tag is repeated the last value supplied is kept"""
        settings = VariationSettings([("wght", 100), ("ital", 1), ("wght", 700)])
        assert len(settings) == 2
        assert settings.get("wght") == 700

    def test_from_mapping(self):
        """A tag -> value mapping is accepted"""
        settings = VariationSettings({"wght": 700, "ABCD": 5})
        assert [str(v.axis_tag) for v in settings] == ["ABCD", "wght"]

    def test_empty(self):
        """Empty settings are falsy"""
        settings = VariationSettings()
        assert len(settings) == 0
        assert not settings
        assert settings.is_empty()
        assert str(settings) == ""

    def test_get_missing_tag(self):
        assert VariationSettings({"wght": 700}).get("slnt") is None

    def test_equality_and_hash(self):
        """Equality compares every tag and value"""
        a = VariationSettings({"wght": 700, "ital": 1})
        b = VariationSettings([("ital", 1), ("wght", 700)])
        c = VariationSettings({"wght": 700, "ital": 0})
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_str(self):
        """Rendering lists pairs in ascending tag order"""
        settings = VariationSettings({"wght": 700, "ital": 1})
        assert str(settings) == "'ital' 1, 'wght' 700"
        assert repr(settings) == "VariationSettings(\"'ital' 1, 'wght' 700\")"

    def test_copy_constructor(self):
        settings = VariationSettings({"wght": 700})
        assert VariationSettings(settings) == settings


class TestAxisTable:
    """Test AxisTable lookup and factories"""

    def test_membership_and_lookup(self):
        """Supported axes are found, unsupported ones give None"""
        table = AxisTable.from_mapping({"wght": (100, 900, 400)})
        assert "wght" in table
        assert TAG_wght in table
        assert "slnt" not in table
        entry = table.get("wght")
        assert entry == AxisRangeEntry(100, 900, 400)
        assert table.get("slnt") is None

    def test_zero_entry_distinct_from_missing(self):
        """An axis whose range is all zeros is still supported"""
        table = AxisTable.from_mapping({"ABCD": (0, 0, 0)})
        assert table.get("ABCD") is not None
        assert table.get("ABCD").default_value == 0

    def test_invalid_tag_not_member(self):
        assert "toolong" not in AxisTable()

    def test_mapping_with_dict_ranges(self):
        """Dict ranges use minimum/default/maximum keys"""
        table = AxisTable.from_mapping({"slnt": {"minimum": -10, "default": 0, "maximum": 0}})
        assert table.get("slnt") == AxisRangeEntry(-10, 0, 0)

    def test_constructor_converts_ranges(self):
        """The constructor accepts the same range forms as from_mapping"""
        table = AxisTable({
            "wght": (100, 900, 400),
            "slnt": {"minimum": -10, "default": 0, "maximum": 0},
            TAG_ital: AxisRangeEntry(0, 1, 0),
        })
        assert table.get("wght") == AxisRangeEntry(100, 900, 400)
        assert table.get("slnt") == AxisRangeEntry(-10, 0, 0)
        assert table.get("ital") == AxisRangeEntry(0, 1, 0)

    def test_iteration_sorted(self):
        """Iteration yields tags in ascending order"""
        table = AxisTable.from_mapping({"wght": (100, 900, 400), "ital": (0, 1, 0)})
        assert list(table) == [TAG_ital, TAG_wght]
        assert len(table) == 2

    def test_from_fvar(self):
        """Axes come from a fontTools fvar table"""
        fvar = table__f_v_a_r()
        axis = Axis()
        axis.axisTag = "wght"
        axis.minValue = 100
        axis.defaultValue = 400
        axis.maxValue = 900
        fvar.axes = [axis]

        table = AxisTable.from_fvar(fvar)
        assert table.get("wght") == AxisRangeEntry(100, 900, 400)

    def test_from_designspace(self):
        """Continuous and discrete designspace axes are both read"""
        doc = DesignSpaceDocument()
        doc.addAxisDescriptor(name="weight", tag="wght", minimum=100, default=400, maximum=900)
        doc.addAxisDescriptor(name="italic", tag="ital", values=[0, 1], default=0)

        table = AxisTable.from_designspace(doc)
        assert table.get("wght") == AxisRangeEntry(100, 900, 400)
        assert table.get("ital") == AxisRangeEntry(0, 1, 0)

    def test_clamp(self):
        entry = AxisRangeEntry(100, 700, 400)
        assert entry.clamp(50) == 100
        assert entry.clamp(900) == 700
        assert entry.clamp(500) == 500


class TestFontStyle:
    """Test FontStyle defaults"""

    def test_defaults(self):
        style = FontStyle()
        assert style.weight == 400
        assert style.slant == Slant.UPRIGHT
        assert not style.is_italic

    def test_italic(self):
        assert FontStyle(FontWeight.BOLD, Slant.ITALIC).is_italic

    def test_named_weights(self):
        assert FontWeight.THIN == 100
        assert FontWeight.SEMI_BOLD == 600
        assert FontWeight.BLACK == 900


class TestFontFakery:
    """Test FontFakery construction and equality"""

    def test_default_construct(self):
        """Default result has no fakery and no variations"""
        assert FontFakery() == FontFakery(False, False)
        assert FontFakery() != FontFakery(True, False)
        assert FontFakery() != FontFakery(False, True)
        assert FontFakery() != FontFakery(True, True)

    def test_flags(self):
        fakery = FontFakery(True, False)
        assert fakery.fake_bold
        assert not fakery.fake_italic
        assert fakery.variation_settings.is_empty()

    def test_variation_settings(self):
        """Variation settings are kept sorted"""
        fakery = FontFakery(False, False, VariationSettings([("wght", 400), ("ital", 1)]))
        assert len(fakery.variation_settings) == 2
        assert fakery.variation_settings[0].axis_tag == TAG_ital
        assert fakery.variation_settings[1].value == 400

    def test_equality_includes_variations(self):
        a = FontFakery(False, False, VariationSettings({"wght": 400}))
        b = FontFakery(False, False, VariationSettings({"wght": 500}))
        assert a != b

    def test_str(self):
        fakery = FontFakery(True, False, VariationSettings({"wght": 700}))
        assert str(fakery) == "FontFakery(fake_bold=True, fake_italic=False, variations=\"'wght' 700\")"
