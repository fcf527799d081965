"""Tests for legacy description cleanup."""

import pytest

from teambuilder.core.description_normalizer import normalize_description


class TestNormalizeDescription:
    """normalize_description tests."""

    def test_legacy_token_becomes_placeholder(self):
        assert normalize_description("deals @Damage@ to enemies") == "deals {Damage} to enemies"

    def test_percent_suffix_is_kept_verbatim(self):
        assert normalize_description("gain @Bonus*100@% AS") == "gain {Bonus*100}% AS"

    def test_nbsp_becomes_space(self):
        assert normalize_description("a&nbsp;b") == "a b"

    def test_tracker_label_removed_across_lines(self):
        desc = "Gain<TFTTrackerLabel>Stacks:\n@Stacks@</TFTTrackerLabel> armor"
        assert normalize_description(desc) == "Gain armor"

    def test_unit_property_and_empty_parens_removed(self):
        desc = "Deals @TFTUnitProperty.:TFT_Bonus@ damage (@TFTUnitProperty.x@)"
        assert normalize_description(desc) == "Deals damage"

    def test_tags_stripped(self):
        desc = "<magicDamage>@Damage@ magic damage</magicDamage> to the target"
        assert normalize_description(desc) == "{Damage} magic damage to the target"

    def test_escaping_artifacts_removed(self):
        assert normalize_description('a\\"b">c') == "abc"

    def test_icon_scale_tokens_removed(self):
        assert normalize_description("Deals 100 %i:scaleAP% damage") == "Deals 100 damage"

    @pytest.mark.parametrize(
        "desc,expected",
        [
            ("Apply keyword2 Wound", "Apply Wound"),
            ("KEYWORD Burn", "Burn"),
            ("Keyword", ""),
        ],
    )
    def test_keyword_markers_removed(self, desc, expected):
        assert normalize_description(desc) == expected

    def test_keyword_inside_word_kept(self):
        assert normalize_description("keywords") == "keywords"

    def test_double_brace_tokens_removed(self):
        assert normalize_description("{{TFT_Keyword_Burn}} Burns the target") == "Burns the target"

    def test_whitespace_collapsed(self):
        assert normalize_description("  a \n\n b\t c  ") == "a b c"

    def test_nothing_left(self):
        assert normalize_description("<br><TFTTrackerLabel>x</TFTTrackerLabel>") == ""

    def test_keyword_tag_contents_kept(self):
        desc = '<TFTKeyword>Chill</TFTKeyword> for @Duration@ seconds'
        assert normalize_description(desc) == "Chill for {Duration} seconds"
