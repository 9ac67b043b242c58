"""Tests for IPA segment matchers."""

import pytest

from phonolex.ipa.parser import parse_ipa_string
from phonolex.ipa.symbols import Diacritic, Suprasegmental
from phonolex.normalize.matcher import IpaSegmentMatcher, matches


def _segment(raw: str, index: int = 0):
    return parse_ipa_string(raw)[0][index]


class TestMatches:
    def test_letter_only(self):
        assert matches(_segment("[a]"), IpaSegmentMatcher("a"))
        assert not matches(_segment("[a]"), IpaSegmentMatcher("e"))

    def test_unspecified_symbols_ignored(self):
        segment = _segment("[ˈa\u0303ː]")
        assert matches(segment, IpaSegmentMatcher("a"))

    def test_required_diacritic(self):
        matcher = IpaSegmentMatcher("ɛ", diacritics={Diacritic.NASALIZED: True})
        assert matches(_segment("[ɛ\u0303]"), matcher)
        assert not matches(_segment("[ɛ]"), matcher)

    def test_forbidden_diacritic(self):
        matcher = IpaSegmentMatcher("ɛ", diacritics={Diacritic.NASALIZED: False})
        assert matches(_segment("[ɛ]"), matcher)
        assert not matches(_segment("[ɛ\u0303]"), matcher)

    def test_right_suprasegmental(self):
        matcher = IpaSegmentMatcher("p", right={Suprasegmental.LONG: True})
        assert matches(_segment("[pːa]"), matcher)
        assert not matches(_segment("[pa]"), matcher)
        # length before the letter is left context, not right
        assert not matches(_segment("[aːp]", 1), matcher)

    def test_left_suprasegmental(self):
        matcher = IpaSegmentMatcher("t", left={Suprasegmental.PRIMARY_STRESS: True})
        assert matches(_segment("[sˈti]", 1), matcher)
        assert not matches(_segment("[sˈti]", 0), matcher)

    def test_several_conditions(self):
        matcher = IpaSegmentMatcher(
            "a",
            diacritics={Diacritic.NASALIZED: True},
            right={Suprasegmental.LONG: False},
        )
        assert matches(_segment("[a\u0303]"), matcher)
        assert not matches(_segment("[a\u0303ː]"), matcher)


class TestFromDict:
    def test_letter_only(self):
        assert IpaSegmentMatcher.from_dict({"letter": "ʔ"}) == IpaSegmentMatcher("ʔ")

    def test_symbol_names(self):
        matcher = IpaSegmentMatcher.from_dict({
            "letter": "p",
            "diacritics": {"aspirated": False},
            "left": {"primary_stress": True},
            "right": {"long": True},
        })
        assert dict(matcher.diacritics) == {Diacritic.ASPIRATED: False}
        assert dict(matcher.left) == {Suprasegmental.PRIMARY_STRESS: True}
        assert dict(matcher.right) == {Suprasegmental.LONG: True}

    def test_flag_order_does_not_matter(self):
        a = IpaSegmentMatcher.from_dict({"letter": "a", "diacritics": {"nasalized": True, "aspirated": False}})
        b = IpaSegmentMatcher.from_dict({"letter": "a", "diacritics": {"aspirated": False, "nasalized": True}})
        assert a == b
        assert hash(a) == hash(b)

    @pytest.mark.parametrize("data", [
        {"letter": "g"},                                  # ASCII g, not ɡ
        {"letter": "pː"},
        {},
        {"letter": "a", "diacritics": {"sparkly": True}},
        {"letter": "a", "right": {"nasalized": True}},    # a diacritic, not a suprasegmental
        {"letter": "a", "right": {"long": "yes"}},
        {"letter": "a", "colour": "red"},
        ["a"],
    ])
    def test_invalid(self, data):
        with pytest.raises(ValueError):
            IpaSegmentMatcher.from_dict(data)
