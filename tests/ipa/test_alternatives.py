"""Tests for optional-content expansion."""

from phonolex.ipa.alternatives import get_alternatives


def test_no_optional_parts():
    assert get_alternatives("abc") == ["abc"]


def test_minimal_then_maximal():
    assert get_alternatives("ˈbaf(ə)lmənt") == ["ˈbaflmənt", "ˈbafəlmənt"]


def test_several_optional_parts():
    assert get_alternatives("a(b)c(d)") == ["ac", "abcd"]


def test_superscript_parentheses():
    assert get_alternatives("d⁽ʰ⁾") == ["d", "dʰ"]


def test_mixed_parentheses():
    assert get_alternatives("(a)b⁽c⁾") == ["b", "abc"]


def test_empty_parentheses_give_one_alternative():
    assert get_alternatives("a()b") == ["ab"]


def test_unbalanced_parenthesis_left_alone():
    assert get_alternatives("a(b") == ["a(b"]
