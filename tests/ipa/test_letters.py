"""Tests for the IPA letter tables."""

import unicodedata

import pytest

from phonolex.ipa.letters import CONSONANTS, IPA_LETTERS, VOWELS, is_ipa_letter


@pytest.mark.parametrize("letters", [CONSONANTS, VOWELS, IPA_LETTERS])
class TestLetterTables:
    def test_letters_are_nfc(self, letters):
        for letter in letters:
            assert unicodedata.normalize("NFC", letter) == letter

    def test_letters_are_single_code_points(self, letters):
        for letter in letters:
            assert len(letter) == 1

    def test_no_duplicates(self, letters):
        assert len(set(letters)) == len(letters)


def test_consonants_and_vowels_disjoint():
    assert not set(CONSONANTS) & set(VOWELS)


def test_is_ipa_letter():
    assert is_ipa_letter("ʃ")
    assert is_ipa_letter("ɡ")
    assert not is_ipa_letter("g")   # ASCII g is only an alias
    assert not is_ipa_letter("pː")
    assert not is_ipa_letter("")
