"""Tests for the IPA lexer and its token map."""

from phonolex.ipa.errors import ParserError, ParserErrorType
from phonolex.ipa.lexer import lex_ipa_string
from phonolex.ipa.symbols import (
    DIACRITIC_SPELLINGS,
    MAX_SPELLING_LENGTH,
    SUPRASEGMENTAL_SPELLINGS,
    TOKEN_MAP,
    Diacritic,
    Suprasegmental,
    TokenType,
)
from phonolex.types import Location


def _values(tokens) -> list:
    return [(t.type, t.value) for t in tokens]


class TestTokenMap:
    def test_every_diacritic_has_a_spelling(self):
        assert set(DIACRITIC_SPELLINGS) == set(Diacritic)

    def test_every_suprasegmental_has_a_spelling(self):
        assert set(SUPRASEGMENTAL_SPELLINGS) == set(Suprasegmental)

    def test_max_spelling_length(self):
        # rising-falling contour ˧˦˨ is the longest spelling
        assert MAX_SPELLING_LENGTH == 3
        assert max(len(k) for k in TOKEN_MAP) == MAX_SPELLING_LENGTH

    def test_ligature_expands_to_three_tokens(self):
        assert [t.type for t in TOKEN_MAP["ʧ"]] == [
            TokenType.LETTER, TokenType.SUPRASEGMENTAL, TokenType.LETTER,
        ]


class TestLexIpaString:
    def test_letters(self):
        tokens = lex_ipa_string("ab")
        assert _values(tokens) == [(TokenType.LETTER, "a"), (TokenType.LETTER, "b")]
        assert tokens[1].location == Location("ab", 1, 2)

    def test_letter_aliases(self):
        assert _values(lex_ipa_string("g\u01DD")) == [
            (TokenType.LETTER, "ɡ"),
            (TokenType.LETTER, "ə"),
        ]

    def test_diacritics_and_suprasegmentals(self):
        assert _values(lex_ipa_string("ˈpʰa\u0303ː")) == [
            (TokenType.SUPRASEGMENTAL, Suprasegmental.PRIMARY_STRESS),
            (TokenType.LETTER, "p"),
            (TokenType.DIACRITIC, Diacritic.ASPIRATED),
            (TokenType.LETTER, "a"),
            (TokenType.DIACRITIC, Diacritic.NASALIZED),
            (TokenType.SUPRASEGMENTAL, Suprasegmental.LONG),
        ]

    def test_ascii_stand_ins(self):
        assert _values(lex_ipa_string("'a:")) == [
            (TokenType.SUPRASEGMENTAL, Suprasegmental.PRIMARY_STRESS),
            (TokenType.LETTER, "a"),
            (TokenType.SUPRASEGMENTAL, Suprasegmental.LONG),
        ]

    def test_longest_match_wins(self):
        # ˩˥ is "rising", not extra-low followed by extra-high
        tokens = lex_ipa_string("a˩˥")
        assert _values(tokens) == [
            (TokenType.LETTER, "a"),
            (TokenType.SUPRASEGMENTAL, Suprasegmental.RISING),
        ]
        assert tokens[1].location == Location("a˩˥", 1, 3)

    def test_three_character_contour(self):
        assert _values(lex_ipa_string("a˧˦˨")) == [
            (TokenType.LETTER, "a"),
            (TokenType.SUPRASEGMENTAL, Suprasegmental.RISING_FALLING),
        ]

    def test_ligature_tokens_share_location(self):
        tokens = lex_ipa_string("aʧ")
        assert _values(tokens) == [
            (TokenType.LETTER, "a"),
            (TokenType.LETTER, "t"),
            (TokenType.SUPRASEGMENTAL, Suprasegmental.LINKING),
            (TokenType.LETTER, "ʃ"),
        ]
        assert {t.location for t in tokens[1:]} == {Location("aʧ", 1, 2)}

    def test_skips_whitespace_and_zero_width_non_joiner(self):
        assert _values(lex_ipa_string(" a \u200C b\t")) == [
            (TokenType.LETTER, "a"),
            (TokenType.LETTER, "b"),
        ]

    def test_empty_input(self):
        assert lex_ipa_string("") == []

    def test_unexpected_character(self):
        assert lex_ipa_string("abc?") == ParserError(
            ParserErrorType.UNEXPECTED_CHARACTER, Location("abc?", 3, 4),
        )

    def test_unexpected_character_reports_first(self):
        error = lex_ipa_string("a?b!")
        assert isinstance(error, ParserError)
        assert error.location.start == 1
        assert error.text == "?"
