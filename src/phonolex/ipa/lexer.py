"""Longest-match tokenizer for decomposed IPA strings."""

from dataclasses import dataclass

from phonolex.ipa.errors import ParserError, ParserErrorType
from phonolex.ipa.letters import IpaLetter
from phonolex.ipa.symbols import (
    MAX_SPELLING_LENGTH,
    TOKEN_MAP,
    Diacritic,
    Suprasegmental,
    TokenType,
)
from phonolex.types import Location


@dataclass(frozen=True)
class Token:
    """An IPA letter, diacritic or suprasegmental found in an input string."""
    type: TokenType
    value: IpaLetter | Diacritic | Suprasegmental
    location: Location


def lex_ipa_string(s: str) -> list[Token] | ParserError:
    """Split a simple IPA string into tokens.

    The input must already be decomposed with ``decompose_ipa_string`` and
    stripped of its delimiters and optional-content parentheses. At every
    position the longest known spelling wins, so multi-character spellings
    such as tone contours take precedence over their single-character
    prefixes. Whitespace is skipped.

    Returns:
        The tokens in input order, or an UNEXPECTED_CHARACTER error pointing
        at the first character no spelling matches.
    """
    tokens: list[Token] = []
    index = 0
    while index < len(s):
        length = _match_length(s, index)
        if length == 0:
            return ParserError(
                ParserErrorType.UNEXPECTED_CHARACTER,
                Location(s, index, index + 1),
            )

        end = index + length
        spelling = s[index:end]
        location = Location(s, index, end)
        for token in TOKEN_MAP.get(spelling, ()):
            tokens.append(Token(token.type, token.value, location))
        index = end

    return tokens


def _match_length(s: str, index: int) -> int:
    """Length of the longest known spelling or whitespace run at *index*, 0 if none."""
    for length in range(min(MAX_SPELLING_LENGTH, len(s) - index), 0, -1):
        substring = s[index:index + length]
        if substring in TOKEN_MAP or substring.isspace():
            return length
    return 0
