"""Errors produced while parsing an IPA string."""

from dataclasses import dataclass
from enum import Enum

from phonolex.types import Location


class ParserErrorType(Enum):
    MISSING_DELIMITERS = "missing_delimiters"
    """The pronunciation is not enclosed in [...] or /.../"""

    UNEXPECTED_CHARACTER = "unexpected_character"
    """A character that is not a common IPA symbol"""

    INCOMPLETE_PRONUNCIATION = "incomplete_pronunciation"
    """Only a prefix or suffix is transcribed, e.g. /-əʃ/"""

    ILLEGAL_DIACRITIC_POSITION = "illegal_diacritic_position"
    """A diacritic not immediately following a letter or another diacritic"""


@dataclass(frozen=True)
class ParserError:
    """Why an IPA string could not be parsed, and where."""
    type: ParserErrorType
    location: Location

    @property
    def text(self) -> str:
        """The offending part of the input."""
        return self.location.text
