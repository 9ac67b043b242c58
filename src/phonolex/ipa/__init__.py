"""IPA parsing: decomposition, lexing and segment assembly."""

from phonolex.ipa.decompose import decompose_ipa_string
from phonolex.ipa.errors import ParserError, ParserErrorType
from phonolex.ipa.letters import IPA_LETTERS, IpaLetter, is_ipa_letter
from phonolex.ipa.parser import parse_ipa_string
from phonolex.ipa.segments import IpaSegment
from phonolex.ipa.symbols import Diacritic, Suprasegmental

__all__ = [
    "IPA_LETTERS",
    "Diacritic",
    "IpaLetter",
    "IpaSegment",
    "ParserError",
    "ParserErrorType",
    "Suprasegmental",
    "decompose_ipa_string",
    "is_ipa_letter",
    "parse_ipa_string",
]
