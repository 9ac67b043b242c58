"""Assemble lexed tokens into IPA segments."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from phonolex.ipa.errors import ParserError, ParserErrorType
from phonolex.ipa.lexer import Token
from phonolex.ipa.letters import IpaLetter
from phonolex.ipa.symbols import Diacritic, Suprasegmental, TokenType
from phonolex.types import Location


@dataclass(frozen=True)
class IpaSegment:
    """One IPA letter with its diacritics and surrounding suprasegmentals.

    The mappings keep insertion order and map each symbol to where it was
    found. They are read-only views: a segment's ``right`` and the next
    segment's ``left`` view the same underlying symbols.
    """
    letter: IpaLetter
    letter_location: Location
    diacritics: Mapping[Diacritic, Location] = field(default_factory=dict)
    left: Mapping[Suprasegmental, Location] = field(default_factory=dict)
    right: Mapping[Suprasegmental, Location] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("diacritics", "left", "right"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(value))


def assemble_segments(tokens: list[Token]) -> list[IpaSegment] | ParserError:
    """Fold a token stream into segments.

    Diacritics attach to the open segment and are only legal directly after
    a letter or another diacritic. Suprasegmentals collect into a pending set
    that is both the open segment's right context and the next segment's left
    context.
    """
    segments: list[IpaSegment] = []
    diacritics: dict[Diacritic, Location] = {}
    suprasegmentals: dict[Suprasegmental, Location] = {}
    last_type: TokenType | None = None

    for token in tokens:
        if token.type is TokenType.LETTER:
            diacritics = {}
            left = suprasegmentals
            suprasegmentals = {}
            segments.append(IpaSegment(
                letter=token.value,
                letter_location=token.location,
                diacritics=diacritics,
                left=left,
                right=suprasegmentals,
            ))
        elif token.type is TokenType.DIACRITIC:
            if last_type not in (TokenType.LETTER, TokenType.DIACRITIC):
                return ParserError(
                    ParserErrorType.ILLEGAL_DIACRITIC_POSITION,
                    token.location,
                )
            diacritics[token.value] = token.location
        else:
            suprasegmentals[token.value] = token.location
        last_type = token.type

    return segments


def segment_key(segment: IpaSegment) -> tuple:
    """The structure of a segment without any location data."""
    return (
        segment.letter,
        tuple(segment.diacritics),
        tuple(segment.left),
        tuple(segment.right),
    )


def segment_lists_equivalent(a: list[IpaSegment], b: list[IpaSegment]) -> bool:
    """Check if two segment lists are identical apart from locations."""
    return [segment_key(s) for s in a] == [segment_key(s) for s in b]
