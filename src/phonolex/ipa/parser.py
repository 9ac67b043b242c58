"""Parse IPA pronunciation strings into segment sequences."""

from phonolex.ipa.alternatives import get_alternatives
from phonolex.ipa.decompose import decompose_ipa_string
from phonolex.ipa.errors import ParserError, ParserErrorType
from phonolex.ipa.lexer import lex_ipa_string
from phonolex.ipa.segments import (
    IpaSegment,
    assemble_segments,
    segment_lists_equivalent,
)
from phonolex.types import Location

# Matching pairs of pronunciation delimiters
_DELIMITERS = (("/", "/"), ("[", "]"))

# Content standing for "no pronunciation given"
_EMPTY_CONTENT = ("", "…")


def parse_ipa_string(raw: str) -> list[list[IpaSegment]] | ParserError:
    """Parse an IPA pronunciation as written on Wiktionary.

    The pronunciation must be enclosed in /.../ or [...]. Optional parts in
    parentheses yield a minimal and a maximal reading; readings that only
    differ in symbol positions are merged, keeping the minimal one.

    Args:
        raw: The pronunciation string, e.g. "/ˈbaf(ə)lmənt/".

    Returns:
        Zero, one or two segment sequences, or the first error encountered.
        Error and segment locations refer to the decomposed string with its
        delimiters removed.
    """
    s = decompose_ipa_string(raw).strip()
    if not s:
        return []

    content = _strip_delimiters(s)
    if content is None:
        return ParserError(
            ParserErrorType.MISSING_DELIMITERS,
            Location(s, 0, len(s)),
        )

    stripped = content.strip()
    if stripped in _EMPTY_CONTENT:
        return []

    if stripped.startswith("-"):
        # Only a suffix is transcribed
        start = content.index("-")
        return ParserError(
            ParserErrorType.INCOMPLETE_PRONUNCIATION,
            Location(content, start, start + 1),
        )
    if stripped.endswith("-"):
        # Only a prefix is transcribed
        end = content.rindex("-") + 1
        return ParserError(
            ParserErrorType.INCOMPLETE_PRONUNCIATION,
            Location(content, end - 1, end),
        )

    results: list[list[IpaSegment]] = []
    for alternative in get_alternatives(content):
        tokens = lex_ipa_string(alternative)
        if isinstance(tokens, ParserError):
            return tokens

        segments = assemble_segments(tokens)
        if isinstance(segments, ParserError):
            return segments

        if not segments:
            continue
        if any(segment_lists_equivalent(known, segments) for known in results):
            continue
        results.append(segments)

    return results


def _strip_delimiters(s: str) -> str | None:
    """Return the content between matching delimiters, or None if there are none."""
    for opening, closing in _DELIMITERS:
        if len(s) >= 2 and s.startswith(opening) and s.endswith(closing):
            return s[1:-1]
    return None
