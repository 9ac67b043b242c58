"""Normalize raw word/pronunciation pairs onto a language's graphemes and phonemes."""

import logging
import unicodedata
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable, Iterable

from phonolex.ipa.errors import ParserError
from phonolex.ipa.parser import parse_ipa_string
from phonolex.issues import (
    InvalidGraphemeInWordIssue,
    IssueLog,
    MissingLanguageLookupIssue,
    NormalizationErrorType,
    PronunciationNormalizationIssue,
    report,
)
from phonolex.normalize.rewriter import rewrite_graphemes, rewrite_segments
from phonolex.types import WordPronunciation

if TYPE_CHECKING:
    from phonolex.languages import LanguageLookup

logger = logging.getLogger(__name__)

# Languages whose lower-casing of I differs from the default Unicode mapping
_DOTLESS_I_LANGUAGES = {"tr", "az"}


def lower_case_word(word: str, language: str) -> str:
    """Lower-case *word* following the casing rules of *language*."""
    if language in _DOTLESS_I_LANGUAGES:
        word = word.replace("I", "ı").replace("İ", "i")
    return word.lower()


def normalize_word(
    word_pronunciation: WordPronunciation,
    lookup: "LanguageLookup",
    issues: IssueLog | None = None,
) -> str | None:
    """Rewrite the word into the language's graphemes.

    Returns None if the word is excluded or contains a character no grapheme
    rule accepts; the latter is reported as an issue.
    """
    word = unicodedata.normalize("NFC", word_pronunciation.word)
    word = lower_case_word(word, lookup.language)

    result = rewrite_graphemes(word, lookup.grapheme_rules)
    if result.excluded:
        return None
    if not result.ok:
        report(issues, InvalidGraphemeInWordIssue(
            word_pronunciation,
            lower_case_word=word,
            invalid_character=word[result.unmatched_index],
        ))
        return None

    return "".join(result.symbols)


def normalize_pronunciation(
    word_pronunciation: WordPronunciation,
    lookup: "LanguageLookup",
    issues: IssueLog | None = None,
) -> list[str]:
    """Rewrite the pronunciation into space-separated phoneme strings, one per alternative.

    A parser error drops the whole pronunciation. An alternative with a
    segment no phoneme rule accepts is dropped on its own, so a sibling
    alternative may still survive. Alternatives that are excluded by a rule
    or rewrite to nothing are dropped silently.
    """
    parsed = parse_ipa_string(word_pronunciation.pronunciation)
    if isinstance(parsed, ParserError):
        report(issues, PronunciationNormalizationIssue(
            word_pronunciation, parsed.type, parsed.location,
        ))
        return []

    pronunciations: list[str] = []
    for segments in parsed:
        result = rewrite_segments(segments, lookup.phoneme_rules)
        if result.excluded:
            continue
        if not result.ok:
            segment = segments[result.unmatched_index]
            report(issues, PronunciationNormalizationIssue(
                word_pronunciation,
                NormalizationErrorType.UNSUPPORTED_IPA_SEGMENT,
                segment.letter_location,
            ))
            continue

        pronunciation = " ".join(result.symbols)
        if pronunciation and pronunciation not in pronunciations:
            pronunciations.append(pronunciation)

    return pronunciations


def normalize_word_pronunciation(
    word_pronunciation: WordPronunciation,
    lookup: "LanguageLookup | None",
    issues: IssueLog | None = None,
) -> list[WordPronunciation]:
    """Turn one raw record into zero or more normalized records.

    Args:
        word_pronunciation: Raw record as extracted from a wiki page.
        lookup: Lookup for the record's language. None means the language
            is unsupported: nothing is returned and the gap is reported.
        issues: Sink for problems found on the way.

    Returns:
        One record per distinct normalized pronunciation, all sharing the
        normalized word.
    """
    if lookup is None:
        report(issues, MissingLanguageLookupIssue(word_pronunciation.language))
        return []

    word = normalize_word(word_pronunciation, lookup, issues)
    if word is None:
        return []

    return [
        replace(word_pronunciation, word=word, pronunciation=pronunciation)
        for pronunciation in normalize_pronunciation(word_pronunciation, lookup, issues)
    ]


@dataclass
class NormalizedEntry:
    """A raw record together with whatever normalization made of it."""
    raw: WordPronunciation
    normalized: list[WordPronunciation] = field(default_factory=list)


def normalize_batch(
    word_pronunciations: Iterable[WordPronunciation],
    issues: IssueLog | None = None,
    get_lookup: Callable[[str], "LanguageLookup | None"] | None = None,
) -> list[NormalizedEntry]:
    """Normalize many records, keeping every raw record.

    Records of a language without a lookup come back with no normalized
    records; the language is reported once, with the number of records
    affected.
    """
    if get_lookup is None:
        from phonolex.languages import get_language_lookup
        get_lookup = get_language_lookup

    lookups: dict[str, "LanguageLookup | None"] = {}
    missing: dict[str, int] = {}
    entries: list[NormalizedEntry] = []

    for wp in word_pronunciations:
        if wp.language not in lookups:
            lookups[wp.language] = get_lookup(wp.language)
        lookup = lookups[wp.language]

        if lookup is None:
            missing[wp.language] = missing.get(wp.language, 0) + 1
            entries.append(NormalizedEntry(wp))
            continue

        entries.append(NormalizedEntry(wp, normalize_word_pronunciation(wp, lookup, issues)))

    for language, count in missing.items():
        logger.info(f"No lookup for language {language!r}, keeping {count} raw record(s)")
        report(issues, MissingLanguageLookupIssue(language, record_count=count))

    normalized = sum(len(entry.normalized) for entry in entries)
    logger.info(f"Normalized {len(entries)} record(s) into {normalized} pronunciation(s)")
    return entries


__all__ = [
    "NormalizedEntry",
    "lower_case_word",
    "normalize_batch",
    "normalize_pronunciation",
    "normalize_word",
    "normalize_word_pronunciation",
]
