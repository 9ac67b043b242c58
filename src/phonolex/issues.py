"""Non-fatal issues found while normalizing, collected per language.

An issue never stops processing: the affected word or pronunciation is
dropped and the issue is recorded for later review.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum

from phonolex.ipa.errors import ParserErrorType
from phonolex.types import Location, WordPronunciation

logger = logging.getLogger(__name__)


class IssueSeverity(IntEnum):
    NORMAL = 0   # expected during regular processing, only a concern in bulk
    HIGH = 1     # should be checked manually


class NormalizationErrorType(Enum):
    UNSUPPORTED_IPA_SEGMENT = "unsupported_ipa_segment"


_ERROR_MESSAGES = {
    ParserErrorType.MISSING_DELIMITERS: "Missing '[]' or '//' delimiters.",
    ParserErrorType.UNEXPECTED_CHARACTER: "Unexpected character: not a common IPA symbol.",
    ParserErrorType.INCOMPLETE_PRONUNCIATION: "Incomplete pronunciation.",
    ParserErrorType.ILLEGAL_DIACRITIC_POSITION: "Illegal diacritic position.",
    NormalizationErrorType.UNSUPPORTED_IPA_SEGMENT: "IPA segment not supported in target language.",
}


@dataclass(frozen=True)
class PronunciationNormalizationIssue:
    """A pronunciation (or one of its alternatives) could not be normalized."""
    word_pronunciation: WordPronunciation
    error_type: ParserErrorType | NormalizationErrorType
    location: Location

    severity = IssueSeverity.NORMAL

    @property
    def language(self) -> str:
        return self.word_pronunciation.language

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self.error_type]

    def cells(self) -> dict[str, str]:
        return {
            "Invalid IPA symbol": repr(self.location.text),
            "Pronunciation": self.word_pronunciation.pronunciation,
            "Word": self.word_pronunciation.word,
        }


@dataclass(frozen=True)
class InvalidGraphemeInWordIssue:
    """A lower-cased word contains a character no grapheme rule accepts."""
    word_pronunciation: WordPronunciation
    lower_case_word: str
    invalid_character: str

    severity = IssueSeverity.NORMAL
    message = "Invalid grapheme in word."

    @property
    def language(self) -> str:
        return self.word_pronunciation.language

    def cells(self) -> dict[str, str]:
        return {
            "Invalid character": repr(self.invalid_character),
            "Word": self.word_pronunciation.word,
            "Normalized word": self.lower_case_word,
        }


@dataclass(frozen=True)
class MissingLanguageLookupIssue:
    """Records in a language without lookup data are kept raw only."""
    language: str
    record_count: int = 1

    severity = IssueSeverity.HIGH
    message = "Missing language lookup for language."

    def cells(self) -> dict[str, str]:
        return {"Records": str(self.record_count)}


Issue = PronunciationNormalizationIssue | InvalidGraphemeInWordIssue | MissingLanguageLookupIssue


class IssueLog:
    """Collects issues grouped by language."""

    def __init__(self):
        self._issues: dict[str, list[Issue]] = {}

    def log(self, issue: Issue) -> None:
        self._issues.setdefault(issue.language, []).append(issue)
        logger.debug(f"[{issue.language}] {issue.message} {issue.cells()}")

    def issues(self, language: str | None = None) -> list[Issue]:
        """All issues, or those of one language, in logging order."""
        if language is not None:
            return list(self._issues.get(language, []))
        return [issue for issues in self._issues.values() for issue in issues]

    def languages(self) -> list[str]:
        return sorted(self._issues)

    def counts(self) -> dict[str, dict[str, int]]:
        """Number of issues per language and message."""
        return {
            language: dict(Counter(issue.message for issue in self._issues[language]))
            for language in self.languages()
        }

    def has_severe_issues(self) -> bool:
        return any(issue.severity >= IssueSeverity.HIGH for issue in self.issues())

    def to_dict(self) -> dict:
        """JSON-safe summary of all issues, grouped by language."""
        return {
            language: [
                {
                    "message": issue.message,
                    "severity": issue.severity.name.lower(),
                    "cells": issue.cells(),
                }
                for issue in self._issues[language]
            ]
            for language in self.languages()
        }

    def __len__(self) -> int:
        return sum(len(issues) for issues in self._issues.values())


def report(issues: IssueLog | None, issue: Issue) -> None:
    """Record *issue* in *issues*, or just log it when no sink is given."""
    if issues is not None:
        issues.log(issue)
    else:
        logger.debug(f"[{issue.language}] {issue.message} {issue.cells()}")
