"""Tests for issue collection."""

import json
import logging

from phonolex.ipa.errors import ParserErrorType
from phonolex.issues import (
    InvalidGraphemeInWordIssue,
    IssueLog,
    IssueSeverity,
    MissingLanguageLookupIssue,
    NormalizationErrorType,
    PronunciationNormalizationIssue,
    report,
)
from phonolex.types import Location, WordPronunciation


def _wp(word="loch", pronunciation="/lɒx/", language="en"):
    return WordPronunciation("en", language, word, pronunciation)


def _unsupported(language="en"):
    return PronunciationNormalizationIssue(
        _wp(language=language),
        NormalizationErrorType.UNSUPPORTED_IPA_SEGMENT,
        Location("lɒx", 2, 3),
    )


class TestIssues:
    def test_pronunciation_issue(self):
        issue = _unsupported()
        assert issue.language == "en"
        assert issue.severity is IssueSeverity.NORMAL
        assert issue.message == "IPA segment not supported in target language."
        assert issue.cells() == {
            "Invalid IPA symbol": "'x'",
            "Pronunciation": "/lɒx/",
            "Word": "loch",
        }

    def test_parser_error_messages(self):
        issue = PronunciationNormalizationIssue(
            _wp(pronunciation="lɒx"), ParserErrorType.MISSING_DELIMITERS, Location("lɒx", 0, 3),
        )
        assert issue.message == "Missing '[]' or '//' delimiters."

    def test_every_parser_error_has_a_message(self):
        for error_type in ParserErrorType:
            issue = PronunciationNormalizationIssue(_wp(), error_type, Location("a", 0, 1))
            assert issue.message

    def test_invalid_grapheme_issue(self):
        issue = InvalidGraphemeInWordIssue(_wp("Naïve"), "naïve", "ï")
        assert issue.language == "en"
        assert issue.message == "Invalid grapheme in word."
        assert issue.cells()["Invalid character"] == "'ï'"

    def test_missing_lookup_is_severe(self):
        issue = MissingLanguageLookupIssue("zz", record_count=4)
        assert issue.severity is IssueSeverity.HIGH
        assert issue.cells() == {"Records": "4"}


class TestIssueLog:
    def test_groups_by_language(self):
        log = IssueLog()
        log.log(_unsupported("en"))
        log.log(MissingLanguageLookupIssue("zz"))
        log.log(_unsupported("de"))
        log.log(_unsupported("en"))

        assert len(log) == 4
        assert log.languages() == ["de", "en", "zz"]
        assert log.issues("en") == [_unsupported("en"), _unsupported("en")]
        assert log.issues("fr") == []
        assert log.issues()[0] == _unsupported("en")

    def test_counts(self):
        log = IssueLog()
        log.log(_unsupported())
        log.log(_unsupported())
        log.log(InvalidGraphemeInWordIssue(_wp("Naïve"), "naïve", "ï"))
        assert log.counts() == {"en": {
            "IPA segment not supported in target language.": 2,
            "Invalid grapheme in word.": 1,
        }}

    def test_severity(self):
        log = IssueLog()
        log.log(_unsupported())
        assert not log.has_severe_issues()
        log.log(MissingLanguageLookupIssue("zz"))
        assert log.has_severe_issues()

    def test_to_dict_is_json_safe(self):
        log = IssueLog()
        log.log(MissingLanguageLookupIssue("zz", record_count=2))
        data = json.loads(json.dumps(log.to_dict()))
        assert data == {"zz": [{
            "message": "Missing language lookup for language.",
            "severity": "high",
            "cells": {"Records": "2"},
        }]}

    def test_logs_each_issue(self, caplog):
        log = IssueLog()
        with caplog.at_level(logging.DEBUG, logger="phonolex.issues"):
            log.log(_unsupported())
        assert "IPA segment not supported" in caplog.text


class TestReport:
    def test_into_log(self):
        log = IssueLog()
        report(log, _unsupported())
        assert len(log) == 1

    def test_without_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="phonolex.issues"):
            report(None, _unsupported())
        assert "[en]" in caplog.text
