"""Per-language grapheme/phoneme inventories and rewrite rules, loaded from YAML."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from phonolex.ipa.letters import is_ipa_letter
from phonolex.normalize.matcher import IpaSegmentMatcher
from phonolex.normalize.rewriter import EXCLUDE, Rule

logger = logging.getLogger(__name__)

GraphemeRule = Rule[str, str]
PhonemeRule = Rule[IpaSegmentMatcher, str]


class LanguageLookupError(ValueError):
    """Language data is malformed or inconsistent."""


@dataclass(frozen=True)
class LanguageLookup:
    """Everything needed to normalize the words and pronunciations of one language."""
    language: str                              # ISO 639-1 code
    name: str                                  # English name
    graphemes: tuple[str, ...]                 # canonical spelling units, in collation-neutral order
    phonemes: tuple[str, ...]                  # canonical sound units
    grapheme_rules: tuple[GraphemeRule, ...]   # tried in order
    phoneme_rules: tuple[PhonemeRule, ...]     # tried in order


def load_language_lookup(path: Path) -> LanguageLookup:
    """Load and validate a language lookup file.

    The file stem must equal the ``language`` field, e.g. ``de.yaml``.

    Raises:
        LanguageLookupError: If the file is malformed or its rules produce
            symbols outside the declared inventories.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    try:
        lookup = parse_language_lookup(data)
    except LanguageLookupError as e:
        raise LanguageLookupError(f"{path}: {e}") from e

    if lookup.language != path.stem:
        raise LanguageLookupError(
            f"{path}: language {lookup.language!r} does not match file name"
        )
    logger.debug(
        f"Loaded {lookup.language} lookup: {len(lookup.grapheme_rules)} grapheme rules, "
        f"{len(lookup.phoneme_rules)} phoneme rules"
    )
    return lookup


def parse_language_lookup(data: Any) -> LanguageLookup:
    """Build a LanguageLookup from parsed YAML data."""
    if not isinstance(data, dict):
        raise LanguageLookupError("Expected a mapping at the top level")
    for key in ("language", "name", "graphemes", "phonemes", "grapheme_rules", "phoneme_rules"):
        if key not in data:
            raise LanguageLookupError(f"Missing field {key!r}")

    graphemes = _inventory(data["graphemes"], "grapheme")
    phonemes = _inventory(data["phonemes"], "phoneme")

    return LanguageLookup(
        language=str(data["language"]),
        name=str(data["name"]),
        graphemes=graphemes,
        phonemes=phonemes,
        grapheme_rules=tuple(_grapheme_rules(data["grapheme_rules"], graphemes)),
        phoneme_rules=tuple(_phoneme_rules(data["phoneme_rules"], phonemes)),
    )


def _inventory(values: Any, kind: str) -> tuple[str, ...]:
    if not isinstance(values, list) or not values:
        raise LanguageLookupError(f"Expected a non-empty list of {kind}s")
    inventory = tuple(str(v) for v in values)
    duplicates = sorted({v for v in inventory if inventory.count(v) > 1})
    if duplicates:
        raise LanguageLookupError(f"Duplicate {kind}s: {duplicates}")
    return inventory


def _rule_result(entry: dict, inventory: tuple[str, ...], kind: str):
    """The result of a rule entry: EXCLUDE or a tuple of inventory symbols."""
    if entry.get("exclude"):
        if "output" in entry:
            raise LanguageLookupError(f"Rule has both 'exclude' and 'output': {entry}")
        return EXCLUDE
    if "output" not in entry:
        raise LanguageLookupError(f"Rule needs 'output' or 'exclude': {entry}")

    output = entry["output"]
    if not isinstance(output, list):
        raise LanguageLookupError(f"Rule output must be a list: {entry}")
    result = tuple(str(symbol) for symbol in output)
    unknown = [symbol for symbol in result if symbol not in inventory]
    if unknown:
        raise LanguageLookupError(f"Rule outputs unknown {kind}s {unknown}: {entry}")
    return result


def _grapheme_rules(entries: Any, graphemes: tuple[str, ...]) -> list[GraphemeRule]:
    rules: list[GraphemeRule] = []
    for entry in _rule_entries(entries):
        if entry.get("identity"):
            rules.extend(Rule(g, (g,)) for g in graphemes)
            continue

        result = _rule_result(entry, graphemes, "grapheme")
        inputs = entry.get("input")
        if isinstance(inputs, str):
            inputs = [inputs]
        if not isinstance(inputs, list) or not inputs:
            raise LanguageLookupError(f"Grapheme rule input must be a string or list: {entry}")
        for text in inputs:
            if not isinstance(text, str) or not text:
                raise LanguageLookupError(f"Empty or non-string grapheme input: {entry}")
            rules.append(Rule(text, result))
    return rules


def _phoneme_rules(entries: Any, phonemes: tuple[str, ...]) -> list[PhonemeRule]:
    rules: list[PhonemeRule] = []
    for entry in _rule_entries(entries):
        if entry.get("identity"):
            # Only phonemes written as a single letter can match a single segment
            rules.extend(
                Rule((IpaSegmentMatcher(p),), (p,))
                for p in phonemes if is_ipa_letter(p)
            )
            continue

        result = _rule_result(entry, phonemes, "phoneme")
        pattern = entry.get("input")
        if not isinstance(pattern, list) or not pattern:
            raise LanguageLookupError(f"Phoneme rule input must be a list of matchers: {entry}")
        try:
            matchers = tuple(IpaSegmentMatcher.from_dict(m) for m in pattern)
        except (TypeError, ValueError) as e:
            raise LanguageLookupError(f"Invalid matcher in {entry}: {e}") from e
        rules.append(Rule(matchers, result))
    return rules


def _rule_entries(entries: Any) -> list[dict]:
    if not isinstance(entries, list):
        raise LanguageLookupError("Rules must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise LanguageLookupError(f"Rule must be a mapping: {entry!r}")
    return entries
