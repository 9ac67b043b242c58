"""Greedy, ordered-rule sequence rewriting.

One algorithm serves two purposes: rewriting the code points of a word into
graphemes, and rewriting parsed IPA segments into phonemes. Only the test of
a single input element against a single pattern element differs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Sequence, TypeVar

from phonolex.ipa.segments import IpaSegment
from phonolex.normalize.matcher import IpaSegmentMatcher, matches

T = TypeVar("T")  # input element
P = TypeVar("P")  # pattern element
S = TypeVar("S")  # output symbol


class Exclude(Enum):
    """Rule result meaning: silently drop the whole input."""
    EXCLUDE = "exclude"


EXCLUDE = Exclude.EXCLUDE


@dataclass(frozen=True)
class Rule(Generic[P, S]):
    """Replace a sequence matching *pattern* by *result*, or exclude the input.

    Non-string patterns and results are stored as tuples, so rules are
    hashable whenever their pattern elements are.
    """
    pattern: Sequence[P]
    result: tuple[S, ...] | Exclude

    def __post_init__(self):
        if len(self.pattern) == 0:
            raise ValueError("Rule pattern must not be empty")
        if not isinstance(self.pattern, (str, tuple)):
            object.__setattr__(self, "pattern", tuple(self.pattern))
        if self.result is not EXCLUDE:
            object.__setattr__(self, "result", tuple(self.result))


@dataclass(frozen=True)
class RewriteResult(Generic[S]):
    """Outcome of rewriting one input sequence.

    Exactly one of these holds: ``symbols`` is set (success), ``excluded`` is
    True (a rule excluded the input), or ``unmatched_index`` is set (no rule
    matched there).
    """
    symbols: tuple[S, ...] | None = None
    excluded: bool = False
    unmatched_index: int | None = None

    @property
    def ok(self) -> bool:
        return self.symbols is not None


def rewrite(
    items: Sequence[T],
    rules: Sequence[Rule[P, S]],
    element_matches: Callable[[T, P], bool],
) -> RewriteResult[S]:
    """Rewrite *items* left to right using the first matching rule at each position.

    Rules are tried in declaration order, not by pattern length. Rewriting is
    all or nothing: an exclusion or a position no rule matches discards the
    whole input.
    """
    symbols: list[S] = []
    index = 0
    while index < len(items):
        rule = _first_match(items, index, rules, element_matches)
        if rule is None:
            return RewriteResult(unmatched_index=index)
        if rule.result is EXCLUDE:
            return RewriteResult(excluded=True)
        symbols.extend(rule.result)
        index += len(rule.pattern)
    return RewriteResult(symbols=tuple(symbols))


def _first_match(
    items: Sequence[T],
    index: int,
    rules: Sequence[Rule[P, S]],
    element_matches: Callable[[T, P], bool],
) -> Rule[P, S] | None:
    for rule in rules:
        end = index + len(rule.pattern)
        if end > len(items):
            continue
        if all(
            element_matches(item, pattern_element)
            for item, pattern_element in zip(items[index:end], rule.pattern)
        ):
            return rule
    return None


def _same_code_point(item: str, pattern_element: str) -> bool:
    return item == pattern_element


def rewrite_graphemes(word: str, rules: Sequence[Rule[str, str]]) -> RewriteResult[str]:
    """Rewrite the code points of *word* into graphemes."""
    return rewrite(word, rules, _same_code_point)


def rewrite_segments(
    segments: Sequence[IpaSegment],
    rules: Sequence[Rule[IpaSegmentMatcher, str]],
) -> RewriteResult[str]:
    """Rewrite parsed IPA segments into phonemes."""
    return rewrite(segments, rules, matches)
