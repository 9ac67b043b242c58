"""Core data types for phonolex."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A half-open code point range within an input string."""
    input: str
    start: int
    end: int     # exclusive

    @property
    def text(self) -> str:
        return self.input[self.start:self.end]


@dataclass(frozen=True)
class WordPronunciation:
    """A word with one pronunciation, raw from a source or normalized."""
    source_edition: str   # wiki edition the record came from, e.g. "en"
    language: str         # ISO 639-1 code of the word's language
    word: str
    pronunciation: str    # IPA string, or space-separated phonemes once normalized
