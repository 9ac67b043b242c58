"""Declarative predicates over IPA segments."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

from phonolex.ipa.letters import IpaLetter, is_ipa_letter
from phonolex.ipa.segments import IpaSegment
from phonolex.ipa.symbols import Diacritic, Suprasegmental

SymbolFlags = tuple[tuple[Enum, bool], ...]


@dataclass(frozen=True)
class IpaSegmentMatcher:
    """Matches segments with a given letter and, optionally, given symbols.

    Each flag set lists symbols whose presence (True) or absence (False) is
    required. Symbols not listed are ignored. Flags may be passed as a
    mapping and are stored as ``(symbol, required)`` pairs sorted by symbol
    name, so matchers stay hashable and compare equal regardless of the
    order the flags were given in.
    """
    letter: IpaLetter
    diacritics: SymbolFlags = ()
    left: SymbolFlags = ()
    right: SymbolFlags = ()

    def __post_init__(self):
        for name in ("diacritics", "left", "right"):
            object.__setattr__(self, name, _freeze_flags(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Mapping) -> "IpaSegmentMatcher":
        """Build a matcher from its data-file form.

        Example: ``{"letter": "ɛ", "diacritics": {"nasalized": True}}``.

        Raises:
            ValueError: On unknown keys, letters or symbol names.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Expected a mapping, got {data!r}")
        unknown = set(data) - {"letter", "diacritics", "left", "right"}
        if unknown:
            raise ValueError(f"Unknown matcher keys: {sorted(unknown)}")

        letter = data.get("letter")
        if not isinstance(letter, str) or not is_ipa_letter(letter):
            raise ValueError(f"Not an IPA letter: {letter!r}")

        return cls(
            letter=letter,
            diacritics=_symbol_flags(Diacritic, data.get("diacritics")),
            left=_symbol_flags(Suprasegmental, data.get("left")),
            right=_symbol_flags(Suprasegmental, data.get("right")),
        )


def _freeze_flags(flags: Mapping | Iterable[tuple[Enum, bool]]) -> SymbolFlags:
    items = flags.items() if isinstance(flags, Mapping) else flags
    return tuple(sorted(items, key=lambda item: item[0].value))


def _symbol_flags(enum_type: type[Enum], flags: Mapping | None) -> dict:
    if not flags:
        return {}
    if not isinstance(flags, Mapping):
        raise ValueError(f"Expected a mapping of symbol flags, got {flags!r}")
    result = {}
    for name, required in flags.items():
        try:
            symbol = enum_type(name)
        except ValueError:
            raise ValueError(f"Unknown {enum_type.__name__.lower()}: {name!r}") from None
        if not isinstance(required, bool):
            raise ValueError(f"Expected true or false for {name!r}, got {required!r}")
        result[symbol] = required
    return result


def _flags_match(flags: SymbolFlags, present: Mapping) -> bool:
    return all((symbol in present) == required for symbol, required in flags)


def matches(segment: IpaSegment, matcher: IpaSegmentMatcher) -> bool:
    """Check if *segment* satisfies *matcher*."""
    return (
        segment.letter == matcher.letter
        and _flags_match(matcher.diacritics, segment.diacritics)
        and _flags_match(matcher.left, segment.left)
        and _flags_match(matcher.right, segment.right)
    )
