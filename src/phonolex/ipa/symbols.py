"""IPA diacritics, suprasegmentals and the spelling table the lexer works from.

Each symbol may be spelled several ways in the wild: as a combining mark, as
a spacing modifier letter, or with an ASCII stand-in. All spellings are
collected into a single token map built once at import time.
"""

from dataclasses import dataclass
from enum import Enum

from phonolex.ipa.letters import IPA_LETTERS, IpaLetter


class Diacritic(Enum):
    """An IPA diacritic, attached to the letter before it."""
    VOICELESS = "voiceless"
    VOICED = "voiced"
    ASPIRATED = "aspirated"
    MORE_ROUNDED = "more_rounded"
    LESS_ROUNDED = "less_rounded"
    ADVANCED = "advanced"
    RETRACTED = "retracted"
    CENTRALIZED = "centralized"
    MID_CENTRALIZED = "mid_centralized"
    SYLLABIC = "syllabic"
    NON_SYLLABIC = "non_syllabic"
    RHOTICITY = "rhoticity"
    BREATHY_VOICED = "breathy_voiced"
    CREAKY_VOICED = "creaky_voiced"
    LINGUOLABIAL = "linguolabial"
    LABIALIZED = "labialized"
    PALATALIZED = "palatalized"
    VELARIZED = "velarized"
    PHARYNGEALIZED = "pharyngealized"
    VELARIZED_OR_PHARYNGEALIZED = "velarized_or_pharyngealized"
    RAISED = "raised"
    LOWERED = "lowered"
    ADVANCED_TONGUE_ROOT = "advanced_tongue_root"
    RETRACTED_TONGUE_ROOT = "retracted_tongue_root"
    DENTAL = "dental"
    APICAL = "apical"
    LAMINAL = "laminal"
    NASALIZED = "nasalized"
    NASAL_RELEASE = "nasal_release"
    LATERAL_RELEASE = "lateral_release"
    NO_AUDIBLE_RELEASE = "no_audible_release"
    # Non-standard
    GLOTTALIZED = "glottalized"
    MID_CENTRAL_VOWEL_RELEASE = "mid_central_vowel_release"


class Suprasegmental(Enum):
    """An IPA suprasegmental, sitting between letters."""
    PRIMARY_STRESS = "primary_stress"
    SECONDARY_STRESS = "secondary_stress"
    LONG = "long"
    HALF_LONG = "half_long"
    EXTRA_SHORT = "extra_short"
    MINOR_GROUP = "minor_group"
    MAJOR_GROUP = "major_group"
    SYLLABLE_BREAK = "syllable_break"
    LINKING = "linking"
    EXTRA_HIGH = "extra_high"
    HIGH = "high"
    MID = "mid"
    LOW = "low"
    EXTRA_LOW = "extra_low"
    DOWNSTEP = "downstep"
    UPSTEP = "upstep"
    RISING = "rising"
    FALLING = "falling"
    HIGH_RISING = "high_rising"
    LOW_RISING = "low_rising"
    RISING_FALLING = "rising_falling"
    GLOBAL_RISE = "global_rise"
    GLOBAL_FALL = "global_fall"
    # Non-standard
    GEMINATION = "gemination"


class TokenType(Enum):
    LETTER = "letter"
    DIACRITIC = "diacritic"
    SUPRASEGMENTAL = "suprasegmental"


@dataclass(frozen=True)
class LocationlessToken:
    """A token value as stored in the token map, before it is placed in an input."""
    type: TokenType
    value: IpaLetter | Diacritic | Suprasegmental


DIACRITIC_SPELLINGS: dict[Diacritic, tuple[str, ...]] = {
    Diacritic.VOICELESS: ("\u0325", "\u030A", "˳"),
    Diacritic.VOICED: ("\u032C", "ˬ"),
    Diacritic.ASPIRATED: ("ʰ",),
    Diacritic.MORE_ROUNDED: ("\u0339",),
    Diacritic.LESS_ROUNDED: ("\u031C",),
    Diacritic.ADVANCED: ("\u031F", "˖"),
    Diacritic.RETRACTED: ("\u0320", "ˍ"),
    Diacritic.CENTRALIZED: ("\u0308",),
    Diacritic.MID_CENTRALIZED: ("\u033D", "˟"),
    Diacritic.SYLLABIC: ("\u0329", "\u030D"),
    Diacritic.NON_SYLLABIC: ("\u032F", "\u0311"),
    Diacritic.RHOTICITY: ("\u02DE",),
    Diacritic.BREATHY_VOICED: ("\u0324", "ʱ"),
    Diacritic.CREAKY_VOICED: ("\u0330", "˷"),
    Diacritic.LINGUOLABIAL: ("\u033C",),
    Diacritic.LABIALIZED: ("ʷ",),
    Diacritic.PALATALIZED: ("ʲ",),
    Diacritic.VELARIZED: ("ˠ",),
    Diacritic.PHARYNGEALIZED: ("ˤ",),
    Diacritic.VELARIZED_OR_PHARYNGEALIZED: ("\u0334",),
    Diacritic.RAISED: ("\u031D", "˔"),
    Diacritic.LOWERED: ("\u031E", "˕"),
    Diacritic.ADVANCED_TONGUE_ROOT: ("\u0318",),
    Diacritic.RETRACTED_TONGUE_ROOT: ("\u0319",),
    Diacritic.DENTAL: ("\u032A",),
    Diacritic.APICAL: ("\u033A", "˽"),
    Diacritic.LAMINAL: ("\u033B",),
    Diacritic.NASALIZED: ("\u0303",),
    Diacritic.NASAL_RELEASE: ("ⁿ",),
    Diacritic.LATERAL_RELEASE: ("ˡ",),
    Diacritic.NO_AUDIBLE_RELEASE: ("\u031A", "˺"),
    Diacritic.GLOTTALIZED: ("ˀ",),
    Diacritic.MID_CENTRAL_VOWEL_RELEASE: ("ᵊ",),
}

# Pitch marks are a stub: only the common levels and contours are covered
SUPRASEGMENTAL_SPELLINGS: dict[Suprasegmental, tuple[str, ...]] = {
    Suprasegmental.PRIMARY_STRESS: ("ˈ", "'", "’"),
    Suprasegmental.SECONDARY_STRESS: ("ˌ", ","),
    Suprasegmental.LONG: ("ː", ":"),
    Suprasegmental.HALF_LONG: ("ˑ",),
    Suprasegmental.EXTRA_SHORT: ("\u0306",),
    Suprasegmental.MINOR_GROUP: ("|",),
    Suprasegmental.MAJOR_GROUP: ("‖",),
    Suprasegmental.SYLLABLE_BREAK: (".",),
    Suprasegmental.LINKING: ("\u035C", "\u0361", "‿"),
    Suprasegmental.EXTRA_HIGH: ("\u030B", "˥"),
    Suprasegmental.HIGH: ("\u0301", "˦"),
    Suprasegmental.MID: ("\u0304", "˧"),
    Suprasegmental.LOW: ("\u0300", "˨"),
    Suprasegmental.EXTRA_LOW: ("\u030F", "˩"),
    Suprasegmental.DOWNSTEP: ("ꜜ",),
    Suprasegmental.UPSTEP: ("ꜛ",),
    Suprasegmental.RISING: ("\u030C", "˩˥"),
    Suprasegmental.FALLING: ("\u0302", "˥˩"),
    Suprasegmental.HIGH_RISING: ("\u1DC4", "˧˥"),
    Suprasegmental.LOW_RISING: ("\u1DC5", "˩˧"),
    Suprasegmental.RISING_FALLING: ("\u1DC8", "˧˦˨"),
    Suprasegmental.GLOBAL_RISE: ("↗",),
    Suprasegmental.GLOBAL_FALL: ("↘",),
    Suprasegmental.GEMINATION: ("ˣ",),
}

# Look-alike characters commonly used in place of an IPA letter
LETTER_ALIASES: dict[str, IpaLetter] = {
    "\u01DD": "ə",  # Latin small letter turned e
    "g": "ɡ",        # ASCII g for script g
}

# Affricate ligatures, split into two letters joined by a tie bar
LIGATURES: dict[str, tuple[IpaLetter, IpaLetter]] = {
    "ʣ": ("d", "z"),
    "ʤ": ("d", "ʒ"),
    "ʥ": ("d", "ʑ"),
    "ʦ": ("t", "s"),
    "ʧ": ("t", "ʃ"),
    "ʨ": ("t", "ɕ"),
}

# Spellings that produce no tokens at all
IGNORED_SPELLINGS: tuple[str, ...] = (
    "\u200C",  # zero width non-joiner
)


def _letter(value: IpaLetter) -> LocationlessToken:
    return LocationlessToken(TokenType.LETTER, value)


def _build_token_map() -> dict[str, tuple[LocationlessToken, ...]]:
    """Collect every known spelling into one map; spellings must be unique."""
    entries: list[tuple[str, tuple[LocationlessToken, ...]]] = []

    entries.extend((letter, (_letter(letter),)) for letter in IPA_LETTERS)
    entries.extend((alias, (_letter(letter),)) for alias, letter in LETTER_ALIASES.items())

    for diacritic, spellings in DIACRITIC_SPELLINGS.items():
        token = LocationlessToken(TokenType.DIACRITIC, diacritic)
        entries.extend((spelling, (token,)) for spelling in spellings)

    for suprasegmental, spellings in SUPRASEGMENTAL_SPELLINGS.items():
        token = LocationlessToken(TokenType.SUPRASEGMENTAL, suprasegmental)
        entries.extend((spelling, (token,)) for spelling in spellings)

    linking = LocationlessToken(TokenType.SUPRASEGMENTAL, Suprasegmental.LINKING)
    for ligature, (first, second) in LIGATURES.items():
        entries.append((ligature, (_letter(first), linking, _letter(second))))

    entries.extend((spelling, ()) for spelling in IGNORED_SPELLINGS)

    token_map: dict[str, tuple[LocationlessToken, ...]] = {}
    for spelling, tokens in entries:
        if spelling in token_map:
            raise ValueError(f"Duplicate IPA spelling: {spelling!r}")
        token_map[spelling] = tokens
    return token_map


TOKEN_MAP = _build_token_map()

MAX_SPELLING_LENGTH = max(len(spelling) for spelling in TOKEN_MAP)
