"""IPA letters: every consonant and vowel symbol the parser accepts."""

# An IPA letter is a single NFC code point from IPA_LETTERS
IpaLetter = str

CONSONANTS: tuple[IpaLetter, ...] = (
    # Pulmonic consonants
    "p", "b", "t", "d", "ʈ", "ɖ", "c", "ɟ", "k", "ɡ", "q", "ɢ", "ʔ",  # plosives
    "m", "ɱ", "n", "ɳ", "ɲ", "ŋ", "ɴ",  # nasals
    "ʙ", "r", "ʀ",  # trills
    "ⱱ", "ɾ", "ɽ",  # taps/flaps
    "ɸ", "β", "f", "v", "θ", "ð", "s", "z", "ʃ", "ʒ", "ʂ", "ʐ",
    "ç", "ʝ", "x", "ɣ", "χ", "ʁ", "ħ", "ʕ", "h", "ɦ",  # fricatives
    "ɬ", "ɮ",  # lateral fricatives
    "ʋ", "ɹ", "ɻ", "j", "ɰ",  # approximants
    "l", "ɭ", "ʎ", "ʟ",  # lateral approximants

    # Non-pulmonic consonants
    "ʘ", "ǀ", "ǃ", "ǂ", "ǁ",  # clicks
    "ɓ", "ɗ", "ʄ", "ɠ", "ʛ",  # voiced implosives
    "ʼ",  # ejective

    # Other consonants
    "ʍ", "w", "ɥ", "ʜ", "ʢ", "ʡ", "ɕ", "ʑ", "ɺ", "ɧ",
)

VOWELS: tuple[IpaLetter, ...] = (
    "i", "y", "ɨ", "ʉ", "ɯ", "u", "ɪ", "ʏ", "ʊ",  # close
    "e", "ø", "ɘ", "ɵ", "ɤ", "o", "ə",  # close-mid
    "ɛ", "œ", "ɜ", "ɞ", "ʌ", "ɔ", "æ", "ɐ",  # open-mid
    "a", "ɶ", "ɑ", "ɒ",  # open
)

IPA_LETTERS: tuple[IpaLetter, ...] = CONSONANTS + VOWELS

_IPA_LETTER_SET = frozenset(IPA_LETTERS)


def is_ipa_letter(value: str) -> bool:
    """Check if *value* is exactly one known IPA letter."""
    return value in _IPA_LETTER_SET
