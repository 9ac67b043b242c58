"""Unicode decomposition of IPA strings."""

import unicodedata

# Letters whose modifier is not separated by canonical decomposition
_MANUAL_DECOMPOSITIONS = {
    "\u025A": "\u0259\u02DE",  # ɚ -> ə + rhoticity
    "\u025D": "\u025C\u02DE",  # ɝ -> ɜ + rhoticity
    "\u026B": "l\u0334",        # ɫ -> l + velarization
}


def decompose_ipa_string(s: str) -> str:
    """Return *s* with every IPA letter, diacritic and suprasegmental as its own code point.

    Canonical decomposition separates most combining marks from their base
    letters. It also splits ``ç``, which is a letter in its own right, so that
    one is composed again.
    """
    result = unicodedata.normalize("NFD", s)
    result = result.replace("c\u0327", "\u00E7")
    for letter, decomposed in _MANUAL_DECOMPOSITIONS.items():
        result = result.replace(letter, decomposed)
    return result
