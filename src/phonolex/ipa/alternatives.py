"""Expand optional parts of an IPA string."""

import re

# (...) and superscript ⁽...⁾, non-greedy so that several spans stay separate
_OPTIONAL_RE = re.compile(r"\((.*?)\)|⁽(.*?)⁾")


def _keep_content(match: re.Match) -> str:
    if match.group(1) is not None:
        return match.group(1)
    return match.group(2)


def get_alternatives(s: str) -> list[str]:
    """Split a string with optional parts into its minimal and maximal readings.

    "ˈbaf(ə)lmənt" becomes ["ˈbaflmənt", "ˈbafəlmənt"]. A string without
    optional parts is returned as the only alternative.
    """
    minimal = _OPTIONAL_RE.sub("", s)
    maximal = _OPTIONAL_RE.sub(_keep_content, s)
    if minimal == maximal:
        return [minimal]
    return [minimal, maximal]
