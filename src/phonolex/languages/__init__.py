"""Registry of language lookups.

Lookups are read from the YAML files bundled in ``data/``, plus any files in
the directories listed in ``PHONOLEX_LANGUAGE_PATH``. A file in a later
directory replaces a bundled file for the same language.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

from phonolex.languages.lookup import (
    GraphemeRule,
    LanguageLookup,
    LanguageLookupError,
    PhonemeRule,
    load_language_lookup,
    parse_language_lookup,
)

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

LANGUAGE_PATH_ENV = "PHONOLEX_LANGUAGE_PATH"


def language_dirs() -> list[Path]:
    """Directories searched for lookup files, lowest precedence first."""
    dirs = [DATA_DIR]
    extra = os.environ.get(LANGUAGE_PATH_ENV, "")
    dirs.extend(Path(p).expanduser() for p in extra.split(os.pathsep) if p)
    return dirs


@lru_cache(maxsize=None)
def _load_all(dirs: tuple[Path, ...]) -> dict[str, LanguageLookup]:
    lookups: dict[str, LanguageLookup] = {}
    for directory in dirs:
        if not directory.is_dir():
            logger.warning(f"Language lookup directory not found: {directory}")
            continue
        for path in sorted(directory.glob("*.yaml")):
            lookup = load_language_lookup(path)
            if lookup.language in lookups:
                logger.info(f"Overriding {lookup.language} lookup with {path}")
            lookups[lookup.language] = lookup
    return lookups


def _lookups() -> dict[str, LanguageLookup]:
    return _load_all(tuple(language_dirs()))


def get_language_lookup(language: str) -> LanguageLookup | None:
    """Return the lookup for *language*, or None if the language is unsupported."""
    return _lookups().get(language)


def available_languages() -> list[str]:
    return sorted(_lookups())


def clear_cache() -> None:
    """Forget loaded lookups, e.g. after changing PHONOLEX_LANGUAGE_PATH."""
    _load_all.cache_clear()


__all__ = [
    "DATA_DIR",
    "LANGUAGE_PATH_ENV",
    "GraphemeRule",
    "LanguageLookup",
    "LanguageLookupError",
    "PhonemeRule",
    "available_languages",
    "clear_cache",
    "get_language_lookup",
    "language_dirs",
    "load_language_lookup",
    "parse_language_lookup",
]
