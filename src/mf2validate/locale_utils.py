"""Locale tag handling for CLDR lookups.

Command-line locales arrive as BCP-47 tags ("pt-BR"), while Babel expects
POSIX identifiers ("pt_BR"). Every lookup goes through canonical_locale()
first so that "pt-BR" and "pt_BR" share one cache entry.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonical_locale",
    "load_locale",
]


def canonical_locale(tag: str) -> str:
    """Return the POSIX spelling of a locale tag.

    Example:
        >>> canonical_locale(" sr-Latn-RS ")
        'sr_Latn_RS'
    """
    return tag.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def _parse(identifier: str) -> Locale:
    from babel import Locale  # noqa: PLC0415 - CLDR data is loaded on first use

    return Locale.parse(identifier)


def load_locale(tag: str) -> Locale:
    """Parse a locale tag into a cached Babel Locale.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the tag is not a well-formed identifier
    """
    return _parse(canonical_locale(tag))
