"""CLDR plural categories using Babel.

Supplies, for a locale, the set of plural-category labels its cardinal plural
rules can produce. The checks consume this through the small
PluralCategoryProvider protocol so tests can substitute fixed tables.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging
from typing import Protocol

from babel.core import UnknownLocaleError

from mf2validate.constants import CLDR_PLURAL_CATEGORIES, OTHER_CATEGORY
from mf2validate.diagnostics import ErrorTemplate, LocaleDataError
from mf2validate.locale_utils import load_locale

__all__ = [
    "BabelPluralCategories",
    "PluralCategoryProvider",
    "StaticPluralCategories",
    "get_plural_categories",
    "order_categories",
]

logger = logging.getLogger(__name__)


class PluralCategoryProvider(Protocol):
    """Protocol for plural-rule lookups.

    This is a Protocol (structural typing) rather than ABC so callers can plug
    in their own CLDR source without inheriting from anything.
    """

    def categories_for(self, locale: str) -> tuple[str, ...]:
        """Return the plural categories of `locale` in CLDR order.

        Raises:
            LocaleDataError: If no plural rules are known for the locale
        """
        ...


def order_categories(categories: set[str] | frozenset[str]) -> tuple[str, ...]:
    """Sort category labels into canonical CLDR order.

    Labels outside the CLDR set sort last, alphabetically.

    Example:
        >>> order_categories({"other", "few", "one"})
        ('one', 'few', 'other')
    """
    rank = {name: index for index, name in enumerate(CLDR_PLURAL_CATEGORIES)}
    return tuple(sorted(categories, key=lambda c: (rank.get(c, len(rank)), c)))


def get_plural_categories(locale: str) -> tuple[str, ...]:
    """Return the cardinal plural categories of a locale using Babel's CLDR data.

    Args:
        locale: Locale code (e.g., "en", "pl_PL", "ar-SA")

    Returns:
        Categories in CLDR order; always includes "other"

    Raises:
        LocaleDataError: If the locale is malformed or unknown to CLDR

    Examples:
        >>> get_plural_categories("en")
        ('one', 'other')
        >>> get_plural_categories("pl")
        ('one', 'few', 'many', 'other')
        >>> get_plural_categories("ja")
        ('other',)
    """
    try:
        locale_obj = load_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("Plural rules lookup failed for %r: %s", locale, e)
        raise LocaleDataError(ErrorTemplate.locale_unknown(locale), locale_code=locale) from e

    # PluralRule.tags omits the implicit "other" rule
    categories = order_categories(frozenset(locale_obj.plural_form.tags) | {OTHER_CATEGORY})
    logger.debug("Plural categories for %s: %s", locale, categories)
    return categories


class BabelPluralCategories:
    """Default PluralCategoryProvider backed by Babel."""

    __slots__ = ()

    def categories_for(self, locale: str) -> tuple[str, ...]:
        return get_plural_categories(locale)


class StaticPluralCategories:
    """PluralCategoryProvider backed by a fixed locale -> categories table.

    Useful for tests and for pinning a CLDR snapshot independent of the
    installed Babel version.

    Example:
        >>> provider = StaticPluralCategories({"en": {"one", "other"}})
        >>> provider.categories_for("en")
        ('one', 'other')
    """

    __slots__ = ("_table",)

    def __init__(self, table: dict[str, set[str] | frozenset[str] | tuple[str, ...]]) -> None:
        self._table = {
            key: order_categories(frozenset(value)) for key, value in table.items()
        }

    def categories_for(self, locale: str) -> tuple[str, ...]:
        try:
            return self._table[locale]
        except KeyError:
            raise LocaleDataError(
                ErrorTemplate.locale_unknown(locale), locale_code=locale
            ) from None
