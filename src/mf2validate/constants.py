"""Shared constants for mf2validate.

Centralizes the literal values that the data model, the checks and the
command-line front end must agree on. Placing them here avoids circular
imports between the datamodel and checks packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Plural categories
    "CLDR_PLURAL_CATEGORIES",
    "OTHER_CATEGORY",
    # Data model
    "WILDCARD",
    "PLURAL_FUNCTIONS",
    # Rendering
    "KEY_SEPARATOR",
    "MAX_RENDERED_LENGTH",
]

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# Canonical CLDR ordering. Babel reports plural tags as an unordered set;
# sorting against this tuple keeps permutation order (and therefore
# diagnostic order) stable across interpreter runs.
CLDR_PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Every CLDR locale defines "other"; an all-"other" variant may be omitted
# when the message supplies a catch-all variant.
OTHER_CATEGORY: str = "other"

# ============================================================================
# DATA MODEL
# ============================================================================

# Source-syntax spelling of the catch-all key.
WILDCARD: str = "*"

# MF2 default-registry functions whose selection is plural-category based.
PLURAL_FUNCTIONS: frozenset[str] = frozenset({"number", "integer"})

# ============================================================================
# RENDERING
# ============================================================================

KEY_SEPARATOR: str = " "

# Diagnostic text longer than this is truncated when sanitizing output.
MAX_RENDERED_LENGTH: int = 100
