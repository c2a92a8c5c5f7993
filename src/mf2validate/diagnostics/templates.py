"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from mf2validate.constants import KEY_SEPARATOR, WILDCARD
from mf2validate.enums import MessageRole, Severity

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps wording in one place and makes every message testable.
    """

    # ------------------------------------------------------------------
    # Exhaustiveness
    # ------------------------------------------------------------------

    @staticmethod
    def no_match_construct(role: MessageRole, locale: str) -> Diagnostic:
        """Message has no selectors, so exhaustiveness holds trivially.

        Args:
            role: Source or target message
            locale: Locale of the message

        Returns:
            Informational Diagnostic for NO_MATCH_CONSTRUCT
        """
        msg = (
            f"{role.capitalize()} message is not made up of a .match construct. "
            "Trivially correct."
        )
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH_CONSTRUCT,
            message=msg,
            severity=Severity.INFO,
            locale=locale,
            role=role,
        )

    @staticmethod
    def non_plural_selectors(
        selectors: tuple[str, ...], role: MessageRole, locale: str
    ) -> Diagnostic:
        """One or more selectors lack a plural annotation.

        Args:
            selectors: Offending selector names (without $)
            role: Source or target message
            locale: Locale of the message

        Returns:
            Diagnostic for NON_PLURAL_SELECTORS
        """
        names = ", ".join(f"${name}" for name in selectors)
        msg = f"Message uses non-plural selectors ({names}). Can't check exhaustiveness."
        return Diagnostic(
            code=DiagnosticCode.NON_PLURAL_SELECTORS,
            message=msg,
            locale=locale,
            role=role,
            hint="Annotate each selector with :number or :integer",
        )

    @staticmethod
    def partial_wildcard(
        keys: str, role: MessageRole | None = None, locale: str | None = None
    ) -> Diagnostic:
        """Variant mixes catch-all and literal keys.

        Args:
            keys: Rendered key set of the offending variant
            role: Source or target message
            locale: Locale of the message

        Returns:
            Diagnostic for PARTIAL_WILDCARD
        """
        msg = (
            f"Partial wildcard variant «{keys}» is present; not all permutations "
            "of categories are explicitly enumerated."
        )
        return Diagnostic(
            code=DiagnosticCode.PARTIAL_WILDCARD,
            message=msg,
            locale=locale,
            role=role,
            key=keys,
            hint=f"Spell out every category combination instead of mixing '{WILDCARD}' with keys",
        )

    @staticmethod
    def permutation_count_mismatch(actual: int, expected: int) -> Diagnostic:
        """Permutation generator produced the wrong number of combinations.

        Args:
            actual: Number of permutations generated
            expected: Number of permutations required

        Returns:
            Diagnostic for PERMUTATION_COUNT_MISMATCH
        """
        msg = (
            "Error calculating permutations of plural categories (this is a bug). "
            f"Actual size: {actual}. Expected size: {expected}."
        )
        return Diagnostic(code=DiagnosticCode.PERMUTATION_COUNT_MISMATCH, message=msg)

    @staticmethod
    def variant_count_mismatch(
        actual: int, expected: int, role: MessageRole | None, locale: str | None
    ) -> Diagnostic:
        """Message has too many or too few variants.

        Args:
            actual: Number of variants present
            expected: Number of variants required, including the catch-all
            role: Source or target message
            locale: Locale of the message

        Returns:
            Diagnostic for VARIANT_COUNT_MISMATCH
        """
        msg = (
            f"Incorrect number of variants; there are {actual} and should be "
            f"{expected} including the wildcard variant."
        )
        return Diagnostic(
            code=DiagnosticCode.VARIANT_COUNT_MISMATCH,
            message=msg,
            locale=locale,
            role=role,
        )

    @staticmethod
    def variant_key_count_mismatch(
        keys: str, key_count: int, selector_count: int
    ) -> Diagnostic:
        """Variant has a different number of keys than there are selectors.

        Args:
            keys: Rendered key set of the variant
            key_count: Number of keys on the variant
            selector_count: Number of selectors on the message

        Returns:
            Warning Diagnostic for VARIANT_KEY_COUNT_MISMATCH
        """
        msg = (
            f"Variant «{keys}» has {key_count} key(s) but there are "
            f"{selector_count} selector(s); ignoring it"
        )
        return Diagnostic(
            code=DiagnosticCode.VARIANT_KEY_COUNT_MISMATCH,
            message=msg,
            severity=Severity.WARNING,
            key=keys,
        )

    @staticmethod
    def variant_omitted(permutation: tuple[str, ...]) -> Diagnostic:
        """No variant covers a plural-category combination.

        Args:
            permutation: The uncovered combination

        Returns:
            Diagnostic for VARIANT_OMITTED
        """
        rendered = KEY_SEPARATOR.join(permutation)
        return Diagnostic(
            code=DiagnosticCode.VARIANT_OMITTED,
            message=f"Omitted variant: {rendered}",
            permutation=permutation,
            hint=f"Add a variant with keys '{rendered}'",
        )

    @staticmethod
    def invalid_plural_category(
        key: str, locale: str, categories: tuple[str, ...], role: MessageRole | None
    ) -> Diagnostic:
        """Variant key is not a plural category of the locale.

        Args:
            key: Offending key text
            locale: Locale of the message
            categories: Valid categories for the locale
            role: Source or target message

        Returns:
            Diagnostic for INVALID_PLURAL_CATEGORY
        """
        msg = f"Key {key} is not a valid plural category for locale {locale}."
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURAL_CATEGORY,
            message=msg,
            locale=locale,
            role=role,
            key=key,
            hint=f"Valid categories: {', '.join(categories)}",
        )

    # ------------------------------------------------------------------
    # Placeholders
    # ------------------------------------------------------------------

    @staticmethod
    def placeholder_inconsistent_in_source(name: str, keys: str) -> Diagnostic:
        """Later source variant uses a placeholder the first variant lacks.

        Args:
            name: Placeholder variable name (without $)
            keys: Rendered key set of the variant using it

        Returns:
            Warning Diagnostic for PLACEHOLDER_INCONSISTENT_IN_SOURCE
        """
        msg = (
            "Not all variants in source message contain the same set of placeholders. "
            f"The placeholder ${name} does not appear in every variant."
        )
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_INCONSISTENT_IN_SOURCE,
            message=msg,
            severity=Severity.WARNING,
            role=MessageRole.SOURCE,
            key=keys,
            placeholder=name,
        )

    @staticmethod
    def placeholder_missing(name: str, keys: str) -> Diagnostic:
        """Target variant omits a placeholder used by the source message.

        Args:
            name: Placeholder variable name (without $)
            keys: Rendered key set of the target variant

        Returns:
            Diagnostic for PLACEHOLDER_MISSING
        """
        msg = f"In target message, variant with keys «{keys}» omits placeholder: ${name}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MISSING,
            message=msg,
            role=MessageRole.TARGET,
            key=keys,
            placeholder=name,
            hint=f"Reference {{${name}}} in the translated variant",
        )

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    @staticmethod
    def message_unreadable(path: str, reason: str) -> Diagnostic:
        """Message file could not be read.

        Args:
            path: File path
            reason: Underlying OS error text

        Returns:
            Diagnostic for MESSAGE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_UNREADABLE,
            message=f"Error reading from file {path}: {reason}",
        )

    @staticmethod
    def message_parse_failed(where: str, reason: str) -> Diagnostic:
        """Message text is not a valid MF2 JSON data model.

        Args:
            where: File path or a short description of the input
            reason: What is wrong with the input

        Returns:
            Diagnostic for MESSAGE_PARSE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_PARSE_FAILED,
            message=f"Couldn't parse message {where}: {reason}",
        )

    @staticmethod
    def locale_unknown(locale: str) -> Diagnostic:
        """No CLDR plural rules are available for a locale.

        Args:
            locale: The requested locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Error getting plural rules for locale {locale}",
            locale=locale,
            hint="Use a BCP-47 tag known to CLDR, e.g. 'en', 'pl', 'ar-EG'",
        )

    # ------------------------------------------------------------------
    # Data model
    # ------------------------------------------------------------------

    @staticmethod
    def data_model_key_count() -> Diagnostic:
        """Variant key count differs from selector count."""
        return Diagnostic(
            code=DiagnosticCode.DATA_MODEL_KEY_COUNT,
            message=(
                "Data model error: One or more variants has a different number "
                "of keys from the number of selectors."
            ),
        )

    @staticmethod
    def data_model_missing_fallback() -> Diagnostic:
        """No variant consists solely of catch-all keys."""
        return Diagnostic(
            code=DiagnosticCode.DATA_MODEL_MISSING_FALLBACK,
            message=f"Data model error: Missing '{WILDCARD}' variant.",
        )

    @staticmethod
    def data_model_missing_selector_annotation(name: str) -> Diagnostic:
        """Selector variable is bound to an unannotated expression.

        Args:
            name: Selector variable name (without $)
        """
        return Diagnostic(
            code=DiagnosticCode.DATA_MODEL_MISSING_SELECTOR_ANNOTATION,
            message=(
                "Data model error: A selector variable refers to an expression "
                f"with no annotation (${name})."
            ),
        )
