"""mf2validate - plural exhaustiveness and placeholder checks for MessageFormat 2.

Validates a translated MF2 message against its source message:

- every message's variants cover each combination of its locale's CLDR
  plural categories exactly once, plus a catch-all variant;
- every variant of the translation keeps the source message's placeholders.

Public API:
    check_exhaustiveness - Plural coverage of one message
    check_placeholder_consistency - Placeholders of target against source
    validate_pair - Run all checks for a source/target pair
    load_message - Deserialize an MF2 JSON data model
    CheckResult - Verdict plus diagnostics of one check
    PairReport - Results of a pair, with exit status

Exceptions:
    MF2ValidateError - Base exception class
    CheckAbortedError - A check cannot be answered for a message
    DataModelError - Malformed selection structure
    MessageParseError / MessageLoadError - Unusable input

Submodules:
    mf2validate.datamodel - Data model nodes, JSON loading, well-formedness
    mf2validate.checks - Permutations, matcher, exhaustiveness, placeholders
    mf2validate.diagnostics - Diagnostic codes, templates and formatting
    mf2validate.plural_categories - CLDR plural categories via Babel
"""

from .checks import check_exhaustiveness, check_placeholder_consistency
from .datamodel import load_message, load_message_file
from .diagnostics import (
    CheckAbortedError,
    CheckResult,
    DataModelError,
    MessageLoadError,
    MessageParseError,
    MF2ValidateError,
)
from .validation import PairReport, validate_pair

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("mf2validate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CheckAbortedError",
    "CheckResult",
    "DataModelError",
    "MF2ValidateError",
    "MessageLoadError",
    "MessageParseError",
    "PairReport",
    "__version__",
    "check_exhaustiveness",
    "check_placeholder_consistency",
    "load_message",
    "load_message_file",
    "validate_pair",
]
