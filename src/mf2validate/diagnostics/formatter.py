"""Rendering of diagnostics for the terminal and for tools.

Three styles are supported: compiler-like blocks (default), one line per
diagnostic, and JSON lines. All user-controlled text (message keys, file
paths, parse errors) passes through control-character escaping first.

Python 3.13+.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from mf2validate.constants import MAX_RENDERED_LENGTH
from mf2validate.enums import Severity

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import CheckResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls except tab, plus DEL
_CONTROL_ESCAPES: dict[int, str] = {
    code: f"\\x{code:02x}" for code in [*range(0x20), 0x7F] if code != 0x09
}

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "\033[1;31m",  # Bold red
    Severity.WARNING: "\033[1;33m",  # Bold yellow
    Severity.INFO: "\033[1;36m",  # Bold cyan
}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Diagnostic rendering style, selected with ``--format``."""

    RUST = "rust"
    """Multi-line block with location, key and hint"""

    SIMPLE = "simple"
    """CODE: message"""

    JSON = "json"
    """One JSON object per diagnostic"""


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic records.

    Attributes:
        output_format: Rendering style
        sanitize: Cut long message text down to max_content_length
        color: Colour the severity label with ANSI escapes (RUST only)
        max_content_length: Limit applied when sanitizing

    Example:
        >>> print(DiagnosticFormatter().format(ErrorTemplate.variant_omitted(("few",))))
        error[VARIANT_OMITTED]: Omitted variant: few
          = permutation: few
          = help: Add a variant with keys 'few'
        >>> simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(simple.format(ErrorTemplate.variant_omitted(("few",))))
        VARIANT_OMITTED: Omitted variant: few
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = MAX_RENDERED_LENGTH

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._block(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._json_line(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics; blocks are separated by a blank line."""
        separator = "\n\n" if self.output_format is OutputFormat.RUST else "\n"
        return separator.join(self.format(d) for d in diagnostics)

    def format_check_result(self, result: "CheckResult") -> str:
        """Render a verdict line followed by the result's diagnostics."""
        notes = f"{result.warning_count} note(s)"
        if result.ok:
            heading = f"Check passed: {notes}"
        else:
            heading = f"Check failed: {result.error_count} error(s), {notes}"
        if not result.diagnostics:
            return heading
        return f"{heading}\n{self.format_all(result.diagnostics)}"

    def _block(self, diagnostic: Diagnostic) -> str:
        """Compiler-style block.

        Example output:
            error[INVALID_PLURAL_CATEGORY]: Key few is not a valid plural category for locale en.
              --> source message (en)
              = key: few
              = help: Valid categories: one, other
        """
        label = str(diagnostic.severity)
        if self.color:
            label = f"{_SEVERITY_COLORS[diagnostic.severity]}{label}{_RESET}"
        lines = [f"{label}[{diagnostic.code.name}]: {self._clean(diagnostic.message)}"]

        if diagnostic.location:
            lines.append(f"  --> {self._clean(diagnostic.location)}")

        # A permutation already spells out the keys it concerns
        permutation = diagnostic.rendered_permutation()
        if permutation is not None:
            lines.append(self._note("permutation", permutation))
        elif diagnostic.key is not None:
            lines.append(self._note("key", diagnostic.key))

        if diagnostic.placeholder is not None:
            lines.append(self._note("placeholder", f"${diagnostic.placeholder}"))
        if diagnostic.hint:
            lines.append(self._note("help", diagnostic.hint))
        return "\n".join(lines)

    def _note(self, label: str, text: str) -> str:
        return f"  = {label}: {self._clean(text)}"

    def _json_line(self, diagnostic: Diagnostic) -> str:
        record: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": str(diagnostic.severity),
            "message": self._truncate(diagnostic.message),
        }
        optional: dict[str, str | list[str] | None] = {
            "locale": diagnostic.locale,
            "role": str(diagnostic.role) if diagnostic.role is not None else None,
            "permutation": list(diagnostic.permutation) if diagnostic.permutation else None,
            "key": diagnostic.key,
            "placeholder": diagnostic.placeholder,
            "hint": self._truncate(diagnostic.hint) if diagnostic.hint else None,
        }
        record.update({name: value for name, value in optional.items() if value is not None})
        return json.dumps(record, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then truncate if sanitizing."""
        return self._truncate(text.translate(_CONTROL_ESCAPES))

    def _truncate(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
