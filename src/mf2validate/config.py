"""Output configuration for the mf2validate command.

Provides a single frozen dataclass that carries every display setting, so
verbosity is passed explicitly to whatever renders results instead of living
in module-level flags.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mf2validate.diagnostics import DiagnosticFormatter, OutputFormat

__all__ = ["OutputConfig"]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Immutable display configuration.

    All fields have defaults; ``OutputConfig()`` prints check sections and
    diagnostics in Rust style without echoing inputs.

    Attributes:
        verbose: Echo the options and both message files before checking,
            and log debug traces (default: False).
        quiet: Suppress all output; only the exit status reports the outcome
            (default: False). Takes precedence over ``verbose``.
        output_format: Diagnostic style, see OutputFormat (default: RUST).
        color: Emit ANSI colors in Rust-style output (default: False).
        sanitize: Truncate long diagnostic text (default: False).

    Example:
        >>> config = OutputConfig(output_format=OutputFormat.JSON)
        >>> config.formatter().output_format
        <OutputFormat.JSON: 'json'>
    """

    verbose: bool = False
    quiet: bool = False
    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    sanitize: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If output_format is not a known OutputFormat value
        """
        if not isinstance(self.output_format, OutputFormat):
            try:
                object.__setattr__(self, "output_format", OutputFormat(self.output_format))
            except ValueError:
                msg = f"Unknown output format: {self.output_format!r}"
                raise ValueError(msg) from None

    @property
    def echo_inputs(self) -> bool:
        """True if options and message sources should be echoed."""
        return self.verbose and not self.quiet

    @property
    def log_level(self) -> int:
        """Logging threshold matching the verbosity settings."""
        if self.quiet:
            return logging.CRITICAL
        if self.verbose:
            return logging.DEBUG
        return logging.WARNING

    def formatter(self) -> DiagnosticFormatter:
        """Build the DiagnosticFormatter for these settings."""
        return DiagnosticFormatter(
            output_format=self.output_format,
            sanitize=self.sanitize,
            color=self.color,
        )
