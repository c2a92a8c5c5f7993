"""Command-line front end.

Usage:
    mf2validate --sourceLocale en --sourceFilename en.json \\
                --targetLocale pl --targetFilename pl.json

Both files hold MF2 JSON data models. The exit status follows ExitCode:
0 when every check passes, otherwise the status of the first abort or the
combined verdict of the checks.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from mf2validate.config import OutputConfig
from mf2validate.datamodel import read_message_source
from mf2validate.diagnostics import CheckResult, Diagnostic, MF2ValidateError, OutputFormat
from mf2validate.enums import CheckStage, ExitCode
from mf2validate.validation import prepare_message, validate_pair

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

_STAGE_HEADINGS: dict[CheckStage, str] = {
    CheckStage.SOURCE: "== Checking source message ==",
    CheckStage.TARGET: "== Checking target message ==",
    CheckStage.PLACEHOLDERS: "== Checking placeholder consistency ==",
}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors do not collide with PARSE_ERROR (2)."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE_ERROR, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mf2validate command."""
    parser = _ArgumentParser(
        prog="mf2validate",
        description="Validate a source and target MF2 message",
    )
    parser.add_argument("--sourceLocale", required=True, help="Locale for source message")
    parser.add_argument("--targetLocale", required=True, help="Locale for target message")
    parser.add_argument(
        "--sourceFilename", required=True, help="File name for source message (MF2 JSON)"
    )
    parser.add_argument(
        "--targetFilename", required=True, help="File name for target message (MF2 JSON)"
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress all output")
    parser.add_argument(
        "--format",
        choices=[str(f) for f in OutputFormat],
        default=str(OutputFormat.RUST),
        help="Diagnostic style (default: rust)",
    )
    parser.add_argument("--color", action="store_true", help="Colorize diagnostics")
    parser.add_argument(
        "--sanitize",
        action="store_true",
        help="Truncate long diagnostic text",
    )
    return parser


class _Console:
    """Writes report lines unless output is suppressed."""

    __slots__ = ("_config", "_stream")

    def __init__(self, config: OutputConfig, stream: TextIO) -> None:
        self._config = config
        self._stream = stream

    def line(self, text: str = "") -> None:
        if not self._config.quiet:
            print(text, file=self._stream)

    def raw(self, text: str) -> None:
        if not self._config.quiet:
            self._stream.write(text)
            if not text.endswith("\n"):
                self._stream.write("\n")

    def diagnostics(self, diagnostics: Sequence[Diagnostic]) -> None:
        if diagnostics:
            self.line(self._config.formatter().format_all(diagnostics))

    def heading(self, stage: CheckStage) -> None:
        self.line(_STAGE_HEADINGS[stage])

    def stage_result(self, _stage: CheckStage, result: CheckResult) -> None:
        self.diagnostics(result.diagnostics)


def _configure_logging(config: OutputConfig) -> None:
    # No-op when the host application has already configured logging
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run(args: argparse.Namespace, console: _Console, config: OutputConfig) -> ExitCode:
    source_text = read_message_source(args.sourceFilename)
    target_text = read_message_source(args.targetFilename)

    if config.echo_inputs:
        console.line("=== Options provided ===")
        console.line(f"Source locale: {args.sourceLocale}")
        console.line(f"Target locale: {args.targetLocale}")
        console.line("== Source message ==")
        console.raw(source_text)
        console.line("== Target message ==")
        console.raw(target_text)

    source = prepare_message(source_text, where=args.sourceFilename)
    target = prepare_message(target_text, where=args.targetFilename)

    report = validate_pair(
        args.sourceLocale,
        source,
        args.targetLocale,
        target,
        observer=console.stage_result,
        on_start=console.heading,
    )

    console.line("== Results ==")
    for text in report.summary_lines():
        console.line(text)
    return report.exit_code


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Run the mf2validate command.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        stdout: Stream for report output (default: sys.stdout)

    Returns:
        Process exit status (an ExitCode value)
    """
    args = build_parser().parse_args(argv)
    config = OutputConfig(
        verbose=args.verbose,
        quiet=args.quiet,
        output_format=OutputFormat(args.format),
        color=args.color,
        sanitize=args.sanitize,
    )
    _configure_logging(config)
    console = _Console(config, stdout if stdout is not None else sys.stdout)

    try:
        exit_code = _run(args, console, config)
    except MF2ValidateError as e:
        logger.debug("Run aborted: %s", type(e).__name__)
        if e.diagnostic is not None:
            console.diagnostics([e.diagnostic])
        else:
            console.line(str(e))
        exit_code = e.exit_code

    logger.debug("Exit status %d (%s)", exit_code, exit_code.name)
    return int(exit_code)
