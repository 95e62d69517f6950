# Copyright 2026 TinyLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the tinylex command-line interface."""

import argparse
import sys
from pathlib import Path
from typing import TextIO

from tinylex.config.settings import ConfigError, ScannerConfig, find_config, load_config
from tinylex.scanner.lexer import Scanner
from tinylex.scanner.tokens import TokenType

# ###############
# Public Interface
# ###############


class SourceFileError(Exception):
    """Raised when a TINY source file cannot be found or opened."""


def main() -> None:
    """Run the tinylex CLI."""
    parser = argparse.ArgumentParser(
        prog="tinylex",
        description="tinylex - lexical scanner for the TINY language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a source file and print the listing",
        description="Scan a TINY source file, echoing source lines and tracing every token.",
    )
    scan_parser.add_argument(
        "file",
        help="Source file to scan (the configured suffix is added when the name has none)",
    )
    scan_parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (default: .tinylex.yaml next to the source file)",
    )
    scan_parser.add_argument(
        "--no-echo",
        action="store_true",
        help="Do not echo source lines to the listing",
    )
    scan_parser.add_argument(
        "--no-trace",
        action="store_true",
        help="Do not trace tokens to the listing",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report lexical errors in a source file",
        description="Scan a TINY source file silently and report every error token.",
    )
    check_parser.add_argument(
        "file",
        help="Source file to check (the configured suffix is added when the name has none)",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (default: .tinylex.yaml next to the source file)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


def normalize_source_name(name: str, suffix: str = ".tny") -> str:
    """Append *suffix* to *name* when its file name has no extension."""
    if "." in Path(name).name:
        return name
    return name + suffix


def open_source(name: str) -> TextIO:
    """Open a TINY source file for reading.

    Raises:
        SourceFileError: If the file does not exist or cannot be opened.
    """
    try:
        return open(name, encoding="latin-1", newline="")
    except FileNotFoundError:
        raise SourceFileError(f"File {name} not found") from None
    except OSError as exc:
        raise SourceFileError(f"Cannot open {name}: {exc}") from exc


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "scan":
        return _cmd_scan(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    name = normalize_source_name(args.file, config.source_suffix)
    try:
        source = open_source(name)
    except SourceFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    listing = sys.stdout
    listing.write(f"\nCOMPILATION: {name}\n")
    with source:
        scanner = Scanner(
            source,
            listing,
            echo_source=config.echo_source and not args.no_echo,
            trace_scan=config.trace_scan and not args.no_trace,
            max_token_length=config.max_token_length,
            buffer_length=config.buffer_length,
        )
        while scanner.get_token().type != TokenType.ENDFILE:
            pass
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    name = normalize_source_name(args.file, config.source_suffix)
    try:
        source = open_source(name)
    except SourceFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    error_count = 0
    with source:
        scanner = Scanner(
            source,
            max_token_length=config.max_token_length,
            buffer_length=config.buffer_length,
        )
        for token in scanner:
            if token.type == TokenType.ERROR:
                print(f"Error: line {token.line}: unexpected '{token.value}'", file=sys.stderr)
                error_count += 1

    if error_count:
        print(f"{error_count} lexical error(s) in {name}.")
        return 1

    print("No lexical errors found.")
    return 0


def _resolve_config(args: argparse.Namespace) -> ScannerConfig:
    """Load the explicit --config file, or the one next to the source file, or defaults."""
    if args.config is not None:
        return load_config(Path(args.config))
    found = find_config(Path(args.file).resolve().parent)
    if found is None:
        return ScannerConfig()
    return load_config(found)
