# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for Folio.

Handles command-line argument definition and version lookup.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from .core.types.constants import (
    DEFAULT_AFM_DIRECTORY, DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_FILE,
)


def _get_version() -> str:
    """Return the installed Folio version."""
    try:
        return version("folio")
    except PackageNotFoundError:
        return "unknown"


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the Folio argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="folio",
        description="Folio - Single-Page PDF Typesetter",
        epilog="The input file is deobfuscated with the passphrase unless --plain is given.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"Folio {_get_version()}"
    )
    parser.add_argument(
        "passphrase", nargs="?", default="",
        help="Passphrase the input file is obfuscated with (default: empty)"
    )
    parser.add_argument(
        "-i", "--input", dest="inputfile", default=DEFAULT_INPUT_FILE,
        help=f"Résumé JSON file (default: {DEFAULT_INPUT_FILE})"
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile", default=DEFAULT_OUTPUT_FILE,
        help=f"Output PDF file (default: {DEFAULT_OUTPUT_FILE})"
    )
    parser.add_argument(
        "--afm-dir", dest="afm_dir", default=DEFAULT_AFM_DIRECTORY,
        help=f"Directory of AFM font metrics files (default: {DEFAULT_AFM_DIRECTORY}); "
             "built-in metrics are used for fonts not found there"
    )
    parser.add_argument(
        "--plain", action="store_true",
        help="Treat the input file as plain text (skip deobfuscation)"
    )
    parser.add_argument(
        "--obfuscate-to", dest="obfuscate_to", metavar="PATH",
        help="Write the input obfuscated with the passphrase to PATH and exit"
    )
    parser.add_argument(
        "--compress", action="store_true",
        help="Compress the page content stream with FlateDecode after writing"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    return parser
