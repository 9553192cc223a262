#!/usr/bin/env python3
# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio - Single-Page PDF Typesetter

This is the main entry point for Folio, which renders a résumé stored as
(optionally obfuscated) JSON into a one-page PDF written from scratch.

Architecture Overview:
    - Object Model: PDF values that serialize themselves to a byte sink
    - Document: numbered indirect objects, xref table and trailer, with
      byte offsets taken from a counting sink
    - Typesetter: greedy line breaking against AFM advance widths
    - PDF Device: fixed one-page résumé layout

Usage:
    folio                          # resume.json -> resume.pdf, empty passphrase
    folio secret -o out.pdf        # deobfuscate with 'secret'
    folio --plain -i plain.json    # input is not obfuscated
    folio secret --plain -i plain.json --obfuscate-to resume.json

Author: Scott Bowman
License: AGPL-3.0-or-later
"""

import logging
import sys

from .cli_args import build_argument_parser
from .cli_runner import run


def main(argv=None) -> int:
    """
    Main entry point for Folio.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
