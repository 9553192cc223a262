# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Constants Module

This module contains the constants and type tags used throughout the Folio
object model and page layout. These values define the fixed structure of the
documents Folio writes: the file header, cross-reference entry layout, the
page geometry and the default colours of the résumé layout.
"""

# PDFObject types
T_ARRAY = 0
T_BOOL = 1
T_DICT = 2
T_HEX_STRING = 3
T_NAME = 4
T_NUMERIC = 5
T_RAW = 6
T_REFERENCE = 7
T_STREAM = 8
T_TEXT = 9
T_RULE = 10

# File structure
PDF_HEADER = b"%PDF-1.4\n\n"
XREF_FREE_ENTRY = b"0000000000 65535 f\r\n"
XREF_ENTRY_FORMAT = "%010d 00000 n\r\n"
GENERATION = 0                              # all objects are generation 0

# Highest code point a name character may carry (#XX escapes are one byte)
NAME_MAX_CODE = 0xFF

# Encoding used for text payloads, matching /WinAnsiEncoding font dictionaries
TEXT_ENCODING = "cp1252"

# US Letter page, in points
PAGE_WIDTH = 612.0
PAGE_HEIGHT = 792.0

# Text column of the résumé layout
MARGIN_LEFT = 58.0
MARGIN_RIGHT = 554.0

# colours (r, g, b)
COLOR_ACCENT = (0.35, 0.3, 0.35)
COLOR_BLACK = (0.0, 0.0, 0.0)

# default file names
DEFAULT_INPUT_FILE = "resume.json"
DEFAULT_OUTPUT_FILE = "resume.pdf"
DEFAULT_AFM_DIRECTORY = "afm"
