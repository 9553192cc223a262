# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio error types.

I/O failures are never wrapped: an ``OSError`` raised by an output sink
propagates unchanged out of serialization. Everything Folio itself rejects
derives from ``FolioError`` so the CLI can report it in one place.
"""


class FolioError(Exception):
    """Base class for all errors raised by Folio."""


class PDFValueError(FolioError, ValueError):
    """Raised when a PDF object cannot represent the value it was given."""


class FontMetricsError(FolioError):
    """Raised for malformed AFM data or a font with no known metrics."""


class LayoutError(FolioError, ValueError):
    """Raised when typesetting parameters describe an impossible text region."""


class ResumeError(FolioError):
    """Raised when résumé input is missing fields or has the wrong shape."""
