# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Font Resources Module

Tracks the fonts a page uses and assigns each one a resource name (F1, F2,
...) in first-use order. The resulting Type 1 font dictionaries reference
the base font by name only: Standard 14 fonts are guaranteed available in
all PDF viewers, and Folio does not embed font programs, so any other font
is logged as a warning and left for the viewer to substitute.
"""

import logging

from ...core import types as pdf

logger = logging.getLogger(__name__)


class FontResource:
    """A base font and the resource name it is shown under."""

    __slots__ = ('base_font', 'resource_name', 'order')

    def __init__(self, base_font, resource_name, order):
        """
        Args:
            base_font: PostScript name of the font (e.g. 'Helvetica-Bold')
            resource_name: Name used by Tf operators (e.g. 'F2')
            order: Order in which this font was first used (0-based)
        """
        self.base_font = base_font
        self.resource_name = resource_name
        self.order = order


class FontResources:
    """
    Assign resource names to the fonts used on a page.

    Requesting the same base font twice returns the same resource name.
    """

    # Standard 14 PDF fonts - guaranteed available in all PDF viewers
    STANDARD_14 = frozenset({
        'Times-Roman',
        'Times-Bold',
        'Times-Italic',
        'Times-BoldItalic',
        'Helvetica',
        'Helvetica-Bold',
        'Helvetica-Oblique',
        'Helvetica-BoldOblique',
        'Courier',
        'Courier-Bold',
        'Courier-Oblique',
        'Courier-BoldOblique',
        'Symbol',
        'ZapfDingbats',
    })

    def __init__(self):
        self.fonts_used = {}  # base_font -> FontResource

    def use(self, base_font):
        """Return the resource name for *base_font*, registering it on first use."""
        resource = self.fonts_used.get(base_font)
        if resource is None:
            if not is_standard_14_font(base_font):
                logger.warning("Font %s is not a Standard 14 font and will not be embedded", base_font)
            order = len(self.fonts_used)
            resource = FontResource(base_font, f"F{order + 1}", order)
            self.fonts_used[base_font] = resource
        return resource.resource_name

    def get_fonts_in_order(self):
        """Return FontResource entries in first-use order."""
        return sorted(self.fonts_used.values(), key=lambda r: r.order)

    def font_dict(self, resource):
        """Build the Type 1 font dictionary for one resource."""
        return pdf.Dict({
            "Type": pdf.Name("Font"),
            "Subtype": pdf.Name("Type1"),
            "Name": pdf.Name(resource.resource_name),
            "BaseFont": pdf.Name(resource.base_font),
            "Encoding": pdf.Name("WinAnsiEncoding"),
        })

    def resource_dict(self, first_object):
        """Build the page /Font resource dictionary.

        Font dictionaries are expected at consecutive object numbers starting
        at *first_object*, in first-use order.
        """
        return pdf.Dict({
            r.resource_name: pdf.Reference(first_object + i)
            for i, r in enumerate(self.get_fonts_in_order())
        })

    def __len__(self):
        return len(self.fonts_used)


def is_standard_14_font(font_name):
    """
    Check if a font is one of the Standard 14 PDF fonts.

    Args:
        font_name: Font name as str

    Returns:
        bool: True if font is Standard 14 (no embedding needed)
    """
    return font_name in FontResources.STANDARD_14
