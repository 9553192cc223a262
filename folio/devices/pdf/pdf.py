# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

This module lays out a résumé on a single US Letter page and writes it as a
PDF file using the Folio object model.

Object Layout:
    The object graph is assembled by hand in a fixed order:

        1  Catalog
        2  Outlines (empty)
        3  Pages
        4  Page
        5  Content stream
        6  ProcSet array
        7+ Type 1 font dictionaries, one per font resource

Page Layout:
    Heading (name, rule, trade, contact lines) at the top, then one block per
    experience entry: a typeset title, a rule, the timeline, the typeset
    summary and the typeset technology list. Blocks are chained down the page
    using the Y position each TypeSetter call returns.

Compression:
    Folio writes uncompressed content streams. With ``compress=True`` the
    finished file is re-written with pypdf, applying FlateDecode to the page
    content stream.
"""

import io
import logging
import os
import tempfile

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from ...core import types as pdf
from ...core.font_metrics import FontMetricsRegistry
from ...core.resume import Resume
from ...core.typesetter import TypeSetter
from .font_resources import FontResources

logger = logging.getLogger(__name__)

# Suppress pypdf's own warnings about the files it re-writes
logging.getLogger('pypdf').setLevel(logging.ERROR)

REGULAR_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"
OBLIQUE_FONT = "Helvetica-Oblique"

FOOTER_TEXT = "This PDF was made from scratch with Folio."

# Object numbers of the fixed part of the graph
CATALOG_OBJ = 1
OUTLINES_OBJ = 2
PAGES_OBJ = 3
PAGE_OBJ = 4
CONTENTS_OBJ = 5
PROCSET_OBJ = 6
FIRST_FONT_OBJ = 7


def _heading(resume, fonts, contents):
    accent = pdf.COLOR_ACCENT
    regular = fonts.use(REGULAR_FONT)
    bold = fonts.use(BOLD_FONT)

    contents.extend([
        pdf.TextObject(bold, 32, pdf.MARGIN_LEFT, 710, resume.name, *accent),
        pdf.RuleObject(2, pdf.MARGIN_LEFT, pdf.MARGIN_RIGHT, 704, *accent),
        pdf.TextObject(regular, 12, pdf.MARGIN_LEFT, 686, resume.trade, *accent),
        pdf.TextObject(regular, 12, pdf.MARGIN_LEFT, 670, "E-mail: " + resume.email, *accent),
        pdf.TextObject(regular, 12, pdf.MARGIN_LEFT, 654, "Tel: " + resume.tel, *accent),
    ])


def _experience(exp, y, registry, fonts, contents):
    """Lay out one experience block starting at *y*; return the Y below it."""
    accent = pdf.COLOR_ACCENT
    black = pdf.COLOR_BLACK
    left, right = pdf.MARGIN_LEFT, pdf.MARGIN_RIGHT

    # Title
    setter = TypeSetter(registry.get(BOLD_FONT), 20, 24, left, y, right)
    lines, y = setter.set(exp.name)
    lines.append_to_stream(fonts.use(BOLD_FONT), *accent, contents)

    contents.append(pdf.RuleObject(1, left, right, y - 6, *accent))

    y -= 24

    # Timeline
    contents.append(pdf.TextObject(fonts.use(OBLIQUE_FONT), 12, left, y, exp.timeline()))

    y -= 8

    # Summary
    setter = TypeSetter(registry.get(REGULAR_FONT), 12, 18, left, y, right)
    lines, y = setter.set(exp.summary)
    lines.append_to_stream(fonts.use(REGULAR_FONT), *black, contents)

    y -= 8

    # Technologies
    setter = TypeSetter(registry.get(OBLIQUE_FONT), 10, 18, left, y, right)
    lines, y = setter.set("Technologies: " + ", ".join(exp.technologies))
    lines.append_to_stream(fonts.use(OBLIQUE_FONT), *black, contents)

    return y - 24


def build_resume_document(resume: Resume, registry: FontMetricsRegistry = None,
                          footer: str = FOOTER_TEXT) -> pdf.Document:
    """
    Lay out *resume* on one page and return the document.

    Args:
        resume: Résumé content (already deobfuscated)
        registry: Font metrics to typeset with (default: the shared registry)
        footer: Line shown at the bottom of the page, or None for no footer

    Raises:
        FontMetricsError: If the registry has no metrics for a layout font.
    """
    if registry is None:
        registry = FontMetricsRegistry.get_instance()

    fonts = FontResources()
    # Register in a fixed order so the resource names are F1, F2, F3
    for base_font in (REGULAR_FONT, BOLD_FONT, OBLIQUE_FONT):
        fonts.use(base_font)

    contents = pdf.ContentStream()
    _heading(resume, fonts, contents)

    y = 640.0
    for exp in resume.experience:
        y = _experience(exp, y, registry, fonts, contents)

    if footer:
        contents.append(pdf.TextObject(
            fonts.use(OBLIQUE_FONT), 10, pdf.MARGIN_LEFT, 50, footer, *pdf.COLOR_ACCENT,
        ))

    doc = pdf.Document()

    doc.add(pdf.Dict({
        "Type": pdf.Name("Catalog"),
        "Outlines": pdf.Reference(OUTLINES_OBJ),
        "Pages": pdf.Reference(PAGES_OBJ),
    }))

    doc.add(pdf.Dict({
        "Type": pdf.Name("Outlines"),
        "Count": pdf.Numeric(0),
    }))

    doc.add(pdf.Dict({
        "Type": pdf.Name("Pages"),
        "Count": pdf.Numeric(1),
        "Kids": pdf.Array([pdf.Reference(PAGE_OBJ)]),
    }))

    doc.add(pdf.Dict({
        "Type": pdf.Name("Page"),
        "Parent": pdf.Reference(PAGES_OBJ),
        "Resources": pdf.Dict({
            "Font": fonts.resource_dict(FIRST_FONT_OBJ),
            "ProcSet": pdf.Reference(PROCSET_OBJ),
        }),
        # Units are 1/72"
        "MediaBox": pdf.Array([
            pdf.Numeric(0),
            pdf.Numeric(0),
            pdf.Numeric(pdf.PAGE_WIDTH),
            pdf.Numeric(pdf.PAGE_HEIGHT),
        ]),
        "Contents": pdf.Reference(CONTENTS_OBJ),
    }))

    doc.add(contents)

    doc.add(pdf.Array([pdf.Name("PDF"), pdf.Name("Text")]))

    for resource in fonts.get_fonts_in_order():
        doc.add(fonts.font_dict(resource))

    return doc


def write_document(doc: pdf.Document, file_path: str, compress: bool = False) -> None:
    """
    Write *doc* to *file_path*.

    The document is serialized in memory and moved into place only once it
    is complete, so a failed run leaves *file_path* as it was (absent, or
    holding the previous file).

    Raises:
        PDFValueError: If the document cannot be serialized.
        OSError: If the file cannot be written.
    """
    buf = io.BytesIO()
    doc.write_pdf(buf)
    data = buf.getvalue()

    _replace_file(file_path, data)
    logger.info("Wrote %d objects (%d bytes) to %s", len(doc), len(data), file_path)

    if compress:
        _compress_pdf(file_path)


def _replace_file(file_path, data):
    """Write *data* to a temporary file next to *file_path*, then rename it over."""
    directory = os.path.dirname(os.path.abspath(file_path))
    temp_file = tempfile.NamedTemporaryFile(dir=directory, suffix='.pdf', delete=False)
    try:
        with temp_file:
            temp_file.write(data)
        os.replace(temp_file.name, file_path)
    except OSError:
        os.unlink(temp_file.name)
        raise


def _compress_pdf(file_path):
    """Compress content streams in a Folio-generated PDF.

    Reads the PDF with pypdf, applies FlateDecode compression to all page
    content streams, and writes it back. On failure the uncompressed file is
    kept and a warning is logged.
    """
    try:
        with open(file_path, 'rb') as f:
            reader = PdfReader(f, strict=False)
            writer = PdfWriter()
            for page in reader.pages:
                writer.add_page(page)
            for page in writer.pages:
                page.compress_content_streams()
            buf = io.BytesIO()
            writer.write(buf)
    except (PyPdfError, OSError, ValueError) as exc:
        logger.warning("Could not compress %s, keeping it uncompressed: %s", file_path, exc)
        return

    _replace_file(file_path, buf.getvalue())
