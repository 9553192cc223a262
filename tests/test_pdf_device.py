from __future__ import annotations

import io
import logging
import os
from pathlib import Path

import pytest
from pypdf import PdfReader

from folio.core import types as pdf
from folio.core.error import PDFValueError
from folio.core.font_metrics import FontMetricsRegistry
from folio.core.resume import Resume
from folio.devices.pdf.font_resources import FontResources, is_standard_14_font
from folio.devices.pdf.pdf import FOOTER_TEXT, build_resume_document, write_document


def _text_objects(doc: pdf.Document) -> list[pdf.TextObject]:
    contents = doc.objects[4]
    assert isinstance(contents, pdf.ContentStream)
    return [obj for obj in contents if isinstance(obj, pdf.TextObject)]


def _decoded(text: pdf.TextObject) -> str:
    return text.text.val.decode(pdf.TEXT_ENCODING)


def test_font_resources_names_in_first_use_order() -> None:
    fonts = FontResources()
    assert fonts.use("Helvetica") == "F1"
    assert fonts.use("Helvetica-Bold") == "F2"
    assert fonts.use("Helvetica") == "F1"
    assert len(fonts) == 2
    assert [r.base_font for r in fonts.get_fonts_in_order()] == ["Helvetica", "Helvetica-Bold"]


def test_font_resources_dicts() -> None:
    fonts = FontResources()
    fonts.use("Helvetica")
    fonts.use("Helvetica-Oblique")
    assert bytes(fonts.resource_dict(7)) == b"<<\n/F1 7 0 R\n/F2 8 0 R\n>>"
    font = fonts.font_dict(fonts.get_fonts_in_order()[1])
    assert font["BaseFont"] == pdf.Name("Helvetica-Oblique")
    assert font["Subtype"] == pdf.Name("Type1")
    assert font["Encoding"] == pdf.Name("WinAnsiEncoding")


def test_non_standard_font_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        FontResources().use("Garamond")
    assert "Garamond" in caplog.text
    assert not is_standard_14_font("Garamond")
    assert is_standard_14_font("ZapfDingbats")


def test_document_has_fixed_object_layout(sample_resume: Resume) -> None:
    doc = build_resume_document(sample_resume)
    assert len(doc) == 9
    assert doc.objects[0]["Type"] == pdf.Name("Catalog")
    assert doc.objects[1]["Type"] == pdf.Name("Outlines")
    assert doc.objects[2]["Type"] == pdf.Name("Pages")
    assert doc.objects[3]["Type"] == pdf.Name("Page")
    assert bytes(doc.objects[5]) == b"[ /PDF /Text ]"
    assert [o["BaseFont"] for o in doc.objects[6:]] == [
        pdf.Name("Helvetica"), pdf.Name("Helvetica-Bold"), pdf.Name("Helvetica-Oblique"),
    ]


def test_heading_layout(sample_resume: Resume) -> None:
    texts = _text_objects(build_resume_document(sample_resume))
    name = texts[0]
    assert _decoded(name) == "Jane Doe"
    assert name.font == pdf.Name("F2")
    assert (name.font_size, name.x, name.y) == (32, 58, 710)
    assert (name.r, name.g, name.b) == pdf.COLOR_ACCENT
    assert [(_decoded(t), t.y) for t in texts[1:4]] == [
        ("Software Engineer", 686),
        ("E-mail: jane@example.com", 670),
        ("Tel: +1 555 0100", 654),
    ]


def test_experience_blocks(sample_resume: Resume) -> None:
    texts = _text_objects(build_resume_document(sample_resume))
    decoded = [_decoded(t) for t in texts]
    assert "Example Corp" in decoded
    assert "From 2019 until 2023" in decoded
    assert "Since 2023" in decoded
    assert "Technologies: Python, PostgreSQL, Kubernetes" in decoded

    title = texts[decoded.index("Example Corp")]
    assert title.y == 640 - 24
    timeline = texts[decoded.index("From 2019 until 2023")]
    assert timeline.y == title.y - 24
    assert timeline.font == pdf.Name("F3")

    # The long summary wraps onto several lines inside the margins
    regular = FontMetricsRegistry.get_instance().get("Helvetica")
    summary = [t for t in texts if t.font == pdf.Name("F1") and t.font_size == 12][3:]
    assert len(summary) > 1
    for line in summary:
        assert line.x == pdf.MARGIN_LEFT
        assert regular.width(12, _decoded(line)) <= pdf.MARGIN_RIGHT - pdf.MARGIN_LEFT


def test_blocks_move_down_the_page(sample_resume: Resume) -> None:
    texts = _text_objects(build_resume_document(sample_resume, footer=None))
    ys = [t.y for t in texts[4:]]
    assert ys == sorted(ys, reverse=True)


def test_footer(sample_resume: Resume) -> None:
    texts = _text_objects(build_resume_document(sample_resume))
    footer = texts[-1]
    assert _decoded(footer) == FOOTER_TEXT
    assert (footer.font, footer.font_size, footer.y) == (pdf.Name("F3"), 10, 50)

    texts = _text_objects(build_resume_document(sample_resume, footer=None))
    assert FOOTER_TEXT not in [_decoded(t) for t in texts]


def test_rules(sample_resume: Resume) -> None:
    contents = build_resume_document(sample_resume).objects[4]
    rules = [obj for obj in contents if isinstance(obj, pdf.RuleObject)]
    assert len(rules) == 1 + len(sample_resume.experience)
    assert (rules[0].width, rules[0].y) == (2, 704)
    assert all(r.x1 == pdf.MARGIN_LEFT and r.x2 == pdf.MARGIN_RIGHT for r in rules)


def test_layout_is_deterministic(sample_resume: Resume) -> None:
    first = io.BytesIO()
    second = io.BytesIO()
    build_resume_document(sample_resume).write_pdf(first)
    build_resume_document(sample_resume).write_pdf(second)
    assert first.getvalue() == second.getvalue()


def test_written_file_reads_back(sample_resume: Resume, tmp_path: Path) -> None:
    path = tmp_path / "resume.pdf"
    doc = build_resume_document(sample_resume)
    write_document(doc, str(path))

    data = path.read_bytes()
    assert data.startswith(b"%PDF-1.4")
    for number, offset in enumerate(doc.offsets, start=1):
        tag = b"%d 0 obj\n" % number
        assert data[offset:offset + len(tag)] == tag

    reader = PdfReader(str(path))
    assert len(reader.pages) == 1
    page = reader.pages[0]
    assert [float(v) for v in page.mediabox] == [0.0, 0.0, 612.0, 792.0]
    assert page["/Resources"]["/Font"]["/F2"]["/BaseFont"] == "/Helvetica-Bold"
    text = page.extract_text()
    assert "Jane Doe" in text
    assert "Example Corp" in text


def test_compressed_file_reads_back(sample_resume: Resume, tmp_path: Path) -> None:
    packed = tmp_path / "packed.pdf"
    write_document(build_resume_document(sample_resume), str(packed), compress=True)

    reader = PdfReader(str(packed))
    assert len(reader.pages) == 1
    contents = reader.pages[0]["/Contents"].get_object()
    assert contents["/Filter"] == "/FlateDecode"
    assert "Jane Doe" in reader.pages[0].extract_text()


def test_write_to_missing_directory(sample_resume: Resume, tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_document(build_resume_document(sample_resume), str(tmp_path / "no" / "such.pdf"))


def test_invalid_document_leaves_no_file(tmp_path: Path) -> None:
    out = tmp_path / "out.pdf"
    with pytest.raises(PDFValueError):
        write_document(pdf.Document([pdf.Dict()], root=2), str(out))
    assert not out.exists()
    assert list(tmp_path.iterdir()) == []


def test_failed_write_keeps_previous_file(sample_resume: Resume, tmp_path: Path,
                                          monkeypatch: pytest.MonkeyPatch) -> None:
    out = tmp_path / "out.pdf"
    out.write_bytes(b"previous")

    def fail(src, dst):
        raise OSError("rename failed")

    monkeypatch.setattr(os, "replace", fail)
    with pytest.raises(OSError, match="rename failed"):
        write_document(build_resume_document(sample_resume), str(out))
    assert out.read_bytes() == b"previous"
    assert list(tmp_path.iterdir()) == [out]


def test_overwrites_existing_file(sample_resume: Resume, tmp_path: Path) -> None:
    out = tmp_path / "out.pdf"
    out.write_bytes(b"previous")
    write_document(build_resume_document(sample_resume), str(out))
    assert out.read_bytes().startswith(b"%PDF-1.4\n")
    assert list(tmp_path.iterdir()) == [out]
