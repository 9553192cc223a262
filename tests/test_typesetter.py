from __future__ import annotations

import pytest

from folio.core import types as pdf
from folio.core.error import LayoutError
from folio.core.font_metrics import FontMetrics
from folio.core.typesetter import OutLine, TypeSetter

TEXT = "Hello world, this is a test of line wrapping"

PARAGRAPH = (
    "Designed and ran the billing platform, moving nightly batch jobs to an "
    "event-driven pipeline and cutting invoice latency from hours to minutes "
    "for every customer. Mentored a team of five engineers in a well-known "
    "open-source codebase."
)


def _texts(lines) -> list[str]:
    return [line.text for line in lines]


def test_wraps_at_last_space(helvetica: FontMetrics) -> None:
    lines, y = TypeSetter(helvetica, 12, 14, 0, 700, 120).set(TEXT)
    assert _texts(lines) == ["Hello world, this is a", "test of line wrapping"]
    assert [line.y for line in lines] == [686, 672]
    assert y == 672


def test_narrower_span_gives_more_lines(helvetica: FontMetrics) -> None:
    lines, y = TypeSetter(helvetica, 12, 14, 0, 700, 100).set(TEXT)
    assert len(lines) == 3
    assert y == 700 - 3 * 14
    assert " ".join(_texts(lines)) == TEXT


def test_wider_span(helvetica: FontMetrics) -> None:
    lines, _ = TypeSetter(helvetica, 12, 14, 0, 700, 130).set(TEXT)
    assert _texts(lines) == ["Hello world, this is a test", "of line wrapping"]


def test_text_that_fits_is_one_line(helvetica: FontMetrics) -> None:
    lines, y = TypeSetter(helvetica, 12, 14, 58, 640, 554).set(TEXT)
    assert lines == [OutLine(58, 626, 12, TEXT)]
    assert y == 626


def test_unbreakable_run_overflows(helvetica: FontMetrics) -> None:
    text = "A" * 40
    lines, _ = TypeSetter(helvetica, 12, 14, 0, 700, 120).set(text)
    assert _texts(lines) == [text]
    assert helvetica.width(12, text) > 120


def test_long_word_then_break(helvetica: FontMetrics) -> None:
    text = "Supercalifragilisticexpialidocious is long"
    lines, _ = TypeSetter(helvetica, 12, 14, 0, 700, 60).set(text)
    assert _texts(lines) == ["Supercalifragilisticexpialidocious", "is long"]


def test_breaks_at_hyphen_and_drops_it(helvetica: FontMetrics) -> None:
    lines, _ = TypeSetter(helvetica, 12, 14, 0, 700, 40).set("well-known fact")
    assert _texts(lines) == ["well", "known", "fact"]


def test_empty_text_gives_one_empty_line(helvetica: FontMetrics) -> None:
    lines, y = TypeSetter(helvetica, 12, 14, 10, 100, 200).set("")
    assert lines == [OutLine(10, 86, 12, "")]
    assert y == 86


def test_characters_without_metrics_have_no_width() -> None:
    empty = FontMetrics("Empty")
    lines, _ = TypeSetter(empty, 12, 14, 0, 100, 1).set("no metrics at all")
    assert _texts(lines) == ["no metrics at all"]


@pytest.mark.parametrize("x2", range(60, 420, 17))
def test_lines_fit_unless_unbreakable(helvetica: FontMetrics, x2: int) -> None:
    lines, y = TypeSetter(helvetica, 12, 18, 0, 700, x2).set(PARAGRAPH)
    for line in lines:
        if helvetica.width(12, line.text) > x2:
            assert " " not in line.text and "-" not in line.text
    assert y == lines[-1].y
    assert [line.y for line in lines] == [700 - 18 * (i + 1) for i in range(len(lines))]


def test_only_break_characters_are_removed(helvetica: FontMetrics) -> None:
    lines, _ = TypeSetter(helvetica, 12, 18, 0, 700, 150).set(PARAGRAPH)
    assert len(lines) > 1
    pos = 0
    for line in lines[:-1]:
        assert PARAGRAPH.startswith(line.text, pos)
        pos += len(line.text)
        assert PARAGRAPH[pos] in " -"
        pos += 1
    assert PARAGRAPH[pos:] == lines[-1].text


def test_layout_is_deterministic(helvetica: FontMetrics) -> None:
    setter = TypeSetter(helvetica, 10, 18, 58, 500, 554)
    assert setter.set(PARAGRAPH) == setter.set(PARAGRAPH)


@pytest.mark.parametrize("x1, x2", [(100, 100), (200, 100)])
def test_span_without_width_is_rejected(helvetica: FontMetrics, x1: float, x2: float) -> None:
    with pytest.raises(LayoutError):
        TypeSetter(helvetica, 12, 14, x1, 700, x2)


@pytest.mark.parametrize("line_height", [0, -14])
def test_non_positive_line_height_is_rejected(helvetica: FontMetrics, line_height: float) -> None:
    with pytest.raises(LayoutError):
        TypeSetter(helvetica, 12, line_height, 0, 700, 100)


def test_layout_error_is_value_error(helvetica: FontMetrics) -> None:
    with pytest.raises(ValueError):
        TypeSetter(helvetica, 12, 14, 0, 700, 0)


def test_append_to_stream(helvetica: FontMetrics) -> None:
    lines, _ = TypeSetter(helvetica, 12, 14, 0, 700, 120).set(TEXT)
    stream = pdf.ContentStream()
    lines.append_to_stream("F1", 0.35, 0.3, 0.35, stream)
    assert list(stream) == [
        pdf.TextObject("F1", 12, 0, 686, "Hello world, this is a", 0.35, 0.3, 0.35),
        pdf.TextObject("F1", 12, 0, 672, "test of line wrapping", 0.35, 0.3, 0.35),
    ]


def test_unencodable_characters_are_measured_as_shown(helvetica: FontMetrics) -> None:
    # Each snowman is shown as "?" (556 units), so four of them plus the
    # space reach a 30 pt span at 12 pt
    text = "☃☃☃☃ ☃☃☃☃"
    lines, _ = TypeSetter(helvetica, 12, 14, 0, 700, 30).set(text)
    assert _texts(lines) == ["☃☃☃☃", "☃☃☃☃"]
    stream = pdf.ContentStream()
    lines.append_to_stream("F1", 0, 0, 0, stream)
    assert [obj.text.val for obj in stream] == [b"????", b"????"]
