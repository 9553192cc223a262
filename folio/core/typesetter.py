# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Typesetter Module

Breaks a string into lines that fit a horizontal span, using per-character
advance widths from a FontMetrics table.

Line Breaking:
    A single greedy pass with a deferred break. While scanning, the most
    recent space or hyphen is remembered as the break point. Once the
    accumulated width reaches the span and a break point exists, the line is
    cut before the break character and the break character itself is
    dropped. A run with no break point is never split: it is allowed to
    overflow the span until a break point or the end of the text is reached.
    There is no hyphenation and no justification.

Vertical Placement:
    The first line sits one line height below the top Y of the text region
    and each following line one line height lower. ``set()`` returns the Y
    of the last line so consecutive blocks can be chained down a page.
"""

from dataclasses import dataclass

from . import types as pdf
from .error import LayoutError
from .font_metrics import FontMetrics


@dataclass(frozen=True)
class OutLine:
    """One typeset line, positioned at its baseline origin."""
    x: float
    y: float
    pt: float
    text: str


class OutLines(list):
    """Typeset lines in top-to-bottom order."""

    def append_to_stream(self, font, r: float, g: float, b: float,
                         stream: pdf.ContentStream) -> None:
        """Convert the lines into text objects appended to *stream*.

        Args:
            font: Font resource name (e.g. 'F1') the lines are shown in
            r, g, b: Fill colour
            stream: Content stream receiving one TextObject per line
        """
        for line in self:
            stream.append(pdf.TextObject(
                font, line.pt, line.x, line.y, line.text, r=r, g=g, b=b,
            ))


class _Cursor:
    """Scan state of one set() call."""

    __slots__ = ('y', 'start', 'last_break')

    def __init__(self, y: float) -> None:
        self.y = y
        self.start = 0          # offset of the first character of the current line
        self.last_break = -1    # offset of the latest space or hyphen, -1 when none


class TypeSetter:
    """
    Lays out text in a column from x1 to x2, starting below y1.

    Args:
        metrics: Advance widths of the font the text is set in
        pt: Point size
        line_height: Distance between baselines
        x1, y1, x2: Left edge, top and right edge of the text region

    Raises:
        LayoutError: If the column has no width or the line height is not
            positive.
    """

    def __init__(self, metrics: FontMetrics, pt: float, line_height: float,
                 x1: float, y1: float, x2: float) -> None:
        if x2 - x1 <= 0:
            raise LayoutError(f"text column has no width (x1={x1}, x2={x2})")
        if line_height <= 0:
            raise LayoutError(f"line height must be positive, got {line_height}")
        self.metrics = metrics
        self.pt = pt
        self.line_height = line_height
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2

    def _next_break(self, text: str, cursor: _Cursor, avail: float) -> bool:
        """Scan one line from cursor.start; return True if it was broken."""
        w = 0.0
        cursor.last_break = -1
        for i in range(cursor.start, len(text)):
            c = text[i]
            if c == ' ' or c == '-':
                cursor.last_break = i
            w += self.metrics.char_width(c) * self.pt / 1000.0
            if w >= avail and cursor.last_break != -1:
                return True
        return False

    def set(self, text: str) -> tuple[OutLines, float]:
        """
        Typeset *text*.

        Widths are measured on the text as the font will show it, so a
        character with no WinAnsi code is measured as the ``?`` it becomes.

        Returns:
            Tuple of (lines, y) where y is the baseline of the last line.
        """
        avail = self.x2 - self.x1
        result = OutLines()
        cursor = _Cursor(self.y1)
        shown = pdf.winansi_text(text)

        while True:
            cursor.y -= self.line_height
            if not self._next_break(shown, cursor, avail):
                break
            result.append(OutLine(
                self.x1, cursor.y, self.pt, text[cursor.start:cursor.last_break],
            ))
            cursor.start = cursor.last_break + 1

        result.append(OutLine(self.x1, cursor.y, self.pt, text[cursor.start:]))
        return result, cursor.y
