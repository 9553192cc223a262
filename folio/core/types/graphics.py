# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Graphics Classes Module

This module contains the drawing objects that make up a page's content
stream, and the content stream itself. Drawing objects are not PDF values on
their own: they write a fixed sequence of content-stream operators.

TextObject writes one positioned, single-line run of text:

    BT
    r g b rg
    /F1 12.000000 Tf
    58.00 686.00 Td
    <48656c6c6f> Tj
    ET

RuleObject writes one stroked horizontal line.
"""

from typing import BinaryIO, Iterable, Iterator, Optional, Union

from .base import PDFObject, Stream
from .composite import HexString, Name
from .constants import T_RULE, T_TEXT


class TextObject(PDFObject):
    """A single line of text in one font, size and fill colour."""
    TYPE = T_TEXT

    __slots__ = ('r', 'g', 'b', 'font', 'font_size', 'x', 'y', 'text')

    def __init__(
        self,
        font: Union[Name, str],
        font_size: float,
        x: float,
        y: float,
        text: Union[HexString, str, bytes],
        r: float = 0.0,
        g: float = 0.0,
        b: float = 0.0,
    ) -> None:
        super().__init__(None)
        self.r = r
        self.g = g
        self.b = b
        self.font = font if isinstance(font, Name) else Name(font)
        self.font_size = font_size
        self.x = x
        self.y = y
        if isinstance(text, str):
            text = HexString.from_text(text)
        elif not isinstance(text, HexString):
            text = HexString(text)
        self.text = text

    def _key(self) -> tuple:
        return (self.r, self.g, self.b, self.font, self.font_size, self.x, self.y, self.text)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TextObject):
            return False
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        return f"TextObject({self.font!r}, {self.font_size}, {self.x}, {self.y}, {self.text!r})"

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"BT\n")
        w.write(b"%f %f %f rg\n" % (self.r, self.g, self.b))
        self.font.write_pdf(w)
        w.write(b" %f Tf\n" % self.font_size)
        w.write(b"%.2f %.2f Td\n" % (self.x, self.y))
        self.text.write_pdf(w)
        w.write(b" Tj\nET")


class RuleObject(PDFObject):
    """A horizontal rule from (x1, y) to (x2, y)."""
    TYPE = T_RULE

    __slots__ = ('width', 'r', 'g', 'b', 'x1', 'x2', 'y')

    def __init__(
        self,
        width: float,
        x1: float,
        x2: float,
        y: float,
        r: float = 0.0,
        g: float = 0.0,
        b: float = 0.0,
    ) -> None:
        super().__init__(None)
        self.width = width
        self.r = r
        self.g = g
        self.b = b
        self.x1 = x1
        self.x2 = x2
        self.y = y

    def _key(self) -> tuple:
        return (self.width, self.r, self.g, self.b, self.x1, self.x2, self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RuleObject):
            return False
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        return f"RuleObject({self.width}, {self.x1}, {self.x2}, {self.y})"

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"%f w\n" % self.width)
        w.write(b"%f %f %f RG\n" % (self.r, self.g, self.b))
        w.write(b"%.2f %.2f m\n" % (self.x1, self.y))
        w.write(b"%.2f %.2f l s\n" % (self.x2, self.y))


class ContentStream(Stream):
    """
    A page content stream built from drawing objects.

    Drawing objects are separated by a single newline in the stream body.
    """

    __slots__ = ()

    def __init__(self, items: Optional[Iterable[PDFObject]] = None) -> None:
        super().__init__(list(items) if items is not None else [])

    def append(self, obj: PDFObject) -> None:
        self.val.append(obj)

    def extend(self, objs: Iterable[PDFObject]) -> None:
        self.val.extend(objs)

    def __iter__(self) -> Iterator[PDFObject]:
        return iter(self.val)

    def __len__(self) -> int:
        return len(self.val)

    def render(self, w: BinaryIO) -> None:
        for i, obj in enumerate(self.val):
            if i:
                w.write(b"\n")
            obj.write_pdf(w)
