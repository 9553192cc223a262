# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Base Classes Module

This module contains the base classes every PDF object derives from. A PDF
object knows how to write itself to a binary sink, which is any object with a
``write(bytes)`` method (a file opened in binary mode, ``io.BytesIO``, or the
byte-counting wrapper the document writer uses).

Writing never catches sink errors: the first ``OSError`` raised by
``write()`` stops serialization and reaches the caller unchanged.
"""

import io
from typing import Any, BinaryIO

from .constants import T_STREAM


class PDFObject(object):
    """
    Base class for all PDF objects.

    Subclasses set ``TYPE`` and implement ``write_pdf()``. The raw Python
    value the object wraps is kept in ``val``.
    """
    TYPE = None  # Base class - no specific type

    __slots__ = ('val',)

    def __init__(self, val: Any) -> None:
        self.val = val

    def write_pdf(self, w: BinaryIO) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not implement write_pdf")

    def __bytes__(self) -> bytes:
        buf = io.BytesIO()
        self.write_pdf(buf)
        return buf.getvalue()

    def __eq__(self, other) -> bool:
        if getattr(other, 'TYPE', None) != self.TYPE:
            return False
        return self.val == other.val

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.TYPE, self.val))

    def __str__(self) -> str:
        return bytes(self).decode('latin-1')

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.val!r})"


class Stream(PDFObject):
    """
    Base class for stream objects.

    A stream renders its body into memory first so that the ``/Length``
    entry of the stream dictionary is known before anything reaches the
    sink. Subclasses implement ``render()``.
    """
    TYPE = T_STREAM

    __slots__ = ()

    def render(self, w: BinaryIO) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not implement render")

    def write_pdf(self, w: BinaryIO) -> None:
        body = io.BytesIO()
        self.render(body)
        data = body.getvalue()

        w.write(b"<< /Length %d >>\nstream\n" % len(data))
        w.write(data)
        w.write(b"\nendstream\n")

    def __hash__(self):
        return id(self)
