# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Document Module

This module contains the top-level Document and the byte-counting sink used
to build its cross-reference table.

File layout written by ``Document.write_pdf()``:

    %PDF-1.4

    1 0 obj
    ...
    endobj

    xref
    0 N+1
    0000000000 65535 f\\r\\n
    0000000010 00000 n\\r\\n          (one 20-byte entry per object)

    trailer
    << /Size N+1 /Root 1 0 R >>

    startxref
    <byte offset of "xref">
    %%EOF

Every offset in the table is read from the WriteCounter that all bytes pass
through, so recorded offsets and written bytes cannot drift apart.
"""

from typing import BinaryIO, Iterable, Iterator, List, Optional

from ..error import PDFValueError
from .base import PDFObject
from .composite import Dict
from .constants import (
    GENERATION, PDF_HEADER, XREF_ENTRY_FORMAT, XREF_FREE_ENTRY,
)
from .primitive import Numeric, Reference


class WriteCounter:
    """
    Binary sink wrapper that counts the bytes written through it.

    One counter is created per serialization pass and discarded with it.
    Sinks may accept only part of a chunk (raw files, sockets); the rest is
    written again until the whole chunk is out, and a sink that accepts
    nothing raises ``OSError``.
    """

    __slots__ = ('writer', 'count')

    def __init__(self, writer: BinaryIO) -> None:
        self.writer = writer
        self.count = 0

    def write(self, data: bytes) -> int:
        view = memoryview(data)
        while view:
            n = self.writer.write(view)
            if n is None:
                n = len(view)
            if n <= 0:
                raise OSError(f"sink accepted no bytes after {self.count} bytes written")
            self.count += n
            view = view[n:]
        return len(data)


class Document(PDFObject):
    """
    An ordered list of indirect objects.

    Object numbers are 1-based positions in the list. The trailer's /Root
    entry names object ``root`` (1 by default, the catalog by convention).
    """

    __slots__ = ('root', 'offsets', 'xref_offset')

    def __init__(self, objects: Optional[Iterable[PDFObject]] = None, root: int = 1) -> None:
        super().__init__(list(objects) if objects is not None else [])
        self.root = root
        self.offsets: List[int] = []
        self.xref_offset: Optional[int] = None

    def add(self, obj: PDFObject) -> Reference:
        """Append an indirect object and return a reference to it."""
        self.val.append(obj)
        return Reference(len(self.val))

    def reference(self, index: int) -> Reference:
        if not 1 <= index <= len(self.val):
            raise PDFValueError(f"object {index} is not in this document ({len(self.val)} objects)")
        return Reference(index)

    @property
    def objects(self) -> List[PDFObject]:
        return self.val

    def __iter__(self) -> Iterator[PDFObject]:
        return iter(self.val)

    def __len__(self) -> int:
        return len(self.val)

    def __hash__(self):
        return id(self)

    def trailer(self) -> Dict:
        return Dict({
            "Size": Numeric(len(self.val) + 1),
            "Root": Reference(self.root),
        })

    def _validate(self) -> None:
        if not self.val:
            raise PDFValueError("cannot write a document with no objects")
        if isinstance(self.root, bool) or not isinstance(self.root, int) \
                or not 1 <= self.root <= len(self.val):
            raise PDFValueError(
                f"root object {self.root!r} is outside the document ({len(self.val)} objects)"
            )

    def write_pdf(self, w: BinaryIO) -> None:
        self._validate()

        c = WriteCounter(w)
        offsets = []

        c.write(PDF_HEADER)

        for i, obj in enumerate(self.val, start=1):
            offsets.append(c.count)
            c.write(b"%d %d obj\n" % (i, GENERATION))
            obj.write_pdf(c)
            c.write(b"\nendobj\n\n")

        xref_offset = c.count

        c.write(b"xref\n0 %d\n" % (len(offsets) + 1))
        c.write(XREF_FREE_ENTRY)
        for offset in offsets:
            c.write((XREF_ENTRY_FORMAT % offset).encode('ascii'))

        c.write(b"\ntrailer\n")
        self.trailer().write_pdf(c)
        c.write(b"\n\nstartxref\n%d\n%%%%EOF\n" % xref_offset)

        self.offsets = offsets
        self.xref_offset = xref_offset
