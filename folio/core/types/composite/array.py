# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Composite Array Module

This module contains the PDF Array type, an ordered sequence of PDF objects
written as ``[ a b c ]``.
"""

from typing import BinaryIO, Iterable, Iterator, Optional

from ..base import PDFObject
from ..constants import T_ARRAY


class Array(PDFObject):
    TYPE = T_ARRAY

    __slots__ = ()

    def __init__(self, items: Optional[Iterable[PDFObject]] = None) -> None:
        super().__init__(list(items) if items is not None else [])

    def append(self, obj: PDFObject) -> None:
        self.val.append(obj)

    def __getitem__(self, index: int) -> PDFObject:
        return self.val[index]

    def __iter__(self) -> Iterator[PDFObject]:
        return iter(self.val)

    def __len__(self) -> int:
        return len(self.val)

    def __hash__(self):
        return id(self)

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"[ ")
        for i, obj in enumerate(self.val):
            if i:
                w.write(b" ")
            obj.write_pdf(w)
        w.write(b" ]")
