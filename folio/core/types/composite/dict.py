# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Composite Dict Module

This module contains the PDF Dict (dictionary) type, a mapping from Name
keys to PDF objects. Entries are written one per line:

    <<
    /Type /Page
    /Parent 3 0 R
    >>

Entry order only changes the byte layout of the output, never its meaning.
Python dicts keep insertion order, so the same Dict always serializes to the
same bytes.
"""

from typing import BinaryIO, ItemsView, Iterator, Mapping, Optional, Union

from ..base import PDFObject
from ..constants import T_DICT
from .name import Name


def _make_key(key: Union[Name, str, bytes]) -> Name:
    return key if isinstance(key, Name) else Name(key)


class Dict(PDFObject):
    TYPE = T_DICT

    __slots__ = ()

    def __init__(self, d: Optional[Mapping[Union[Name, str], PDFObject]] = None) -> None:
        super().__init__({})
        if d:
            for key, value in d.items():
                self.put(key, value)

    def put(self, key: Union[Name, str], value: PDFObject) -> None:
        self.val[_make_key(key)] = value

    def get(self, key: Union[Name, str], default: Optional[PDFObject] = None) -> Optional[PDFObject]:
        return self.val.get(_make_key(key), default)

    def items(self) -> ItemsView[Name, PDFObject]:
        return self.val.items()

    def __getitem__(self, key: Union[Name, str]) -> PDFObject:
        return self.val[_make_key(key)]

    def __setitem__(self, key: Union[Name, str], value: PDFObject) -> None:
        self.put(key, value)

    def __contains__(self, key: Union[Name, str]) -> bool:
        return _make_key(key) in self.val

    def __iter__(self) -> Iterator[Name]:
        return iter(self.val)

    def __len__(self) -> int:
        return len(self.val)

    def __hash__(self):
        return id(self)

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"<<\n")
        for key, value in self.val.items():
            key.write_pdf(w)
            w.write(b" ")
            value.write_pdf(w)
            w.write(b"\n")
        w.write(b">>")
