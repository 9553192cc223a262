# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Composite Name Module

This module contains the PDF Name type. Names are written as ``/`` followed
by their characters; every character outside the printable ASCII range
[33, 126] is replaced by ``#`` and its two-digit hex code. Names are limited
to single-byte characters, so anything above U+00FF is rejected when the
name is created.
"""

from typing import BinaryIO, Union

from ...error import PDFValueError
from ..base import PDFObject
from ..constants import NAME_MAX_CODE, T_NAME


class Name(PDFObject):
    TYPE = T_NAME

    __slots__ = ('_hash',)

    def __init__(self, name: Union[str, bytes, bytearray]) -> None:
        if isinstance(name, (bytes, bytearray)):
            name = bytes(name).decode('latin-1')
        for c in name:
            if ord(c) > NAME_MAX_CODE:
                raise PDFValueError(f"name {name!r} contains non-Latin-1 character {c!r}")
        super().__init__(name)
        # Cache hash since Name.val is immutable and names are dict keys
        self._hash = hash((T_NAME, name))

    def __hash__(self):
        return self._hash

    def escaped(self) -> bytes:
        """Return the serialized form, including the leading slash."""
        out = bytearray(b"/")
        for c in self.val:
            code = ord(c)
            if 33 <= code <= 126:
                out.append(code)
            else:
                out += b"#%02X" % code
        return bytes(out)

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(self.escaped())

    def __len__(self) -> int:
        return len(self.val)
