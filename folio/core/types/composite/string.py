# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Composite String Module

This module contains the PDF hexadecimal string type. Payload bytes are
opaque: they are written as lowercase hex between angle brackets, which
keeps arbitrary byte values (including parentheses and backslashes) safe
without any escaping rules.

Text destined for a content stream is converted to bytes with
``HexString.from_text()``, which uses the WinAnsi code page to match the
``/WinAnsiEncoding`` font dictionaries Folio writes.
"""

from typing import BinaryIO, Union

from ..base import PDFObject
from ..constants import T_HEX_STRING, TEXT_ENCODING


def winansi_text(text: str) -> str:
    """Return *text* as a WinAnsi font shows it, one character per character.

    Characters the code page cannot encode are shown as ``?``, so this is the
    text that should be measured when laying out a ``from_text()`` payload.
    """
    return text.encode(TEXT_ENCODING, errors='replace').decode(TEXT_ENCODING)


class HexString(PDFObject):
    TYPE = T_HEX_STRING

    __slots__ = ()

    def __init__(self, val: Union[bytes, bytearray]) -> None:
        super().__init__(bytes(val))

    @classmethod
    def from_text(cls, text: str) -> 'HexString':
        """Encode text for a WinAnsi font; unmappable characters become ``?``."""
        return cls(text.encode(TEXT_ENCODING, errors='replace'))

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"<")
        w.write(self.val.hex().encode('ascii'))
        w.write(b">")

    def __len__(self) -> int:
        return len(self.val)
