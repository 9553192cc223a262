# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Primitive Classes Module

This module contains the atomic PDF object types: booleans, numbers,
indirect references and raw pre-formatted content. These types are
immutable and have straightforward value semantics.
"""

import math
from decimal import Decimal
from typing import BinaryIO, Union

from ..error import PDFValueError
from .base import PDFObject
from .constants import GENERATION, T_BOOL, T_NUMERIC, T_RAW, T_REFERENCE


def format_number(value: float) -> str:
    """Return the shortest decimal text that reads back as ``value``.

    PDF has no exponent syntax, so ``repr()`` output such as ``1e-07`` is
    expanded to plain positional notation. Integral values print without a
    fractional part (``612.0`` -> ``612``).
    """
    if value == int(value):
        return str(int(value))
    text = repr(value)
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    return text


class Bool(PDFObject):
    """PDF boolean type - represents true/false values."""
    TYPE = T_BOOL

    __slots__ = ()

    def __init__(self, val: bool) -> None:
        super().__init__(bool(val))

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"true" if self.val else b"false")


class Numeric(PDFObject):
    """PDF numeric type - a float64 written in plain decimal form."""
    TYPE = T_NUMERIC

    __slots__ = ()

    def __init__(self, val: Union[int, float]) -> None:
        val = float(val)
        if not math.isfinite(val):
            raise PDFValueError(f"PDF numbers must be finite, got {val!r}")
        super().__init__(val)

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(format_number(self.val).encode('ascii'))


class Reference(PDFObject):
    """
    Indirect reference to a document object.

    Only the 1-based object index is stored; the generation number is always
    zero. The reference is resolved by position in the document's object
    list, never by content.
    """
    TYPE = T_REFERENCE

    __slots__ = ()

    def __init__(self, val: int) -> None:
        if isinstance(val, bool) or not isinstance(val, int) or val < 1:
            raise PDFValueError(f"object references must be positive integers, got {val!r}")
        super().__init__(val)

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(b"%d %d R" % (self.val, GENERATION))


class Raw(PDFObject):
    """Raw, uninterpreted PDF content written verbatim."""
    TYPE = T_RAW

    __slots__ = ()

    def __init__(self, val: Union[bytes, str]) -> None:
        if isinstance(val, str):
            val = val.encode('latin-1')
        super().__init__(bytes(val))

    def write_pdf(self, w: BinaryIO) -> None:
        w.write(self.val)
