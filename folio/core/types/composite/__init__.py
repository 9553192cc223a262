# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Composite Sub-Package

This sub-package contains the PDF composite and string-like object types,
each in its own module:

- name.py: Name - escaped ``/Name`` symbols, usable as dictionary keys
- string.py: HexString - opaque byte payloads written as ``<hex>``
- array.py: Array - ordered ``[ ... ]`` sequences
- dict.py: Dict - ``<< ... >>`` mappings keyed by Name

All classes are re-exported so the package-level ``from core import types
as pdf`` pattern exposes them directly.
"""

from .name import Name
from .string import HexString, winansi_text
from .array import Array
from .dict import Dict

__all__ = [
    'Name',
    'HexString',
    'winansi_text',
    'Array',
    'Dict',
]
