# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Unicode Mapping Module

Maps PostScript glyph names found in AFM files to Unicode characters, so
that advance widths can be looked up by the characters of the text being
typeset.

Three kinds of names are resolved:
- names of punctuation and symbols (``space``, ``hyphen``, ``quoteright``)
- Latin letters with a diacritic (``eacute``, ``Udieresis``, ``ccedilla``),
  composed through the Unicode character database
- ``uniXXXX`` / ``uXXXX`` names and single-character names

Reference: https://github.com/adobe-type-tools/agl-aglfn
"""

import unicodedata
from typing import Optional

# Glyph names that are not derivable from the letter + accent pattern
# Format: glyph_name (str) -> Unicode character (str)
GLYPH_TO_UNICODE = {
    'space': ' ', 'exclam': '!', 'quotedbl': '"', 'numbersign': '#',
    'dollar': '$', 'percent': '%', 'ampersand': '&', 'quotesingle': "'",
    'parenleft': '(', 'parenright': ')', 'asterisk': '*', 'plus': '+',
    'comma': ',', 'hyphen': '-', 'period': '.', 'slash': '/',
    'zero': '0', 'one': '1', 'two': '2', 'three': '3', 'four': '4',
    'five': '5', 'six': '6', 'seven': '7', 'eight': '8', 'nine': '9',
    'colon': ':', 'semicolon': ';', 'less': '<', 'equal': '=',
    'greater': '>', 'question': '?', 'at': '@',
    'bracketleft': '[', 'backslash': '\\', 'bracketright': ']',
    'asciicircum': '^', 'underscore': '_', 'grave': '`',
    'braceleft': '{', 'bar': '|', 'braceright': '}', 'asciitilde': '~',

    # Typographic punctuation
    'quoteleft': '‘', 'quoteright': '’',
    'quotedblleft': '“', 'quotedblright': '”',
    'quotesinglbase': '‚', 'quotedblbase': '„',
    'guilsinglleft': '‹', 'guilsinglright': '›',
    'guillemotleft': '«', 'guillemotright': '»',
    'endash': '–', 'emdash': '—', 'ellipsis': '…',
    'bullet': '•', 'dagger': '†', 'daggerdbl': '‡',
    'perthousand': '‰', 'periodcentered': '·',
    'exclamdown': '¡', 'questiondown': '¿',

    # Symbols
    'cent': '¢', 'sterling': '£', 'currency': '¤',
    'yen': '¥', 'Euro': '€', 'florin': 'ƒ',
    'brokenbar': '¦', 'section': '§', 'paragraph': '¶',
    'copyright': '©', 'registered': '®', 'trademark': '™',
    'ordfeminine': 'ª', 'ordmasculine': 'º',
    'logicalnot': '¬', 'degree': '°', 'plusminus': '±',
    'multiply': '×', 'divide': '÷', 'mu': 'µ',
    'onequarter': '¼', 'onehalf': '½', 'threequarters': '¾',
    'onesuperior': '¹', 'twosuperior': '²', 'threesuperior': '³',
    'fraction': '⁄', 'minus': '−',

    # Spacing accents
    'acute': '´', 'dieresis': '¨', 'macron': '¯',
    'cedilla': '¸', 'circumflex': 'ˆ', 'tilde': '˜',
    'caron': 'ˇ', 'breve': '˘', 'dotaccent': '˙',
    'ring': '˚', 'ogonek': '˛', 'hungarumlaut': '˝',

    # Letters without a decomposition
    'AE': 'Æ', 'ae': 'æ', 'OE': 'Œ', 'oe': 'œ',
    'Oslash': 'Ø', 'oslash': 'ø', 'Lslash': 'Ł', 'lslash': 'ł',
    'Eth': 'Ð', 'eth': 'ð', 'Thorn': 'Þ', 'thorn': 'þ',
    'germandbls': 'ß', 'dotlessi': 'ı',
    'fi': 'ﬁ', 'fl': 'ﬂ',
}

# Accent suffix used in glyph names -> Unicode character-name suffix
_ACCENT_SUFFIXES = (
    ('circumflex', 'CIRCUMFLEX'),
    ('dieresis', 'DIAERESIS'),
    ('cedilla', 'CEDILLA'),
    ('acute', 'ACUTE'),
    ('grave', 'GRAVE'),
    ('tilde', 'TILDE'),
    ('caron', 'CARON'),
    ('ring', 'RING ABOVE'),
)


def _compose_accented(glyph_name: str) -> Optional[str]:
    """Resolve names like ``Aacute`` via 'LATIN CAPITAL LETTER A WITH ACUTE'."""
    for suffix, accent in _ACCENT_SUFFIXES:
        if glyph_name.endswith(suffix) and len(glyph_name) == len(suffix) + 1:
            base = glyph_name[0]
            if not base.isascii() or not base.isalpha():
                return None
            case = 'CAPITAL' if base.isupper() else 'SMALL'
            try:
                return unicodedata.lookup(f"LATIN {case} LETTER {base.upper()} WITH {accent}")
            except KeyError:
                return None
    return None


def glyph_name_to_unicode(glyph_name: str) -> Optional[str]:
    """
    Map a PostScript glyph name to its Unicode character.

    Args:
        glyph_name: Glyph name (e.g., 'A', 'space', 'Agrave', 'uni20AC')

    Returns:
        The Unicode character, or None for names that cannot be resolved.
    """
    if isinstance(glyph_name, bytes):
        glyph_name = glyph_name.decode('latin-1')

    if glyph_name in GLYPH_TO_UNICODE:
        return GLYPH_TO_UNICODE[glyph_name]

    # Single character name is the character itself
    if len(glyph_name) == 1:
        return glyph_name

    accented = _compose_accented(glyph_name)
    if accented is not None:
        return accented

    # uniXXXX format (e.g., uni0041 = 'A')
    if glyph_name.startswith('uni') and len(glyph_name) == 7:
        try:
            return chr(int(glyph_name[3:], 16))
        except ValueError:
            return None

    # uXXXX or uXXXXX format (e.g., u0041, u1F600)
    if glyph_name.startswith('u') and len(glyph_name) in (5, 6):
        try:
            return chr(int(glyph_name[1:], 16))
        except ValueError:
            return None

    return None
