# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
Font metrics: advance widths for the fonts a page is typeset in.

Metrics come from two places:
  - AFM files in a metrics directory (``<FontName>.afm``), parsed on load
  - built-in tables for the Standard 14 fonts the résumé layout uses

Only the character metrics section of an AFM file is read: one
``C <code> ; WX <width> ; N <glyph> ; ...`` line per glyph. Widths are in
1/1000 of the font size.
"""

import glob
import logging
import os
from typing import Iterable

from .error import FontMetricsError
from .standard_metrics import STANDARD_WIDTHS
from .unicode_mapping import glyph_name_to_unicode

logger = logging.getLogger(__name__)


class FontMetrics:
    """Advance widths of one font, by character and by glyph name."""

    __slots__ = ('name', 'rune_width', 'named_width')

    def __init__(self, name: str, rune_width: dict[str, int] | None = None,
                 named_width: dict[str, int] | None = None) -> None:
        self.name = name
        self.rune_width = rune_width if rune_width is not None else {}
        self.named_width = named_width if named_width is not None else {}

    @classmethod
    def from_standard(cls, name: str) -> FontMetrics:
        """Build metrics from the built-in Standard 14 tables."""
        widths = STANDARD_WIDTHS[name]
        return cls(name, {chr(code): w for code, w in widths.items()})

    def char_width(self, char: str | int) -> int:
        """Advance width of one character; characters without metrics are zero-width."""
        if isinstance(char, int):
            char = chr(char)
        return self.rune_width.get(char, 0)

    def width(self, pt: float, text: str) -> float:
        """Width of ``text`` set at ``pt`` points."""
        w = 0.0
        for c in text:
            w += self.rune_width.get(c, 0) * pt / 1000.0
        return w

    def __repr__(self) -> str:
        return f"FontMetrics({self.name!r}, {len(self.rune_width)} characters)"


def _parse_char_metrics(line: str) -> tuple[int, int, str]:
    """Split a ``C`` line into (code, width, glyph name)."""
    fields = {}
    for part in line.split(';'):
        tokens = part.split()
        if tokens:
            fields[tokens[0]] = tokens[1:]
    code = int(fields['C'][0])
    width = int(fields['WX'][0])
    glyph = fields['N'][0]
    return code, width, glyph


def parse_afm(lines: Iterable[str], name: str) -> FontMetrics:
    """
    Parse the character metrics of an AFM file.

    The character for a glyph is resolved from its glyph name, falling back
    to the character code for names that are not recognised. Unencoded
    glyphs (code -1) with unrecognised names are only kept by name.

    Args:
        lines: Lines of the AFM file
        name: Font name the metrics are registered under

    Returns:
        FontMetrics for the font

    Raises:
        FontMetricsError: If a character metrics line is malformed.
    """
    metrics = FontMetrics(name)
    for line_num, line in enumerate(lines, start=1):
        line = line.strip()
        if not line.startswith("C "):
            continue
        try:
            code, width, glyph = _parse_char_metrics(line)
        except (KeyError, IndexError, ValueError) as exc:
            raise FontMetricsError(
                f"Error parsing AFM line {line_num} of {name!r}: {line!r}"
            ) from exc

        metrics.named_width[glyph] = width

        char = glyph_name_to_unicode(glyph)
        if char is None:
            if code == -1:
                continue
            char = chr(code)
        metrics.rune_width[char] = width
    return metrics


def load_afm_file(file_path: str) -> FontMetrics:
    """Load one AFM file; the font name is the file name without extension."""
    name = os.path.splitext(os.path.basename(file_path))[0]
    with open(file_path, "r", encoding="latin-1") as f:
        return parse_afm(f, name)


class FontMetricsRegistry:
    """Singleton registry mapping font names to their metrics."""

    _instance = None

    def __init__(self) -> None:
        self._fonts: dict[str, FontMetrics] = {}   # {font_name: metrics}

    @classmethod
    def get_instance(cls) -> FontMetricsRegistry:
        """Return the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, metrics: FontMetrics) -> None:
        self._fonts[metrics.name] = metrics

    def load_directory(self, directory: str) -> int:
        """Load every ``*.afm`` file in *directory*.

        A missing directory is not an error: the built-in metrics still apply.

        Returns:
            Number of fonts loaded.
        """
        if not os.path.isdir(directory):
            logger.info("AFM directory %s not found, using built-in metrics", directory)
            return 0

        filenames = sorted(glob.glob(os.path.join(directory, "*.afm")))
        for filename in filenames:
            self.register(load_afm_file(filename))
        logger.info("Loaded %d AFM font metrics from %s", len(filenames), directory)
        return len(filenames)

    def get(self, font_name: str) -> FontMetrics:
        """Return metrics for *font_name*.

        Raises:
            FontMetricsError: If no AFM file or built-in table covers the font.
        """
        metrics = self._fonts.get(font_name)
        if metrics is not None:
            return metrics
        if font_name in STANDARD_WIDTHS:
            metrics = FontMetrics.from_standard(font_name)
            self._fonts[font_name] = metrics
            return metrics
        raise FontMetricsError(f"Could not find font metrics for font {font_name!r}")

    def names(self) -> list[str]:
        """Return all font names with metrics available."""
        return sorted(set(self._fonts) | set(STANDARD_WIDTHS))

    def reset(self) -> None:
        """Forget all loaded fonts."""
        self._fonts.clear()
