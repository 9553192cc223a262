# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio execution logic.

Loads the résumé, applies the obfuscation transform, lays out the page and
writes the PDF. Every failure is reported as a single ``Folio Error:`` line
and turned into exit code 1.
"""

import logging

from .core.error import FolioError
from .core.font_metrics import FontMetricsRegistry
from .core.resume import load_resume, save_resume
from .devices.pdf.pdf import build_resume_document, write_document

logger = logging.getLogger(__name__)


def _obfuscate_to(resume, args):
    """Write the obfuscated form of *resume* and return an exit code."""
    try:
        save_resume(resume.obfuscate(args.passphrase), args.obfuscate_to)
    except OSError as e:
        print(f"Folio Error: Cannot write {args.obfuscate_to}: {e}")
        return 1
    print(f"Obfuscated résumé written to {args.obfuscate_to}")
    return 0


def run(args):
    """Run one Folio job described by parsed CLI arguments.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    try:
        resume = load_resume(args.inputfile)
    except OSError as e:
        print(f"Folio Error: Cannot read {args.inputfile}: {e}")
        return 1
    except FolioError as e:
        print(f"Folio Error: {e}")
        return 1

    if args.obfuscate_to:
        return _obfuscate_to(resume, args)

    if not args.plain:
        resume = resume.obfuscate(args.passphrase)

    registry = FontMetricsRegistry.get_instance()
    try:
        registry.load_directory(args.afm_dir)
        doc = build_resume_document(resume, registry)
    except OSError as e:
        print(f"Folio Error: Cannot read font metrics from {args.afm_dir}: {e}")
        return 1
    except FolioError as e:
        print(f"Folio Error: {e}")
        return 1

    logger.info("Laid out %d experience entries", len(resume.experience))

    try:
        write_document(doc, args.outputfile, compress=args.compress)
    except OSError as e:
        print(f"Folio Error: Cannot write {args.outputfile}: {e}")
        return 1

    return 0
