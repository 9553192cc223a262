# Folio - A Single-Page PDF Typesetter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Folio Types Package - Public API

This package provides the PDF object model used by Folio. All object types
and constants are available through this single namespace to support the
standard import pattern: `from core import types as pdf`

**Internal Module Organization:**
- constants.py: type tags, file-structure constants and page geometry
- base.py: PDFObject and Stream base classes
- primitive.py: Bool, Numeric, Reference, Raw
- composite/: Name, HexString, Array, Dict
- graphics.py: TextObject, RuleObject, ContentStream
- document.py: Document and WriteCounter

**Usage:**
```python
from folio.core import types as pdf

doc = pdf.Document()
catalog = pdf.Dict({"Type": pdf.Name("Catalog"), "Pages": pdf.Reference(2)})
doc.add(catalog)
with open("out.pdf", "wb") as f:
    doc.write_pdf(f)
```
"""

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

from .constants import *
from .base import *
from .primitive import *
from .composite import *
from .graphics import *
from .document import *
