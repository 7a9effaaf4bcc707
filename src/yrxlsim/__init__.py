"""
yrxlsim - Render YAML-authored spreadsheet sheets as formula and value grids.

A sheet document describes a grid sparsely: literal rows, an A1-keyed cell
map, and fill rules that replicate template rows, columns, cells or blocks
with spreadsheet-style relative reference rewriting. yrxlsim expands the
document into a dense grid and renders it as a plain-text grid or HTML table,
showing either the formulas or their evaluated values.

Usage:
    >>> import yrxlsim
    >>> doc = {"rows": [["2", "=A1*3"]], "fill": [{"row": 1, "down": 1}]}
    >>> print(yrxlsim.render_document(doc, view="formulas"))

Key components:
- spreadsheet: A1 addressing, reference rewriting, grid store, fill operations
- engine: Fill expansion and grid resolution
- evaluator: Value evaluation via formualizer
- render: Formulas/values views, ASCII and HTML serialization
"""

from loguru import logger as _logger

# Version
__version__ = "0.1.0"

from .spreadsheet import SheetSpec, get_sheets
from .engine import EffectiveGrid, build_effective_grid
from .config import RenderConfig, default_config
from .pipeline import (
    build_html_page,
    load_document,
    render_document,
    render_sheet,
    render_text,
    sheet_views,
)
from .exceptions import *

# Library logging stays silent unless the application enables it.
_logger.disable("yrxlsim")

__all__ = [
    'SheetSpec',
    'get_sheets',
    'EffectiveGrid',
    'build_effective_grid',
    'RenderConfig',
    'default_config',
    'build_html_page',
    'load_document',
    'render_document',
    'render_sheet',
    'render_text',
    'sheet_views',
    'YrxlsimError',
    'DocumentParseError',
    'InvalidDocumentError',
    'TemplateNotFoundError',
    'InvalidReferenceError',
    'InvalidAddressError',
    'InvalidRangeError',
]
