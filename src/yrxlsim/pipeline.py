"""
End-to-end rendering utilities.

Each function runs the full pipeline (select sheets, expand fill, resolve
cells, build views, serialize) on an already-parsed document or on source
text. Collaborators (document parser, value evaluator) come from the
RenderConfig passed in, or from ``default_config()``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import yaml
from loguru import logger

from yrxlsim.config import DEFAULT_FORMAT, DEFAULT_VIEW, RenderConfig, check_options, default_config
from yrxlsim.engine.resolver import build_effective_grid
from yrxlsim.exceptions import DocumentParseError, InvalidDocumentError
from yrxlsim.render.ascii import render_ascii_views
from yrxlsim.render.html import build_page, render_table, sheet_label
from yrxlsim.render.views import SheetView, build_formulas_view, build_values_view
from yrxlsim.spreadsheet.sheet import SheetSpec, get_sheets

ViewPair = Tuple[Optional[SheetView], Optional[SheetView]]


def load_document(text: str, config: Optional[RenderConfig] = None) -> Any:
    """Parse source text with the configured document parser.

    Raises:
        DocumentParseError: If the parser rejects the text
    """
    config = config or default_config()
    try:
        return config.parser(text)
    except (yaml.YAMLError, ValueError) as e:
        raise DocumentParseError(f"Error parsing YAML: {e}") from e


def _check_root(document: Any) -> None:
    if not isinstance(document, dict):
        raise InvalidDocumentError(
            f"document root must be a mapping, got {type(document).__name__}"
        )


def sheet_views(sheet: Any, view: str = DEFAULT_VIEW, config: Optional[RenderConfig] = None) -> ViewPair:
    """Build the views of one sheet that *view* asks for (the other is None).

    Args:
        sheet: A SheetSpec or a raw sheet mapping
        view: ``formulas``, ``values`` or ``both``
        config: Collaborators; defaults to ``default_config()``

    Returns:
        (formulas view or None, values view or None)
    """
    config = config or default_config()
    spec = sheet if isinstance(sheet, SheetSpec) else SheetSpec.from_dict(sheet)
    effective = build_effective_grid(spec)
    formulas = build_formulas_view(effective) if view in ("formulas", "both") else None
    values = build_values_view(spec, effective, config.evaluator) if view in ("values", "both") else None
    return formulas, values


def render_sheet(
    sheet: Any,
    format: str = DEFAULT_FORMAT,
    view: str = DEFAULT_VIEW,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render a single sheet to ASCII or an HTML fragment."""
    check_options(format, view)
    formulas, values = sheet_views(sheet, view, config)
    if format == "ascii":
        return render_ascii_views(formulas, values, view)
    return "".join(render_table(v) for v in (formulas, values) if v is not None)


def render_document(
    document: Any,
    format: str = DEFAULT_FORMAT,
    view: str = DEFAULT_VIEW,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render every sheet of a parsed document.

    With more than one sheet each rendered block is labelled with its
    1-based sheet number.

    Raises:
        InvalidDocumentError: If the root is not a mapping or a sheet is invalid
        TemplateNotFoundError: If a fill operation names a missing template
        ValueError: If format or view is not recognised
    """
    check_options(format, view)
    _check_root(document)
    sheets = get_sheets(document)
    labelled = len(sheets) > 1
    logger.debug("Rendering {} sheet(s) as {} ({})", len(sheets), format, view)

    parts: List[str] = []
    for number, sheet in enumerate(sheets, start=1):
        rendered = render_sheet(sheet, format, view, config)
        if format == "ascii":
            parts.append(f"--- Sheet {number} ---\n\n{rendered}" if labelled else rendered)
        else:
            parts.append(sheet_label(number) + rendered if labelled else rendered)
    return "\n\n".join(parts) if format == "ascii" else "".join(parts)


def render_text(
    text: str,
    format: str = DEFAULT_FORMAT,
    view: str = DEFAULT_VIEW,
    config: Optional[RenderConfig] = None,
) -> str:
    """Parse source text and render it (see ``render_document``)."""
    config = config or default_config()
    return render_document(load_document(text, config), format, view, config)


def build_html_page(
    document: Any,
    view: str = DEFAULT_VIEW,
    config: Optional[RenderConfig] = None,
    source: Optional[str] = None,
) -> str:
    """Render a parsed document as a standalone HTML page.

    Args:
        document: Parsed document (single sheet or ``sheets:`` list)
        view: ``formulas``, ``values`` or ``both``
        config: Collaborators; defaults to ``default_config()``
        source: Original source text to embed for reference
    """
    check_options("html", view)
    _check_root(document)
    pairs = [sheet_views(sheet, view, config) for sheet in get_sheets(document)]
    return build_page(pairs, view=view, source=source)
