"""
HTML table rendering.

``render_table`` produces a table fragment for one view; ``build_page`` wraps
the fragments of a whole document into a self-contained HTML page with inline
CSS and, optionally, the original YAML source. The page loads no external
resources.
"""

from __future__ import annotations

import html
from typing import List, Optional, Sequence, Tuple

from yrxlsim.render.views import SheetView

NBSP = "\u00a0"

STYLESHEET = """\
body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; margin: 1.5em; }
.yrxlsim-sheet { overflow-x: auto; border: 1px solid #d4d4d4; display: inline-block; }
.yrxlsim-table { border-collapse: collapse; font-size: 13px; font-family: Menlo, Consolas, monospace; }
.yrxlsim-table th, .yrxlsim-table td { border: 1px solid #d4d4d4; padding: 2px 8px; white-space: pre; }
.yrxlsim-table th { background: #f3f3f3; color: #555; font-weight: normal; text-align: center; }
.yrxlsim-corner { background: #e8e8e8; }
.yrxlsim-cell { min-width: 3em; }
.yrxlsim-formula { color: #1a5fb4; }
.yrxlsim-standalone-section { margin: 1.5em 0; }
.yrxlsim-standalone-section h2 { font-size: 1em; color: #555; margin-bottom: 0.25em; }
.yrxlsim-sheet-label { font-size: 0.85em; font-weight: 600; color: #666; margin-top: 1em; margin-bottom: 0.25em; }
.yrxlsim-source pre { background: #f7f7f7; padding: 0.75em; overflow-x: auto; }
"""


def render_table(view: SheetView) -> str:
    """Render a view as an HTML table fragment.

    Formula cells of a formulas view get the ``yrxlsim-formula`` class; empty
    cells hold a non-breaking space.
    """
    parts = ['<div class="yrxlsim-sheet"><table class="yrxlsim-table"><thead><tr>'
             '<th class="yrxlsim-corner"></th>']
    for letters in view.column_letters:
        parts.append(f'<th class="yrxlsim-col-header">{html.escape(letters)}</th>')
    parts.append("</tr></thead><tbody>")

    for r in range(view.max_row):
        texts = view.texts[r] if r < len(view.texts) else []
        mask = view.formula_mask[r] if r < len(view.formula_mask) else []
        parts.append(f'<tr><th class="yrxlsim-row-header">{r + 1}</th>')
        for c in range(view.max_col):
            text = texts[c] if c < len(texts) else ""
            formula = view.kind == "formulas" and c < len(mask) and mask[c]
            css = "yrxlsim-cell yrxlsim-formula" if formula else "yrxlsim-cell"
            parts.append(f'<td class="{css}">{html.escape(text or NBSP)}</td>')
        parts.append("</tr>")

    parts.append("</tbody></table></div>")
    return "".join(parts)


def sheet_label(number: int) -> str:
    return f'<div class="yrxlsim-sheet-label">Sheet {number}</div>'


def build_page(
    sheets: Sequence[Tuple[Optional[SheetView], Optional[SheetView]]],
    view: str = "both",
    source: Optional[str] = None,
    title: str = "yrxlsim sheet",
) -> str:
    """Build a standalone HTML page from (formulas, values) view pairs.

    Args:
        sheets: One (formulas view, values view) pair per sheet; a view
                that is not shown may be None
        view: ``formulas``, ``values`` or ``both``
        source: Optional original YAML, embedded escaped in a <details> block
        title: Page title

    Returns:
        A complete HTML document string
    """
    labelled = len(sheets) > 1
    formulas_html: List[str] = []
    values_html: List[str] = []
    for number, (formulas, values) in enumerate(sheets, start=1):
        if labelled:
            formulas_html.append(sheet_label(number))
            values_html.append(sheet_label(number))
        if formulas is not None:
            formulas_html.append(render_table(formulas))
        if values is not None:
            values_html.append(render_table(values))

    sections = []
    if view in ("formulas", "both"):
        sections.append(
            '<div class="yrxlsim-standalone-section"><h2>Formulas</h2>'
            + "".join(formulas_html) + "</div>"
        )
    if view in ("values", "both"):
        sections.append(
            '<div class="yrxlsim-standalone-section"><h2>Values</h2>'
            + "".join(values_html) + "</div>"
        )
    if source is not None:
        sections.append(
            '<details class="yrxlsim-source"><summary>YAML source</summary>'
            f"<pre>{html.escape(source)}</pre></details>"
        )

    body = "\n".join(sections)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="generator" content="yrxlsim">
  <title>{html.escape(title)}</title>
  <style>
{STYLESHEET}  </style>
</head>
<body>
{body}
</body>
</html>
"""
