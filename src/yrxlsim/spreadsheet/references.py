"""Relative reference rewriting for copied formulas.

When a formula is copied by a fill rule, every relative cell reference in it
moves by the copy displacement, exactly like a spreadsheet fill handle.
``$`` locks pin the column (``$A1``), the row (``A$1``) or both (``$A$1``).
"""

from __future__ import annotations

import re

from yrxlsim.spreadsheet.model import col_index_to_letters, col_letters_to_index

# (col lock)(letters)(row lock)(digits)
CELL_REF_RE = re.compile(r"(\$?)([A-Z]+)(\$?)([0-9]+)", re.IGNORECASE)


def rewrite_references(formula: str, row_delta: int, col_delta: int) -> str:
    """Shift every unlocked reference in *formula* by the given displacement.

    Non-formulas (anything not starting with ``=``) are returned unchanged.
    Shifted references are clamped to row 1 and column A; lock markers are
    kept verbatim.

    >>> rewrite_references("=A1+$B$2", 2, 1)
    '=B3+$B$2'
    """
    if not formula or not isinstance(formula, str) or not formula.startswith("="):
        return formula

    def _shift(match: re.Match[str]) -> str:
        col_lock, letters, row_lock, digits = match.groups()
        col = col_letters_to_index(letters)
        row = int(digits)
        if not col_lock:
            col += col_delta
        if not row_lock:
            row += row_delta
        row = max(1, row)
        col = max(0, col)
        return f"{col_lock}{col_index_to_letters(col)}{row_lock}{row}"

    return CELL_REF_RE.sub(_shift, formula)
