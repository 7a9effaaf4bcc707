"""
Formulas and values views of a resolved sheet.

Both views are rectangular snapshots of the used range:
- formulas: the stored content, with ``'=`` literals shown without the quote
- values: what the value evaluator computes for each cell, with any explicit
  ``values`` overrides from the sheet taking precedence
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional

import pandas as pd
from loguru import logger

from yrxlsim.engine.resolver import EffectiveGrid, build_effective_grid
from yrxlsim.evaluator.base import ERROR_MARKER, PLACEHOLDER_MARKER, ValueEvaluator
from yrxlsim.spreadsheet.model import (
    col_index_to_letters,
    display_text,
    is_formula,
    is_literal_equals,
    parse_address,
)
from yrxlsim.spreadsheet.sheet import SheetSpec


@dataclass
class SheetView:
    """One display grid.

    Attributes:
        kind: ``"formulas"`` or ``"values"``
        max_row: Number of rows shown
        max_col: Number of columns shown (at least 1)
        cells: Raw cell values (stored strings or computed values)
        texts: Display string for every cell
        formula_mask: True where a formulas-view cell holds a formula
    """
    kind: str
    max_row: int
    max_col: int
    cells: List[List[Any]]
    texts: List[List[str]]
    formula_mask: List[List[bool]]

    @property
    def column_letters(self) -> List[str]:
        return [col_index_to_letters(c) for c in range(self.max_col)]

    def to_dataframe(self) -> pd.DataFrame:
        """Display strings as a DataFrame indexed by row number, one column per letter."""
        return pd.DataFrame(
            self.texts,
            index=pd.RangeIndex(1, self.max_row + 1, name="row"),
            columns=self.column_letters,
        )


def format_value(value: Any) -> str:
    """Display string of a computed or stored value.

    Integral floats drop their ``.0``; booleans print as TRUE/FALSE.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def build_formulas_view(effective: EffectiveGrid) -> SheetView:
    """Formulas view of a resolved grid."""
    dense = effective.dense()
    return SheetView(
        kind="formulas",
        max_row=effective.max_row,
        max_col=max(effective.max_col, 1),
        cells=dense,
        texts=[[display_text(cell) for cell in row] for row in dense],
        formula_mask=[[is_formula(cell) for cell in row] for row in dense],
    )


def build_values_view(
    sheet: SheetSpec,
    effective: EffectiveGrid,
    evaluator: Optional[ValueEvaluator],
) -> SheetView:
    """Values view of a resolved grid.

    Without an evaluator every formula cell shows ``PLACEHOLDER_MARKER``; if
    the evaluator raises, every formula cell shows ``ERROR_MARKER``.
    """
    dense = effective.dense()
    if evaluator is None:
        logger.warning("No value evaluator configured; formula cells show a placeholder")
        values = _fallback_values(dense, PLACEHOLDER_MARKER)
    else:
        try:
            values = evaluator.evaluate(dense, seed=_seed(sheet))
        except Exception as e:
            logger.warning("Value evaluator failed: {}", e)
            values = _fallback_values(dense, ERROR_MARKER)

    _apply_overrides(values, sheet.values)
    return SheetView(
        kind="values",
        max_row=effective.max_row,
        max_col=max(effective.max_col, 1),
        cells=values,
        texts=[[format_value(v) for v in row] for row in values],
        formula_mask=[[False] * len(row) for row in values],
    )


def build_views(sheet: Any, evaluator: Optional[ValueEvaluator]) -> tuple[SheetView, SheetView]:
    """Formulas and values views for a sheet (SheetSpec or raw mapping)."""
    if not isinstance(sheet, SheetSpec):
        sheet = SheetSpec.from_dict(sheet)
    effective = build_effective_grid(sheet)
    return build_formulas_view(effective), build_values_view(sheet, effective, evaluator)


def _fallback_values(dense: List[List[str]], marker: str) -> List[List[Any]]:
    values = []
    for row in dense:
        out = []
        for cell in row:
            if is_literal_equals(cell):
                out.append(cell[1:])
            elif is_formula(cell):
                out.append(marker)
            else:
                out.append(cell)
        values.append(out)
    return values


def _seed(sheet: SheetSpec) -> Optional[float]:
    seed = sheet.seed
    if seed is None:
        return None
    try:
        return float(seed)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric meta.seed: {!r}", seed)
        return None


def _apply_overrides(values: List[List[Any]], overrides: Any) -> None:
    """Replace computed values in place; None entries mean "no override"."""
    if not overrides:
        return
    if isinstance(overrides, dict):
        for key, value in overrides.items():
            address = parse_address(key)
            if address is None or value is None:
                continue
            r = address.row - 1
            if r < len(values) and address.col < len(values[r]):
                values[r][address.col] = value
    else:
        for r, row in enumerate(overrides[:len(values)]):
            if not isinstance(row, list):
                continue
            for c, value in enumerate(row[:len(values[r])]):
                if value is not None:
                    values[r][c] = value
