"""
Local value evaluator backed by formualizer.

Loads a dense grid of cell strings into a fresh in-memory formualizer
Workbook, evaluates every cell, and returns the computed values. A new
workbook is built for every call and dropped before returning, so no formula
state is shared between sheets or renders.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

import formualizer as fz
from loguru import logger

from yrxlsim.evaluator.base import ERROR_MARKER
from yrxlsim.evaluator.functions import register_seeded_functions
from yrxlsim.spreadsheet.model import is_formula, is_literal_equals

SHEET_NAME = "Sheet1"

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class FormualizerEvaluator:
    """In-process formula evaluator using formualizer.

    Usage::

        evaluator = FormualizerEvaluator()
        values = evaluator.evaluate([["2", "=A1*3"]])
        # [[2.0, 6.0]]
    """

    def evaluate(self, cells: list[list[str]], seed: Optional[float] = None) -> list[list[Any]]:
        """Evaluate *cells* and return a same-shaped grid of values.

        Formulas the engine rejects, and cells whose evaluation raises, come
        back as ``ERROR_MARKER`` instead of failing the whole grid.
        """
        wb = fz.Workbook()
        if seed is not None:
            register_seeded_functions(wb, seed)
        wb.add_sheet(SHEET_NAME)
        sheet = wb.sheet(SHEET_NAME)

        failed: set[tuple[int, int]] = set()
        for ri, data_row in enumerate(cells):
            for ci, content in enumerate(data_row):
                r = ri + 1  # formualizer is 1-indexed
                c = ci + 1
                if is_formula(content):
                    try:
                        wb.set_formula(SHEET_NAME, r, c, content.strip())
                    except Exception as e:
                        logger.warning("Formula rejected at row {} col {}: {}", r, c, e)
                        failed.add((ri, ci))
                elif content:
                    sheet.set_value(r, c, _to_literal(content))

        values: list[list[Any]] = []
        for ri, data_row in enumerate(cells):
            row: list[Any] = []
            for ci in range(len(data_row)):
                if (ri, ci) in failed:
                    row.append(ERROR_MARKER)
                    continue
                try:
                    row.append(_normalize(wb.evaluate_cell(SHEET_NAME, ri + 1, ci + 1)))
                except Exception as e:
                    logger.warning("Evaluation failed at row {} col {}: {}", ri + 1, ci + 1, e)
                    row.append(ERROR_MARKER)
            values.append(row)

        del sheet, wb
        return values


def _to_literal(text: str) -> fz.LiteralValue:
    """Convert stored cell text to a formualizer LiteralValue.

    Numeric text becomes a number and TRUE/FALSE a boolean, mirroring what a
    spreadsheet does on entry; ``'=...`` literals lose their quote.
    """
    s = text.strip()
    if is_literal_equals(s):
        return fz.LiteralValue.text(s[1:])
    if _NUMBER_RE.match(s):
        return fz.LiteralValue.number(float(s))
    if s.upper() in ("TRUE", "FALSE"):
        return fz.LiteralValue.boolean(s.upper() == "TRUE")
    if not s:
        return fz.LiteralValue.empty()
    return fz.LiteralValue.text(s)


def _normalize(value: Any) -> Any:
    """Normalise a cell value returned by formualizer.

    * ``None`` → ``""``
    * Error dicts → the spreadsheet error code (e.g. ``#DIV/0!``); generic
      engine errors such as an unparseable formula → ``ERROR_MARKER``
    * NaN → ``""``
    """
    if value is None:
        return ""
    if isinstance(value, dict):
        return _error_text(value)
    if isinstance(value, float) and math.isnan(value):
        return ""
    return value


# formualizer error kind -> spreadsheet error code
ERROR_CODES = {
    "Div": "#DIV/0!",
    "Ref": "#REF!",
    "Name": "#NAME?",
    "Value": "#VALUE!",
    "Na": "#N/A",
    "Num": "#NUM!",
    "Null": "#NULL!",
    "Spill": "#SPILL!",
    "Calc": "#CALC!",
}


def _error_text(error: dict) -> str:
    kind = error.get("kind")
    if kind in ERROR_CODES:
        return ERROR_CODES[kind]
    for code in error.values():
        if isinstance(code, str) and code.startswith("#"):
            return code
    return ERROR_MARKER
