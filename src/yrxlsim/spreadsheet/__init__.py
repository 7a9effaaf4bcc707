"""
Spreadsheet model module.

This module provides A1 addressing, formula reference rewriting, the growable
grid store, fill operation types and sheet documents.
"""

from yrxlsim.spreadsheet.model import (
    Address,
    Range,
    col_index_to_letters,
    col_letters_to_index,
    parse_address,
    parse_range,
    is_formula,
    is_literal_equals,
    display_text,
)
from yrxlsim.spreadsheet.references import rewrite_references
from yrxlsim.spreadsheet.grid import Grid, UsedRange, clone_row, used_range
from yrxlsim.spreadsheet.operations import (
    BlockFill,
    RowFill,
    ColumnFill,
    CellFill,
    FillOp,
    fill_op_from_dict,
    parse_fill_ops,
)
from yrxlsim.spreadsheet.sheet import SheetSpec, get_sheets

__all__ = [
    "Address",
    "Range",
    "col_index_to_letters",
    "col_letters_to_index",
    "parse_address",
    "parse_range",
    "is_formula",
    "is_literal_equals",
    "display_text",
    "rewrite_references",
    "Grid",
    "UsedRange",
    "clone_row",
    "used_range",
    "BlockFill",
    "RowFill",
    "ColumnFill",
    "CellFill",
    "FillOp",
    "fill_op_from_dict",
    "parse_fill_ops",
    "SheetSpec",
    "get_sheets",
]
