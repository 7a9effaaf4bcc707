"""
Fill expansion engine.

Builds the initial grid of a sheet (literal rows with the sparse cell map
overlaid) and replays its fill operations against it in document order.
Each operation mutates the grid in place, so later operations overwrite
earlier results where they overlap.

Template-based fills always establish the effective template span first
(extension) and only then copy that whole span (replication). Targets that
would land above row 1 or left of column A are dropped, never reported.
"""

from __future__ import annotations

from loguru import logger

from yrxlsim.exceptions import InvalidDocumentError, TemplateNotFoundError
from yrxlsim.spreadsheet.grid import Grid
from yrxlsim.spreadsheet.model import is_formula
from yrxlsim.spreadsheet.operations import BlockFill, CellFill, ColumnFill, FillOp, RowFill
from yrxlsim.spreadsheet.references import rewrite_references
from yrxlsim.spreadsheet.sheet import SheetSpec

EMPTY_SHEET_MESSAGE = (
    "invalid sheet: at least one of rows, cells, or fill must supply at least one cell"
)


def expand_fill(sheet: SheetSpec) -> Grid:
    """Build a sheet's initial grid and apply every fill operation to it.

    Raises:
        InvalidDocumentError: If the sheet supplies no cell at all
        TemplateNotFoundError: If a row/column fill names a missing template
    """
    if not sheet.has_content():
        raise InvalidDocumentError(EMPTY_SHEET_MESSAGE)

    grid = Grid(sheet.rows)
    grid.apply_cells(sheet.cells)

    for op in sheet.fill:
        logger.debug("Applying fill[{}]: {}", op.index, op.to_dict())
        apply_fill_op(grid, op)
    return grid


def apply_fill_op(grid: Grid, op: FillOp) -> None:
    """Apply a single fill operation to *grid* in place."""
    if isinstance(op, BlockFill):
        _apply_block_fill(grid, op)
    elif isinstance(op, RowFill):
        _apply_row_fill(grid, op)
    elif isinstance(op, ColumnFill):
        _apply_column_fill(grid, op)
    elif isinstance(op, CellFill):
        _apply_cell_fill(grid, op)
    else:
        raise TypeError(f"Unknown fill operation: {type(op).__name__}")


def _copy_content(content: str, row_delta: int, col_delta: int) -> str:
    """Content of a copied cell: formulas are rewritten, anything else is verbatim."""
    if is_formula(content):
        return rewrite_references(content, row_delta, col_delta)
    return content or ""


def _apply_block_fill(grid: Grid, op: BlockFill) -> None:
    for row, col in op.target.cells():
        grid.set(row, col, op.value)


def _apply_row_fill(grid: Grid, op: RowFill) -> None:
    template = op.row
    if template < 1 or len(grid) < template:
        raise TemplateNotFoundError("row", template, op.index)

    last_col = max(0, len(grid.row(template)) - 1)
    if op.right is not None:
        right = op.right
    elif op.to_col is not None:
        right = max(0, op.to_col - last_col)
    else:
        right = 0

    # Snapshot of the template span before anything is written.
    span = [grid.get(template, col) for col in range(last_col + 1)]
    first_target = max(0, -op.left)
    last_target = last_col + right

    def source(col: int):
        if col <= last_col:
            return span[col], 0
        return span[last_col], col - last_col

    # The template row stays as authored; only target rows receive the
    # extended span.
    for row in range(template - op.up, template + op.down + 1):
        if row == template or row < 1:
            continue
        row_delta = row - template
        for col in range(first_target, last_target + 1):
            content, col_delta = source(col)
            grid.set(row, col, _copy_content(content, row_delta, col_delta))


def _apply_column_fill(grid: Grid, op: ColumnFill) -> None:
    col = op.col
    bottom = next((r for r in range(len(grid), 0, -1) if grid.is_defined(r, col)), 0)
    if bottom == 0:
        raise TemplateNotFoundError("column", op.letters, op.index)
    top = next(r for r in range(1, bottom + 1) if grid.is_defined(r, col))

    if op.down is not None:
        down = op.down
    elif op.to_row is not None:
        down = max(0, op.to_row - bottom)
    else:
        down = 0

    # Snapshot of the template span before anything is written.
    span = {row: grid.get(row, col) for row in range(top, bottom + 1)}
    first_row = max(1, top - op.up)
    last_row = bottom + down

    def source(row: int):
        if row < top:
            return span[top], row - top
        if row > bottom:
            return span[bottom], row - bottom
        return span[row], 0

    # Extension: the template column itself grows up and down.
    for row in list(range(first_row, top)) + list(range(bottom + 1, last_row + 1)):
        content, row_delta = source(row)
        grid.set(row, col, _copy_content(content, row_delta, 0))

    # Replication of the extended span to every target column.
    for target_col in range(col - op.left, col + op.right + 1):
        if target_col == col or target_col < 0:
            continue
        col_delta = target_col - col
        for row in range(first_row, last_row + 1):
            content, row_delta = source(row)
            grid.set(row, target_col, _copy_content(content, row_delta, col_delta))


def _apply_cell_fill(grid: Grid, op: CellFill) -> None:
    template = grid.get(op.start.row, op.start.col)
    for row, col in op.target().cells():
        row_delta = row - op.start.row
        col_delta = col - op.start.col
        grid.set(row, col, _copy_content(template, row_delta, col_delta))
