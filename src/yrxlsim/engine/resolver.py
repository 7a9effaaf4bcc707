"""
Grid resolution.

After fill expansion the sparse ``cells`` map is applied once more, so explicit
cell authoring always has the final say over generated content. The used
range of the resolved grid sizes every rendered view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from yrxlsim.engine.expander import expand_fill
from yrxlsim.spreadsheet.grid import Grid, used_range
from yrxlsim.spreadsheet.sheet import SheetSpec


@dataclass
class EffectiveGrid:
    """The resolved content of one sheet.

    Attributes:
        grid: Resolved grid (fill output with explicit cells on top)
        max_row: Rows in the used range
        max_col: Columns in the used range
    """
    grid: Grid
    max_row: int
    max_col: int

    def dense(self, min_cols: int = 1) -> List[List[str]]:
        """Rectangular copy of the used range, padded with empty strings."""
        width = max(self.max_col, min_cols)
        return [
            [self.grid.get(row, col) for col in range(width)]
            for row in range(1, self.max_row + 1)
        ]


def resolve_grid(sheet: SheetSpec, expanded: Grid) -> Grid:
    """Return a copy of *expanded* with the sheet's explicit cells re-applied."""
    grid = expanded.copy()
    grid.apply_cells(sheet.cells)
    return grid


def build_effective_grid(sheet: Any) -> EffectiveGrid:
    """Expand and resolve a sheet (a SheetSpec or a raw sheet mapping).

    Raises:
        InvalidDocumentError: If the sheet is malformed or empty
        TemplateNotFoundError: If a row/column fill names a missing template
    """
    if not isinstance(sheet, SheetSpec):
        sheet = SheetSpec.from_dict(sheet)
    grid = resolve_grid(sheet, expand_fill(sheet))
    bounds = used_range(grid, sheet.cells)
    return EffectiveGrid(grid=grid, max_row=bounds.max_row, max_col=bounds.max_col)
