"""
Growable sparse grid of cell contents.

A Grid stores rows of cell strings addressed by 1-based row and 0-based
column. It only ever grows: writing outside the current bounds appends empty
rows and pads the target row with empty cells first.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from yrxlsim.spreadsheet.model import cell_text, parse_address


@dataclass(frozen=True)
class UsedRange:
    """Bounding box of authored content.

    Attributes:
        max_row: Number of rows to display (1-based last row)
        max_col: Number of columns to display (count, not index)
    """
    max_row: int
    max_col: int


class Grid:
    """Mutable 2-D cell store owned by a single expansion pass.

    Attributes:
        rows: List of rows; each row is a list of cell strings
    """

    def __init__(self, rows: Optional[Iterable[Iterable[Any]]] = None) -> None:
        self.rows: List[List[str]] = [
            [cell_text(cell) for cell in (row or [])] for row in (rows or [])
        ]

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Grid(rows={len(self.rows)}, cols={self.width})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(row) for row in self.rows), default=0)

    def get(self, row: int, col: int) -> str:
        """Return trimmed content at (row, col), or "" if unset or past the grid.

        Raises:
            ValueError: If row < 1 or col < 0
        """
        if row < 1 or col < 0:
            raise ValueError(f"Cell coordinates out of bounds: row={row}, col={col}")
        if row > len(self.rows):
            return ""
        cells = self.rows[row - 1]
        if col >= len(cells):
            return ""
        value = cells[col]
        return value.strip() if value else ""

    def set(self, row: int, col: int, content: Any) -> None:
        """Write content at (row, col), growing the grid as needed.

        Raises:
            ValueError: If row < 1 or col < 0
        """
        if row < 1 or col < 0:
            raise ValueError(f"Cell coordinates out of bounds: row={row}, col={col}")
        while len(self.rows) < row:
            self.rows.append([])
        cells = self.rows[row - 1]
        while len(cells) <= col:
            cells.append("")
        cells[col] = cell_text(content)

    def is_defined(self, row: int, col: int) -> bool:
        """True if the row physically holds a slot at col (even an empty one)."""
        return 1 <= row <= len(self.rows) and 0 <= col < len(self.rows[row - 1])

    def row(self, row: int) -> List[str]:
        """Copy of a row's cells (empty list when the row does not exist)."""
        if row < 1 or row > len(self.rows):
            return []
        return clone_row(self.rows[row - 1])

    def copy(self) -> "Grid":
        grid = Grid()
        grid.rows = [clone_row(row) for row in self.rows]
        return grid

    def apply_cells(self, cells: Mapping[str, Any]) -> None:
        """Overlay a sparse A1-keyed cell map; range keys and non-addresses are ignored."""
        for key, value in cells.items():
            if ":" in str(key):
                continue
            address = parse_address(key)
            if address is None:
                continue
            self.set(address.row, address.col, value)

    def to_list(self) -> List[List[str]]:
        return [clone_row(row) for row in self.rows]


def clone_row(row: Optional[List[str]]) -> List[str]:
    """Shallow copy of a row for safe template reuse."""
    return list(row) if row else []


def used_range(grid: Grid, cells: Optional[Mapping[str, Any]] = None) -> UsedRange:
    """Compute the bounding box of the grid extent and every single-cell key in cells."""
    max_row = len(grid)
    max_col = grid.width
    for key in (cells or {}):
        if ":" in str(key):
            continue
        address = parse_address(key)
        if address is not None:
            max_row = max(max_row, address.row)
            max_col = max(max_col, address.col + 1)
    return UsedRange(max_row=max_row, max_col=max_col)
