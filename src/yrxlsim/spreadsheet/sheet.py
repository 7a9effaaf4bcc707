"""
Sheet documents.

A SheetSpec is the read-only description of one sheet: literal rows, a sparse
A1-keyed cell map, fill rules, optional value overrides and opaque metadata.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from yrxlsim.exceptions import InvalidDocumentError
from yrxlsim.spreadsheet.model import cell_text, parse_address
from yrxlsim.spreadsheet.operations import FillOp, parse_fill_ops


@dataclass
class SheetSpec:
    """One sheet's authored content.

    Attributes:
        rows: Literal rows, anchored at A1
        cells: Sparse A1-keyed patch applied before and after fill expansion
        fill: Parsed fill operations in document order
        values: Optional value overrides (A1-keyed mapping or dense rows)
        meta: Optional hints for the value evaluator (e.g. ``seed``)
        fill_entries: Number of raw fill entries, including skipped ones
    """
    rows: List[List[str]] = field(default_factory=list)
    cells: Dict[str, str] = field(default_factory=dict)
    fill: List[FillOp] = field(default_factory=list)
    values: Optional[Union[Dict[str, Any], List[List[Any]]]] = None
    meta: Dict[str, Any] = field(default_factory=dict)
    fill_entries: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "SheetSpec":
        """Build a SheetSpec from one parsed sheet mapping.

        Raises:
            InvalidDocumentError: If data or one of its sections has the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidDocumentError(f"sheet must be a mapping, got {type(data).__name__}")

        raw_rows = data.get("rows") or []
        if not isinstance(raw_rows, list):
            raise InvalidDocumentError("'rows' must be a list of rows")
        rows = []
        for i, row in enumerate(raw_rows):
            if row is None:
                row = []
            if not isinstance(row, list):
                raise InvalidDocumentError(f"rows[{i}] must be a list of cells")
            rows.append([cell_text(cell) for cell in row])

        raw_cells = data.get("cells") or {}
        if not isinstance(raw_cells, dict):
            raise InvalidDocumentError("'cells' must be a mapping of A1 addresses")
        cells = {str(key): cell_text(value) for key, value in raw_cells.items()}
        for key in cells:
            if ":" in key:
                logger.warning("Ignoring range key {!r} in cells; use a block fill instead", key)

        raw_fill = data.get("fill") or []
        if not isinstance(raw_fill, list):
            raise InvalidDocumentError("'fill' must be a list of fill operations")

        values = data.get("values")
        if values is not None and not isinstance(values, (dict, list)):
            raise InvalidDocumentError("'values' must be a mapping or a list of rows")

        meta = data.get("meta") or {}
        if not isinstance(meta, dict):
            raise InvalidDocumentError("'meta' must be a mapping")

        return cls(
            rows=rows,
            cells=cells,
            fill=parse_fill_ops(raw_fill),
            values=values,
            meta=meta,
            fill_entries=len(raw_fill),
        )

    def has_content(self) -> bool:
        """True if rows, cells or fill supply at least one cell."""
        if any(cell != "" for row in self.rows for cell in row):
            return True
        if any(":" not in key and parse_address(key) for key in self.cells):
            return True
        return self.fill_entries > 0

    @property
    def seed(self) -> Any:
        return self.meta.get("seed")


def get_sheets(document: Any) -> List[Any]:
    """Return the sheet mappings of a parsed document.

    A root with a non-empty ``sheets`` list yields that list; any other mapping
    is itself the single sheet. None and non-mappings yield an empty list.
    """
    if not isinstance(document, dict):
        return []
    sheets = document.get("sheets")
    if isinstance(sheets, list) and sheets:
        return sheets
    return [document]
