"""
Fill operation classes.

This module defines the four shapes a ``fill`` entry of a sheet document can take:
- BlockFill: Write one literal value into every cell of a range
- RowFill: Replicate (and optionally extend) a template row
- ColumnFill: Replicate (and optionally extend) a template column
- CellFill: Replicate a single template cell over a rectangle

The shape is decided once, when the document is parsed, from the keys that are
present (first match wins, in the order above). The expansion engine then
dispatches on the class instead of re-inspecting raw mappings.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger

from yrxlsim.exceptions import InvalidDocumentError, InvalidReferenceError
from yrxlsim.spreadsheet.model import (
    Address,
    Range,
    cell_text,
    col_index_to_letters,
    col_letters_to_index,
)


@dataclass
class BlockFill:
    """Write a literal value into every cell of a range (no reference rewriting).

    Attributes:
        target: The normalized target range
        value: Cell content written to each cell
        index: Position of the operation in the document's fill list
    """
    target: Range
    value: str
    index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to document representation."""
        return {"range": self.target.to_a1(), "value": self.value}


@dataclass
class RowFill:
    """Extend a template row sideways, then replicate it up and down.

    Attributes:
        row: Template row number (1-based)
        down: Rows to fill below the template
        up: Rows to fill above the template
        right: Columns to extend past the template's last column
        left: Columns to extend before column A (always clamped away)
        index: Position of the operation in the document's fill list
    """
    row: int
    down: int = 0
    up: int = 0
    right: Optional[int] = None
    left: int = 0
    to_col: Optional[int] = None
    index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to document representation."""
        data: Dict[str, Any] = {"row": self.row, "down": self.down, "up": self.up, "left": self.left}
        if self.right is not None:
            data["right"] = self.right
        if self.to_col is not None:
            data["toCol"] = col_index_to_letters(self.to_col)
        return data


@dataclass
class ColumnFill:
    """Extend a template column up/down, then replicate it left and right.

    Attributes:
        col: Template column index (0-based)
        right: Columns to fill right of the template
        left: Columns to fill left of the template
        down: Rows to extend past the template's lowest defined cell
        up: Rows to extend above the template's topmost defined cell
        to_row: Target last row; converted to ``down`` against the template bottom
        index: Position of the operation in the document's fill list
    """
    col: int
    right: int = 0
    left: int = 0
    down: Optional[int] = None
    up: int = 0
    to_row: Optional[int] = None
    index: int = 0

    @property
    def letters(self) -> str:
        return col_index_to_letters(self.col)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to document representation."""
        data: Dict[str, Any] = {"col": self.letters, "right": self.right, "left": self.left, "up": self.up}
        if self.down is not None:
            data["down"] = self.down
        if self.to_row is not None:
            data["toRow"] = self.to_row
        return data


@dataclass
class CellFill:
    """Replicate the cell at ``start`` over a rectangle, rewriting references.

    The rectangle is either ``start``..``to`` or ``start`` grown by the offsets.

    Attributes:
        start: Template cell
        to: Optional opposite corner
        down, up, right, left: Offsets used when ``to`` is absent
        index: Position of the operation in the document's fill list
    """
    start: Address
    to: Optional[Address] = None
    down: int = 0
    up: int = 0
    right: int = 0
    left: int = 0
    index: int = 0

    def target(self) -> Range:
        """Target rectangle with both corners clamped to row 1 / column A."""
        if self.to is not None:
            rect = Range.from_corners(self.start, self.to)
        else:
            rect = Range(
                r1=self.start.row - self.up,
                r2=self.start.row + self.down,
                c1=self.start.col - self.left,
                c2=self.start.col + self.right,
            )
        return Range(r1=max(1, rect.r1), r2=rect.r2, c1=max(0, rect.c1), c2=rect.c2)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to document representation."""
        if self.to is not None:
            return {"from": self.start.to_a1(), "to": self.to.to_a1()}
        return {
            "from": self.start.to_a1(),
            "down": self.down,
            "up": self.up,
            "right": self.right,
            "left": self.left,
        }


# Type alias for all fill operation types
FillOp = Union[BlockFill, RowFill, ColumnFill, CellFill]


def _offset(data: Dict[str, Any], key: str, index: int) -> Optional[int]:
    """Read an optional integer key of a fill entry."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidDocumentError(f"fill[{index}]: '{key}' must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise InvalidDocumentError(f"fill[{index}]: '{key}' must be an integer, got {value!r}")


def _present(data: Dict[str, Any], key: str) -> bool:
    return data.get(key) is not None


def fill_op_from_dict(data: Dict[str, Any], index: int = 0) -> FillOp:
    """Deserialize a fill entry into its operation class.

    Args:
        data: One entry of the document's ``fill`` list
        index: Position of the entry (used in error messages)

    Returns:
        The corresponding operation object

    Raises:
        InvalidDocumentError: If an offset is not an integer or the entry is not a mapping
        InvalidReferenceError: If an address or range in the entry is malformed
        ValueError: If the entry matches no fill shape
    """
    if not isinstance(data, dict):
        raise InvalidDocumentError(f"fill[{index}] must be a mapping, got {type(data).__name__}")

    if "value" in data and (_present(data, "range") or (_present(data, "from") and _present(data, "to"))):
        if _present(data, "range"):
            target = Range.from_a1(data["range"])
        else:
            target = Range.from_corners(Address.from_a1(data["from"]), Address.from_a1(data["to"]))
        return BlockFill(target=target, value=cell_text(data["value"]), index=index)

    if _present(data, "row"):
        row = _offset(data, "row", index)
        down = _offset(data, "down", index)
        up = _offset(data, "up", index)
        to_row = _offset(data, "toRow", index)
        if to_row is not None and down is None and up is None:
            if to_row >= row:
                down = to_row - row
            else:
                up = row - to_row
        to_col = col_letters_to_index(data["toCol"]) if _present(data, "toCol") else None
        return RowFill(
            row=row,
            down=down or 0,
            up=up or 0,
            right=_offset(data, "right", index),
            left=_offset(data, "left", index) or 0,
            to_col=to_col,
            index=index,
        )

    if _present(data, "col"):
        col = col_letters_to_index(data["col"])
        right = _offset(data, "right", index)
        left = _offset(data, "left", index)
        if _present(data, "toCol") and right is None and left is None:
            to_col = col_letters_to_index(data["toCol"])
            if to_col >= col:
                right = to_col - col
            else:
                left = col - to_col
        return ColumnFill(
            col=col,
            right=right or 0,
            left=left or 0,
            down=_offset(data, "down", index),
            up=_offset(data, "up", index) or 0,
            to_row=_offset(data, "toRow", index),
            index=index,
        )

    if _present(data, "from") and "value" not in data:
        start = Address.from_a1(data["from"])
        to = Address.from_a1(data["to"]) if _present(data, "to") else None
        return CellFill(
            start=start,
            to=to,
            down=_offset(data, "down", index) or 0,
            up=_offset(data, "up", index) or 0,
            right=_offset(data, "right", index) or 0,
            left=_offset(data, "left", index) or 0,
            index=index,
        )

    raise ValueError(f"fill[{index}] matches no fill shape: keys {sorted(map(str, data))}")


def parse_fill_ops(entries: Sequence[Any]) -> List[FillOp]:
    """Parse a document's fill list, skipping malformed entries.

    Entries with a bad address or range, or with no recognisable shape, are
    logged and dropped; integer-typing errors are fatal.
    """
    ops: List[FillOp] = []
    for index, entry in enumerate(entries):
        try:
            ops.append(fill_op_from_dict(entry, index))
        except InvalidReferenceError as e:
            logger.warning("Skipping fill[{}]: {}", index, e)
        except ValueError as e:
            logger.warning("Skipping {}", e)
    return ops
