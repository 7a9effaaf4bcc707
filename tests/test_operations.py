"""
Tests for fill operation parsing and sheet documents.

Tests cover:
- Shape selection (block, row, column, cell; first match wins)
- Offset typing and toRow / toCol derivation
- Skipping of malformed entries
- SheetSpec validation and get_sheets
"""

import pytest

from yrxlsim.exceptions import InvalidAddressError, InvalidDocumentError, InvalidRangeError
from yrxlsim.spreadsheet.model import Address, Range
from yrxlsim.spreadsheet.operations import (
    BlockFill,
    CellFill,
    ColumnFill,
    RowFill,
    fill_op_from_dict,
    parse_fill_ops,
)
from yrxlsim.spreadsheet.sheet import SheetSpec, get_sheets


class TestFillShapes:
    """Test suite for deciding the shape of a fill entry."""

    def test_block_fill_with_range(self):
        op = fill_op_from_dict({"range": "B2:A1", "value": "=1+1"})
        assert isinstance(op, BlockFill)
        assert op.target == Range(r1=1, r2=2, c1=0, c2=1)
        assert op.value == "=1+1"

    def test_block_fill_with_from_and_to(self):
        op = fill_op_from_dict({"from": "A1", "to": "C1", "value": 0})
        assert isinstance(op, BlockFill)
        assert op.value == "0"
        assert op.target.to_a1() == "A1:C1"

    def test_block_wins_over_row(self):
        """An entry with both value+range and row is a block fill."""
        op = fill_op_from_dict({"range": "A1:A2", "value": "x", "row": 1})
        assert isinstance(op, BlockFill)

    def test_row_fill(self):
        op = fill_op_from_dict({"row": 2, "down": 3, "right": 1}, index=4)
        assert op == RowFill(row=2, down=3, up=0, right=1, left=0, index=4)

    def test_row_wins_over_col(self):
        op = fill_op_from_dict({"row": 1, "col": "B"})
        assert isinstance(op, RowFill)

    def test_column_fill(self):
        op = fill_op_from_dict({"col": "c", "left": 2})
        assert isinstance(op, ColumnFill)
        assert op.col == 2
        assert op.letters == "C"
        assert op.left == 2
        assert op.down is None

    def test_cell_fill_with_offsets(self):
        op = fill_op_from_dict({"from": "A5", "up": 3})
        assert op == CellFill(start=Address(row=5, col=0), up=3)

    def test_cell_fill_with_to(self):
        op = fill_op_from_dict({"from": "B2", "to": "D4"})
        assert isinstance(op, CellFill)
        assert op.target() == Range(r1=2, r2=4, c1=1, c2=3)

    def test_from_with_value_but_no_to_matches_nothing(self):
        """``from`` plus ``value`` without ``to`` is neither block nor cell fill."""
        with pytest.raises(ValueError, match="matches no fill shape"):
            fill_op_from_dict({"from": "A1", "value": "x"})

    def test_unknown_shape(self):
        with pytest.raises(ValueError, match="fill\\[3\\]"):
            fill_op_from_dict({"foo": 1}, index=3)

    def test_non_mapping_entry(self):
        with pytest.raises(InvalidDocumentError, match="must be a mapping"):
            fill_op_from_dict(["row", 1])


class TestOffsets:
    """Test suite for integer keys and derived offsets."""

    def test_integral_float_and_digit_string(self):
        op = fill_op_from_dict({"row": 2.0, "down": "3"})
        assert op.row == 2
        assert op.down == 3

    def test_non_integer_offset_is_fatal(self):
        with pytest.raises(InvalidDocumentError, match="'down' must be an integer"):
            fill_op_from_dict({"row": 1, "down": "many"})
        with pytest.raises(InvalidDocumentError):
            fill_op_from_dict({"row": 1, "down": 1.5})
        with pytest.raises(InvalidDocumentError):
            fill_op_from_dict({"row": 1, "down": True})

    def test_to_row_derives_down_for_row_fill(self):
        assert fill_op_from_dict({"row": 2, "toRow": 6}).down == 4

    def test_to_row_derives_up_for_row_fill(self):
        op = fill_op_from_dict({"row": 5, "toRow": 2})
        assert op.up == 3
        assert op.down == 0

    def test_explicit_offsets_beat_to_row(self):
        assert fill_op_from_dict({"row": 2, "toRow": 6, "down": 1}).down == 1

    def test_to_col_derives_right_and_left_for_column_fill(self):
        assert fill_op_from_dict({"col": "B", "toCol": "E"}).right == 3
        assert fill_op_from_dict({"col": "D", "toCol": "A"}).left == 3

    def test_row_fill_keeps_to_col(self):
        op = fill_op_from_dict({"row": 1, "toCol": "D"})
        assert op.to_col == 3
        assert op.right is None

    def test_column_fill_keeps_to_row(self):
        op = fill_op_from_dict({"col": "A", "toRow": 10})
        assert op.to_row == 10
        assert op.down is None

    def test_cell_fill_to_beats_offsets(self):
        op = fill_op_from_dict({"from": "A1", "to": "B2", "down": 9, "right": 9})
        assert op.target() == Range(r1=1, r2=2, c1=0, c2=1)

    def test_cell_fill_target_is_clamped(self):
        """Offsets reaching past row 1 or column A are clamped."""
        op = CellFill(start=Address(row=2, col=1), up=5, left=5)
        assert op.target() == Range(r1=1, r2=2, c1=0, c2=1)


class TestToDict:
    """Test suite for converting operations back to document form."""

    def test_block(self):
        op = BlockFill(target=Range.from_a1("C4:C8"), value="'=growth")
        assert op.to_dict() == {"range": "C4:C8", "value": "'=growth"}

    def test_row(self):
        assert RowFill(row=3, down=5).to_dict() == {"row": 3, "down": 5, "up": 0, "left": 0}
        assert RowFill(row=1, to_col=3).to_dict()["toCol"] == "D"

    def test_column(self):
        data = ColumnFill(col=2, left=2, to_row=9).to_dict()
        assert data["col"] == "C"
        assert data["toRow"] == 9
        assert "down" not in data

    def test_cell(self):
        assert CellFill(start=Address(5, 0), to=Address(8, 0)).to_dict() == {"from": "A5", "to": "A8"}


class TestParseFillOps:
    """Test suite for parsing a whole fill list."""

    def test_malformed_entries_are_skipped(self):
        """Bad addresses and unknown shapes are dropped; the rest survive in order."""
        ops = parse_fill_ops([
            {"row": 1, "down": 1},
            {"range": "A1:nope", "value": "x"},
            {"from": "A1", "to": "??"},
            {"mystery": True},
            {"col": "B", "right": 1},
        ])
        assert [type(op) for op in ops] == [RowFill, ColumnFill]
        assert [op.index for op in ops] == [0, 4]

    def test_bad_offsets_propagate(self):
        with pytest.raises(InvalidDocumentError):
            parse_fill_ops([{"row": 1, "down": "x"}])

    def test_reference_errors_are_value_errors(self):
        assert issubclass(InvalidAddressError, ValueError)
        assert issubclass(InvalidRangeError, ValueError)


class TestSheetSpec:
    """Test suite for building SheetSpec from parsed mappings."""

    def test_from_dict_normalises_cells(self):
        spec = SheetSpec.from_dict({
            "rows": [[1, True, None], None],
            "cells": {"B2": 3.5},
            "meta": {"seed": 7},
        })
        assert spec.rows == [["1", "TRUE", ""], []]
        assert spec.cells == {"B2": "3.5"}
        assert spec.seed == 7

    def test_non_mapping_sheet(self):
        with pytest.raises(InvalidDocumentError, match="sheet must be a mapping, got list"):
            SheetSpec.from_dict([1, 2])

    @pytest.mark.parametrize(
        "data",
        [
            {"rows": "A1"},
            {"rows": ["not a row"]},
            {"cells": ["A1"]},
            {"fill": {"row": 1}},
            {"rows": [["x"]], "values": "1"},
            {"rows": [["x"]], "meta": [1]},
        ],
    )
    def test_wrong_section_types(self, data):
        with pytest.raises(InvalidDocumentError):
            SheetSpec.from_dict(data)

    def test_has_content(self):
        assert not SheetSpec.from_dict({"rows": [], "cells": {}, "fill": []}).has_content()
        assert not SheetSpec.from_dict({"rows": [["", None]]}).has_content()
        assert not SheetSpec.from_dict({"cells": {"A1:B2": "x", "notes": "y"}}).has_content()
        assert SheetSpec.from_dict({"cells": {"C3": "x"}}).has_content()
        assert SheetSpec.from_dict({"fill": [{"bogus": 1}]}).has_content()


class TestGetSheets:
    """Test suite for multi-sheet document handling."""

    def test_sheets_list(self):
        s1, s2 = {"rows": [["a"]]}, {"rows": [["b"]]}
        assert get_sheets({"sheets": [s1, s2]}) == [s1, s2]

    def test_sheetless_root(self):
        root = {"rows": [["a"]]}
        assert get_sheets(root) == [root]

    def test_empty_sheets_list_falls_back_to_root(self):
        root = {"sheets": [], "rows": [["a"]]}
        assert get_sheets(root) == [root]

    @pytest.mark.parametrize("document", [None, [], "text", 3])
    def test_non_mapping_yields_nothing(self, document):
        assert get_sheets(document) == []
