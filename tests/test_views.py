"""
Tests for formulas and values views.

The values view is exercised with mock evaluators so these tests pin down
the view logic (placeholders, errors, overrides) independently of the
formula engine.
"""

from unittest.mock import Mock

import pandas as pd
import pytest

from yrxlsim.engine import build_effective_grid
from yrxlsim.evaluator import ERROR_MARKER, PLACEHOLDER_MARKER
from yrxlsim.render.views import (
    build_formulas_view,
    build_values_view,
    build_views,
    format_value,
)
from yrxlsim.spreadsheet.sheet import SheetSpec


def echo_evaluator():
    """Evaluator returning its input unchanged, recording the call."""
    evaluator = Mock()
    evaluator.evaluate.side_effect = lambda cells, seed=None: [list(row) for row in cells]
    return evaluator


def values_view(document, evaluator):
    sheet = SheetSpec.from_dict(document)
    return build_values_view(sheet, build_effective_grid(sheet), evaluator)


class TestFormatValue:
    """Test suite for display formatting of values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ""),
            ("", ""),
            (2.0, "2"),
            (2.5, "2.5"),
            (-3.0, "-3"),
            (7, "7"),
            (True, "TRUE"),
            (False, "FALSE"),
            (float("nan"), ""),
            ("text", "text"),
        ],
    )
    def test_format(self, value, expected):
        assert format_value(value) == expected


class TestFormulasView:
    """Test suite for the formulas view."""

    def test_literal_equals_is_displayed_without_quote(self):
        view = build_formulas_view(build_effective_grid({"rows": [["'=not a formula", "=A1"]]}))
        assert view.texts == [["=not a formula", "=A1"]]
        assert view.formula_mask == [[False, True]]
        assert view.kind == "formulas"

    def test_view_is_rectangular(self):
        view = build_formulas_view(build_effective_grid({"rows": [["a", "b", "c"], ["d"]]}))
        assert (view.max_row, view.max_col) == (2, 3)
        assert view.texts[1] == ["d", "", ""]
        assert view.column_letters == ["A", "B", "C"]

    def test_to_dataframe(self):
        view = build_formulas_view(build_effective_grid({"rows": [["x", "=A1"], ["1", ""]]}))
        df = view.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["A", "B"]
        assert list(df.index) == [1, 2]
        assert df.index.name == "row"
        assert df.loc[1, "B"] == "=A1"


class TestValuesView:
    """Test suite for the values view."""

    def test_evaluator_receives_dense_grid_and_seed(self):
        evaluator = echo_evaluator()
        values_view({"rows": [["1"], ["", "=A1"]], "meta": {"seed": 42}}, evaluator)
        evaluator.evaluate.assert_called_once_with([["1", ""], ["", "=A1"]], seed=42.0)

    def test_non_numeric_seed_is_ignored(self):
        evaluator = echo_evaluator()
        values_view({"rows": [["1"]], "meta": {"seed": "abc"}}, evaluator)
        assert evaluator.evaluate.call_args.kwargs["seed"] is None

    def test_placeholder_without_evaluator(self):
        view = values_view({"rows": [["2", "=A1*3", "'=lit"]]}, None)
        assert view.texts == [["2", PLACEHOLDER_MARKER, "=lit"]]
        assert view.kind == "values"

    def test_failing_evaluator_marks_formula_cells(self):
        evaluator = Mock()
        evaluator.evaluate.side_effect = RuntimeError("engine down")
        view = values_view({"rows": [["2", "=A1*3"]]}, evaluator)
        assert view.texts == [["2", ERROR_MARKER]]

    def test_computed_values_are_formatted(self):
        evaluator = Mock()
        evaluator.evaluate.return_value = [[2.0, 6.0, True]]
        view = values_view({"rows": [["2", "=A1*3", "TRUE"]]}, evaluator)
        assert view.texts == [["2", "6", "TRUE"]]
        assert view.cells == [[2.0, 6.0, True]]
        assert view.formula_mask == [[False, False, False]]

    def test_dict_overrides(self):
        view = values_view(
            {"rows": [["=1", "=2"], ["=3", "=4"]], "values": {"B1": 99, "B2": None, "Z9": 1}},
            echo_evaluator(),
        )
        assert view.texts == [["=1", "99"], ["=3", "=4"]]

    def test_array_overrides(self):
        view = values_view(
            {"rows": [["=1", "=2"], ["=3", "=4"]], "values": [[None, "x"], [5]]},
            echo_evaluator(),
        )
        assert view.texts == [["=1", "x"], ["5", "=4"]]

    def test_overrides_apply_without_evaluator(self):
        view = values_view({"rows": [["=1"]], "values": {"A1": 10}}, None)
        assert view.texts == [["10"]]


class TestBuildViews:
    """Test suite for building both views at once."""

    def test_both_views_share_dimensions(self):
        formulas, values = build_views({"cells": {"C2": "=A1"}}, None)
        assert (formulas.max_row, formulas.max_col) == (2, 3)
        assert (values.max_row, values.max_col) == (2, 3)
        assert values.texts[1][2] == PLACEHOLDER_MARKER
