"""Shared pytest configuration and fixtures for yrxlsim tests."""

import pytest

from yrxlsim.config import RenderConfig, default_config


@pytest.fixture
def config() -> RenderConfig:
    """Default collaborators: PyYAML parser and the formualizer evaluator."""
    return default_config()


@pytest.fixture
def no_eval_config() -> RenderConfig:
    """Config without a value evaluator (values view shows placeholders)."""
    return default_config().without_evaluator()


@pytest.fixture
def minimal_doc() -> dict:
    return {"rows": [["Label", "Data"], ["X", "=A2"]]}


@pytest.fixture
def row_fill_doc() -> dict:
    return {
        "rows": [["ColA", "ColB"], ["=A1+1", "=B1*2"]],
        "fill": [{"row": 2, "down": 2}],
    }


@pytest.fixture
def multi_sheet_doc() -> dict:
    return {
        "sheets": [
            {"rows": [["Label", "Data"], ["X", "=A2"]]},
            {"rows": [["=A1+B1", "Sum"]]},
        ]
    }


@pytest.fixture
def sheet_yaml() -> str:
    return 'version: "0.0.2"\nrows:\n  - ["Label", "Data"]\n  - ["2", "=A2*3"]\n'
