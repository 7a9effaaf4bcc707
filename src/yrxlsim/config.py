"""
Render configuration.

A RenderConfig carries the two collaborators the renderer depends on: the
document parser (source text to a mapping/sequence tree) and the value
evaluator (formula grid to computed values). It is passed explicitly into the
render entry points; nothing is injected through module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, Callable, Optional

import yaml

from yrxlsim.evaluator.base import ValueEvaluator
from yrxlsim.evaluator.local_evaluator import FormualizerEvaluator

FORMATS = ("ascii", "html")
VIEWS = ("formulas", "values", "both")
DEFAULT_FORMAT = "ascii"
DEFAULT_VIEW = "both"


@dataclass(frozen=True)
class RenderConfig:
    """Collaborators used while rendering.

    Attributes:
        parser: Callable turning source text into a parsed document
        evaluator: Formula evaluator for the values view; None degrades the
                   values view to a placeholder per formula cell
    """
    parser: Callable[[str], Any] = yaml.safe_load
    evaluator: Optional[ValueEvaluator] = None

    def without_evaluator(self) -> "RenderConfig":
        return replace(self, evaluator=None)


@lru_cache(maxsize=1)
def default_config() -> RenderConfig:
    """Process-wide default: PyYAML safe loading and the formualizer evaluator."""
    return RenderConfig(parser=yaml.safe_load, evaluator=FormualizerEvaluator())


def check_options(format: str, view: str) -> None:
    """Validate a format/view pair.

    Raises:
        ValueError: If either value is not recognised
    """
    if format not in FORMATS:
        raise ValueError(f"format must be one of: {', '.join(FORMATS)} (got {format!r})")
    if view not in VIEWS:
        raise ValueError(f"view must be one of: {', '.join(VIEWS)} (got {view!r})")
