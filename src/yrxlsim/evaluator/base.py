"""
Abstract value evaluator interface.

The ValueEvaluator protocol defines the contract every formula engine backend
must satisfy: turn a dense grid of cell strings into a same-shaped grid of
computed values. The concrete implementation is FormualizerEvaluator
(in-process evaluation via formualizer).
"""

from typing import Any, List, Optional, Protocol

ERROR_MARKER = "(error)"
PLACEHOLDER_MARKER = "…"


class ValueEvaluator(Protocol):
    """Protocol for formula evaluation backends.

    An evaluator must use a fresh evaluation context per call so that no
    formula state leaks between sheets, and must release that context before
    returning.
    """

    def evaluate(self, cells: List[List[str]], seed: Optional[float] = None) -> List[List[Any]]:
        """Evaluate a dense grid of cell contents.

        Args:
            cells: Rectangular grid of cell strings (row 0 is sheet row 1).
                   Formulas start with ``=``; ``'=...`` cells are literals.
            seed: Optional seed making volatile random functions reproducible

        Returns:
            Grid of the same shape holding numbers, booleans, strings, or
            error marker strings. Empty cells come back as ``""``.
        """
        ...
