"""
Evaluator module for yrxlsim.

This module provides the value evaluation backend used by the values view.
``FormualizerEvaluator`` evaluates formulas in-process via formualizer.
"""

from yrxlsim.evaluator.base import ERROR_MARKER, PLACEHOLDER_MARKER, ValueEvaluator
from yrxlsim.evaluator.local_evaluator import FormualizerEvaluator

__all__ = [
    "ERROR_MARKER",
    "PLACEHOLDER_MARKER",
    "ValueEvaluator",
    "FormualizerEvaluator",
]
