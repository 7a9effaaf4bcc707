"""
Grid engine for yrxlsim.

This module expands a sheet's fill rules into a dense grid and resolves the
explicit cell overrides on top of it.
"""

from yrxlsim.engine.expander import EMPTY_SHEET_MESSAGE, apply_fill_op, expand_fill
from yrxlsim.engine.resolver import EffectiveGrid, build_effective_grid, resolve_grid

__all__ = [
    "EMPTY_SHEET_MESSAGE",
    "apply_fill_op",
    "expand_fill",
    "EffectiveGrid",
    "build_effective_grid",
    "resolve_grid",
]
