"""
Seeded volatile functions for the formualizer evaluator.

When a sheet declares ``meta.seed``, the random functions are replaced by
Python callbacks that draw from a ``random.Random`` seeded with it, so the
values view renders identically on every run. Arguments arrive as
already-evaluated Python values.

Functions registered here:

  RAND          : uniform float in [0, 1)
  RANDBETWEEN   : uniform integer in [bottom, top]
"""

from __future__ import annotations

import math
import random
from typing import Any

import formualizer as fz


def _scalar(value: Any) -> Any:
    """Unwrap single-cell nested lists to a scalar."""
    while isinstance(value, list) and len(value) == 1:
        value = value[0]
    return value


def make_rand(rng: random.Random):
    def _rand() -> float:
        """RAND()"""
        return rng.random()
    return _rand


def make_randbetween(rng: random.Random):
    def _randbetween(bottom: Any, top: Any) -> float:
        """RANDBETWEEN(bottom, top)

        Bounds are rounded inward like spreadsheet engines do.
        """
        low = math.ceil(float(_scalar(bottom)))
        high = math.floor(float(_scalar(top)))
        if low > high:
            raise ValueError(f"RANDBETWEEN bottom {low} is greater than top {high}")
        return float(rng.randint(low, high))
    return _randbetween


def register_seeded_functions(wb: fz.Workbook, seed: float) -> None:
    """Register seeded RAND / RANDBETWEEN on *wb*.

    Must be called before any formulas are set.
    """
    rng = random.Random(seed)
    wb.register_function(
        "RAND", make_rand(rng),
        min_args=0, max_args=0, allow_override_builtin=True,
    )
    wb.register_function(
        "RANDBETWEEN", make_randbetween(rng),
        min_args=2, max_args=2, allow_override_builtin=True,
    )
