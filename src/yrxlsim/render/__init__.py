"""
Rendering utilities for yrxlsim.

This module turns resolved sheets into display grids and serializes them:
- views: formulas / values display grids
- ascii: fixed-width text grid
- html: table fragments and standalone pages
"""

from .views import SheetView, build_formulas_view, build_values_view, build_views, format_value
from .ascii import render_ascii, render_ascii_views
from .html import build_page, render_table

__all__ = [
    'SheetView',
    'build_formulas_view',
    'build_values_view',
    'build_views',
    'format_value',
    'render_ascii',
    'render_ascii_views',
    'build_page',
    'render_table',
]
