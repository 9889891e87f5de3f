"""Widgets package"""
from .menu_list import (
    WINDOW_RADIUS,
    WINDOW_ROWS,
    RenderFrame,
    VisibleRow,
    compute_frame,
    render_menu_list,
)

__all__ = [
    'WINDOW_RADIUS',
    'WINDOW_ROWS',
    'RenderFrame',
    'VisibleRow',
    'compute_frame',
    'render_menu_list',
]
