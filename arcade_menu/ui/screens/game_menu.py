"""
Game Menu Screen

Paints one tick of the menu: header logo plus the windowed game list.
"""
from typing import Optional

from ...config import MenuLayout
from ...assets import HeaderImage
from ..canvas import CharacterCanvas, TRANSPARENT
from ..core.state import SessionContext
from ..widgets import WINDOW_ROWS, RenderFrame, compute_frame, render_menu_list


def render(
    canvas: CharacterCanvas,
    context: SessionContext,
    header: Optional[HeaderImage],
    layout: MenuLayout
) -> RenderFrame:
    """
    Render the game menu screen

    Args:
        canvas: Canvas to paint on (not cleared between ticks)
        context: Session context with the selection
        header: Shared header image, None if it failed to load
        layout: Canvas geometry

    Returns:
        The frame that was painted
    """
    # Only the menu rows are cleared. They overlap the last row of the
    # logo, which is redrawn right after.
    canvas.fill_rectangle(0, layout.menu_top, layout.width, WINDOW_ROWS, TRANSPARENT)

    canvas.set_title("")
    if header is not None:
        canvas.draw_image(0, 0, header)

    selection = context.selection
    frame = compute_frame(selection.entries, selection.selected_index, layout)
    render_menu_list(canvas, frame, layout)
    return frame
