"""
Menu List Widget - Windowed game list

`compute_frame` is pure: it decides which entries are visible, where and
how bright. `render_menu_list` paints a frame on a canvas. No state
mutation, no event handling.

The window shows at most WINDOW_RADIUS rows above and below the
selection. The selected row never moves; near the ends of the list the
window shrinks instead of re-centering.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ...catalog import GameEntry
from ...config import MenuLayout
from ..canvas import CharacterCanvas
from ..theme import Theme

WINDOW_RADIUS = 2
WINDOW_ROWS = 2 * WINDOW_RADIUS + 1


@dataclass(frozen=True)
class VisibleRow:
    """One painted menu row"""
    y: int
    index: int
    entry: GameEntry
    tier: int  # 0 = selected, grows with distance


@dataclass(frozen=True)
class RenderFrame:
    """What a single tick paints below the header"""
    rows: Tuple[VisibleRow, ...] = ()
    empty: bool = False

    @property
    def selected_row(self) -> Optional[VisibleRow]:
        for row in self.rows:
            if row.tier == 0:
                return row
        return None


def compute_frame(
    entries: Sequence[GameEntry],
    selected_index: Optional[int],
    layout: MenuLayout
) -> RenderFrame:
    """
    Compute the visible window for the current selection.

    Args:
        entries: All selectable entries
        selected_index: Current selection, None when there are no entries
        layout: Canvas geometry

    Returns:
        RenderFrame with rows ordered top to bottom
    """
    if not entries or selected_index is None:
        return RenderFrame(empty=True)

    if not 0 <= selected_index < len(entries):
        raise IndexError(f"Selection {selected_index} outside {len(entries)} entries")

    items_before = selected_index
    items_after = len(entries) - 1 - selected_index
    base_y = layout.selected_row

    rows = []
    for distance in range(min(WINDOW_RADIUS, items_before), 0, -1):
        index = selected_index - distance
        rows.append(VisibleRow(base_y - distance, index, entries[index], distance))

    rows.append(VisibleRow(base_y, selected_index, entries[selected_index], 0))

    for distance in range(1, min(WINDOW_RADIUS, items_after) + 1):
        index = selected_index + distance
        rows.append(VisibleRow(base_y + distance, index, entries[index], distance))

    return RenderFrame(rows=tuple(rows))


def center_x(text: str, width: int) -> int:
    """Left column that centers `text`; long names start at the left edge."""
    return max(0, (width - len(text)) // 2)


def render_menu_list(canvas: CharacterCanvas, frame: RenderFrame, layout: MenuLayout):
    """
    Paint a frame onto the canvas.

    Only writes inside the menu rows; clearing is the caller's job.
    """
    if frame.empty:
        message = Theme.NO_GAMES_MESSAGE
        canvas.write_string(
            center_x(message, layout.width),
            layout.message_row,
            message,
            Theme.NO_GAMES_STYLE
        )
        return

    for row in frame.rows:
        name = row.entry.display_name.upper()
        canvas.write_string(
            center_x(name, layout.width),
            row.y,
            name,
            Theme.get_tier_style(row.tier)
        )
