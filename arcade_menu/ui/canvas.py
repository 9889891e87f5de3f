"""
Character Canvas - Fixed-size grid of styled cells

The canvas is never cleared automatically between ticks. Whoever paints
on it decides which regions to reset, so parts that do not change (the
header) can stay untouched.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.text import Text

from ..assets import HeaderImage
from .theme import Theme


@dataclass(frozen=True)
class Cell:
    """One character cell"""
    char: str = " "
    style: Optional[str] = None  # Rich style string, None = transparent


TRANSPARENT = Cell()


class CharacterCanvas:
    """Drawing surface of `width` x `height` character cells"""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.title = ""
        self._cells: List[List[Cell]] = [
            [TRANSPARENT] * width for _ in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def set_title(self, title: str):
        self.title = title

    def set_cell(self, x: int, y: int, cell: Cell):
        """Set a single cell, silently clipped to the canvas."""
        if self.in_bounds(x, y):
            self._cells[y][x] = cell

    def fill_rectangle(self, x: int, y: int, width: int, height: int, cell: Cell = TRANSPARENT):
        """Fill a rectangle (clipped) with `cell`."""
        for row in range(max(0, y), min(self.height, y + height)):
            for col in range(max(0, x), min(self.width, x + width)):
                self._cells[row][col] = cell

    def write_string(self, x: int, y: int, text: str, style: Optional[str] = Theme.DEFAULT_FONT):
        """Write `text` starting at (x, y). Characters outside the canvas are dropped."""
        for offset, char in enumerate(text):
            self.set_cell(x + offset, y, Cell(char, style))

    def draw_image(self, x: int, y: int, image: HeaderImage):
        """Paint image cells with (x, y) as the top-left corner. Transparent cells are skipped."""
        for row, colors in enumerate(image.colors):
            for col, color in enumerate(colors):
                if color is None:
                    continue
                self.set_cell(x + col, y + row, Cell(" ", f"on {color}"))

    def row_text(self, y: int) -> str:
        """Plain characters of one row"""
        return "".join(cell.char for cell in self._cells[y])

    def rows_text(self) -> Sequence[str]:
        return [self.row_text(y) for y in range(self.height)]

    def to_renderable(self) -> Text:
        """Convert the grid into a Rich Text for display."""
        text = Text(no_wrap=True, overflow="crop")
        if self.title:
            text.append(self.title, style=Theme.TITLE_STYLE)
            text.append("\n")
        for y, row in enumerate(self._cells):
            for cell in row:
                text.append(cell.char, style=cell.style or "")
            if y < self.height - 1:
                text.append("\n")
        return text
