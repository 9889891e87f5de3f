"""
Header Asset Registry

The header logo is built once per process and shared read-only by every
menu session. The first session that needs it loads it; later sessions
reuse the same object. A failed build is reported once and remembered,
sessions then run without a header.
"""
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import AssetError

logger = logging.getLogger(__name__)

# Pixels with less alpha than this are treated as transparent
ALPHA_THRESHOLD = 128

_Key = Tuple[str, int, int]


@dataclass(frozen=True)
class HeaderImage:
    """
    Image converted to cell colors.

    `colors[y][x]` is a Rich color string, or None where the image is
    transparent.
    """
    width: int
    height: int
    colors: Tuple[Tuple[Optional[str], ...], ...]


def image_to_cells(img: Image.Image, columns: int, rows: int) -> HeaderImage:
    """
    Reduce an image to one color per character cell.

    A 400x160 logo on a 25x10 grid gives 16x16 pixels per cell; each
    cell gets the average color of its block.
    """
    rgba = img.convert("RGBA").resize((columns, rows), Image.Resampling.BOX)
    colors = []
    for y in range(rows):
        line = []
        for x in range(columns):
            r, g, b, a = rgba.getpixel((x, y))
            line.append(None if a < ALPHA_THRESHOLD else f"#{r:02x}{g:02x}{b:02x}")
        colors.append(tuple(line))
    return HeaderImage(width=columns, height=rows, colors=tuple(colors))


def load_header_image(path: Path, columns: int, rows: int) -> HeaderImage:
    """Load a PNG logo and convert it to cells. Raises AssetError."""
    try:
        with Image.open(path) as img:
            return image_to_cells(img, columns, rows)
    except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as e:
        raise AssetError(path, e) from e


class AssetRegistry:
    """Process-wide cache of immutable header images."""

    def __init__(self):
        self._lock = threading.Lock()
        self._headers: Dict[_Key, Optional[HeaderImage]] = {}
        self.build_count = 0

    def get_header(self, path: Path, columns: int, rows: int) -> Optional[HeaderImage]:
        """
        Shared header for `path`, built on first use.

        Returns:
            HeaderImage, or None when it could not be built
        """
        key = (str(path), columns, rows)
        with self._lock:
            if key not in self._headers:
                self._headers[key] = self._build(path, columns, rows)
            return self._headers[key]

    def _build(self, path: Path, columns: int, rows: int) -> Optional[HeaderImage]:
        self.build_count += 1
        try:
            header = load_header_image(path, columns, rows)
        except AssetError as e:
            logger.error(f"{e}. Menu will run without a header.")
            return None
        logger.info(f"Header image built from {path} ({columns}x{rows} cells)")
        return header

    def reset(self):
        """Forget every built asset"""
        with self._lock:
            self._headers.clear()
            self.build_count = 0


# Global instance
ASSETS = AssetRegistry()
