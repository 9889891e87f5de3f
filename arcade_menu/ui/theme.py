"""
Theme and Color Configuration
"""
from typing import Tuple


class Theme:
    """UI color and style theme"""

    # Colors (classic 16-color game chat palette)
    YELLOW = "#FFFF55"
    GRAY = "#AAAAAA"
    DARK_GRAY = "#555555"
    WHITE = "#FFFFFF"

    # Styles
    TITLE_STYLE = "bold #FFFF55"
    DEFAULT_FONT = WHITE

    # Emphasis tiers, index = distance from the selected row
    TIER_STYLES: Tuple[str, ...] = (YELLOW, GRAY, DARK_GRAY)

    # Messages
    NO_GAMES_MESSAGE = "No games available ..."
    NO_GAMES_STYLE = GRAY

    @classmethod
    def get_tier_style(cls, tier: int) -> str:
        """Get style for a menu row, clamped to the dimmest tier"""
        return cls.TIER_STYLES[min(max(tier, 0), len(cls.TIER_STYLES) - 1)]
