import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuLayout:
    """Fixed geometry of the menu canvas, in character cells."""
    width: int = 25
    height: int = 15
    header_rows: int = 10
    menu_top: int = 9
    message_row: int = 12

    @property
    def selected_row(self) -> int:
        return self.menu_top + 2


@dataclass
class MenuConfig:
    # Loop
    ticks_per_second: int = 5

    # Screen (25 columns = width of the logo in 16px cells)
    screen_width: int = 25
    screen_height: int = 15

    # Layout
    header_rows: int = 10
    menu_top: int = 9
    message_row: int = 12

    # Paths & Logging
    header_image_path: str = "assets/logo.png"
    catalog_path: str = "games.json"
    log_path: str = "logs/arcade_menu.log"
    log_level: str = "INFO"

    # Viewer
    viewer_name: str = "player"
    viewer_permissions: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def load(cls, path: Path) -> "MenuConfig":
        """Loads configuration from a JSON file. Creates a default one if it doesn't exist."""
        if not path.exists():
            default_config = cls()
            default_config.save(path)
            return default_config

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")

            return cls(**cls._checked_values(data, path))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Error loading config from {path}: {e}. Using defaults.")
            return cls()

    @classmethod
    def _checked_values(cls, data: Dict[str, Any], path: Path) -> Dict[str, Any]:
        """Known keys whose value has the default's type; others keep the default."""
        defaults = cls()
        checked = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            default = getattr(defaults, f.name)
            # bool is an int subclass, so compare exact types
            valid = type(value) is type(default)
            if valid and isinstance(default, list):
                valid = all(isinstance(item, str) for item in value)
            if not valid:
                logger.error(
                    f"Invalid value for {f.name} in {path}: {value!r}. Using default {default!r}."
                )
                continue
            checked[f.name] = value
        return checked

    def save(self, path: Path) -> None:
        """Saves the current configuration to a JSON file."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.__dict__, f, ensure_ascii=False, indent=4)
        except OSError as e:
            logger.error(f"Error saving config to {path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Dict-like access."""
        return getattr(self, key, default)

    def layout(self) -> MenuLayout:
        return MenuLayout(
            width=self.screen_width,
            height=self.screen_height,
            header_rows=self.header_rows,
            menu_top=self.menu_top,
            message_row=self.message_row,
        )
