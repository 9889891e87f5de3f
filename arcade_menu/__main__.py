import os
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from arcade_menu.catalog import GameCatalog, GameEntry, Viewer
from arcade_menu.config import MenuConfig
from arcade_menu.errors import CatalogError
from arcade_menu.ui import run_game_menu
from arcade_menu.utils import setup_logging

# ARCADE_MENU_CONFIG may come from the environment or a .env file
load_dotenv()

DEFAULT_CONFIG_FILE = "config.json"

# Console for application output
console = Console(emoji=False, force_terminal=True, color_system="truecolor")


class ConsoleSessionOwner:
    """Session owner that reports the menu's requests on the console."""

    def __init__(self, logger):
        self.logger = logger

    def start_game(self, viewer: Viewer, entry: GameEntry) -> None:
        self.logger.info(f"Start request: {entry.game_id} for {viewer.name}")

    def terminate(self, viewer: Viewer) -> None:
        self.logger.info(f"Terminate request for {viewer.name}")


def main() -> None:
    """Main application entry point."""
    # 1. Load Config
    config_file = Path(os.environ.get("ARCADE_MENU_CONFIG", DEFAULT_CONFIG_FILE))
    config = MenuConfig.load(config_file)

    # 2. Setup Logging
    logger = setup_logging(Path(config.log_path), config.log_level, console)
    logger.info("Arcade menu started")

    # 3. Load Catalog
    try:
        catalog = GameCatalog.load(Path(config.catalog_path))
    except CatalogError as e:
        logger.error(str(e))
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    viewer = Viewer(config.viewer_name, frozenset(config.viewer_permissions))

    # 4. Run Menu
    entry = run_game_menu(catalog, viewer, config, ConsoleSessionOwner(logger))

    if entry is not None:
        console.print(f"[bold yellow]Starting {entry.display_name}[/bold yellow]")
    else:
        console.print("[dim]Menu closed[/dim]")
    logger.info("Arcade menu stopped")


if __name__ == "__main__":
    main()
