"""
Arcade Menu UI Package

Main entry point for running the game menu for one viewer.
"""
from typing import Optional

from rich.console import Console

from ..catalog import GameCatalog, GameEntry, Viewer
from ..config import MenuConfig
from .core import MenuSession, SessionContext, SessionOwner, SessionState


def run_game_menu(
    catalog: GameCatalog,
    viewer: Viewer,
    config: MenuConfig,
    owner: SessionOwner
) -> Optional[GameEntry]:
    """
    Run the game menu until the viewer starts a game or quits

    Args:
        catalog: Every known game; filtered for the viewer here
        viewer: Player looking at the menu
        config: MenuConfig object
        owner: Receives start/terminate requests

    Returns:
        The started game, or None if the viewer quit
    """
    console = Console(emoji=False, force_terminal=True, color_system="truecolor")

    session = MenuSession(owner, config, console=console)
    session.join(viewer, catalog)
    result = session.run()

    if result.state == SessionState.ACTIVATED:
        return result.activated_entry

    return None


__all__ = [
    'run_game_menu',
    'MenuSession',
    'SessionContext',
]
