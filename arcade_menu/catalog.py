"""
Game Catalog Module

Holds every game the arcade knows about and filters them for a viewer.
The menu itself never checks permissions; it only receives the list
produced by `GameCatalog.available_for`.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

from .errors import CatalogError

logger = logging.getLogger(__name__)

WILDCARD_PERMISSION = "*"


@dataclass(frozen=True)
class GameEntry:
    """A selectable game"""
    game_id: str
    display_name: str
    visible: bool = True
    permission: Optional[str] = None  # None = everyone may play


@dataclass(frozen=True)
class Viewer:
    """The player looking at the menu"""
    name: str
    permissions: FrozenSet[str] = field(default_factory=frozenset)

    def has_permission(self, node: Optional[str]) -> bool:
        if node is None:
            return True
        return WILDCARD_PERMISSION in self.permissions or node in self.permissions


class GameCatalog:
    """Ordered collection of all known games."""

    def __init__(self, games: Iterable[GameEntry] = ()):
        self._games: List[GameEntry] = list(games)

    def __len__(self) -> int:
        return len(self._games)

    @property
    def games(self) -> List[GameEntry]:
        return list(self._games)

    def add(self, game: GameEntry) -> None:
        self._games.append(game)

    def available_for(self, viewer: Viewer) -> List[GameEntry]:
        """
        Games the viewer may start, in catalog order.

        Only games the viewer has permission to and that are visible
        are offered.
        """
        available = []
        for game in self._games:
            if not viewer.has_permission(game.permission):
                continue
            if game.visible:
                available.append(game)
        logger.debug(
            f"Catalog filtered for {viewer.name}: {len(available)}/{len(self._games)} games"
        )
        return available

    @classmethod
    def load(cls, path: Path) -> "GameCatalog":
        """
        Load the catalog from a JSON file.

        Format:
            {"games": [{"id": "snake", "name": "Snake",
                        "visible": true, "permission": "arcade.snake"}]}

        A missing file gives an empty catalog. An unreadable or malformed
        file raises CatalogError.
        """
        if not path.exists():
            logger.warning(f"Game catalog not found: {path}")
            return cls()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(path, e) from e

        if not isinstance(data, dict) or not isinstance(data.get("games", []), list):
            raise CatalogError(path, "expected an object with a 'games' list")

        catalog = cls()
        for raw in data.get("games", []):
            try:
                game_id = str(raw["id"])
                name = raw.get("name", game_id)
                visible = raw.get("visible", True)
                permission = raw.get("permission")
            except (KeyError, TypeError, AttributeError) as e:
                raise CatalogError(path, f"invalid game entry {raw!r}") from e

            # JSON strings like "false" must not pass as flags
            if not isinstance(name, str):
                raise CatalogError(path, f"game {game_id!r}: 'name' must be a string")
            if not isinstance(visible, bool):
                raise CatalogError(path, f"game {game_id!r}: 'visible' must be true or false")
            if permission is not None and not isinstance(permission, str):
                raise CatalogError(path, f"game {game_id!r}: 'permission' must be a string")

            catalog.add(GameEntry(
                game_id=game_id,
                display_name=name,
                visible=visible,
                permission=permission,
            ))

        logger.info(f"Loaded {len(catalog)} games from {path}")
        return catalog
