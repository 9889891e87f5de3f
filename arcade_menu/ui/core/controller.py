"""
UI Controller - Selection logic and the menu tick loop

SelectionController holds no state of its own: every call receives the
SessionContext it works on. MenuSession owns one context per viewer and
drives it:
- Single Live context (created once per run)
- Fixed tick rate, the canvas is repainted every tick
- Key events handled between ticks, never concurrently with them
"""
import logging
import time
from pathlib import Path
from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.live import Live

from ...assets import ASSETS, AssetRegistry, HeaderImage
from ...catalog import GameCatalog, GameEntry, Viewer
from ...config import MenuConfig
from ...errors import SessionError
from ...utils import console_logging_paused
from ..canvas import CharacterCanvas
from ..keymap import Command, KeyMap
from ..screens import game_menu
from ..widgets import RenderFrame
from .events import Event, EventDispatcher, EventType
from .state import SessionContext, SessionState

logger = logging.getLogger(__name__)


class SessionOwner(Protocol):
    """Receives the requests a menu session produces"""

    def start_game(self, viewer: Viewer, entry: GameEntry) -> None:
        ...

    def terminate(self, viewer: Viewer) -> None:
        ...


class SelectionController:
    """State transitions of the game list. No rendering."""

    def initialize(self, context: SessionContext, entries: Sequence[GameEntry]):
        """Populate the entries once; select the first one if there is any."""
        if context.state is not SessionState.LOADING:
            raise SessionError("Session entries can only be set once")

        context.selection.entries = tuple(entries)
        if context.selection.entries:
            context.selection.selected_index = 0
            context.state = SessionState.HAS_SELECTION
        else:
            context.selection.selected_index = None
            context.state = SessionState.EMPTY

    def move_up(self, context: SessionContext):
        data = context.selection
        if data.selected_index is not None and data.selected_index > 0:
            data.selected_index -= 1

    def move_down(self, context: SessionContext):
        data = context.selection
        if data.selected_index is not None and data.selected_index < len(data.entries) - 1:
            data.selected_index += 1

    def activate(self, context: SessionContext) -> Optional[GameEntry]:
        """Selected entry, or None when there is nothing to start"""
        entry = context.selection.get_selected_item()
        if entry is None:
            return None
        context.activated_entry = entry
        context.state = SessionState.ACTIVATED
        return entry

    def quit(self, context: SessionContext):
        context.state = SessionState.QUIT

    def apply(self, context: SessionContext, command: Command) -> Optional[GameEntry]:
        """
        Apply a command to the context.

        Returns:
            The activated entry for ACTIVATE, None otherwise
        """
        if context.state.is_terminal:
            return None

        if command in (Command.UP, Command.ALT_UP):
            self.move_up(context)

        elif command in (Command.DOWN, Command.ALT_DOWN):
            self.move_down(context)

        elif command is Command.ACTIVATE:
            return self.activate(context)

        elif command is Command.QUIT:
            self.quit(context)

        return None


class MenuSession:
    """
    One viewer's menu.

    Created when the viewer joins, discarded once the viewer starts a
    game or quits. Sessions share nothing but the read-only header.
    """

    def __init__(
        self,
        owner: SessionOwner,
        config: MenuConfig,
        console: Optional[Console] = None,
        dispatcher: Optional[EventDispatcher] = None,
        registry: Optional[AssetRegistry] = None
    ):
        self.owner = owner
        self.config = config
        self.layout = config.layout()
        self.console = console
        self.dispatcher = dispatcher or EventDispatcher()
        self.registry = registry or ASSETS
        self.controller = SelectionController()
        self.canvas = CharacterCanvas(self.layout.width, self.layout.height)
        self.context: Optional[SessionContext] = None
        self.header: Optional[HeaderImage] = None
        self.live: Optional[Live] = None

    def join(self, viewer: Viewer, catalog: GameCatalog) -> SessionContext:
        """Start the session for `viewer` with the games it may play."""
        if self.context is not None:
            raise SessionError(f"Session already joined by {self.context.viewer.name}")

        self.context = SessionContext(viewer=viewer)
        self.header = self.registry.get_header(
            Path(self.config.header_image_path),
            self.layout.width,
            self.layout.header_rows
        )
        self.controller.initialize(self.context, catalog.available_for(viewer))
        logger.info(
            f"{viewer.name} joined the menu with {len(self.context.selection.entries)} games"
        )
        return self.context

    def _require_context(self) -> SessionContext:
        if self.context is None:
            raise SessionError("No viewer has joined this session")
        return self.context

    @property
    def finished(self) -> bool:
        return self.context is not None and self.context.state.is_terminal

    def handle_key(self, key: str):
        """Handle a raw key. Unbound keys are ignored."""
        command = KeyMap.command_for(key)
        if command is None:
            return
        self.handle_command(command)

    def handle_command(self, command: Command):
        context = self._require_context()
        if context.state.is_terminal:
            return

        entry = self.controller.apply(context, command)

        if entry is not None:
            logger.info(f"{context.viewer.name} starts {entry.game_id}")
            self.owner.start_game(context.viewer, entry)

        elif context.state is SessionState.QUIT:
            logger.info(f"{context.viewer.name} left the menu")
            self.owner.terminate(context.viewer)

    def tick(self) -> RenderFrame:
        """Repaint the canvas from the current state"""
        context = self._require_context()
        frame = game_menu.render(self.canvas, context, self.header, self.layout)
        context.tick_count += 1
        return frame

    def run(self) -> SessionContext:
        """
        Main loop - runs until the viewer starts a game or quits

        Returns:
            SessionContext with results
        """
        context = self._require_context()
        interval = 1.0 / max(1, self.config.ticks_per_second)
        console = self.console or Console(emoji=False, force_terminal=True, color_system="truecolor")

        self.live = Live(
            console=console,
            auto_refresh=False,  # Ticks drive refresh
            screen=True,
            transient=False
        )

        with self.dispatcher, console_logging_paused(), self.live:
            while not context.state.is_terminal:
                tick_start = time.monotonic()

                self.tick()
                self.live.update(self.canvas.to_renderable(), refresh=True)

                # Handle events until the next tick is due
                while not context.state.is_terminal:
                    remaining = interval - (time.monotonic() - tick_start)
                    if remaining <= 0:
                        break
                    event = self.dispatcher.get_event(timeout=remaining)
                    if event is None:
                        time.sleep(min(remaining, 0.01))
                        continue
                    self._handle_event(event)

        return context

    def _handle_event(self, event: Event):
        if event.type == EventType.KEYBOARD and event.key:
            self.handle_key(event.key)
