import unittest
import io
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

from PIL import Image
from rich.console import Console

from arcade_menu.assets import AssetRegistry
from arcade_menu.catalog import GameCatalog, GameEntry, Viewer
from arcade_menu.config import MenuConfig
from arcade_menu.errors import SessionError
from arcade_menu.ui.core.controller import MenuSession
from arcade_menu.ui.core.events import EventDispatcher
from arcade_menu.ui.core.state import SessionState
from arcade_menu.ui.theme import Theme


def make_catalog(*names):
    return GameCatalog(GameEntry(name.lower(), name) for name in names)


class TestMenuSession(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.logo_path = Path(self.temp_dir.name) / "logo.png"
        Image.new('RGB', (400, 160), color=(0, 0, 255)).save(self.logo_path)

        self.config = MenuConfig(header_image_path=str(self.logo_path))
        self.owner = MagicMock()
        self.registry = AssetRegistry()
        self.viewer = Viewer("alex", frozenset({"*"}))

    def tearDown(self):
        self.temp_dir.cleanup()

    def make_session(self, config=None):
        return MenuSession(
            self.owner,
            config or self.config,
            dispatcher=EventDispatcher(read_terminal=False),
            registry=self.registry
        )

    def test_join_filters_catalog(self):
        catalog = GameCatalog([
            GameEntry("snake", "Snake", permission="arcade.snake"),
            GameEntry("pong", "Pong"),
            GameEntry("menu", "Menu", visible=False),
        ])
        session = self.make_session()
        context = session.join(Viewer("guest"), catalog)
        self.assertEqual([e.game_id for e in context.selection.entries], ["pong"])
        self.assertEqual(context.state, SessionState.HAS_SELECTION)

    def test_join_twice_raises(self):
        session = self.make_session()
        session.join(self.viewer, make_catalog("A"))
        with self.assertRaises(SessionError):
            session.join(self.viewer, make_catalog("B"))

    def test_keys_before_join_raise(self):
        with self.assertRaises(SessionError):
            self.make_session().handle_key(" ")

    def test_activate_requests_start(self):
        session = self.make_session()
        context = session.join(self.viewer, make_catalog("Snake", "Pong", "Tetris"))
        session.handle_key("\x1b[B")
        session.handle_key("1")
        session.handle_key(" ")

        tetris = context.selection.entries[2]
        self.owner.start_game.assert_called_once_with(self.viewer, tetris)
        self.owner.terminate.assert_not_called()
        self.assertTrue(session.finished)

        # Further keys are ignored once the session is over
        session.handle_key("q")
        self.owner.terminate.assert_not_called()

    def test_quit_requests_terminate(self):
        session = self.make_session()
        session.join(self.viewer, make_catalog("Snake"))
        session.handle_key("x")
        self.assertFalse(session.finished)
        session.handle_key("q")
        self.owner.terminate.assert_called_once_with(self.viewer)
        self.owner.start_game.assert_not_called()

    def test_empty_menu_only_quits(self):
        # Scenario D
        session = self.make_session()
        context = session.join(self.viewer, GameCatalog())
        for key in ("\x1b[A", "\x1b[B", "8", "1", " ", "\r"):
            session.handle_key(key)
        self.assertEqual(context.state, SessionState.EMPTY)
        self.owner.start_game.assert_not_called()

        frame = session.tick()
        self.assertTrue(frame.empty)
        layout = session.layout
        self.assertEqual(session.canvas.row_text(layout.message_row).strip(), Theme.NO_GAMES_MESSAGE)
        # Header painted
        self.assertEqual(session.canvas.cell(0, 0).style, "on #0000ff")

        session.handle_key("q")
        self.assertEqual(context.state, SessionState.QUIT)

    def test_tick_repaints_without_stale_rows(self):
        session = self.make_session()
        session.join(self.viewer, make_catalog("A", "B", "C", "D", "E", "F", "G"))
        for _ in range(3):
            session.handle_key("\x1b[B")
        session.tick()
        rows = [session.canvas.row_text(y).strip() for y in range(9, 14)]
        self.assertEqual(rows, ["B", "C", "D", "E", "F"])

        # Move to the top: rows above the selection must be cleared
        for _ in range(3):
            session.handle_key("\x1b[A")
        frame = session.tick()
        rows = [session.canvas.row_text(y).strip() for y in range(9, 14)]
        self.assertEqual(rows, ["", "", "A", "B", "C"])
        self.assertEqual(frame.selected_row.entry.display_name, "A")
        self.assertEqual(session.context.tick_count, 2)

    def test_header_drawn_above_menu(self):
        session = self.make_session()
        session.join(self.viewer, make_catalog("A"))
        session.tick()
        for y in range(9):
            self.assertEqual(session.canvas.cell(0, y).style, "on #0000ff")
        # Row outside the menu and header stays untouched
        self.assertEqual(session.canvas.row_text(14).strip(), "")

    def test_missing_header_still_renders_list(self):
        config = MenuConfig(header_image_path=str(Path(self.temp_dir.name) / "nope.png"))
        session = self.make_session(config)
        with self.assertLogs("arcade_menu.assets", level="ERROR"):
            session.join(self.viewer, make_catalog("Snake"))
        self.assertIsNone(session.header)
        session.tick()
        self.assertEqual(session.canvas.row_text(11).strip(), "SNAKE")
        self.assertIsNone(session.canvas.cell(0, 0).style)

    def test_sessions_share_header_not_state(self):
        first = self.make_session()
        second = self.make_session()
        first.join(self.viewer, make_catalog("A", "B"))
        second.join(Viewer("sam"), make_catalog("A", "B"))

        first.handle_key("\x1b[B")
        self.assertEqual(first.context.selection.selected_index, 1)
        self.assertEqual(second.context.selection.selected_index, 0)
        self.assertIs(first.header, second.header)
        self.assertEqual(self.registry.build_count, 1)

    def test_run_until_activation(self):
        config = MenuConfig(header_image_path=str(self.logo_path), ticks_per_second=50)
        dispatcher = EventDispatcher(read_terminal=False)
        session = MenuSession(
            self.owner,
            config,
            console=Console(file=io.StringIO(), width=40),
            dispatcher=dispatcher,
            registry=self.registry
        )
        session.join(self.viewer, make_catalog("Snake", "Pong"))
        dispatcher.push("\x1b[B")
        dispatcher.push("z")
        dispatcher.push(" ")

        context = session.run()

        self.assertEqual(context.state, SessionState.ACTIVATED)
        self.assertEqual(context.activated_entry.game_id, "pong")
        self.assertGreaterEqual(context.tick_count, 1)
        self.owner.start_game.assert_called_once()


if __name__ == '__main__':
    unittest.main()
