import unittest
import json
import tempfile
from pathlib import Path
from arcade_menu.config import MenuConfig, MenuLayout

class TestMenuConfig(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.temp_dir.name) / "test_config.json"

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_load_defaults(self):
        # Loading when file doesn't exist creates defaults
        config = MenuConfig.load(self.config_path)
        self.assertTrue(self.config_path.exists())
        self.assertEqual(config.ticks_per_second, 5)
        self.assertEqual((config.screen_width, config.screen_height), (25, 15))

    def test_load_existing(self):
        data = {
            "ticks_per_second": 10,
            "viewer_name": "alex",
            "unknown_key": "should_be_ignored"
        }
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f)

        config = MenuConfig.load(self.config_path)
        self.assertEqual(config.ticks_per_second, 10)
        self.assertEqual(config.viewer_name, "alex")

    def test_load_broken_file_uses_defaults(self):
        self.config_path.write_text("{broken", encoding="utf-8")
        config = MenuConfig.load(self.config_path)
        self.assertEqual(config.ticks_per_second, 5)

    def test_load_wrong_types_keep_defaults(self):
        data = {
            "ticks_per_second": "10",
            "screen_width": True,
            "viewer_permissions": ["arcade.snake", 3],
            "viewer_name": "alex",
            "log_level": "DEBUG"
        }
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f)

        with self.assertLogs("arcade_menu.config", level="ERROR") as logs:
            config = MenuConfig.load(self.config_path)

        self.assertEqual(config.ticks_per_second, 5)
        self.assertEqual(config.screen_width, 25)
        self.assertEqual(config.viewer_permissions, ["*"])
        # Valid keys next to invalid ones still apply
        self.assertEqual(config.viewer_name, "alex")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(len(logs.records), 3)

    def test_load_non_object_uses_defaults(self):
        self.config_path.write_text("[1, 2]", encoding="utf-8")
        config = MenuConfig.load(self.config_path)
        self.assertEqual(config, MenuConfig())

    def test_save(self):
        config = MenuConfig(viewer_permissions=["arcade.snake"])
        config.save(self.config_path)

        with open(self.config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        self.assertEqual(data["viewer_permissions"], ["arcade.snake"])

    def test_layout(self):
        layout = MenuConfig(menu_top=4).layout()
        self.assertIsInstance(layout, MenuLayout)
        self.assertEqual(layout.width, 25)
        self.assertEqual(layout.selected_row, 6)

if __name__ == '__main__':
    unittest.main()
