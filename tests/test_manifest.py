from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from gameshelf import manifest
from gameshelf.errors import PersistenceFailure
from gameshelf.manifest import EngineConfig, ItemConfig, SettingConfig, TabConfig

SAMPLE = """
[[tab]]
name = "Welcome"

[[tab.item]]
name = "Game1"
path = "/games/one"

[[tab.item]]
name = "Game2"
path = "/games/two"

[[tab]]
name = "CustomTab"

[setting]
is_close_after_game_launch = true
tick_rate = 100
"""


class ManifestParseTests(unittest.TestCase):
    def test_parses_tabs_items_and_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / manifest.MANIFEST_CONFIG_NAME
            path.write_text(SAMPLE, encoding="utf-8")
            config = manifest.load_manifest(path)

        assert config is not None
        self.assertEqual([tab.name for tab in config.tabs], ["Welcome", "CustomTab"])
        self.assertEqual(
            config.tabs[0].items,
            [ItemConfig("Game1", "/games/one"), ItemConfig("Game2", "/games/two")],
        )
        self.assertEqual(config.tabs[1].items, [])
        self.assertTrue(config.setting.is_close_after_game_launch)
        self.assertEqual(config.setting.tick_rate_ms, 100)

    def test_malformed_entries_are_skipped(self) -> None:
        data = {
            "tab": [
                {"name": "Ok", "item": [{"name": "A", "path": "/a"}, {"name": "NoPath"}, "junk"]},
                {"item": []},
                {"name": 3},
            ]
        }
        config = manifest.parse_manifest(data)
        assert config is not None
        self.assertEqual([tab.name for tab in config.tabs], ["Ok"])
        self.assertEqual(config.tabs[0].items, [ItemConfig("A", "/a")])

    def test_missing_setting_uses_defaults_and_tick_rate_is_clamped(self) -> None:
        config = manifest.parse_manifest({"tab": []})
        assert config is not None
        self.assertEqual(config.setting, SettingConfig())

        config = manifest.parse_manifest({"tab": [], "setting": {"tick_rate": 1}})
        assert config is not None
        self.assertEqual(config.setting.tick_rate_ms, manifest.MIN_TICK_RATE_MS)

    def test_file_without_tabs_is_not_a_configuration(self) -> None:
        self.assertIsNone(manifest.parse_manifest({"setting": {}}))

    def test_unreadable_toml_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.toml"
            path.write_text("[[tab]\nname=", encoding="utf-8")
            self.assertIsNone(manifest.load_manifest(path))


class ManifestPersistenceTests(unittest.TestCase):
    def test_write_then_load_preserves_order_and_fields(self) -> None:
        config = EngineConfig(
            tabs=[
                TabConfig("Arcade", [ItemConfig("Chess", "/bin/chess"), ItemConfig("Go", "/bin/go")]),
                TabConfig("Empty"),
                TabConfig("Retro", [ItemConfig("Ünïcode", "/opt/räd game")]),
            ],
            setting=SettingConfig(is_close_after_game_launch=True, tick_rate_ms=500),
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / manifest.MANIFEST_CONFIG_NAME
            manifest.write_manifest(config, path)
            loaded = manifest.load_manifest(path)

        self.assertEqual(loaded, config)

    def test_write_failure_raises_persistence_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with self.assertRaises(PersistenceFailure):
                manifest.write_manifest(EngineConfig.default(), blocker / manifest.MANIFEST_CONFIG_NAME)


class ManifestDiscoveryTests(unittest.TestCase):
    def test_search_walks_up_to_parent_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / manifest.MANIFEST_CONFIG_NAME
            target.write_text(SAMPLE, encoding="utf-8")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)
            self.assertEqual(manifest.search_manifest(nested), target)

    def test_search_falls_back_to_user_config_dir(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            user_path = Path(tmp) / "config" / manifest.MANIFEST_CONFIG_NAME
            user_path.parent.mkdir()
            user_path.write_text(SAMPLE, encoding="utf-8")
            work = Path(tmp) / "work"
            work.mkdir()
            with mock.patch("gameshelf.manifest.USER_MANIFEST_PATH", user_path):
                self.assertEqual(manifest.search_manifest(work), user_path)

    def test_init_config_writes_default_when_nothing_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with mock.patch("gameshelf.manifest.search_manifest", return_value=None):
                config, path = manifest.init_config(root)
            self.assertEqual(path, root / manifest.MANIFEST_CONFIG_NAME)
            self.assertEqual(config, EngineConfig.default())
            self.assertEqual(manifest.load_manifest(path), EngineConfig.default())

    def test_init_config_keeps_malformed_manifest_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / manifest.MANIFEST_CONFIG_NAME
            path.write_text("not = [valid", encoding="utf-8")
            config, resolved = manifest.init_config(Path(tmp), path)
            self.assertEqual(resolved, path)
            self.assertEqual(config, EngineConfig.default())
            self.assertEqual(path.read_text(encoding="utf-8"), "not = [valid")

    def test_init_config_survives_unwritable_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("gameshelf.manifest.search_manifest", return_value=None), mock.patch(
                "gameshelf.manifest.write_manifest", side_effect=PersistenceFailure("nope")
            ):
                config, _ = manifest.init_config(Path(tmp))
        self.assertEqual(config, EngineConfig.default())


if __name__ == "__main__":
    unittest.main()
