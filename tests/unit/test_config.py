import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from flaggen_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual((cfg.output.width, cfg.output.height), (640, 360))
            self.assertEqual(cfg.output.path, "flag.png")
            self.assertIsNone(cfg.generator.seed)
            self.assertTrue(cfg.preview.save_on_regenerate)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.output.width = 800
            cfg.generator.seed = 17
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.output.width, 800)
            self.assertEqual(reloaded.generator.seed, 17)

    def test_partial_file_and_normalization(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "output": {"width": 0, "height": 99999, "format": "svg"},
                "preview": {"title": "flags"},
                "generator": {"seed": "abc"},
                "unknown": {"x": 1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.output.width, 1)
            self.assertEqual(cfg.output.height, 8192)
            self.assertEqual(cfg.output.format, "PNG")
            self.assertEqual(cfg.preview.title, "flags")
            self.assertEqual(cfg.preview.width, 640)
            self.assertIsNone(cfg.generator.seed)

    def test_wrong_value_types_load_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "x",
                "preview": {"resize_debounce_ms": "fast"},
                "diagnostics": {"keep_log_files": [3]},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 1)
            self.assertEqual(cfg.preview.resize_debounce_ms, 150)
            self.assertEqual(cfg.diagnostics.keep_log_files, 7)

    def test_corrupt_file_loads_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.output.format, "PNG")


if __name__ == "__main__":
    unittest.main()
