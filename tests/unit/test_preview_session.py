import random
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "desktop"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from flaggen_app.preview import PreviewSession
from flaggen_core.config import AppConfig


class PreviewSessionTests(unittest.TestCase):
    def test_regenerate_saves_when_enabled(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = AppConfig()
            cfg.output.path = str(Path(tmp) / "flag.png")
            session = PreviewSession(cfg, rng=random.Random(1))
            flag = session.regenerate(64, 36)
            self.assertEqual((flag.width, flag.height), (64, 36))
            self.assertEqual(session.generated, 1)
            self.assertTrue(Path(cfg.output.path).exists())
            self.assertEqual(len(session.frame_bytes()), 64 * 36 * 3)

    def test_regenerate_without_save(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = AppConfig()
            cfg.output.path = str(Path(tmp) / "flag.png")
            cfg.preview.save_on_regenerate = False
            session = PreviewSession(cfg, rng=random.Random(2))
            session.regenerate(10, 10)
            session.regenerate(20, 10)
            self.assertEqual(session.generated, 2)
            self.assertEqual(session.flag.width, 20)
            self.assertFalse(Path(cfg.output.path).exists())

    def test_zero_size_surface(self):
        cfg = AppConfig()
        cfg.preview.save_on_regenerate = False
        session = PreviewSession(cfg, rng=random.Random(3))
        flag = session.regenerate(0, 0)
        self.assertTrue(flag.empty)
        self.assertEqual(session.frame_bytes(), b"")

    def test_config_seed_used(self):
        cfg = AppConfig()
        cfg.preview.save_on_regenerate = False
        cfg.generator.seed = 11
        a = PreviewSession(cfg).regenerate(8, 8)
        b = PreviewSession(cfg).regenerate(8, 8)
        self.assertEqual(a.describe(), b.describe())


if __name__ == "__main__":
    unittest.main()
