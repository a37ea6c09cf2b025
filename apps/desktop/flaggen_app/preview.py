"""Toolkit-free state behind the preview window."""

from __future__ import annotations

import random
from pathlib import Path

from flaggen_core import AppConfig
from flaggen_core.logging_setup import get_logger
from flaggen_renderer import Flag, flag_to_rgb_bytes, random_flag, save_flag, seeded_rng


class PreviewSession:
    """Holds the current flag and regenerates it for a given surface size."""

    def __init__(self, config: AppConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng or seeded_rng(config.generator.seed)
        self.logger = get_logger()
        self.flag: Flag | None = None
        self.generated = 0

    @property
    def output_path(self) -> Path:
        return Path(self.config.output.path).expanduser()

    def regenerate(self, width: int, height: int) -> Flag:
        self.flag = random_flag(max(width, 0), max(height, 0), self.rng)
        self.generated += 1
        if self.config.preview.save_on_regenerate and not self.flag.empty:
            self._save(self.flag)
        return self.flag

    def frame_bytes(self) -> bytes:
        if self.flag is None or self.flag.empty:
            return b""
        return flag_to_rgb_bytes(self.flag)

    def _save(self, flag: Flag) -> None:
        try:
            path = save_flag(flag, self.output_path, format=self.config.output.format)
        except OSError as exc:
            self.logger.error(f"failed to save flag: {exc}", extra={"event": "flag_save_failed"})
            return
        self.logger.info(f"saved flag to {path}", extra={"event": "flag_saved", "path": str(path)})
