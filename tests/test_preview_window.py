"""Offscreen smoke test for the preview window."""

from __future__ import annotations

import os
import random

import pytest


@pytest.fixture()
def qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app


def test_next_flag_builds_pixmap(qt_app, tmp_path) -> None:
    from flaggen_app.app import FlagPreviewWindow
    from flaggen_app.preview import PreviewSession
    from flaggen_core.config import AppConfig

    cfg = AppConfig()
    cfg.output.path = str(tmp_path / "flag.png")
    cfg.preview.width = 120
    cfg.preview.height = 80
    window = FlagPreviewWindow(cfg, PreviewSession(cfg, rng=random.Random(4)))

    window.next_flag()

    assert window.session.generated == 1
    assert window.session.flag is not None
    assert (tmp_path / "flag.png").exists()
    window.close()
