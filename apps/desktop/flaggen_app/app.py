"""Interactive preview window: Space regenerates, resizing regenerates at the new size."""

from __future__ import annotations

import os
import sys

from PySide6.QtCore import QTimer, Qt
from PySide6.QtGui import QImage, QKeyEvent, QPainter, QPaintEvent, QPixmap, QResizeEvent
from PySide6.QtWidgets import QApplication, QWidget

from flaggen_core import AppConfig, load_config
from flaggen_core.logging_setup import configure_logging, get_logger, install_crash_hooks

try:
    from .preview import PreviewSession
except ImportError:
    from flaggen_app.preview import PreviewSession


class FlagPreviewWindow(QWidget):
    def __init__(self, config: AppConfig, session: PreviewSession | None = None) -> None:
        super().__init__()
        self.config = config
        self.session = session or PreviewSession(config)
        self.logger = get_logger()
        self._pixmap: QPixmap | None = None

        self.setWindowTitle(config.preview.title)
        self.resize(config.preview.width, config.preview.height)

        self._resize_timer = QTimer(self)
        self._resize_timer.setSingleShot(True)
        self._resize_timer.timeout.connect(self.next_flag)

    def next_flag(self) -> None:
        width, height = self.width(), self.height()
        flag = self.session.regenerate(width, height)
        if flag.empty:
            self._pixmap = None
        else:
            data = self.session.frame_bytes()
            image = QImage(data, flag.width, flag.height, flag.width * 3, QImage.Format.Format_RGB888)
            # QImage borrows the buffer; copy before it goes out of scope.
            self._pixmap = QPixmap.fromImage(image.copy())
        self.logger.info(
            f"flag {self.session.generated} generated at {width}x{height}",
            extra={"event": "flag_generated", "foreground": flag.describe()["foreground"]},
        )
        self.update()

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if self._pixmap is None:
            self._resize_timer.stop()
            self.next_flag()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._resize_timer.start(self.config.preview.resize_debounce_ms)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Space:
            self.next_flag()
        elif event.key() == Qt.Key.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(event)

    def paintEvent(self, _event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.GlobalColor.black)
        if self._pixmap is not None:
            painter.drawPixmap(self.rect(), self._pixmap)
        painter.end()


def run_gui(width: int | None = None, height: int | None = None, seed: int | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files)
    install_crash_hooks()
    logger = get_logger()

    if width:
        cfg.preview.width = width
    if height:
        cfg.preview.height = height
    if seed is not None:
        cfg.generator.seed = seed

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("FlagGen")

    window = FlagPreviewWindow(cfg)
    window.show()

    exit_code = app.exec()
    logger.info("app shutdown", extra={"event": "shutdown", "exit_code": int(exit_code)})
    return int(exit_code)
