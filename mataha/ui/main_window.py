from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mataha.core.feedback import Renderer
from mataha.core.maze import DOWN, LEFT, RIGHT, UP, Direction
from mataha.core.motion import MotionPolicy
from mataha.core.session import LevelSession
from mataha.ui.colors import GameColors
from mataha.ui.maze_widget import MazeWidget
from mataha.ui.models import HudState

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16

# Qt key codes translated to the names the session's key bindings use.
_QT_KEY_NAMES: Dict[int, str] = {
    Qt.Key_Up: "ArrowUp",
    Qt.Key_Down: "ArrowDown",
    Qt.Key_Left: "ArrowLeft",
    Qt.Key_Right: "ArrowRight",
}


class MainWindow(QMainWindow):
    """Game window: header, maze board and on-screen arrow buttons.

    A ``QTimer`` drives the frame loop. Every frame runs one session tick and
    then hands the resulting snapshot to the board and the header.
    """

    def __init__(self, session: LevelSession) -> None:
        super().__init__()
        self._session = session
        self._renderer: Optional[Renderer] = None
        self._level_label: Optional[QLabel] = None
        self._message_label: Optional[QLabel] = None
        self._star_label: Optional[QLabel] = None
        self._last_hud: Optional[HudState] = None

        self.setWindowTitle("Mataha")
        self._build_ui()

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)

    def start(self, level: int = 1) -> None:
        """Start ``level`` and the frame loop."""
        self._session.start_level(level)
        self._session.resize(self.width(), self.height())
        self._frame_timer.start()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        central = QWidget(self)
        central.setStyleSheet(f"background: {GameColors.WINDOW_BG};")
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 12, 16, 12)
        root.setSpacing(10)

        header = QHBoxLayout()
        self._level_label = self._header_label(20, GameColors.TEXT_PRIMARY)
        self._message_label = self._header_label(18, GameColors.TEXT_SECONDARY)
        self._star_label = self._header_label(20, GameColors.TEXT_PRIMARY)
        header.addWidget(self._level_label)
        header.addStretch(1)
        header.addWidget(self._message_label)
        header.addStretch(1)
        header.addWidget(self._star_label)
        root.addLayout(header)

        maze_widget = MazeWidget(central)
        root.addWidget(maze_widget, 1, Qt.AlignCenter)
        self._renderer = maze_widget
        root.addLayout(self._build_arrow_pad(), 0)

        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.StrongFocus)

    @staticmethod
    def _header_label(size: int, color: str) -> QLabel:
        label = QLabel()
        label.setStyleSheet(f"color: {color}; font-size: {size}px; font-weight: 700;")
        return label

    def _build_arrow_pad(self) -> QGridLayout:
        pad = QGridLayout()
        pad.setSpacing(6)
        for text, direction, row, col in (
            ("▲", UP, 0, 1),
            ("◀", LEFT, 1, 0),
            ("▼", DOWN, 1, 1),
            ("▶", RIGHT, 1, 2),
        ):
            pad.addWidget(self._arrow_button(text, direction), row, col)
        wrapper = QGridLayout()
        wrapper.addLayout(pad, 0, 1)
        wrapper.setColumnStretch(0, 1)
        wrapper.setColumnStretch(2, 1)
        return wrapper

    def _arrow_button(self, text: str, direction: Direction) -> QPushButton:
        button = QPushButton(text)
        button.setFixedSize(56, 56)
        button.setFocusPolicy(Qt.NoFocus)
        button.setStyleSheet(
            f"""
            QPushButton {{
                background: {GameColors.BUTTON_BG};
                color: white;
                border: none;
                border-radius: 12px;
                font-size: 22px;
            }}
            QPushButton:pressed {{
                background: {GameColors.BUTTON_PRESSED};
            }}
            """
        )
        button.pressed.connect(lambda d=direction: self._session.set_desired_direction(d.dx, d.dy))
        button.released.connect(lambda d=direction: self._session.release_direction(d.dx, d.dy))
        return button

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def _on_frame(self) -> None:
        self._session.tick()
        snapshot = self._session.snapshot()
        if self._renderer is not None:
            self._renderer.draw(snapshot)

        hud = HudState.from_snapshot(snapshot)
        if hud != self._last_hud:
            self._level_label.setText(hud.level_text)
            self._message_label.setText(hud.message)
            self._star_label.setText(hud.star_text)
            self._last_hud = hud

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._session.resize(self.width(), self.height())

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.isAutoRepeat() and self._session.settings.motion_policy is MotionPolicy.EDGE:
            event.accept()
            return
        if self._session.handle_key_down(self._key_name(event)):
            event.accept()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if event.isAutoRepeat():
            event.accept()
            return
        if self._session.handle_key_up(self._key_name(event)):
            event.accept()
            return
        super().keyReleaseEvent(event)

    @staticmethod
    def _key_name(event: QKeyEvent) -> str:
        return _QT_KEY_NAMES.get(event.key(), event.text())

    def closeEvent(self, event) -> None:
        self._frame_timer.stop()
        logger.info("Closing at level %d", self._session.level)
        super().closeEvent(event)
