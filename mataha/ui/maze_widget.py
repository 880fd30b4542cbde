"""Board widget: paints a session snapshot with QPainter."""

from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import QWidget

from mataha.core.session import GameState, Snapshot
from mataha.ui.colors import GameColors, blend_hex
from mataha.ui.confetti import ConfettiBurst

WALL_WIDTH = 4


def star_points(cx: float, cy: float, spikes: int, outer: float, inner: float) -> list[QPointF]:
    """Vertices of a star centred on (cx, cy), first spike pointing up."""
    points = []
    rot = math.pi / 2 * 3
    step = math.pi / spikes
    for _ in range(spikes):
        points.append(QPointF(cx + math.cos(rot) * outer, cy + math.sin(rot) * outer))
        rot += step
        points.append(QPointF(cx + math.cos(rot) * inner, cy + math.sin(rot) * inner))
        rot += step
    return points


class MazeWidget(QWidget):
    """Renderer for the maze board, the exit, the stars, the player and confetti."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._snapshot: Optional[Snapshot] = None
        self._confetti = ConfettiBurst()
        self._celebrating = False
        self.setMinimumSize(100, 100)
        self.setFocusPolicy(Qt.NoFocus)

    def draw(self, snapshot: Snapshot) -> None:
        """Take the frame's snapshot and schedule a repaint."""
        celebrating = snapshot.state is GameState.CELEBRATING
        if celebrating and not self._celebrating:
            cs = snapshot.cell_size
            self._confetti.spawn(snapshot.render_x * cs + cs / 2, snapshot.render_y * cs + cs / 2)
        elif celebrating:
            self._confetti.update()
        else:
            self._confetti.clear()
        self._celebrating = celebrating

        side = max(1, int(snapshot.board_size))
        if self.width() != side or self.height() != side:
            self.setFixedSize(side, side)
        self._snapshot = snapshot
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        snap = self._snapshot
        if snap is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.fillRect(self.rect(), QColor(blend_hex(GameColors.BOARD_BG, GameColors.WALL, 0.04)))

        self._paint_walls(painter, snap)
        self._paint_stars(painter, snap)
        self._paint_exit(painter, snap)
        self._paint_player(painter, snap)
        if snap.state is GameState.CELEBRATING:
            self._paint_confetti(painter)
        painter.end()

    def _paint_walls(self, painter: QPainter, snap: Snapshot) -> None:
        cs = snap.cell_size
        pen = QPen(QColor(GameColors.WALL), WALL_WIDTH)
        pen.setCapStyle(Qt.SquareCap)
        painter.setPen(pen)
        for y, row in enumerate(snap.maze.cells):
            for x, cell in enumerate(row):
                left, top = x * cs, y * cs
                if cell.top:
                    painter.drawLine(QPointF(left, top), QPointF(left + cs, top))
                if cell.right:
                    painter.drawLine(QPointF(left + cs, top), QPointF(left + cs, top + cs))
                if cell.bottom:
                    painter.drawLine(QPointF(left, top + cs), QPointF(left + cs, top + cs))
                if cell.left:
                    painter.drawLine(QPointF(left, top), QPointF(left, top + cs))

    def _paint_stars(self, painter: QPainter, snap: Snapshot) -> None:
        cs = snap.cell_size
        twinkle = math.sin(snap.frame_count * 0.08) * (cs * 0.03)
        outer = cs / 4 + twinkle
        inner = outer / 2
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(GameColors.STAR))
        for star in snap.stars:
            cx = star.x * cs + cs / 2
            cy = star.y * cs + cs / 2
            painter.drawPolygon(QPolygonF(star_points(cx, cy, 5, outer, inner)))

    def _paint_exit(self, painter: QPainter, snap: Snapshot) -> None:
        cs = snap.cell_size
        pulse = math.sin(snap.frame_count * 0.05) * (cs * 0.05)
        size = cs * 0.8 + pulse
        offset = (cs - size) / 2
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(GameColors.EXIT))
        painter.drawRect(QRectF(snap.exit.x * cs + offset, snap.exit.y * cs + offset, size, size))

    def _paint_player(self, painter: QPainter, snap: Snapshot) -> None:
        cs = snap.cell_size
        breath = 0.0
        if not snap.moving and not snap.animating:
            breath = math.sin(snap.frame_count * 0.1) * (cs * 0.04)
        radius = cs / 3 + breath
        center = QPointF(snap.render_x * cs + cs / 2, snap.render_y * cs + cs / 2)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(GameColors.PLAYER))
        painter.drawEllipse(center, radius, radius)

    def _paint_confetti(self, painter: QPainter) -> None:
        painter.setPen(Qt.NoPen)
        for p in self._confetti.particles:
            painter.fillRect(QRectF(p.x, p.y, p.size, p.size), QColor(p.color))
