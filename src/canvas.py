# Dotgrid
# Copyright 2025 - Ricardo Quesada

"""The main canvas widget for the application."""

import logging
from typing import override

from PySide6.QtCore import QEvent, QPointF, QRectF, QSize, Qt, Slot
from PySide6.QtGui import (
    QColor,
    QMouseEvent,
    QPaintDevice,
    QPainter,
    QPaintEvent,
    QPen,
    QResizeEvent,
)
from PySide6.QtWidgets import QWidget

from geometry import Point
from preferences import get_global_preferences
from state import State
from state_properties import StateChangeFlags

logger = logging.getLogger(__name__)

NODE_OUTLINE_WIDTH = 2


class Canvas(QWidget):
    """
    The drawing area of the Dotgrid application.

    It forwards the resize and mouse events to the State, and renders the
    nodes, the completed shapes and the path being drawn.
    """

    def __init__(self, state: State):
        """
        Initializes the Canvas.

        Args:
            state: The application state.
        """
        super().__init__()
        self._state = state

        self._load_colors()

        self.setCursor(Qt.CursorShape.CrossCursor)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._state.state_changed.connect(self._on_state_changed)
        get_global_preferences().colors_changed.connect(self._on_colors_changed)

    def _load_colors(self) -> None:
        preferences = get_global_preferences()
        self._cached_background_color = QColor(preferences.get_canvas_background_color_name())
        self._cached_node_color = QColor(preferences.get_node_color_name())
        self._cached_shape_color = QColor(preferences.get_shape_color_name())
        self._cached_preview_color = QColor(preferences.get_preview_color_name())

    def _draw_points(self, painter: QPainter, points: list[Point], color: QColor) -> None:
        """Draws a path as a thick stroke with rounded caps and joins."""
        if not points:
            return
        diameter = self._state.properties.node_diameter
        if len(points) == 1:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(color)
            radius = diameter / 2
            painter.drawEllipse(QPointF(points[0].x, points[0].y), radius, radius)
            return

        pen = QPen(color, diameter, Qt.PenStyle.SolidLine)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPolyline([QPointF(p.x, p.y) for p in points])

    def _paint(self, device: QPaintDevice) -> None:
        """Renders the nodes, the shapes and the path being drawn to a QPaintDevice."""
        painter = QPainter(device)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        size = self.size()
        painter.fillRect(QRectF(0, 0, size.width(), size.height()), self._cached_background_color)

        # 1. Nodes
        painter.save()
        painter.setPen(QPen(self._cached_node_color, NODE_OUTLINE_WIDTH, Qt.PenStyle.SolidLine))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for node in self._state.nodes:
            # Keep the outline inside the circle
            r = node.radius - NODE_OUTLINE_WIDTH / 2
            painter.drawEllipse(QPointF(node.x, node.y), r, r)
        painter.restore()

        # 2. Completed shapes
        painter.save()
        for shape in self._state.shapes:
            self._draw_points(painter, shape.points, self._cached_shape_color)
        painter.restore()

        # 3. Preview
        if self._state.is_drawing:
            painter.save()
            self._draw_points(painter, self._state.current_path, self._cached_preview_color)
            painter.restore()

        painter.end()

    #
    # Slots
    #
    @Slot(StateChangeFlags)
    def _on_state_changed(self, flags: StateChangeFlags):
        self.update()

    @Slot()
    def _on_colors_changed(self):
        self._load_colors()
        self.update()

    #
    # Pyside6 events
    #
    @override
    def paintEvent(self, event: QPaintEvent) -> None:
        self._paint(self)

    @override
    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self._state.resize(size.width(), size.height())
        super().resizeEvent(event)

    @override
    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        event.accept()
        pos = event.position()
        self._state.capture_start(pos.x(), pos.y())

    @override
    def mouseMoveEvent(self, event: QMouseEvent):
        if not self._state.is_drawing:
            event.ignore()
            return
        event.accept()
        pos = event.position()
        self._state.capture_move(pos.x(), pos.y())

    @override
    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        event.accept()
        self._state.capture_end()

    @override
    def leaveEvent(self, event: QEvent):
        # Leaving the canvas finishes the path, same as releasing the button
        self._state.capture_end()
        super().leaveEvent(event)

    @override
    def sizeHint(self) -> QSize:
        return QSize(1280, 720)

    @property
    def state(self) -> State:
        """The application state."""
        return self._state
