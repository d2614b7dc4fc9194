"""
Arc channel picker widget.

Paints one channel's arc with a conical gradient and a round indicator,
and forwards mouse press/move/release to an ArcController. Click/drag on
the arc (or on the indicator) selects a value and emits
``selection_changed`` with a ColorState snapshot.
"""

import logging

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QConicalGradient, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from ..conf import settings
from ..core.controllers import ArcController
from ..core.models import Channel, Circle, ColorState, PointerAction, PointerEvent
from ..geometry import ring_radius
from ..services.arc import ArcChannelMapper
from ..services.color import WHITE, border_color

log = logging.getLogger(__name__)

_ACTIONS = {
    'press': PointerAction.DOWN,
    'move': PointerAction.MOVE,
    'release': PointerAction.UP,
}


class UCArcPicker(QWidget):
    """Single channel arc with click/drag selection.

    Attributes:
        selection_started: Emitted on press inside the arc's touch zone.
        selection_changed: Emitted for the press and every drag step.
        selection_ended: Emitted on release.
    """

    selection_started = pyqtSignal(object)
    selection_changed = pyqtSignal(object)
    selection_ended = pyqtSignal(object)

    def __init__(self, channel=Channel.HUE, color=None, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self._layout = settings.arc_layout(channel)
        self._color = color if color is not None else ColorState()

        mapper = ArcChannelMapper(self._layout.arc, channel, self._color)
        self.controller = ArcController(mapper)
        self.controller.on_selection_start = self.selection_started.emit
        self.controller.on_selection_changed = self.selection_changed.emit
        self.controller.on_selection_end = self.selection_ended.emit

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    @property
    def color(self) -> ColorState:
        return self._color

    def set_value(self, value: float) -> None:
        """Set the channel value without emitting a signal."""
        self.controller.mapper.set_channel_value(value)
        self.update()

    def sync_from_color(self) -> None:
        """Move the indicator after the shared color changed elsewhere."""
        self.controller.mapper.sync_from_color()
        self.update()

    def indicator_border_color(self):
        """Indicator outline: the configured color, else a contrast to the fill."""
        return border_color(self._color.to_rgb(), self._layout.indicator_stroke_color)

    # ----------------------------------------------------------------
    # Layout
    # ----------------------------------------------------------------

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._relayout()

    def _relayout(self):
        lay = self._layout
        radius = ring_radius(min(self.width(), self.height()) / 2.0,
                             lay.fill_width, lay.indicator_radius,
                             lay.indicator_stroke_width)
        if radius <= 0:
            log.debug("Arc picker too small (%dx%d), skipping layout",
                      self.width(), self.height())
            return
        self.controller.set_layout(
            Circle(self.width() / 2.0, self.height() / 2.0, radius),
            lay.fill_width, lay.indicator_radius)

    # ----------------------------------------------------------------
    # Painting
    # ----------------------------------------------------------------

    def paintEvent(self, event):
        circle = self.controller.circle
        if circle is None:
            return
        lay = self._layout
        mapper = self.controller.mapper

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # Qt angles run counter-clockwise, arc angles clockwise
        rect = QRectF(circle.cx - circle.radius, circle.cy - circle.radius,
                      circle.radius * 2, circle.radius * 2)
        start16 = int(-mapper.arc_start * 16)
        span16 = int(-mapper.arc_length * 16)

        if lay.stroke_width > 0:
            outline = lay.stroke_color or WHITE
            pen = QPen(QColor(*outline), lay.fill_width + lay.stroke_width * 2)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(pen)
            painter.drawArc(rect, start16, span16)

        # --- Gradient arc ---
        gradient = QConicalGradient(circle.cx, circle.cy, -mapper.arc_start)
        positions, colors = mapper.color_stops()
        for pos, (r, g, b, a) in zip(positions, colors):
            gradient.setColorAt(1.0 - float(pos), QColor(int(r), int(g), int(b), int(a)))
        pen = QPen(QBrush(gradient), lay.fill_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.drawArc(rect, start16, span16)

        # --- Indicator ---
        x, y = self.controller.indicator_position()
        rgb = self._color.to_rgb()
        painter.setBrush(QBrush(QColor(*rgb)))
        if lay.indicator_stroke_width > 0:
            painter.setPen(QPen(QColor(*self.indicator_border_color()),
                                lay.indicator_stroke_width))
        else:
            painter.setPen(Qt.PenStyle.NoPen)
        painter.drawEllipse(QPointF(x, y), lay.indicator_radius, lay.indicator_radius)

        painter.end()

    # ----------------------------------------------------------------
    # Mouse interaction
    # ----------------------------------------------------------------

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._dispatch('press', event)
        else:
            event.ignore()

    def mouseMoveEvent(self, event):
        self._dispatch('move', event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._dispatch('release', event)
        else:
            event.ignore()

    def _dispatch(self, kind, event):
        if self.controller.circle is None:
            event.ignore()
            return
        pos = event.position()
        consumed = self.controller.on_touch(PointerEvent(_ACTIONS[kind], pos.x(), pos.y()))
        if consumed:
            event.accept()
            self.update()
        else:
            event.ignore()
