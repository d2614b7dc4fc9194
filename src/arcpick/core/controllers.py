"""
Arcpick Controllers - pointer handling that coordinates Models and Services.

Controllers are GUI-framework independent. They:
1. Own an ArcChannelMapper and the layout metrics of one arc
2. Accept pointer events from whatever view hosts them
3. Emit callbacks that views subscribe to for updates
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from ..geometry import (
    angle_of,
    indicator_touch_radius,
    is_within_arc_sweep,
    is_within_disc,
    is_within_ring,
    point_on_circle,
    touch_tolerance,
)
from ..services.arc import ArcChannelMapper
from .models import Circle, ColorState, GestureState, PointerAction, PointerEvent

log = logging.getLogger(__name__)

SelectionCallback = Callable[[ColorState], None]


class ArcController:
    """
    Gesture state machine for one channel arc.

    IDLE --down inside touch zone--> ACTIVE (start + changed)
    ACTIVE --move--> ACTIVE (changed), wherever the pointer is
    ACTIVE --up/cancel--> IDLE (end)
    """

    def __init__(self, mapper: ArcChannelMapper, circle: Optional[Circle] = None,
                 fill_width: float = 0.0, indicator_radius: float = 0.0):
        self.mapper = mapper
        self.circle = circle
        self.fill_width = fill_width
        self.indicator_radius = indicator_radius
        self.state = GestureState.IDLE

        # View callbacks
        self.on_selection_start: Optional[SelectionCallback] = None
        self.on_selection_changed: Optional[SelectionCallback] = None
        self.on_selection_end: Optional[SelectionCallback] = None

    def set_layout(self, circle: Circle, fill_width: float, indicator_radius: float) -> None:
        """Apply metrics from a layout pass."""
        self.circle = circle
        self.fill_width = fill_width
        self.indicator_radius = indicator_radius
        log.debug("%s arc layout: center=(%.1f, %.1f) r=%.1f fill=%.1f indicator=%.1f",
                  self.mapper.channel.value, circle.cx, circle.cy, circle.radius,
                  fill_width, indicator_radius)

    @property
    def is_active(self) -> bool:
        return self.state is GestureState.ACTIVE

    def current_angle(self) -> float:
        return self.mapper.current_angle

    def channel_value(self) -> float:
        return self.mapper.channel_value()

    def indicator_position(self) -> Tuple[float, float]:
        """Center of the indicator for the cached angle."""
        circle = self._require_layout()
        return point_on_circle(circle.center, circle.radius, self.mapper.current_angle)

    # ── Hit testing ─────────────────────────────────────────────────

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) hits the indicator or the arc's ring.

        Nothing is hit before the first layout pass.
        """
        return self.is_on_indicator(x, y) or self.is_on_arc(x, y)

    def is_on_indicator(self, x: float, y: float) -> bool:
        if self.circle is None:
            return False
        return is_within_disc((x, y), self.indicator_position(),
                              indicator_touch_radius(self.indicator_radius))

    def is_on_arc(self, x: float, y: float) -> bool:
        circle = self.circle
        if circle is None:
            return False
        tolerance = touch_tolerance(self.indicator_radius, self.fill_width)
        if not is_within_ring((x, y), circle.center, circle.radius, tolerance):
            return False
        angle = angle_of((x, y), circle.center)
        return is_within_arc_sweep(angle, self.mapper.arc_start, self.mapper.arc_length)

    # ── Pointer events ──────────────────────────────────────────────

    def on_touch(self, event: PointerEvent) -> bool:
        """Feed one pointer event. Returns True if the event was consumed."""
        action = event.action
        if self.circle is None:
            log.debug("%s arc: no layout yet, ignoring %s",
                      self.mapper.channel.value, action.name.lower())
            return False

        if action is PointerAction.DOWN:
            if not self.is_active and self.contains(event.x, event.y):
                self.state = GestureState.ACTIVE
                log.debug("%s arc: selection started at (%.1f, %.1f)",
                          self.mapper.channel.value, event.x, event.y)
                self._track(event)
                self._notify(self.on_selection_start)
                self._notify(self.on_selection_changed)
        elif action is PointerAction.MOVE:
            if self.is_active:
                self._track(event)
                self._notify(self.on_selection_changed)
        elif action in (PointerAction.UP, PointerAction.CANCEL):
            if self.is_active:
                self.state = GestureState.IDLE
                log.debug("%s arc: selection ended (%s), value %.4f",
                          self.mapper.channel.value, action.name.lower(),
                          self.mapper.channel_value())
                self._notify(self.on_selection_end)
                return True

        return self.is_active

    def _track(self, event: PointerEvent) -> None:
        circle = self._require_layout()
        self.mapper.update_from_angle(angle_of((event.x, event.y), circle.center))

    def _notify(self, callback: Optional[SelectionCallback]) -> None:
        if callback:
            callback(self.mapper.color.snapshot())

    def _require_layout(self) -> Circle:
        if self.circle is None:
            raise RuntimeError("ArcController used before set_layout()")
        return self.circle
