"""Arc channel mapping: angle on an arc <-> value of one color channel.

Pure Python, no Qt dependencies.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from ..core.models import Arc, Channel, ColorState
from ..geometry import is_within_arc_sweep
from .color import ComponentSpec, component_for, gradient_positions

log = logging.getLogger(__name__)


class ArcChannelMapper:
    """Maps angles on one arc to values of one channel of a shared ColorState.

    The arc runs clockwise from ``arc.start`` for ``arc.length`` degrees and
    covers channel values 0 at the start to ``channel_max`` at the end.
    ``current_angle`` caches the indicator position until the next update.
    """

    def __init__(self, arc: Arc, channel: Channel, color: Optional[ColorState] = None,
                 channel_max: Optional[float] = None) -> None:
        self.arc = arc
        self.component: ComponentSpec = component_for(channel)
        self.channel = self.component.channel
        self.channel_max = self.component.channel_max if channel_max is None else float(channel_max)
        if not self.channel_max > 0:
            raise ValueError(f"channel_max must be > 0, got {self.channel_max!r}")
        self.color = color if color is not None else ColorState()
        self.current_angle: float = arc.midpoint

    @property
    def arc_start(self) -> float:
        return self.arc.start

    @property
    def arc_length(self) -> float:
        return self.arc.length

    @property
    def arc_end(self) -> float:
        return self.arc.end

    # ── Angle clamping ──────────────────────────────────────────────

    def clamp_angle_to_arc(self, angle: float) -> float:
        """Keep ``angle`` on the arc.

        Angles in the complement (the part of the circle the arc does not
        cover) snap to the nearer arc endpoint; the complement's midpoint
        is the split. Angles already on the arc are returned unchanged.
        """
        if self.arc.is_full_circle:
            return angle
        start, end = self.arc_start, self.arc_end
        middle = end + (360.0 - self.arc_length) / 2.0

        if end < start:
            # Arc crosses 0, the complement [end, start] is continuous
            if end <= angle <= middle:
                return end
            if middle <= angle <= start:
                return start
            return angle

        if middle > 360.0:
            # Complement crosses 0 and so does its midpoint
            middle -= 360.0
            if end <= angle <= 360.0 or 0.0 <= angle <= middle:
                return end
            if middle <= angle <= start:
                return start
            return angle

        # Complement crosses 0 after its midpoint
        if end <= angle <= middle:
            return end
        if middle <= angle <= 360.0 or 0.0 <= angle <= start:
            return start
        return angle

    def contains_angle(self, angle: float) -> bool:
        return is_within_arc_sweep(angle, self.arc_start, self.arc_length)

    # ── Conversions ─────────────────────────────────────────────────

    def angle_to_channel(self, angle: float) -> float:
        """Channel value at ``angle``. Expects an angle already on the arc."""
        relative = angle
        if angle < self.arc_start:
            relative += 360.0
        return (relative - self.arc_start) / self.arc_length * self.channel_max

    def channel_to_angle(self, value: float) -> float:
        """Arc angle for ``value``, un-normalized (may exceed 360).

        Values outside [0, channel_max] are clamped first.
        """
        value = max(0.0, min(self.channel_max, value))
        return value / self.channel_max * self.arc_length + self.arc_start

    # ── Shared color state ──────────────────────────────────────────

    def channel_value(self) -> float:
        return self.color.get_channel(self.channel)

    def update_from_angle(self, raw_angle: float) -> float:
        """Clamp a pointer angle, cache it, and write the channel value."""
        self.current_angle = self.clamp_angle_to_arc(raw_angle)
        value = self.angle_to_channel(self.current_angle)
        self.color.set_channel(self.channel, value)
        log.debug("%s: angle %.2f -> %.2f, value %.4f",
                  self.channel.value, raw_angle, self.current_angle, value)
        return value

    def set_channel_value(self, value: float) -> float:
        """Programmatic write: clamp, store, and move the indicator."""
        value = max(0.0, min(self.channel_max, float(value)))
        self.color.set_channel(self.channel, value)
        self.current_angle = self.channel_to_angle(value)
        return value

    def sync_from_color(self) -> float:
        """Re-derive the indicator angle after someone else changed the color."""
        self.current_angle = self.channel_to_angle(self.channel_value())
        return self.current_angle

    # ── Gradient ────────────────────────────────────────────────────

    def color_stops(self) -> Tuple[np.ndarray, np.ndarray]:
        """(positions, RGBA colors) for a sweep gradient starting at the arc start.

        Positions are fractions of a full turn, so the gradient has to be
        rotated by ``arc_start`` when drawn.
        """
        positions = gradient_positions(self.arc_length, self.component.stop_count)
        return positions, self.component.color_stops(self.color)
