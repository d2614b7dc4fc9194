"""
Geometry helpers for arc hit-testing.

Angles are in degrees, 0 at the positive x-axis, increasing clockwise on
screen (view y grows downward). No color semantics live here.
"""

import math
from typing import Tuple

Point = Tuple[float, float]

# Indicator touch target is inflated by 20% over its drawn radius
INDICATOR_TOUCH_SCALE = 1.2


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def angle_of(point: Point, center: Point) -> float:
    """Angle of ``point`` around ``center`` in [0, 360).

    A point sitting exactly on the center has no direction; 0.0 is returned.
    """
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    if dx == 0 and dy == 0:
        return 0.0
    angle = math.degrees(math.atan2(dy, dx))
    # atan2 gives (-180, 180]; fold into [0, 360)
    angle = (angle + 360.0) % 360.0
    return 0.0 if angle >= 360.0 else angle


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    """Screen position at ``angle`` degrees on the circle."""
    rad = math.radians(angle)
    return (center[0] + radius * math.cos(rad),
            center[1] + radius * math.sin(rad))


def is_within_ring(point: Point, center: Point, radius: float, tolerance: float) -> bool:
    """True if ``point`` lies within ``tolerance`` of the circle's rim."""
    return abs(distance(point, center) - radius) <= tolerance


def is_within_disc(point: Point, center: Point, radius: float) -> bool:
    """True if ``point`` lies inside the disc (boundary included).

    The bounding box rejects far points cheaply; Euclidean distance decides.
    """
    if abs(point[0] - center[0]) > radius or abs(point[1] - center[1]) > radius:
        return False
    return distance(point, center) <= radius


def is_within_arc_sweep(angle: float, arc_start: float, arc_length: float) -> bool:
    """True if ``angle`` (in [0, 360)) falls inside the clockwise sweep."""
    end = arc_start + arc_length
    if end >= 360.0:
        return angle >= arc_start or angle <= end % 360.0
    return arc_start <= angle <= end


def touch_tolerance(indicator_radius: float, fill_width: float) -> float:
    """Half-thickness of the ring that accepts touches."""
    return max(indicator_radius, fill_width)


def indicator_touch_radius(indicator_radius: float) -> float:
    return indicator_radius * INDICATOR_TOUCH_SCALE


def ring_radius(outer_radius: float, fill_width: float, indicator_radius: float,
                indicator_stroke_width: float = 0.0, offset: float = 0.0) -> float:
    """Radius of the arc's center line so the indicator stays inside ``outer_radius``.

    ``offset`` pushes the arc further inward, used to nest several arcs.
    """
    return outer_radius - max(indicator_radius + indicator_stroke_width, fill_width) - offset
