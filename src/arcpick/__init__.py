"""
arcpick - arc-based color component picker core

Geometry and color math behind a picker that lays each color channel
(hue, saturation, value, alpha) out on an arc of a circle:

- Pointer position -> angle around the center
- Angle -> clamped onto the arc -> channel value
- Channel value -> indicator angle
- Ring/indicator hit testing and a luma-based border color

Usage:
    # As a library
    from arcpick import Arc, ArcChannelMapper, ArcController, Channel
    mapper = ArcChannelMapper(Arc(285, 150), Channel.VALUE)
    controller = ArcController(mapper)

    # Command line
    arcpick map --start 285 --length 150 --max 255 --angle 180
    arcpick border 202020
    arcpick gui --channel hue
"""

from arcpick.__version__ import __version__
from arcpick.core.controllers import ArcController
from arcpick.core.models import (
    Arc,
    Channel,
    Circle,
    ColorState,
    GestureState,
    PointerAction,
    PointerEvent,
)
from arcpick.services.arc import ArcChannelMapper
from arcpick.services.color import border_color

__all__ = [
    # Version
    "__version__",
    # Models
    "Arc",
    "Channel",
    "Circle",
    "ColorState",
    "GestureState",
    "PointerAction",
    "PointerEvent",
    # Mapping / interaction
    "ArcChannelMapper",
    "ArcController",
    # Color
    "border_color",
]
