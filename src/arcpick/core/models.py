"""
Arcpick Models - Pure data classes with no GUI dependencies.

These models can be used by any GUI framework (PyQt6, Tkinter, a test
harness feeding synthetic pointer events, etc.)
"""

import colorsys
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Tuple

# =============================================================================
# Geometry configuration
# =============================================================================


@dataclass(frozen=True)
class Circle:
    """Circle in view coordinates (y grows downward)."""
    cx: float
    cy: float
    radius: float

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"Circle radius must be > 0, got {self.radius!r}")

    @property
    def center(self) -> Tuple[float, float]:
        return (self.cx, self.cy)


@dataclass(frozen=True)
class Arc:
    """
    Contiguous angular segment swept clockwise from ``start``.

    ``start`` is normalized into [0, 360). ``length`` must lie in (0, 360].
    An arc may wrap past 360 degrees, in which case ``end < start``.
    """
    start: float
    length: float

    def __post_init__(self):
        if not 0 < self.length <= 360:
            raise ValueError(f"Arc length must be in (0, 360], got {self.length!r}")
        object.__setattr__(self, 'start', self.start % 360.0)

    @property
    def end(self) -> float:
        """End angle in [0, 360)."""
        end = self.start + self.length
        return end - 360.0 if end >= 360.0 else end

    @property
    def midpoint(self) -> float:
        """Middle of the arc, un-normalized (may exceed 360)."""
        return self.start + self.length / 2.0

    @property
    def crosses_zero(self) -> bool:
        """True if the arc reaches 0 degrees, ending exactly at 360 included."""
        return self.start + self.length >= 360.0

    @property
    def is_full_circle(self) -> bool:
        return self.length >= 360.0


# =============================================================================
# Color state
# =============================================================================

class Channel(Enum):
    """Color channels an arc can edit."""
    HUE = 'hue'
    SATURATION = 'saturation'
    VALUE = 'value'
    ALPHA = 'alpha'


# Max value per channel (min is always 0)
CHANNEL_MAX = {
    Channel.HUE: 360.0,
    Channel.SATURATION: 1.0,
    Channel.VALUE: 1.0,
    Channel.ALPHA: 1.0,
}


@dataclass
class ColorState:
    """
    Shared HSV+alpha color edited by one arc per channel.

    Each channel has a single writer (the arc bound to it); readers get
    independent copies via ``snapshot()``.
    """
    hue: float = 0.0         # 0-360
    saturation: float = 1.0  # 0-1
    value: float = 1.0       # 0-1
    alpha: float = 1.0       # 0-1

    def get_channel(self, channel: Channel) -> float:
        return getattr(self, Channel(channel).value)

    def set_channel(self, channel: Channel, value: float) -> None:
        setattr(self, Channel(channel).value, float(value))

    def snapshot(self) -> 'ColorState':
        """Independent copy for listeners."""
        return replace(self)

    def to_rgb(self) -> Tuple[int, int, int]:
        """Convert to 0-255 RGB (alpha ignored)."""
        return hsv_to_rgb(self.hue, _unit(self.saturation), _unit(self.value))

    def to_argb(self) -> int:
        """Pack as a 32-bit 0xAARRGGBB integer."""
        r, g, b = self.to_rgb()
        a = round(_unit(self.alpha) * 255)
        return (a << 24) | (r << 16) | (g << 8) | b

    @property
    def hex(self) -> str:
        r, g, b = self.to_rgb()
        return f"#{r:02x}{g:02x}{b:02x}"


def _unit(x: float) -> float:
    return max(0.0, min(1.0, x))


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """HSV (h 0-360, s/v 0-1) to 0-255 RGB."""
    r, g, b = colorsys.hsv_to_rgb((h % 360.0) / 360.0, s, v)
    return (round(r * 255), round(g * 255), round(b * 255))


# =============================================================================
# Pointer events and gesture state
# =============================================================================

class PointerAction(Enum):
    """Pointer/touch action kinds."""
    DOWN = auto()
    MOVE = auto()
    UP = auto()
    CANCEL = auto()   # platform gave up on the gesture, treated like UP


@dataclass(frozen=True)
class PointerEvent:
    """Single pointer event in view coordinates."""
    action: PointerAction
    x: float
    y: float


class GestureState(Enum):
    """Interaction state of one arc."""
    IDLE = auto()
    ACTIVE = auto()


# =============================================================================
# Layout
# =============================================================================

@dataclass
class ArcLayout:
    """
    Per-arc layout metrics, supplied once per layout pass.

    ``fill_width`` is the gradient stroke; ``stroke_width`` the optional
    outline drawn around it. A ``None`` color means the default: white for
    the arc outline, a luma-derived contrast color for the indicator.
    """
    arc_start: float = 0.0
    arc_length: float = 360.0
    fill_width: float = 12.0
    stroke_width: float = 0.0
    indicator_radius: float = 10.0
    indicator_stroke_width: float = 2.0
    stroke_color: Optional[Tuple[int, int, int]] = None
    indicator_stroke_color: Optional[Tuple[int, int, int]] = None

    @property
    def arc(self) -> Arc:
        return Arc(self.arc_start, self.arc_length)
