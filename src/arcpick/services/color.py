"""Color helpers: border color by luma, HSV conversion, and gradient stops.

Pure Python + numpy, no Qt dependencies.

Each editable channel is described by a ``ComponentSpec`` capability record
(channel, max value, gradient generator) looked up in ``COMPONENTS``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from ..core.models import CHANNEL_MAX, Channel, ColorState, hsv_to_rgb

log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)

# Rec. 601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


# =========================================================================
# Border color
# =========================================================================

def color_darkness(rgb: RGB) -> float:
    """1 - luma, in [0, 1]. 1.0 for black, 0.0 for white."""
    r, g, b = rgb
    wr, wg, wb = LUMA_WEIGHTS
    return 1.0 - (wr * r + wg * g + wb * b) / 255.0


def blend_rgb(color1: RGB, color2: RGB, ratio: float) -> RGB:
    """Linear per-channel blend. ratio=0 gives color1, ratio=1 gives color2.

    Channels are truncated to int, not rounded.
    """
    return tuple(int(c1 + (c2 - c1) * ratio)
                 for c1, c2 in zip(color1, color2))  # type: ignore[return-value]


def border_color(rgb: RGB, override: Optional[RGB] = None) -> RGB:
    """Outline color that contrasts with ``rgb``.

    Dark colors are lifted toward white, light colors pushed toward black.
    An explicit ``override`` wins.
    """
    if override is not None:
        return override
    darkness = color_darkness(rgb)
    if darkness >= 0.5:
        return blend_rgb(rgb, WHITE, darkness)
    return blend_rgb(rgb, BLACK, 0.75 - darkness)


def rgb_to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def hex_to_rgb(text: str) -> RGB:
    """Parse 'ff8000' or '#ff8000'."""
    text = text.strip().lstrip('#')
    if len(text) != 6:
        raise ValueError(f"Expected 6 hex digits, got {text!r}")
    return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))


# =========================================================================
# Gradient stops
# =========================================================================

def gradient_positions(arc_length: float, count: int) -> np.ndarray:
    """Stop positions as fractions of a full turn, spread over the arc."""
    if count < 2:
        raise ValueError(f"Need at least 2 gradient stops, got {count}")
    return np.arange(count, dtype=np.float64) * (arc_length / (count - 1)) / 360.0


def _hue_stops(color: ColorState, count: int) -> np.ndarray:
    hues = np.linspace(0.0, 360.0, count)
    return np.array([(*hsv_to_rgb(h, 1.0, 1.0), 255) for h in hues], dtype=np.uint8)


def _saturation_stops(color: ColorState, count: int) -> np.ndarray:
    sats = np.linspace(0.0, 1.0, count)
    return np.array([(*hsv_to_rgb(color.hue, s, color.value), 255) for s in sats],
                    dtype=np.uint8)


def _value_stops(color: ColorState, count: int) -> np.ndarray:
    values = np.linspace(0.0, 1.0, count)
    return np.array([(*hsv_to_rgb(color.hue, color.saturation, v), 255) for v in values],
                    dtype=np.uint8)


def _alpha_stops(color: ColorState, count: int) -> np.ndarray:
    r, g, b = color.to_rgb()
    alphas = np.rint(np.linspace(0.0, 255.0, count))
    return np.array([(r, g, b, a) for a in alphas], dtype=np.uint8)


@dataclass(frozen=True)
class ComponentSpec:
    """What an arc needs to know about the channel it edits."""
    channel: Channel
    channel_max: float
    stop_count: int
    color_stops_fn: Callable[[ColorState, int], np.ndarray]

    def color_stops(self, color: ColorState) -> np.ndarray:
        """(stop_count, 4) uint8 RGBA array from channel 0 to channel max."""
        return self.color_stops_fn(color, self.stop_count)


COMPONENTS: Dict[Channel, ComponentSpec] = {
    Channel.HUE: ComponentSpec(Channel.HUE, CHANNEL_MAX[Channel.HUE], 7, _hue_stops),
    Channel.SATURATION: ComponentSpec(Channel.SATURATION, CHANNEL_MAX[Channel.SATURATION],
                                      2, _saturation_stops),
    Channel.VALUE: ComponentSpec(Channel.VALUE, CHANNEL_MAX[Channel.VALUE], 2, _value_stops),
    Channel.ALPHA: ComponentSpec(Channel.ALPHA, CHANNEL_MAX[Channel.ALPHA], 2, _alpha_stops),
}


def component_for(channel) -> ComponentSpec:
    """Look up a channel's ComponentSpec by enum or name ('hue', 'alpha', ...)."""
    try:
        return COMPONENTS[Channel(channel)]
    except ValueError:
        raise ValueError(f"Unknown channel: {channel!r}") from None
