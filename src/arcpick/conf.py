"""Application settings and config persistence for arcpick.

Single source of truth for arc layouts and indicator metrics.
Config is stored at ~/.config/arcpick/config.json (XDG-compliant).

Usage:
    from arcpick.conf import settings

    settings.fill_width              # gradient stroke width
    settings.indicator_radius        # indicator disc radius
    settings.stroke_color            # arc outline color, None for white
    settings.arc_layout(Channel.HUE) # ArcLayout for one channel

    # Low-level config access
    from arcpick.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import os
from typing import Dict, Optional, Tuple

from .core.models import Arc, ArcLayout, Channel
from .services.color import RGB, hex_to_rgb

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'arcpick')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')

# Default (start, length) per channel arc.
# Hue takes the full ring; saturation/value sit on the left/right halves,
# value crossing 0 degrees.
DEFAULT_ARCS: Dict[Channel, Tuple[float, float]] = {
    Channel.HUE: (0.0, 360.0),
    Channel.SATURATION: (105.0, 150.0),
    Channel.VALUE: (285.0, 150.0),
    Channel.ALPHA: (30.0, 120.0),
}

DEFAULT_METRICS: Dict[str, float] = {
    'fill_width': 12.0,
    'stroke_width': 0.0,
    'indicator_radius': 10.0,
    'indicator_stroke_width': 2.0,
}

# Outline colors, hex strings in the "colors" config key. None = derived.
COLOR_KEYS = ('stroke_color', 'indicator_stroke_color')


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, e)
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# Settings singleton
# =========================================================================

class Settings:
    """Application-wide settings singleton.

    Defaults come from DEFAULT_ARCS/DEFAULT_METRICS; the config file's
    ``"arcs"``, ``"metrics"`` and ``"colors"`` keys override them.
    """

    def __init__(self) -> None:
        self._arcs: Dict[Channel, Arc] = {
            ch: Arc(start, length) for ch, (start, length) in DEFAULT_ARCS.items()
        }
        self.fill_width = DEFAULT_METRICS['fill_width']
        self.stroke_width = DEFAULT_METRICS['stroke_width']
        self.indicator_radius = DEFAULT_METRICS['indicator_radius']
        self.indicator_stroke_width = DEFAULT_METRICS['indicator_stroke_width']
        self.stroke_color: Optional[RGB] = None
        self.indicator_stroke_color: Optional[RGB] = None
        self.reload()

    def reload(self) -> None:
        """Re-read overrides from the config file."""
        config = load_config()

        for name, value in config.get('metrics', {}).items():
            if name not in DEFAULT_METRICS:
                log.warning("Unknown metric in config: %s", name)
                continue
            try:
                setattr(self, name, float(value))
            except (TypeError, ValueError):
                log.warning("Bad value for metric %s: %r", name, value)

        for name, value in config.get('colors', {}).items():
            if name not in COLOR_KEYS:
                log.warning("Unknown color in config: %s", name)
                continue
            try:
                setattr(self, name, None if value is None else hex_to_rgb(value))
            except (AttributeError, ValueError):
                log.warning("Bad value for color %s: %r", name, value)

        for name, entry in config.get('arcs', {}).items():
            try:
                channel = Channel(name)
                self._arcs[channel] = Arc(float(entry['start']), float(entry['length']))
            except (KeyError, TypeError, ValueError) as e:
                log.warning("Ignoring arc override %s=%r: %s", name, entry, e)

    def arc(self, channel: Channel) -> Arc:
        return self._arcs[Channel(channel)]

    def arc_layout(self, channel: Channel) -> ArcLayout:
        """Full layout for one channel's arc."""
        arc = self.arc(channel)
        return ArcLayout(
            arc_start=arc.start,
            arc_length=arc.length,
            fill_width=self.fill_width,
            stroke_width=self.stroke_width,
            indicator_radius=self.indicator_radius,
            indicator_stroke_width=self.indicator_stroke_width,
            stroke_color=self.stroke_color,
            indicator_stroke_color=self.indicator_stroke_color,
        )

    def set_arc_layout(self, channel: Channel, start: float, length: float,
                       persist: bool = True) -> None:
        """Move/resize a channel's arc. Invalid arcs raise ValueError."""
        channel = Channel(channel)
        arc = Arc(start, length)
        log.info("Settings: %s arc %.1f+%.1f → %.1f+%.1f", channel.value,
                 self._arcs[channel].start, self._arcs[channel].length,
                 arc.start, arc.length)
        self._arcs[channel] = arc
        if persist:
            config = load_config()
            arcs = config.setdefault('arcs', {})
            arcs[channel.value] = {'start': arc.start, 'length': arc.length}
            save_config(config)


# Module-level singleton — import and use directly
settings = Settings()
