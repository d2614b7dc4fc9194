"""
Arcpick Core - Models + Controllers

Models: Data classes only (Circle, Arc, ColorState, PointerEvent, etc.)
Controllers: ArcController, the per-arc pointer gesture state machine

Note: Controllers are NOT re-exported here to avoid circular imports
(services → core.models → core.__init__ → controllers → services).
Import controllers directly: `from arcpick.core.controllers import ...`
"""

from .models import (
    Arc,
    ArcLayout,
    Channel,
    Circle,
    ColorState,
    GestureState,
    PointerAction,
    PointerEvent,
)

__all__ = [
    'Arc',
    'ArcLayout',
    'Channel',
    'Circle',
    'ColorState',
    'GestureState',
    'PointerAction',
    'PointerEvent',
]
