"""Arcpick Services — pure Python logic (no Qt/CLI).

Shared by the driving adapters:
- core/controllers.py (pointer gestures)
- qt_components/ (PyQt6 widget)
- cli.py (argparse CLI)
"""

from .arc import ArcChannelMapper
from .color import COMPONENTS, ComponentSpec, border_color, component_for

__all__ = [
    'ArcChannelMapper',
    'COMPONENTS',
    'ComponentSpec',
    'border_color',
    'component_for',
]
