"""arcpick version information."""

__version__ = "0.3.1"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release: arc angle/value mapping, ring + indicator hit tests
# 0.2.0 - Strategy records per channel (hue/saturation/value/alpha) replace
#         per-channel subclasses, gradient stops via numpy
# 0.3.0 - PyQt6 arc picker widget, XDG config overrides for arc layouts,
#         CLI (map, border, stops, gui) with -v/-vv logging
# 0.3.1 - Events before the first layout are ignored instead of raising,
#         border blend truncates channels to int, outline colors
#         configurable under "colors"
