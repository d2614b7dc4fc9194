#!/usr/bin/env python3
"""
arcpick - Command Line Interface

Entry point for the arcpick package.
"""

import argparse
import logging
import sys

from arcpick.__version__ import __version__


def _setup_logging(verbose=0):
    """Configure logging from the -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="arcpick",
        description="Arc-based color component picker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    arcpick map --start 285 --length 150 --max 255 --angle 180
    arcpick map --start 285 --length 150 --max 255 --value 128
    arcpick border 202020     Border color for a dark fill
    arcpick stops saturation  Gradient stops of the saturation arc
    arcpick gui --channel hue Open the picker widget
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Map command
    map_parser = subparsers.add_parser("map", help="Convert between arc angle and channel value")
    map_parser.add_argument("--start", type=float, required=True, help="Arc start angle (degrees)")
    map_parser.add_argument("--length", type=float, required=True, help="Arc length (degrees)")
    map_parser.add_argument("--max", type=float, default=None, dest="channel_max",
                            help="Channel max value (default: the channel's own max)")
    map_parser.add_argument("--channel", default="hue",
                            help="Channel (hue, saturation, value, alpha)")
    group = map_parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--angle", type=float, help="Pointer angle to clamp and convert")
    group.add_argument("--value", type=float, help="Channel value to convert to an angle")

    # Border command
    border_parser = subparsers.add_parser("border", help="Indicator border color for a fill color")
    border_parser.add_argument("color", help="Fill color as hex (e.g., ff0000)")

    # Stops command
    stops_parser = subparsers.add_parser("stops", help="Show gradient stops of a channel arc")
    stops_parser.add_argument("channel", help="Channel (hue, saturation, value, alpha)")

    # GUI command
    gui_parser = subparsers.add_parser("gui", help="Open the arc picker widget")
    gui_parser.add_argument("--channel", default="hue", help="Channel to edit")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "map":
            return map_angle(args.start, args.length, args.channel_max, args.channel,
                             angle=args.angle, value=args.value)
        elif args.command == "border":
            return border(args.color)
        elif args.command == "stops":
            return stops(args.channel)
        elif args.command == "gui":
            return gui(args.channel)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def map_angle(start, length, channel_max, channel, angle=None, value=None):
    """Print the clamped angle + value, or the angle for a value."""
    from arcpick.core.models import Arc, Channel
    from arcpick.services.arc import ArcChannelMapper

    mapper = ArcChannelMapper(Arc(start, length), Channel(channel.lower()),
                              channel_max=channel_max)
    if angle is not None:
        clamped = mapper.clamp_angle_to_arc(angle % 360.0)
        print(f"angle:   {angle:g}")
        print(f"clamped: {clamped:g}")
        print(f"value:   {mapper.angle_to_channel(clamped):.4f}")
    else:
        result = mapper.channel_to_angle(value)
        print(f"value: {value:g}")
        print(f"angle: {result:g} ({result % 360.0:g} normalized)")
    return 0


def border(color):
    """Print the border color for a fill color."""
    from arcpick.services.color import border_color, hex_to_rgb, rgb_to_hex

    rgb = hex_to_rgb(color)
    print(rgb_to_hex(border_color(rgb)))
    return 0


def stops(channel):
    """Print gradient stop positions and colors for a channel's configured arc."""
    from arcpick.conf import settings
    from arcpick.core.models import Channel
    from arcpick.services.arc import ArcChannelMapper

    ch = Channel(channel.lower())
    mapper = ArcChannelMapper(settings.arc(ch), ch)
    positions, colors = mapper.color_stops()
    print(f"{ch.value}: arc {mapper.arc_start:g} + {mapper.arc_length:g}")
    for pos, (r, g, b, a) in zip(positions, colors):
        print(f"  {pos:.4f}  #{int(r):02x}{int(g):02x}{int(b):02x} a={int(a)}")
    return 0


def gui(channel="hue"):
    """Open a window with one arc picker."""
    from PyQt6.QtWidgets import QApplication

    from arcpick.core.models import Channel
    from arcpick.qt_components.uc_arc_picker import UCArcPicker

    log = logging.getLogger(__name__)
    app = QApplication.instance() or QApplication(sys.argv)
    picker = UCArcPicker(Channel(channel.lower()))
    picker.setWindowTitle(f"arcpick - {channel}")
    picker.resize(320, 320)
    picker.selection_ended.connect(lambda c: log.info("Selected %s (alpha %.2f)", c.hex, c.alpha))
    picker.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
