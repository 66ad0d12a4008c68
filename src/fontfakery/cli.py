#!/usr/bin/env python3
"""
fontfakery CLI
Command-line interface for merging variation settings against a face's axes
"""

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path

from .core.merge import merge
from .core.styles import parse_style
from .parsers.axis_parser import load_axis_table, parse_axis_table
from .parsers.variation_parser import parse_variation_settings
from .utils.logging import FontFakeryLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fontfakery",
        description="Merge font variation settings for a face and report whether\n"
        "fake bold or fake italic has to be synthesized.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    axes_group = parser.add_mutually_exclusive_group(required=True)
    axes_group.add_argument(
        "--axes",
        help="Supported axes, e.g. \"wght 100:400:900, slnt -10:0:0\"",
    )
    axes_group.add_argument(
        "--font",
        help="Read supported axes from a font, .designspace, .yaml/.json or axis text file",
    )

    parser.add_argument("--base", default="", help="Variation settings of the selected face")
    parser.add_argument("--target", default="", help="Override variation settings")
    parser.add_argument("--base-style", default="Regular", help="Style of the selected face")
    parser.add_argument("--target-style", default="Regular", help="Requested style")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    """Merge variations from the command line"""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO

    if args.font:
        font_path = Path(args.font)
        if not font_path.exists():
            print(f"Error: input file {font_path} does not exist", file=sys.stderr)
            return 1
        # Setup logging next to the input file
        FontFakeryLogger.setup_logger(str(font_path), log_level=log_level)
    else:
        FontFakeryLogger.setup_console_logger(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.font:
            FontFakeryLogger.info(f"Loading axes from {args.font}")
            axis_table = load_axis_table(args.font)
        else:
            axis_table = parse_axis_table(args.axes)

        result = merge(
            axis_table,
            parse_variation_settings(args.base),
            parse_variation_settings(args.target),
            parse_style(args.base_style),
            parse_style(args.target_style),
        )
        FontFakeryLogger.success(f"Resolved {result}")

        if args.json:
            print(json.dumps({
                "fake_bold": result.fake_bold,
                "fake_italic": result.fake_italic,
                "variations": [
                    {"tag": str(v.axis_tag), "value": v.value}
                    for v in result.variation_settings
                ],
            }, indent=2))
        else:
            print(f"fake bold:   {'yes' if result.fake_bold else 'no'}")
            print(f"fake italic: {'yes' if result.fake_italic else 'no'}")
            print(f"variations:  {result.variation_settings}")

    except Exception as e:
        # The logger's console handler reports the error on stderr
        FontFakeryLogger.error(f"Error: {e}")
        FontFakeryLogger.debug("Full traceback:")
        FontFakeryLogger.debug(traceback.format_exc())
        return 1
    finally:
        log_path = FontFakeryLogger.get_log_file_path()
        if log_path:
            print(f"\nLog file: {log_path}", file=sys.stderr)
        FontFakeryLogger.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
