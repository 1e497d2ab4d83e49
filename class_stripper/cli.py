#!/usr/bin/env python3

import argparse
import json
import logging
import re
import sys
from typing import List, Optional

from pydantic import ValidationError

from class_stripper.cleaner import clean, is_valid_html
from class_stripper.cleaner.domain.value_objects.class_matcher import pattern_matcher
from class_stripper.cleaner.domain.value_objects.cleaning_config import (
    BeautifyOptions,
    CleaningConfig,
)
from class_stripper.logger import get_logger, set_package_level

logger = get_logger("class-stripper-cli")


def build_config(args: argparse.Namespace) -> CleaningConfig:
    """
    Translate parsed command line flags into a CleaningConfig.

    Args:
        args: Parsed arguments from build_parser()

    Returns:
        Cleaning configuration for the run
    """
    preserve = list(args.preserve_class or [])
    try:
        preserve.extend(pattern_matcher(expr) for expr in args.preserve_pattern or [])
    except re.error as e:
        raise SystemExit(f"Invalid --preserve-pattern: {e}")

    return CleaningConfig(
        strip_classes=not args.keep_classes,
        strip_ids=args.strip_ids or args.strip_all,
        strip_styles=args.strip_styles or args.strip_all,
        strip_data_attributes=args.strip_data or args.strip_all,
        strip_event_handlers=args.strip_events or args.strip_all,
        strip_aria_attributes=args.strip_aria or args.strip_all,
        preserve_classes=preserve,
        remove_tags=args.remove_tag or [],
        optimize_html=not args.no_optimize,
        remove_empty_divs=not args.keep_empty_divs,
        bubble_up_wrapper_divs=not args.no_bubble,
        beautify=not args.no_beautify,
        beautify_options=BeautifyOptions(indent_size=args.indent_size),
        track_statistics=not args.no_stats,
    )


def read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_output(content: str, output_file: Optional[str]) -> None:
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Results saved to {output_file}")
    else:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="class-stripper",
        description="Strip classes, styles and other attributes from HTML",
    )
    parser.add_argument("file", nargs="?", help="HTML file to clean (default: stdin)")
    parser.add_argument("-o", "--output", help="Output file for the cleaned HTML")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--check", action="store_true", help="Only check that the input is valid HTML")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")

    strip = parser.add_argument_group("attribute stripping")
    strip.add_argument("--keep-classes", action="store_true", help="Do not strip class attributes")
    strip.add_argument("--strip-ids", action="store_true", help="Strip id attributes")
    strip.add_argument("--strip-styles", action="store_true", help="Strip inline styles")
    strip.add_argument("--strip-data", action="store_true", help="Strip data-* attributes")
    strip.add_argument("--strip-events", action="store_true", help="Strip event handler attributes")
    strip.add_argument("--strip-aria", action="store_true", help="Strip aria-* attributes")
    strip.add_argument("--strip-all", action="store_true", help="Strip every attribute category")
    strip.add_argument("--preserve-class", action="append", metavar="NAME", help="Class name to keep (repeatable)")
    strip.add_argument("--preserve-pattern", action="append", metavar="REGEX", help="Regular expression of class names to keep (repeatable)")
    strip.add_argument("--remove-tag", action="append", metavar="TAG", help="Remove elements with this tag (repeatable)")

    structure = parser.add_argument_group("structure and output")
    structure.add_argument("--no-optimize", action="store_true", help="Skip structural optimization")
    structure.add_argument("--keep-empty-divs", action="store_true", help="Do not remove empty divs")
    structure.add_argument("--no-bubble", action="store_true", help="Do not bubble up wrapper divs")
    structure.add_argument("--no-beautify", action="store_true", help="Emit the serialized HTML as is")
    structure.add_argument("--indent-size", type=int, default=BeautifyOptions().indent_size, help="Spaces per indentation level")
    structure.add_argument("--no-stats", action="store_true", help="Do not track statistics")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command line arguments and run the cleaner."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)
        set_package_level(logging.DEBUG)

    try:
        html = read_input(args.file)
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1

    if args.check:
        valid = is_valid_html(html)
        if valid:
            logger.info("Input is valid HTML")
        else:
            logger.error("Input is not valid HTML")
        return 0 if valid else 1

    try:
        config = build_config(args)
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return 2

    result = clean(html, config)

    if args.json:
        write_output(json.dumps(result.to_dict(), indent=2), args.output)
        return 0 if result.ok else 1

    if not result.ok:
        logger.error(f"Cleaning failed: {result.error}")
        return 1

    if result.statistics is not None:
        summary = ", ".join(
            f"{name}={value}"
            for name, value in result.statistics.to_dict().items()
            if value
        )
        logger.info(f"Statistics: {summary or 'nothing removed'}")

    write_output(result.html, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
