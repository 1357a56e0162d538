"""Command-line entry point.

Usage:
    swiper-attrs inspect page.html
    swiper-attrs inspect page.html --component hero-slider --indent 2
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from swiper_attrs.config import configure_logging, get_settings
from swiper_attrs.dom import find_components, parse_document, resolve_target
from swiper_attrs.report import build_report, inspect_component

logger = logging.getLogger("swiper_attrs.cli")

EXIT_OK = 0
EXIT_STRUCTURAL_ERROR = 1
EXIT_UNREADABLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swiper-attrs",
        description="Resolve data-swiper-* attributes into slider configuration",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to SWIPER_ATTR_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect = subparsers.add_parser("inspect", help="Print the resolved configuration of each component")
    inspect.add_argument("file", type=Path, help="HTML file to inspect")
    inspect.add_argument("--component", help="Only this component (id or XPath)")
    inspect.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")

    return parser


def run_inspect(args: argparse.Namespace) -> int:
    """Print component reports as JSON and return the exit code."""
    try:
        markup = args.file.read_bytes()
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return EXIT_UNREADABLE

    document = parse_document(markup)

    if args.component:
        component = resolve_target(document, args.component)
        if component is None:
            logger.error(f"Component not found: {args.component!r}")
            return EXIT_UNREADABLE
        components = find_components(document)
        index = next((i for i, c in enumerate(components) if c is component), 0)
        reports = [inspect_component(component, index)]
    else:
        reports = build_report(document)

    payload = [report.model_dump(mode="json") for report in reports]
    print(json.dumps(payload, indent=args.indent))

    if any(not report.ok for report in reports):
        return EXIT_STRUCTURAL_ERROR
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    if args.command == "inspect":
        return run_inspect(args)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
