"""Command-line interface: parse a catalog and print it in a chosen format."""

from __future__ import annotations

import argparse
import asyncio
import sys

from catalogtree.config import CATALOGTREE_DEFAULT_CATALOG
from catalogtree.exceptions import FetchError
from catalogtree.loader import load_catalog_text
from catalogtree.parser import parse_catalog
from catalogtree.render import OUTPUT_FORMATS, render
from catalogtree.schemas import Diagnostic
from catalogtree.search import filter_catalog
from catalogtree.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalogtree",
        description="Parse an indentation-based catalog and print the resulting tree.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=CATALOGTREE_DEFAULT_CATALOG,
        help=f"Catalog file path or http(s) URL (default: {CATALOGTREE_DEFAULT_CATALOG})",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="outline", help="Output format")
    parser.add_argument("--query", default="", help="Only show entries matching this search query")
    parser.add_argument(
        "--show-diagnostics",
        action="store_true",
        help="Print parse diagnostics to stderr",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: CATALOGTREE_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        text = asyncio.run(load_catalog_text(args.source))
    except FetchError as exc:
        logger.error("Could not load catalog: %s", exc)
        return 1

    diagnostics: list[Diagnostic] = []
    forest = parse_catalog(text, diagnostics=diagnostics)
    if args.query:
        forest = filter_catalog(forest, args.query).forest

    output = render(forest, args.format)
    if output:
        print(output)

    if args.show_diagnostics:
        for diagnostic in diagnostics:
            print(f"line {diagnostic.line_number}: {diagnostic.message}", file=sys.stderr)
    return 0
