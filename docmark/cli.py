"""
docmark command line.

Usage:
  docmark INPUT.docx [-o OUTPUT] [-f markdown|json] [--headings auto|classifier|style]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from docmark import __version__
from docmark.config import ConversionConfig
from docmark.convert import convert_file, render
from docmark.exporters import ExporterRegistry
from docmark.loaders import LoaderError
from docmark.processors import HeadingStrategy, PipelineError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmark",
        description="Recover headings, lists and bold text from a Word document.",
    )
    parser.add_argument("--version", action="version", version=f"docmark {__version__}")
    parser.add_argument("input", type=Path, help="Path to a .docx file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output file (default: print to stdout)",
    )
    parser.add_argument(
        "-f", "--format", dest="output_format", default="markdown",
        choices=ExporterRegistry.available_exporters(),
        help="Output format (default: markdown)",
    )
    parser.add_argument(
        "--headings", dest="heading_strategy", default=HeadingStrategy.AUTO.value,
        choices=[s.value for s in HeadingStrategy],
        help="How headings are recognised (default: auto)",
    )
    parser.add_argument(
        "--list-style", dest="list_style_name", default=ConversionConfig.list_style_name,
        help="Paragraph style name that marks list items",
    )
    parser.add_argument(
        "--bullet", default="-", choices=["-", "*", "+"],
        help="Markdown list marker",
    )
    parser.add_argument(
        "--no-bold-merge", dest="merge_bold", action="store_false",
        help="Keep bold runs as plain text",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    config = ConversionConfig(
        heading_strategy=HeadingStrategy(args.heading_strategy),
        list_style_name=args.list_style_name,
        merge_bold=args.merge_bold,
        output_format=args.output_format,
        bullet=args.bullet,
    )

    try:
        root = convert_file(args.input, config)
    except (LoaderError, PipelineError) as exc:
        logger.error("%s", exc)
        return 1

    if args.output is None:
        sys.stdout.write(render(root, config))
        return 0

    exporter = ExporterRegistry.require_exporter(config.output_format, **config.exporter_options())
    path = exporter.export(root, args.output)
    logger.info("Wrote %s", path)
    return 0
