"""Command line entry point for recipescraper."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from .document import parse_document
from .exceptions import ScraperError, TransportError
from .extractor import RecipeExtractor
from .fetcher import Fetcher
from .output import HtmlWriter
from .utils.log_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_USAGE = 64
EXIT_FAILURE = -1


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that prints help to stdout and exits with EX_USAGE."""

    def error(self, message: str) -> NoReturn:
        logging.getLogger("recipescraper").error("failed to parse arguments: %s", message)
        self.print_help(sys.stdout)
        sys.exit(EXIT_USAGE)


def build_parser() -> UsageArgumentParser:
    parser = UsageArgumentParser(
        prog="recipescraper",
        usage="%(prog)s [options] URL OUTPUT-FILE",
        add_help=False,
    )
    parser.add_argument("url", metavar="URL", help="URL to retrieve")
    parser.add_argument("output_file", metavar="OUTPUT-FILE", help="name of the file to write")
    parser.add_argument("-h", "--help", action="store_true", help="produce help message")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable diagnostic output")
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(sys.stdout)
        sys.exit(EXIT_USAGE)
    return args


def run(argv: Optional[List[str]] = None, fetcher: Optional[Fetcher] = None) -> int:
    """Run one fetch, extract and write pass. Returns the process exit code."""
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    fetcher = fetcher or Fetcher()
    extractor = RecipeExtractor()
    writer = HtmlWriter(args.output_file)

    try:
        page = fetcher.fetch(args.url)
        with parse_document(page.body, encoding=page.encoding) as document:
            recipe = extractor.extract(document)
        writer.write(recipe, args.url)
    except TransportError as exc:
        logger.error("Failed to retrieve document from %s: %s", args.url, exc)
        return EXIT_FAILURE
    except ScraperError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
