"""
Word Html Toolkit — command-line front-end.

Usage:
    wordhtml report.docx notes.docx      convert the listed files, then exit
    wordhtml                             prompt for paths until end of input
    wordhtml -v report.docx              same, with debug logging on stderr
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from wordhtml.core.exceptions import ConversionError, InputNotFoundError
from wordhtml.core.services import ConversionService
from wordhtml.logging_config import setup_logging
from wordhtml.version import get_app_version

logger = logging.getLogger(__name__)

PROMPT = "Enter the full path of the word document to convert:"
NOT_FOUND_MESSAGE = "File not found. Please check the path and try again."
DONE_MESSAGE = "Conversion completed. The HTML File is saved at: {path}"
FAILED_MESSAGE = "Conversion failed: {error}"


def convert_one(service: ConversionService, path: str, out: TextIO) -> bool:
    """Convert *path* and print the outcome; return True on success."""
    try:
        output_path = service.convert(path)
    except InputNotFoundError:
        print(NOT_FOUND_MESSAGE, file=out)
        return False
    except ConversionError as exc:
        logger.error("Conversion of %s failed: %s", path, exc)
        print(FAILED_MESSAGE.format(error=exc), file=out)
        return False
    print(DONE_MESSAGE.format(path=output_path), file=out)
    return True


def convert_paths(service: ConversionService, paths: Iterable[str], out: TextIO) -> int:
    """Convert each path in order; return 1 if any of them failed."""
    failures = 0
    for path in paths:
        if not convert_one(service, path, out):
            failures += 1
    if failures:
        logger.warning("%d conversion(s) failed", failures)
    return 1 if failures else 0


def interactive_loop(service: ConversionService, out: TextIO,
                     read_line: Callable[[], str] = input) -> int:
    """Prompt for one path per iteration until end of input or Ctrl+C."""
    while True:
        print(PROMPT, file=out)
        try:
            path = read_line()
        except (EOFError, KeyboardInterrupt):
            logger.info("Interactive session ended")
            return 0
        convert_one(service, path.strip(), out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordhtml",
        description="Convert Word (.docx) documents to HTML files saved next to them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n  wordhtml report.docx\n  wordhtml            (interactive)",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH",
                        help="Documents to convert; prompts interactively when omitted")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    service = ConversionService()
    if args.paths:
        return convert_paths(service, args.paths, sys.stdout)
    return interactive_loop(service, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
