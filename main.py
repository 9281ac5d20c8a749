"""CLI entry point for the HTML -> Markdown converter."""

import argparse
import logging
import sys

from mailmark.pipeline import transform_html
from mailmark.selfcheck import run_selfcheck
from mailmark.utils.logger import get_logger

log = get_logger(__name__)


def convert_file(path: str, show_stats: bool = False) -> None:
    """Convert one HTML document (``-`` for stdin) and print the Markdown."""
    if path == "-":
        html = sys.stdin.read()
    else:
        with open(path, encoding="utf-8", errors="replace") as f:
            html = f.read()

    if not html:
        return

    result = transform_html(html)
    print(result.markdown)

    if show_stats:
        saved = result.original_length - result.markdown_length
        print(
            f"{'converted' if result.converted else 'passed through'}: "
            f"{result.original_length} -> {result.markdown_length} chars "
            f"({saved} saved)",
            file=sys.stderr,
        )


def check() -> int:
    """Run the diagnostic scenarios; return the process exit code."""
    print("=== HTML transform self-check ===\n")
    results = run_selfcheck()
    for r in results:
        print(f"{'PASS' if r.passed else 'FAIL'}  {r.name}: {r.output!r}")

    failed = [r for r in results if not r.passed]
    print(f"\n{len(results) - len(failed)}/{len(results)} scenarios passed")
    return 1 if failed else 0


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Convert HTML email bodies to compact Markdown")
    parser.add_argument("path", nargs="?", default="-",
                        help="HTML file to convert (default: stdin)")
    parser.add_argument("--check", action="store_true",
                        help="Run the built-in whitespace/invisible-character scenarios")
    parser.add_argument("--stats", action="store_true",
                        help="Print input/output sizes to stderr")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    if args.verbose:
        for name in list(logging.root.manager.loggerDict):
            if name.startswith("mailmark") or name == __name__:
                logging.getLogger(name).setLevel(logging.DEBUG)

    if args.check:
        sys.exit(check())

    try:
        convert_file(args.path, show_stats=args.stats)
    except OSError as exc:
        log.error("Cannot read %s: %s", args.path, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
