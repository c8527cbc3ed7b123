import argparse
import sys
from pathlib import Path
from typing import List, Optional

from jsondiffreport.log import log

DEFAULT_OUTPUT = "diff.html"

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2
EXIT_PARSE_ERROR = 3


def generate_log_name(old_path: str, new_path: str) -> str:
    """Generate log file name"""
    old_name = Path(old_path).stem
    new_name = Path(new_path).stem
    return f"log_{old_name}_{new_name}.txt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsondiff-html",
        description="Compare two JSON documents and render the differences as an HTML report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jsondiff-html old.json new.json
  jsondiff-html old.json new.json -o report.html --log
  jsondiff-html -o report.html old.json new.json --debug
        """
    )
    parser.add_argument("old", help="Path to old/original JSON document")
    parser.add_argument("new", help="Path to new/modified JSON document")
    # A bare trailing -o falls back to the default instead of failing
    parser.add_argument(
        "-o", "--output",
        nargs="?",
        default=DEFAULT_OUTPUT,
        const=DEFAULT_OUTPUT,
        help=f"HTML output file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("--log", action="store_true", help="Store logs in file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and verbose output")
    return parser


def run(old_path: str, new_path: str, out_path: str) -> int:
    from jsondiffreport.classifier import stat_top_level_diff
    from jsondiffreport.differ import compute_delta
    from jsondiffreport.loader import load_document
    from jsondiffreport.report import render_report, write_report

    docs = []
    for path in (old_path, new_path):
        try:
            docs.append(load_document(path))
        except OSError as e:
            log.error(f"Cannot read {path}: {e}")
            print(f"Error: cannot read {path}: {e}", file=sys.stderr)
            return EXIT_IO_ERROR
        except ValueError as e:
            log.error(f"Invalid JSON in {path}: {e}")
            print(f"Error: invalid JSON in {path}: {e}", file=sys.stderr)
            return EXIT_PARSE_ERROR
    left, right = docs

    delta = compute_delta(left, right)
    stats = stat_top_level_diff(delta)
    log.info(f"Added: {stats.added} Removed: {stats.removed} Updated: {stats.updated}")

    html = render_report(delta, left, stats)
    try:
        write_report(html, out_path)
    except OSError as e:
        log.error(f"Cannot write {out_path}: {e}")
        print(f"Error: cannot write {out_path}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    print(f"HTML diff report generated: {out_path}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    log_file = generate_log_name(args.old, args.new) if args.log else None
    log.configure(debug=args.debug, log_file=log_file)

    # An empty -o value falls back to the default like a bare -o
    out_path = args.output or DEFAULT_OUTPUT

    if extra:
        log.debug(f"Ignoring extra arguments: {extra}")
    if args.log:
        log.info(f"Logging to file: {log_file}")
    log.info(f"Comparing {args.old} -> {args.new}, output: {out_path}")

    try:
        return run(args.old, args.new, out_path)
    finally:
        # Close the log file at the end
        log.close()


if __name__ == "__main__":
    sys.exit(main())
