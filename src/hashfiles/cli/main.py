"""CLI entrypoint for hashfiles."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from hashfiles import __version__
from hashfiles.config import load_config
from hashfiles.constants.branding import BRAND_NAME, CLI_DESCRIPTION, CLI_EPILOG, ERROR_PREFIX
from hashfiles.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from hashfiles.exceptions import HashFilesError
from hashfiles.exceptions.validation import format_errors
from hashfiles.hashing.orchestrator import run_hash, run_hash_sync
from hashfiles.model import HashResult
from hashfiles.reporting import render_result
from hashfiles.validation import preflight_validate


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        epilog=CLI_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("paths", nargs="*", default=[], help="Files or glob patterns to hash")
    parser.add_argument(
        "-f",
        "--files",
        nargs="+",
        action="extend",
        default=None,
        metavar="PATTERN",
        help="Files to hash (repeatable; default: ./**)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        default=None,
        help="Hash algorithm: sha-1 (default), sha-256, sha-384, sha-512",
    )
    parser.add_argument(
        "-n",
        "--no-glob",
        dest="exact_paths",
        action="store_true",
        default=None,
        help="Treat file arguments as exact paths (no globbing)",
    )
    parser.add_argument(
        "--glob",
        dest="exact_paths",
        action="store_false",
        default=None,
        help="Expand file arguments as glob patterns (overrides exact_paths in config)",
    )
    parser.add_argument(
        "-c",
        "--batch-count",
        "--batch-size",
        dest="batch_size",
        type=positive_int,
        default=None,
        help="Max files to read at once (default: 100)",
    )
    parser.add_argument("-s", "--sync", dest="sync", action="store_true", default=None, help="Use the blocking reader")
    parser.add_argument(
        "--no-sync",
        "--async",
        dest="sync",
        action="store_false",
        default=None,
        help="Use the concurrent reader (overrides sync in config)",
    )
    parser.add_argument("-C", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resolution and read progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    root = Path.cwd()
    validation_errors = preflight_validate(root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 1

    try:
        result = _run(args, root)
    except HashFilesError as exc:
        print(f"{ERROR_PREFIX}: {exc}", file=sys.stderr)
        return 1

    print(render_result(result, args.output_format))
    return 0


def _run(args: argparse.Namespace, root: Path) -> HashResult:
    """Merge CLI flags over the config file and run the selected variant."""
    config = load_config(root, args.config)
    patterns = args.files or args.paths
    request = config.to_request(
        patterns=tuple(patterns) if patterns else None,
        algorithm=args.algorithm,
        batch_size=args.batch_size,
        exact_paths=args.exact_paths,
    )
    use_sync = args.sync if args.sync is not None else config.sync
    if use_sync:
        return run_hash_sync(request)
    return asyncio.run(run_hash(request))


if __name__ == "__main__":
    raise SystemExit(main())
