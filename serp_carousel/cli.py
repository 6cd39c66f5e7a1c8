"""Command-line entry point for the carousel extractor."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Optional, Sequence, Set

from .classifier import PROFILES, classify_document, get_profile
from .config import DEFAULT_SEARCH_HOST, ExtractionConfig
from .document import load_document
from .extractor import CarouselExtractor
from .utils import slugify

logger = logging.getLogger("serp_carousel.cli")

STDIN_MARKER = "-"


def _ensure_command_prefix(argv: Sequence[str], commands: Iterable[str]) -> Sequence[str]:
    if not argv:
        return argv
    first = argv[0]
    if first in commands or (first.startswith("-") and first != STDIN_MARKER):
        return argv
    return ("extract", *argv)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="+",
        help="Saved search result pages to read ('-' reads HTML from stdin)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def _add_extract_arguments(parser: argparse.ArgumentParser) -> None:
    _add_common_arguments(parser)
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default=None,
        help="Force an extraction profile instead of detecting it from the page",
    )
    parser.add_argument(
        "--output",
        default=None,
        type=Path,
        help=(
            "Directory where one JSON file per input should be written "
            "(default: STDOUT, one JSON document per line when several inputs are given)"
        ),
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_SEARCH_HOST,
        help="Host prefixed to relative search links",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation level for a single input or --output files",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract knowledge-carousel items from saved search result pages.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract", help="Extract carousel items as JSON"
    )
    _add_extract_arguments(extract_parser)

    classify_parser = subparsers.add_parser(
        "classify", help="Report which extraction profile each page selects"
    )
    _add_common_arguments(classify_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    argv = list(_ensure_command_prefix(argv, subparsers.choices.keys()))
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _read_source(path: str, config: ExtractionConfig):
    if path == STDIN_MARKER:
        return load_document(sys.stdin.read(), parser=config.parser)
    return load_document(file_path=path, parser=config.parser)


def _output_name(path: str, taken: Set[str]) -> str:
    """Slug the input's stem, adding ``-2``, ``-3``... when it is already used."""
    stem = "stdin" if path == STDIN_MARKER else Path(path).stem
    base = slugify(stem, fallback="page")
    name = f"{base}.json"
    counter = 2
    while name in taken:
        name = f"{base}-{counter}.json"
        counter += 1
    taken.add(name)
    return name


def _run_extract(args: argparse.Namespace) -> int:
    config = ExtractionConfig(search_host=args.host)
    profile = get_profile(args.profile) if args.profile else None
    failures = 0
    taken: Set[str] = set()
    # Several inputs on STDOUT are written as JSON Lines, one document per input.
    indent = args.indent if args.output is not None or len(args.paths) == 1 else None
    overall_start = time.perf_counter()

    for path in args.paths:
        try:
            soup = _read_source(path, config)
        except (FileNotFoundError, ValueError) as exc:
            logger.error("Skipping %s: %s", path, exc)
            failures += 1
            continue

        extractor = CarouselExtractor(soup, profile=profile, config=config)
        results = extractor.extract()
        count = len(results[extractor.profile.results_key])
        logger.info("Extracted %d %s from %s", count, extractor.profile.results_key, path)

        payload = json.dumps(results, indent=indent, ensure_ascii=False)
        if args.output is None:
            sys.stdout.write(payload + "\n")
            continue
        output_dir = Path(args.output).resolve()
        output_dir.mkdir(parents=True, exist_ok=True)
        destination = output_dir / _output_name(path, taken)
        destination.write_text(payload + "\n", encoding="utf-8")
        logger.info("Saved JSON to %s", destination)

    sys.stdout.flush()
    logger.debug(
        "Finished in %.2fs (%d/%d succeeded)",
        time.perf_counter() - overall_start,
        len(args.paths) - failures,
        len(args.paths),
    )
    return 1 if failures else 0


def _run_classify(args: argparse.Namespace) -> int:
    config = ExtractionConfig()
    failures = 0
    for path in args.paths:
        try:
            soup = _read_source(path, config)
        except (FileNotFoundError, ValueError) as exc:
            logger.error("Skipping %s: %s", path, exc)
            failures += 1
            continue
        profile = classify_document(soup)
        sys.stdout.write(f"{path}\t{profile.kind}\t{profile.results_key}\n")
    sys.stdout.flush()
    return 1 if failures else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "extract":
        return _run_extract(args)
    return _run_classify(args)


if __name__ == "__main__":
    sys.exit(main())
