"""Command line entrypoint for the word-search puzzle builder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core.constants import Orientation
from .core.exceptions import WordFindError
from .data.normalization import clean_words
from .engine.builder import PuzzleBuilder, PuzzleConfig
from .utils.logger import configure_logging, get_logger
from .utils.pretty import print_puzzle_stats


LOGGER = get_logger(__name__)


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordfind",
        description="Generate a word-search puzzle and report where each word was hidden",
    )
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to hide in the grid")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--height", type=int, help="Grid height, default: longest word length")
    parser.add_argument("--width", type=int, help="Grid width, default: longest word length")
    parser.add_argument(
        "--orientations",
        nargs="+",
        choices=[o.value for o in Orientation],
        default=[o.value for o in Orientation],
        help="Orientations words may be written in",
    )
    parser.add_argument(
        "--no-fill-blanks",
        action="store_true",
        help="Leave cells that hold no word letter empty",
    )
    parser.add_argument(
        "--secret-word",
        type=str,
        help="Letters written into the blank cells, in reading order, instead of random ones",
    )
    parser.add_argument(
        "--no-extra-blanks",
        action="store_true",
        help="Fail when the secret word leaves blank cells",
    )
    parser.add_argument(
        "--allowed-missing-words",
        type=int,
        default=0,
        help="Number of words that may be dropped when the grid cannot fit them all",
    )
    parser.add_argument("--max-attempts", type=int, default=3, help="Tries per grid size")
    parser.add_argument("--max-grid-growth", type=int, default=10, help="Number of grid size increases")
    parser.add_argument(
        "--no-prefer-overlap",
        action="store_true",
        help="Pick word locations uniformly instead of maximizing shared letters",
    )
    parser.add_argument("--lang", type=str, default="EN", help="ISO 639-1 code of the fill letters")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--engine-log-level",
        type=str,
        help="Separate level for placement and build attempt logging (defaults to --log-level)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    engine_level = None
    if args.engine_log_level:
        engine_level = getattr(logging, args.engine_log_level.upper(), level)
    configure_logging(level, engine_level=engine_level)

    if args.no_fill_blanks and args.secret_word:
        parser.error("--no-fill-blanks cannot be combined with --secret-word")

    entries: List[str] = []
    if args.words:
        entries.extend(args.words)
    if args.words_file:
        entries.extend(parse_words_file(args.words_file))
    words = clean_words(entries)
    if not words:
        parser.error("provide at least one word with --words or --words-file")

    fill_blanks: Any = True
    if args.no_fill_blanks:
        fill_blanks = False
    elif args.secret_word:
        fill_blanks = args.secret_word

    try:
        config = PuzzleConfig(
            height=args.height,
            width=args.width,
            orientations=args.orientations,
            fill_blanks=fill_blanks,
            allow_extra_blanks=not args.no_extra_blanks,
            allowed_missing_words=args.allowed_missing_words,
            max_attempts=args.max_attempts,
            max_grid_growth=args.max_grid_growth,
            prefer_overlap=not args.no_prefer_overlap,
            language=args.lang,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    builder = PuzzleBuilder(config)
    try:
        outcome = builder.new_puzzle_lax(words)
    except WordFindError as exc:
        LOGGER.error("Puzzle generation failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    solution = builder.solve(outcome.grid, words)

    if args.format == "text":
        if args.output:
            with args.output.open("w", encoding="utf-8") as handle:
                print_puzzle_stats(outcome.grid, solution, stream=handle)
        else:
            print_puzzle_stats(outcome.grid, solution)
        return 0

    payload: Dict[str, Any] = {
        "height": outcome.grid.height,
        "width": outcome.grid.width,
        "grid": outcome.grid.rows(),
        "found": [record.to_jsonable() for record in solution.found],
        "not_found": solution.not_found,
        "dropped_words": outcome.dropped_words,
    }
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
