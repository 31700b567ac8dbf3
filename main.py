"""CLI entrypoint for the word-search puzzle generator."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, List

from wordsearch.core.constants import Direction, WordOrdering
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.levels import config_for_board, level_config
from wordsearch.data.word_bank import sample_words
from wordsearch.data.word_list import parse_words_file
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.engine.validator import GridValidator
from wordsearch.io.word_source import RemoteWordListClient
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_puzzle_stats

DEFAULT_SIZE = 12
CLASSIC_SIZE = 10
DEFAULT_WORD_COUNT = 6


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word-search puzzles",
    )
    parser.add_argument("--width", type=int, help=f"Grid width in cells (default {DEFAULT_SIZE})")
    parser.add_argument("--height", type=int, help=f"Grid height in cells (default {DEFAULT_SIZE})")
    parser.add_argument("--size", type=int, help="Square grid shortcut for --width/--height")
    parser.add_argument(
        "--directions",
        nargs="+",
        choices=[d.value for d in Direction],
        help="Allowed word directions",
    )
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to hide")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--words-url", metavar="URL", help="Fetch the word list over HTTP")
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_WORD_COUNT,
        help="Words sampled from the built-in bank when none are given",
    )
    parser.add_argument("--board", type=int, help="Progression board index (picks level, grid and words)")
    parser.add_argument("--level", type=int, help="Progression level (uses its first board)")
    parser.add_argument(
        "--classic",
        action="store_true",
        help="Square grid, horizontal/vertical only, shuffled words, retry budget 50",
    )
    parser.add_argument(
        "--ordering",
        choices=[o.value for o in WordOrdering],
        help="Word placement order",
    )
    parser.add_argument("--retry-budget", type=int, help="Placement attempts per word")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--pretty", action="store_true", help="Print the grid and stats instead of JSON")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[str]:
    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if args.words_url:
        words.extend(RemoteWordListClient().fetch(args.words_url))
    return words


def _first_given(*values: int | None) -> int:
    return next(value for value in values if value is not None)


def build_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> tuple[GeneratorConfig, List[str]]:
    dimension_given = any(v is not None for v in (args.width, args.height, args.size))
    if args.size is not None and (args.width is not None or args.height is not None):
        parser.error("--size cannot be combined with --width/--height")
    if args.board is not None and args.level is not None:
        parser.error("--board and --level are mutually exclusive")
    preset = args.board is not None or args.level is not None
    if preset and (args.classic or dimension_given):
        parser.error("--board/--level choose the grid; drop --classic and size options")

    words = collect_words(args)
    if preset:
        board = args.board if args.board is not None else level_config(args.level).board_start_index
        config, board_words = config_for_board(board, seed=args.seed)
        words = words or board_words
    elif args.classic:
        if args.width is not None or args.height is not None:
            parser.error("--classic grids are square; use --size")
        size = CLASSIC_SIZE if args.size is None else args.size
        config = GeneratorConfig.classic(size, seed=args.seed)
    else:
        width = _first_given(args.size, args.width, DEFAULT_SIZE)
        height = _first_given(args.size, args.height, DEFAULT_SIZE)
        config = GeneratorConfig(width=width, height=height, seed=args.seed)

    overrides: Dict[str, Any] = {}
    if args.directions:
        overrides["directions"] = args.directions
    if args.ordering:
        overrides["ordering"] = args.ordering
    if args.retry_budget is not None:
        overrides["retry_budget"] = args.retry_budget
    if overrides:
        config = dataclasses.replace(config, **overrides)

    if not words:
        words = sample_words(args.count, rng=random.Random(args.seed))
    return config, words


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        config, words = build_config(parser, args)
        result = WordSearchGenerator(config).generate(words)
    except WordSearchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    validation = GridValidator().validate(result, words)
    if args.pretty:
        print_puzzle_stats(result)
        for message in validation.messages:
            print(f"  {message}")
        return 0 if validation.ok else 1

    payload = result.to_jsonable()
    payload["validation"] = validation.messages
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0 if validation.ok else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
