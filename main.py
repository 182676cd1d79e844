"""CLI entrypoint for the crossword layout generator."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from crossword_layout.core.constants import (
    MAX_GENERATE_ATTEMPTS,
    MAX_WORD_POSITION_ATTEMPTS,
    GenerationMode,
)
from crossword_layout.core.exceptions import ConfigurationError
from crossword_layout.engine.generator import CrosswordResult, GeneratorConfig, generate_crossword
from crossword_layout.utils.logger import configure_logging, get_logger


LOGGER = get_logger("crossword_layout.cli")


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
        description="Lay candidate words out on a rectangular crossword board",
    )
    parser.add_argument("--rows", type=int, required=True, help="Board height in cells")
    parser.add_argument("--columns", type=int, required=True, help="Board width in cells")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Candidate words")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[mode.value for mode in GenerationMode],
        default=GenerationMode.RANDOM.value,
        help="Placement strategy",
    )
    parser.add_argument(
        "--require-all-words",
        action="store_true",
        help="Only accept layouts that place every candidate word",
    )
    parser.add_argument(
        "--max-generate-attempts",
        type=int,
        default=MAX_GENERATE_ATTEMPTS,
        help="Whole-board regeneration attempts (default %(default)s)",
    )
    parser.add_argument(
        "--max-word-position-attempts",
        type=int,
        default=MAX_WORD_POSITION_ATTEMPTS,
        help="Word positioning attempts per generation attempt (default %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_payload(result: CrosswordResult) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "success": result.success,
        "mode": result.mode.value,
        "seed": result.seed,
        "stats": result.stats.__dict__,
        "validation": result.validation_messages,
    }
    payload.update(result.board.to_jsonable())
    return payload


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    words: List[str] = list(args.words or [])
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide candidate words with --words and/or --words-file")

    try:
        config = GeneratorConfig(
            rows=args.rows,
            columns=args.columns,
            mode=args.mode,
            require_all_words=args.require_all_words,
            max_generate_attempts=args.max_generate_attempts,
            max_word_position_attempts=args.max_word_position_attempts,
            seed=args.seed,
        )
        result = generate_crossword(config, words)
    except ConfigurationError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    output_text = json.dumps(build_payload(result), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
        LOGGER.info("Layout written to %s", args.output)
    else:
        print(output_text)
    return 0 if result.success else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
