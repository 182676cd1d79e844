"""Main crossword layout orchestration.

Two nested, bounded retry loops:
  1. Generation attempts: seed an empty board through the strategy, clear and
     retry when seeding fails or when required words were left out.
  2. Word position attempts: keep handing random unused words to the strategy
     until every word is placed or the per-attempt budget runs out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from ..core.constants import MAX_GENERATE_ATTEMPTS, MAX_WORD_POSITION_ATTEMPTS, GenerationMode
from ..core.exceptions import ConfigurationError, UnknownGenerationModeError
from ..utils.logger import get_logger
from .board import CrosswordBoard
from .strategies import PlacementStrategy, resolve_strategy
from .validator import LayoutValidator
from .words import WordSet


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int
    columns: int
    mode: Union[GenerationMode, str] = GenerationMode.RANDOM
    require_all_words: bool = False
    max_generate_attempts: int = MAX_GENERATE_ATTEMPTS
    max_word_position_attempts: int = MAX_WORD_POSITION_ATTEMPTS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.rows < 1 or self.columns < 1:
            raise ConfigurationError(
                f"Board needs positive dimensions, got {self.rows}x{self.columns}"
            )
        if self.max_generate_attempts < 1:
            raise ConfigurationError("max_generate_attempts must be a positive integer")
        if self.max_word_position_attempts < 1:
            raise ConfigurationError("max_word_position_attempts must be a positive integer")
        try:
            self.mode = GenerationMode(self.mode)
        except ValueError as exc:
            raise UnknownGenerationModeError(self.mode) from exc
        if self.mode == GenerationMode.SEED and self.seed is None:
            raise ConfigurationError("Generation mode 'seed' requires a numeric seed")

    def to_board(self, words: Union[WordSet, Iterable[str]]) -> CrosswordBoard:
        return CrosswordBoard(self.rows, self.columns, words)


@dataclass
class GenerationStats:
    """Bookkeeping for the most recent :meth:`CrosswordGenerator.generate` call."""

    generate_attempts: int = 0
    successful_seeds: int = 0
    word_position_attempts: int = 0
    words_placed: int = 0
    total_words: int = 0


@dataclass
class CrosswordResult:
    board: CrosswordBoard
    success: bool
    stats: GenerationStats
    mode: GenerationMode
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None


class CrosswordGenerator:
    """Drives a placement strategy through the bounded regeneration search."""

    def __init__(self, strategy: PlacementStrategy) -> None:
        self.strategy = strategy
        self.stats = GenerationStats()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        require_all_words: bool = False,
        max_generate_attempts: int = MAX_GENERATE_ATTEMPTS,
        max_word_position_attempts: int = MAX_WORD_POSITION_ATTEMPTS,
    ) -> bool:
        """Lay words onto the strategy's board.

        Returns ``True`` as soon as one attempt seeds the board and, when
        ``require_all_words`` is set, places every word. Failed attempts clear
        the board before the next one. Returns ``False`` when the generation
        budget runs out without such an attempt.
        """

        board = self.strategy.board
        stats = GenerationStats(total_words=len(board.words))
        self.stats = stats
        seeded = False
        generate_attempts = max_generate_attempts

        while generate_attempts > 0:
            stats.generate_attempts += 1
            if not self.strategy.position_first_word():
                LOGGER.debug("Attempt %s: first word could not be positioned", stats.generate_attempts)
                generate_attempts -= 1
                board.clear()
                continue

            seeded = True
            stats.successful_seeds += 1
            self._position_words(board, max_word_position_attempts, stats)

            unused = board.words.not_used()
            if require_all_words and unused.not_empty():
                LOGGER.info(
                    "Attempt %s left %s/%s words unplaced, regenerating",
                    stats.generate_attempts,
                    len(unused),
                    stats.total_words,
                )
                generate_attempts -= 1
                board.clear()
                continue

            stats.words_placed = len(board.words.used())
            LOGGER.info(
                "Layout generated on attempt %s with %s/%s words",
                stats.generate_attempts,
                stats.words_placed,
                stats.total_words,
            )
            return True

        stats.words_placed = len(board.words.used())
        LOGGER.warning("Generation budget exhausted after %s attempts", stats.generate_attempts)
        if require_all_words:
            return not board.words.not_used().not_empty()
        # An empty pool has nothing to seed and nothing left unplaced.
        return seeded or not board.words.not_empty()

    def _position_words(self, board: CrosswordBoard, budget: int, stats: GenerationStats) -> None:
        attempts = budget
        while attempts > 0:
            words = board.words.not_used()
            if not words.not_empty():
                break
            stats.word_position_attempts += 1
            self.strategy.position_word(words.get_random(self.strategy.rng))
            attempts -= 1


def generate_crossword(
    config: GeneratorConfig,
    words: Union[WordSet, Iterable[str]],
) -> CrosswordResult:
    """Build a board from ``config``, run the configured strategy and validate the layout."""

    board = config.to_board(words)
    strategy = resolve_strategy(config.mode, board, config.seed)
    generator = CrosswordGenerator(strategy)
    success = generator.generate(
        require_all_words=config.require_all_words,
        max_generate_attempts=config.max_generate_attempts,
        max_word_position_attempts=config.max_word_position_attempts,
    )
    validation = LayoutValidator().validate(board)
    return CrosswordResult(
        board=board,
        success=success,
        stats=generator.stats,
        mode=GenerationMode(config.mode),
        validation_messages=validation.messages,
        seed=config.seed,
    )
