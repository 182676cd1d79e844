"""Placement strategies deciding where words go on the board.

Every strategy answers two questions for :class:`CrosswordGenerator`:

- ``position_first_word``: how an empty board is seeded;
- ``position_word``: where one more word can cross the words already placed.

Strategies commit through :meth:`Line.position`, which leaves the board
untouched when a word does not fit.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Protocol, Tuple, Union

from ..core.constants import Direction, GenerationMode
from ..core.exceptions import ConfigurationError, UnknownGenerationModeError
from ..core.models import Word
from ..utils.logger import get_logger
from .board import CrosswordBoard, Line


LOGGER = get_logger(__name__)

Candidate = Tuple[Line, int]


class PlacementStrategy(Protocol):
    """Capability required by the generator."""

    board: CrosswordBoard
    rng: random.Random

    def position_first_word(self) -> bool:
        ...

    def position_word(self, word: Word) -> bool:
        ...


def center_index(count: int) -> int:
    """Index nearest to ``count / 2`` (halves round up), kept inside the board."""

    return max(0, min(int(math.floor(count / 2 + 0.5)), count - 1))


class LineStrategy(ABC):
    """Shared helpers for strategies placing words along rows and columns."""

    mode: GenerationMode

    def __init__(self, board: CrosswordBoard, rng: Optional[random.Random] = None) -> None:
        self.board = board
        self.rng = rng or random.Random()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.board!r})"

    @abstractmethod
    def position_first_word(self) -> bool:
        """Seed the empty board with one word."""

    @abstractmethod
    def position_word(self, word: Word) -> bool:
        """Cross ``word`` with the words already on the board."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def center_row(self) -> Line:
        return self.board.rows.get_by_index(center_index(self.board.rows_count))

    def center_column(self) -> Line:
        return self.board.columns.get_by_index(center_index(self.board.columns_count))

    def _crossing_candidates(self, word: Word) -> List[Candidate]:
        """Every (line, offset) that lays ``word`` across a matching placed letter."""

        candidates: List[Candidate] = []
        for row, col, cell in self.board.occupied_cells():
            for direction in Direction:
                if direction in cell.words:
                    continue
                if direction == Direction.ACROSS:
                    line, position = self.board.rows.get_by_index(row), col
                else:
                    line, position = self.board.columns.get_by_index(col), row
                for index, letter in enumerate(word.text):
                    if letter == cell.letter:
                        candidates.append((line, position - index))
        return candidates

    def _try_candidates(self, word: Word, candidates: List[Candidate]) -> bool:
        self.rng.shuffle(candidates)
        for line, offset in candidates:
            if line.position(word, offset):
                return True
        LOGGER.debug("No crossing found for %s among %s candidates", word.text, len(candidates))
        return False


class RandomStrategy(LineStrategy):
    """Seed anywhere on the board, then cross any placed letter."""

    mode = GenerationMode.RANDOM

    def position_first_word(self) -> bool:
        pool = self.board.words.not_used()
        if not pool.not_empty():
            return False
        word = pool.get_random(self.rng)
        directions = list(Direction)
        self.rng.shuffle(directions)
        for direction in directions:
            lines = self.board.lines(direction)
            line = lines.get_by_index(self.rng.randrange(len(lines)))
            if len(word) > line.length:
                continue
            offset = self.rng.randint(0, line.length - len(word))
            return line.position(word, offset)
        LOGGER.debug("%s is longer than both board dimensions", word.text)
        return False

    def position_word(self, word: Word) -> bool:
        return self._try_candidates(word, self._crossing_candidates(word))


class BaseLineStrategy(LineStrategy):
    """Anchor the longest word on a center line and hang every other word off it."""

    base_direction: Direction = Direction.DOWN

    def base_line(self) -> Line:
        if self.base_direction == Direction.DOWN:
            return self.center_column()
        return self.center_row()

    def position_first_word(self) -> bool:
        line = self.base_line()
        fitting = self.board.words.not_used().filter(lambda word: len(word) <= line.length)
        longest = fitting.longest()
        if not longest:
            LOGGER.debug("No word fits the base %r", line)
            return False
        word = self.rng.choice(longest)
        return line.position(word, (line.length - len(word)) // 2)

    def position_word(self, word: Word) -> bool:
        base = self.base_line()
        crossing_lines = self.board.lines(self.base_direction.perpendicular)
        candidates: List[Candidate] = []
        for position, letter in enumerate(base.letters()):
            if letter is None:
                continue
            line = crossing_lines.get_by_index(position)
            for index, char in enumerate(word.text):
                if char == letter:
                    candidates.append((line, base.index - index))
        return self._try_candidates(word, candidates)


class BaseLineColumnStrategy(BaseLineStrategy):
    mode = GenerationMode.BASE_LINE_COLUMN
    base_direction = Direction.DOWN


class BaseLineRowStrategy(BaseLineStrategy):
    mode = GenerationMode.BASE_LINE_ROW
    base_direction = Direction.ACROSS


class SeedStrategy(RandomStrategy):
    """Reproducible layouts: the seed fixes the first word and drives every later choice."""

    mode = GenerationMode.SEED

    def __init__(self, board: CrosswordBoard, seed: int) -> None:
        super().__init__(board, rng=random.Random(seed))
        self.seed = seed

    def position_first_word(self) -> bool:
        longest_line = max(self.board.rows_count, self.board.columns_count)
        pool = self.board.words.not_used().filter(lambda word: len(word) <= longest_line)
        if not pool.not_empty():
            return False

        value = abs(self.seed)
        word = list(pool)[value % len(pool)]
        directions = [Direction.ACROSS, Direction.DOWN]
        if value % 2:
            directions.reverse()
        for direction in directions:
            lines = self.board.lines(direction)
            line = lines.get_by_index(value % len(lines))
            if len(word) > line.length:
                continue
            return line.position(word, value % (line.length - len(word) + 1))
        return False


StrategyFactory = Callable[[CrosswordBoard, Optional[int]], LineStrategy]


def _seeded(board: CrosswordBoard, seed: Optional[int]) -> LineStrategy:
    if seed is None:
        raise ConfigurationError("Generation mode 'seed' requires a numeric seed")
    return SeedStrategy(board, seed)


_STRATEGIES: Dict[GenerationMode, StrategyFactory] = {
    GenerationMode.RANDOM: lambda board, seed: RandomStrategy(board, random.Random(seed)),
    GenerationMode.BASE_LINE_COLUMN: lambda board, seed: BaseLineColumnStrategy(board, random.Random(seed)),
    GenerationMode.BASE_LINE_ROW: lambda board, seed: BaseLineRowStrategy(board, random.Random(seed)),
    GenerationMode.SEED: _seeded,
}


def resolve_strategy(
    mode: Union[GenerationMode, str],
    board: CrosswordBoard,
    seed: Optional[int] = None,
) -> LineStrategy:
    """Instantiate the strategy registered for ``mode`` bound to ``board``.

    Raises :class:`UnknownGenerationModeError` when ``mode`` is not one of the
    :class:`GenerationMode` values.
    """

    try:
        resolved = GenerationMode(mode)
    except ValueError as exc:
        raise UnknownGenerationModeError(mode) from exc
    factory = _STRATEGIES.get(resolved)
    if factory is None:
        raise UnknownGenerationModeError(mode)
    strategy = factory(board, seed)
    LOGGER.debug("Resolved generation mode %s to %r", resolved.value, strategy)
    return strategy
