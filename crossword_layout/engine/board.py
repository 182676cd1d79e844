"""Board representation and the row/column placement primitive."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..core.constants import Bounds, Direction
from ..core.exceptions import ConfigurationError
from ..core.models import Cell, Word
from ..utils.logger import get_logger
from .words import WordSet


LOGGER = get_logger(__name__)


class Line:
    """A single row or column of the board.

    ``position`` is the only way words get onto the board: it checks the whole
    word first and writes letters only when every cell fits.
    """

    direction: Direction = Direction.ACROSS

    def __init__(self, board: "CrosswordBoard", index: int) -> None:
        self.board = board
        self.index = index

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.index})"

    @property
    def length(self) -> int:
        raise NotImplementedError

    def coordinate(self, position: int) -> Tuple[int, int]:
        raise NotImplementedError

    def letter_at(self, position: int) -> Optional[str]:
        row, col = self.coordinate(position)
        return self.board.cell(row, col).letter

    def letters(self) -> List[Optional[str]]:
        return [self.letter_at(position) for position in range(self.length)]

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_position(self, word: Word, offset: int) -> bool:
        text = word.text
        if word.used or not text:
            return False
        if offset < 0 or offset + len(text) > self.length:
            return False
        if self._occupied(offset - 1) or self._occupied(offset + len(text)):
            return False

        dr, dc = self.direction.perpendicular.step
        for index, letter in enumerate(text):
            row, col = self.coordinate(offset + index)
            cell = self.board.cell(row, col)
            if cell.is_empty():
                # A new letter may not touch a parallel neighbour.
                if self.board.is_occupied(row - dr, col - dc) or self.board.is_occupied(row + dr, col + dc):
                    return False
                continue
            if cell.letter != letter:
                return False
            if self.direction in cell.words:
                return False
        return True

    def position(self, word: Word, offset: int) -> bool:
        """Place ``word`` starting at ``offset`` if it fits; report the outcome."""

        if not self.can_position(word, offset):
            LOGGER.debug("%s does not fit %r at offset %s", word.text, self, offset)
            return False

        for index, letter in enumerate(word.text):
            cell = self.board.cell(*self.coordinate(offset + index))
            cell.letter = letter
            cell.words[self.direction] = word.text

        row, col = self.coordinate(offset)
        word.place(row, col, self.direction)
        LOGGER.debug("Placed %s %s at (%s,%s)", word.text, self.direction.value, row, col)
        return True

    def _occupied(self, position: int) -> bool:
        if position < 0 or position >= self.length:
            return False
        return self.letter_at(position) is not None


class Row(Line):
    direction = Direction.ACROSS

    @property
    def length(self) -> int:
        return self.board.columns_count

    def coordinate(self, position: int) -> Tuple[int, int]:
        return self.index, position


class Column(Line):
    direction = Direction.DOWN

    @property
    def length(self) -> int:
        return self.board.rows_count

    def coordinate(self, position: int) -> Tuple[int, int]:
        return position, self.index


class LineCollection(Sequence[Line]):
    """Indexable collection of rows or columns."""

    def __init__(self, lines: Iterable[Line]) -> None:
        self._lines: List[Line] = list(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index):  # type: ignore[override]
        return self._lines[index]

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def get_by_index(self, index: int) -> Line:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"Line index {index} outside 0..{len(self._lines) - 1}")
        return self._lines[index]


class CrosswordBoard:
    """Rectangular grid together with the pool of words being fitted onto it."""

    def __init__(
        self,
        rows: int,
        columns: int,
        words: Union[WordSet, Iterable[str]] = (),
    ) -> None:
        if rows < 1 or columns < 1:
            raise ConfigurationError(f"Board needs positive dimensions, got {rows}x{columns}")
        self.bounds = Bounds(rows=rows, cols=columns)
        self.cells: List[List[Cell]] = [[Cell() for _ in range(columns)] for _ in range(rows)]
        self.words = words if isinstance(words, WordSet) else WordSet.from_texts(words)
        self.rows = LineCollection(Row(self, index) for index in range(rows))
        self.columns = LineCollection(Column(self, index) for index in range(columns))

    def __repr__(self) -> str:
        return f"CrosswordBoard({self.rows_count}x{self.columns_count}, words={len(self.words)})"

    @property
    def rows_count(self) -> int:
        return self.bounds.rows

    @property
    def columns_count(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col) and not self.cells[row][col].is_empty()

    def lines(self, direction: Direction) -> LineCollection:
        return self.rows if direction == Direction.ACROSS else self.columns

    def occupied_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if not cell.is_empty():
                    yield r, c, cell

    def is_empty(self) -> bool:
        return next(self.occupied_cells(), None) is None

    def letters(self) -> List[List[Optional[str]]]:
        return [[cell.letter for cell in row] for row in self.cells]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def clear(self) -> None:
        """Empty every cell and return every word to the unused pool."""

        for row in self.cells:
            for cell in row:
                cell.clear()
        self.words.reset()

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> Dict[str, object]:
        placed = [
            {
                "word": word.text,
                "start": [word.row, word.column],
                "direction": word.direction.value if word.direction else None,
                "length": len(word),
            }
            for word in self.words.used()
        ]
        return {
            "rows": self.rows_count,
            "columns": self.columns_count,
            "grid": ["".join(letter or "." for letter in row) for row in self.letters()],
            "words": placed,
            "unplaced": self.words.not_used().texts(),
        }
