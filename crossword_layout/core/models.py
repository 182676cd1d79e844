"""Data models supporting the crossword layout generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .constants import Direction


@dataclass
class Word:
    """A candidate word and, once used, where it sits on the board."""

    text: str
    used: bool = False
    row: Optional[int] = None
    column: Optional[int] = None
    direction: Optional[Direction] = None

    def __len__(self) -> int:
        return len(self.text)

    def place(self, row: int, column: int, direction: Direction) -> None:
        self.row = row
        self.column = column
        self.direction = direction
        self.used = True

    def reset(self) -> None:
        self.row = None
        self.column = None
        self.direction = None
        self.used = False

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """Board coordinates covered by a placed word (empty while unused)."""

        if not self.used or self.row is None or self.column is None or self.direction is None:
            return []
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.column + dc * i) for i in range(len(self.text))]


@dataclass
class Cell:
    """Represents a grid cell and the words running through it."""

    letter: Optional[str] = None
    words: Dict[Direction, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return self.letter is None

    def clear(self) -> None:
        self.letter = None
        self.words.clear()
