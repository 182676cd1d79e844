"""Shared constants and enumerations for the crossword layout generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


MAX_GENERATE_ATTEMPTS = 100
"""Default number of whole-puzzle regeneration attempts."""

MAX_WORD_POSITION_ATTEMPTS = 100
"""Default number of word positioning attempts inside one generation attempt."""


class Direction(str, Enum):
    """Word directions supported by the board."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class GenerationMode(str, Enum):
    """Names of the available placement strategies."""

    RANDOM = "random"
    BASE_LINE_COLUMN = "baseLine\\Column"
    BASE_LINE_ROW = "baseLine\\Row"
    SEED = "seed"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
