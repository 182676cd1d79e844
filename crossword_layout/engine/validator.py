"""Deterministic rule validation for generated layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .board import CrosswordBoard


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs deterministic validation over a board after generation."""

    def validate(self, board: CrosswordBoard) -> ValidationResult:
        try:
            self._check_unused_words(board)
            self._check_word_letters(board)
            self._check_cells_covered(board)
            self._check_no_duplicate_words(board)
            self._check_connected(board)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_unused_words(self, board: CrosswordBoard) -> None:
        for word in board.words.not_used():
            if word.row is not None or word.column is not None or word.direction is not None:
                raise ValidationError(f"Unused word '{word.text}' still carries a position")

    def _check_word_letters(self, board: CrosswordBoard) -> None:
        for word in board.words.used():
            for index, (row, col) in enumerate(word.cells):
                if not board.bounds.contains(row, col):
                    raise ValidationError(f"Word '{word.text}' leaves the board at ({row},{col})")
                cell = board.cell(row, col)
                if cell.letter != word.text[index]:
                    raise ValidationError(
                        f"Letter conflict at ({row},{col}): '{cell.letter}' vs '{word.text}'"
                    )

    def _check_cells_covered(self, board: CrosswordBoard) -> None:
        covered: Set[Tuple[int, int]] = set()
        for word in board.words.used():
            covered.update(word.cells)
        for row, col, cell in board.occupied_cells():
            if (row, col) not in covered:
                raise ValidationError(f"Letter '{cell.letter}' at ({row},{col}) belongs to no word")

    def _check_no_duplicate_words(self, board: CrosswordBoard) -> None:
        seen: Set[str] = set()
        for word in board.words.used():
            if word.text in seen:
                raise ValidationError(f"Duplicate word '{word.text}'")
            seen.add(word.text)

    def _check_connected(self, board: CrosswordBoard) -> None:
        placed = list(board.words.used())
        if len(placed) < 2:
            return
        owners: Dict[Tuple[int, int], List[int]] = {}
        for index, word in enumerate(placed):
            for coord in word.cells:
                owners.setdefault(coord, []).append(index)

        reached = {0}
        stack = [0]
        while stack:
            current = stack.pop()
            for coord in placed[current].cells:
                for neighbor in owners[coord]:
                    if neighbor not in reached:
                        reached.add(neighbor)
                        stack.append(neighbor)
        if len(reached) != len(placed):
            stray = sorted(placed[i].text for i in range(len(placed)) if i not in reached)
            raise ValidationError(f"Words not connected to the layout: {', '.join(stray)}")
