import random
import unittest
from typing import Iterable, List
from unittest.mock import patch

from crossword_layout.core.constants import Direction, GenerationMode
from crossword_layout.core.exceptions import ConfigurationError, UnknownGenerationModeError
from crossword_layout.core.models import Word
from crossword_layout.engine.board import CrosswordBoard
from crossword_layout.engine.generator import CrosswordGenerator, GeneratorConfig, generate_crossword
from crossword_layout.engine.strategies import resolve_strategy
from crossword_layout.engine.validator import LayoutValidator


class ScriptedStrategy:
    """Strategy stub: seeding follows a script, only ``placeable`` words ever fit."""

    def __init__(
        self,
        board: CrosswordBoard,
        seed_outcomes: Iterable[bool] = (True,),
        placeable: Iterable[str] = (),
    ) -> None:
        self.board = board
        self.rng = random.Random(0)
        self.seed_outcomes: List[bool] = list(seed_outcomes)
        self.placeable = set(placeable)
        self.first_word_calls = 0
        self.word_calls = 0

    def position_first_word(self) -> bool:
        self.first_word_calls += 1
        outcome = self.seed_outcomes.pop(0) if len(self.seed_outcomes) > 1 else self.seed_outcomes[0]
        if not outcome:
            return False
        word = next(iter(self.board.words.not_used()))
        word.place(0, 0, Direction.ACROSS)
        return True

    def position_word(self, word: Word) -> bool:
        self.word_calls += 1
        if word.text not in self.placeable:
            return False
        word.place(0, 0, Direction.DOWN)
        return True


class GeneratorControlTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = CrosswordBoard(10, 10, ["cat", "car", "art"])

    def test_returns_once_every_word_is_placed(self) -> None:
        strategy = ScriptedStrategy(self.board, placeable={"CAR", "ART"})
        generator = CrosswordGenerator(strategy)

        self.assertTrue(generator.generate(require_all_words=True))
        self.assertEqual(strategy.first_word_calls, 1)
        self.assertEqual(strategy.word_calls, 2)
        self.assertFalse(self.board.words.not_used().not_empty())
        self.assertEqual(generator.stats.words_placed, 3)
        self.assertEqual(generator.stats.total_words, 3)

    def test_failed_seed_clears_board_and_retries(self) -> None:
        strategy = ScriptedStrategy(self.board, seed_outcomes=[False, False, True], placeable={"CAR", "ART"})
        generator = CrosswordGenerator(strategy)
        with patch.object(self.board, "clear", wraps=self.board.clear) as clear:
            self.assertTrue(generator.generate(require_all_words=True))
        self.assertEqual(clear.call_count, 2)
        self.assertEqual(strategy.first_word_calls, 3)
        self.assertEqual(generator.stats.generate_attempts, 3)
        self.assertEqual(generator.stats.successful_seeds, 1)

    def test_inner_budget_is_consumed_by_failed_placements(self) -> None:
        strategy = ScriptedStrategy(self.board)
        generator = CrosswordGenerator(strategy)

        self.assertTrue(generator.generate(max_word_position_attempts=7))
        self.assertEqual(strategy.word_calls, 7)
        self.assertEqual(len(self.board.words.not_used()), 2)

    def test_partial_layout_is_accepted_without_retry_when_not_all_words_required(self) -> None:
        strategy = ScriptedStrategy(self.board, placeable={"CAR"})
        generator = CrosswordGenerator(strategy)
        with patch.object(self.board, "clear", wraps=self.board.clear) as clear:
            self.assertTrue(
                generator.generate(require_all_words=False, max_generate_attempts=5, max_word_position_attempts=30)
            )
        self.assertEqual(strategy.first_word_calls, 1)
        self.assertEqual(clear.call_count, 0)
        self.assertEqual(self.board.words.not_used().texts(), ["ART"])

    def test_missing_words_exhaust_outer_budget_when_all_words_required(self) -> None:
        strategy = ScriptedStrategy(self.board, placeable={"CAR"})
        generator = CrosswordGenerator(strategy)

        self.assertFalse(
            generator.generate(require_all_words=True, max_generate_attempts=5, max_word_position_attempts=4)
        )
        self.assertEqual(strategy.first_word_calls, 5)
        self.assertEqual(strategy.word_calls, 5 * 4)
        self.assertEqual(len(self.board.words.not_used()), 3)

    def test_never_seeding_fails_regardless_of_flag(self) -> None:
        for require_all in (True, False):
            board = CrosswordBoard(10, 10, ["cat"])
            strategy = ScriptedStrategy(board, seed_outcomes=[False])
            self.assertFalse(CrosswordGenerator(strategy).generate(require_all, 4, 4))
            self.assertEqual(strategy.first_word_calls, 4)
            self.assertEqual(strategy.word_calls, 0)

    def test_inner_budget_resets_every_attempt(self) -> None:
        strategy = ScriptedStrategy(self.board, placeable=())
        CrosswordGenerator(strategy).generate(require_all_words=True, max_generate_attempts=3, max_word_position_attempts=2)
        self.assertEqual(strategy.word_calls, 3 * 2)

    def test_zero_budget_never_calls_the_strategy(self) -> None:
        strategy = ScriptedStrategy(self.board)
        self.assertFalse(CrosswordGenerator(strategy).generate(max_generate_attempts=0))
        self.assertEqual(strategy.first_word_calls, 0)


class GeneratorScenarioTests(unittest.TestCase):
    def test_random_mode_places_all_three_words(self) -> None:
        board = CrosswordBoard(10, 10, ["CAT", "CAR", "ART"])
        generator = CrosswordGenerator(resolve_strategy("random", board, seed=17))

        self.assertTrue(generator.generate(require_all_words=True, max_generate_attempts=100, max_word_position_attempts=100))
        self.assertTrue(all(word.used for word in board.words))
        self.assertTrue(LayoutValidator().validate(board).ok)
        for word in board.words:
            for index, (row, col) in enumerate(word.cells):
                self.assertEqual(board.cell(row, col).letter, word.text[index])

    def test_word_longer_than_board_fails_regardless_of_flag(self) -> None:
        for require_all in (True, False):
            board = CrosswordBoard(4, 5, ["elephant"])
            generator = CrosswordGenerator(resolve_strategy("random", board))
            self.assertFalse(generator.generate(require_all_words=require_all))
            self.assertTrue(board.is_empty())
            self.assertEqual(generator.stats.generate_attempts, 100)

    def test_empty_word_pool_succeeds_regardless_of_flag(self) -> None:
        for require_all in (True, False):
            board = CrosswordBoard(5, 5, [])
            generator = CrosswordGenerator(resolve_strategy("random", board))
            self.assertTrue(generator.generate(require_all, 3, 3))
            self.assertTrue(board.is_empty())
            self.assertEqual(generator.stats.generate_attempts, 3)

    def test_best_effort_layout_when_words_do_not_cross(self) -> None:
        board = CrosswordBoard(10, 10, ["cat", "dog"])
        generator = CrosswordGenerator(resolve_strategy("random", board, seed=3))
        self.assertTrue(generator.generate(require_all_words=False))
        self.assertEqual(len(board.words.used()), 1)
        self.assertEqual(generator.stats.generate_attempts, 1)

    def test_base_line_column_layout_is_connected(self) -> None:
        board = CrosswordBoard(9, 9, ["crossword", "dog", "row"])
        generator = CrosswordGenerator(resolve_strategy("baseLine\\Column", board, seed=8))
        self.assertTrue(generator.generate(require_all_words=True))
        self.assertEqual(LayoutValidator().validate(board).messages, [])
        base = board.words.get("crossword")
        assert base is not None
        self.assertEqual(base.direction, Direction.DOWN)


class GenerateCrosswordTests(unittest.TestCase):
    def test_config_drives_a_validated_result(self) -> None:
        config = GeneratorConfig(rows=10, columns=10, mode="seed", seed=42, require_all_words=True)
        result = generate_crossword(config, ["cat", "car", "art"])
        self.assertTrue(result.success)
        self.assertEqual(result.mode, GenerationMode.SEED)
        self.assertEqual(result.validation_messages, [])
        self.assertEqual(result.stats.words_placed, 3)

    def test_seed_mode_is_reproducible(self) -> None:
        config = GeneratorConfig(rows=12, columns=12, mode=GenerationMode.SEED, seed=5)
        words = ["crossword", "puzzle", "letter", "grid", "clue", "word"]
        first = generate_crossword(config, words).board.to_jsonable()
        second = generate_crossword(config, words).board.to_jsonable()
        self.assertEqual(first, second)

    def test_config_validation(self) -> None:
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(rows=5, columns=0)
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(rows=5, columns=5, max_generate_attempts=0)
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(rows=5, columns=5, mode="seed")
        with self.assertRaises(UnknownGenerationModeError):
            GeneratorConfig(rows=5, columns=5, mode="bogus-mode")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
