"""Word pool views used by the generator and the strategies."""

from __future__ import annotations

import random
from typing import Callable, Iterable, Iterator, List, Optional

from ..core.exceptions import EmptyWordSetError
from ..core.models import Word
from ..data.normalization import clean_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordSet:
    """Ordered view over :class:`Word` objects.

    Filtering methods return new views sharing the same ``Word`` instances, so
    a word marked used through the board is seen as used by every view.
    """

    def __init__(self, words: Iterable[Word] = ()) -> None:
        self._words: List[Word] = list(words)

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "WordSet":
        """Build a pool from raw strings, normalizing and dropping duplicates."""

        words: List[Word] = []
        seen = set()
        for raw in texts:
            text = clean_word(raw)
            if not text:
                LOGGER.warning("Skipping candidate without letters: %r", raw)
                continue
            if text in seen:
                LOGGER.debug("Dropping duplicate candidate %s", text)
                continue
            seen.add(text)
            words.append(Word(text=text))
        return cls(words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(word.text == item for word in self._words)
        return item in self._words

    def __repr__(self) -> str:
        return f"WordSet({[word.text for word in self._words]!r})"

    def filter(self, predicate: Callable[[Word], bool]) -> "WordSet":
        return WordSet(word for word in self._words if predicate(word))

    def not_used(self) -> "WordSet":
        return self.filter(lambda word: not word.used)

    def used(self) -> "WordSet":
        return self.filter(lambda word: word.used)

    def not_empty(self) -> bool:
        return bool(self._words)

    def get(self, text: str) -> Optional[Word]:
        wanted = clean_word(text)
        for word in self._words:
            if word.text == wanted:
                return word
        return None

    def get_random(self, rng: Optional[random.Random] = None) -> Word:
        """Pick one word uniformly at random."""

        if not self._words:
            raise EmptyWordSetError("Cannot pick a random word from an empty set")
        return (rng or random).choice(self._words)

    def longest(self) -> List[Word]:
        """Return the words sharing the maximum length, in pool order."""

        if not self._words:
            return []
        size = max(len(word) for word in self._words)
        return [word for word in self._words if len(word) == size]

    def texts(self) -> List[str]:
        return [word.text for word in self._words]

    def reset(self) -> None:
        for word in self._words:
            word.reset()
