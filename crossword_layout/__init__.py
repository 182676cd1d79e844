"""Crossword layout generator.

This package exposes the public API surface via:

- ``crossword_layout.engine.board.CrosswordBoard``: the grid and its word pool.
- ``crossword_layout.engine.generator.CrosswordGenerator``: the bounded retry search.
- ``crossword_layout.engine.strategies.resolve_strategy``: generation mode lookup.
"""

from .core.constants import Direction, GenerationMode
from .core.exceptions import ConfigurationError, CrosswordError, UnknownGenerationModeError
from .engine.board import CrosswordBoard
from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig, generate_crossword
from .engine.strategies import resolve_strategy
from .engine.words import WordSet

__all__ = [
    "ConfigurationError",
    "CrosswordBoard",
    "CrosswordError",
    "CrosswordGenerator",
    "CrosswordResult",
    "Direction",
    "GenerationMode",
    "GeneratorConfig",
    "UnknownGenerationModeError",
    "WordSet",
    "generate_crossword",
    "resolve_strategy",
]

__version__ = "0.1.0"
