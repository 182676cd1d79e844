"""Custom exception hierarchy for crossword layout generation."""

from __future__ import annotations


class CrosswordError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(CrosswordError):
    """Raised when the board, budgets or generation mode are misconfigured."""


class UnknownGenerationModeError(ConfigurationError):
    """Raised when a generation mode name does not map to a strategy."""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f"Unknown generation mode: {mode!r}")


class EmptyWordSetError(CrosswordError):
    """Raised when a random word is requested from an empty word set."""


class ValidationError(CrosswordError):
    """Raised when the layout integrity checks fail."""
