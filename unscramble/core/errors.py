from __future__ import annotations


class UnscrambleError(Exception):
    """Base class for every error raised by the game core."""


class ConfigurationError(UnscrambleError, ValueError):
    """The word bank or game constants cannot support a full game."""


class WordPickError(ConfigurationError):
    """No unused word could be drawn within the retry budget."""


class ScrambleError(ConfigurationError):
    """No permutation different from the original word was found."""
