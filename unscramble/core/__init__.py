from .engine import GameEngine, scramble_word
from .errors import ConfigurationError, ScrambleError, UnscrambleError, WordPickError
from .state import GameState, MutableStateFlow, StateFlow
from .wordlist import DEFAULT_WORD_BANK, MAX_NO_OF_WORDS, SCORE_INCREASE, WordBank

__all__ = [
    "GameEngine",
    "scramble_word",
    "GameState",
    "MutableStateFlow",
    "StateFlow",
    "WordBank",
    "DEFAULT_WORD_BANK",
    "MAX_NO_OF_WORDS",
    "SCORE_INCREASE",
    "UnscrambleError",
    "ConfigurationError",
    "WordPickError",
    "ScrambleError",
]
