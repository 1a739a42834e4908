from __future__ import annotations

import logging
import random
import threading
from dataclasses import replace
from typing import FrozenSet, Optional, Set

from .errors import ScrambleError, UnscrambleError, WordPickError
from .state import GameState, MutableStateFlow, StateFlow
from .wordlist import DEFAULT_WORD_BANK, WordBank

logger = logging.getLogger(__name__)

MAX_SCRAMBLE_ATTEMPTS = 1000


def scramble_word(word: str, rng: Optional[random.Random] = None, max_attempts: int = MAX_SCRAMBLE_ATTEMPTS) -> str:
    """
    Return a random permutation of `word` that differs from `word`.

    Each attempt is a full reshuffle of the original characters. Raises
    `ScrambleError` if no differing permutation turns up within
    `max_attempts` (e.g. "a" or "zzz").
    """
    rng = rng or random.Random()
    letters = list(word)
    for _ in range(max_attempts):
        rng.shuffle(letters)
        scrambled = "".join(letters)
        if scrambled != word:
            return scrambled
    raise ScrambleError(f"Could not scramble {word!r} after {max_attempts} attempts.")


class GameEngine:
    """
    Owns one game session and publishes its visible state.

    Intents
    -------
    - `reset()`                  : start over from round 1 with score 0.
    - `update_guess_draft(text)` : store the player's in-progress input.
    - `submit_guess()`           : check the draft against the answer.
    - `skip_word()`              : move on without scoring.

    Observers read `state.value` or `state.subscribe(cb)`; `guess_draft` is
    readable synchronously. Intents are serialized with a lock, so the engine
    may be driven from more than one thread, one intent at a time.
    """

    def __init__(self, word_bank: WordBank = DEFAULT_WORD_BANK, rng: Optional[random.Random] = None) -> None:
        self._word_bank = word_bank
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

        self._current_word: Optional[str] = None
        self._used_words: Set[str] = set()
        self._guess_draft = ""

        self._state: MutableStateFlow[GameState] = MutableStateFlow(GameState())
        self.state: StateFlow[GameState] = self._state.as_read_only()

        self.reset()

    # ---- read handles ----

    @property
    def guess_draft(self) -> str:
        return self._guess_draft

    @property
    def current_word(self) -> Optional[str]:
        """The unscrambled answer for the active round."""
        return self._current_word

    @property
    def used_words(self) -> FrozenSet[str]:
        return frozenset(self._used_words)

    @property
    def word_bank(self) -> WordBank:
        return self._word_bank

    # ---- intents ----

    def reset(self) -> None:
        with self._lock:
            previous, self._used_words = self._used_words, set()
            try:
                scrambled = self._pick_word()
            except UnscrambleError:
                self._used_words = previous
                raise
            self._guess_draft = ""
            self._state.value = GameState(current_scrambled_word=scrambled)
            logger.info("New game started (%d rounds)", self._word_bank.max_no_of_words)

    def update_guess_draft(self, text: str) -> None:
        with self._lock:
            self._guess_draft = text

    def submit_guess(self) -> None:
        with self._lock:
            current = self._state.value
            if current.is_game_over:
                logger.debug("Guess ignored: game is over")
            elif self._guess_draft.lower() == (self._current_word or "").lower():
                self._advance_round(current.score + self._word_bank.score_increase)
            else:
                logger.debug("Wrong guess %r for round %d", self._guess_draft, current.current_word_count)
                self._state.value = replace(current, is_guessed_word_wrong=True)
            self.update_guess_draft("")

    def skip_word(self) -> None:
        with self._lock:
            current = self._state.value
            if current.is_game_over:
                logger.debug("Skip ignored: game is over")
            else:
                self._advance_round(current.score)
            self.update_guess_draft("")

    # ---- internals ----

    def _advance_round(self, updated_score: int) -> None:
        """
        Move past the active round with `updated_score`.

        Rules
        -----
        - Last round played (`used_words` is full): game over, no new word.
        - Otherwise: next round with a freshly picked, scrambled word.
        """
        current = self._state.value
        if len(self._used_words) == self._word_bank.max_no_of_words:
            self._state.value = replace(
                current,
                score=updated_score,
                is_guessed_word_wrong=False,
                is_game_over=True,
            )
            logger.info("Game over with score %d", updated_score)
        else:
            self._state.value = replace(
                current,
                score=updated_score,
                current_word_count=current.current_word_count + 1,
                current_scrambled_word=self._pick_word(),
                is_guessed_word_wrong=False,
                is_game_over=False,
            )
            logger.info("Round %d of %d, score %d",
                        current.current_word_count + 1, self._word_bank.max_no_of_words, updated_score)

    def _pick_word(self) -> str:
        """
        Draw an unused word at random, remember it and return it scrambled.

        Draws uniformly from the words not yet used this game. Nothing is
        recorded unless the scramble succeeds.
        """
        unused = [w for w in self._word_bank.words if w not in self._used_words]
        if not unused:
            raise WordPickError("Every word in the bank has already been used this game.")
        word = self._rng.choice(unused)
        scrambled = scramble_word(word, self._rng)
        self._used_words.add(word)
        self._current_word = word
        logger.debug("Picked %r", word)
        return scrambled
