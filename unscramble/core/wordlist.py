from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import ConfigurationError

# Rounds per game.
MAX_NO_OF_WORDS = 10

# Points awarded for each correct guess.
SCORE_INCREASE = 20

ALL_WORDS: Tuple[str, ...] = (
    "animal", "auto", "anecdote", "alphabet", "all", "awesome", "arise",
    "balloon", "basket", "bench", "best", "birthday", "book", "briefcase",
    "camera", "camping", "candle", "cat", "cauliflower", "chat", "children",
    "class", "classic", "classroom", "coffee", "colorful", "cookie",
    "creative", "cruise", "dance", "daytime", "dinosaur", "doorknob", "dine",
    "dream", "dusk", "eating", "elephant", "emerald", "eerie", "electric",
    "finish", "flowers", "follow", "fox", "frame", "free", "frequent",
    "funnel", "green", "guitar", "grocery", "glass", "great", "giggle",
    "haircut", "half", "homemade", "happen", "honey", "hurry", "hundred",
    "ice", "igloo", "invest", "invite", "icon", "introduce", "joke", "jovial",
    "journal", "jump", "join", "kangaroo", "keyboard", "kitchen", "koala",
    "kind", "kaleidoscope", "landscape", "late", "laugh", "learning", "lemon",
    "letter", "lily", "magazine", "marine", "marshmallow", "maze", "meditate",
    "melody", "minute", "monument", "moon", "motorcycle", "mountain", "music",
    "north", "nose", "night", "name", "never", "negotiate", "number",
    "opposite", "octopus", "oak", "order", "open", "polar", "pack",
    "painting", "person", "picnic", "pillow", "pizza", "podcast",
    "presentation", "puppy", "puzzle", "recipe", "release", "restaurant",
    "revolution", "school", "sun", "sand", "soap", "sandwich", "sailboat",
    "travel", "tiger", "toast", "umbrella", "unicorn", "vacation", "violin",
    "window", "winter", "yellow", "zebra",
)


def _normalize(words: Iterable[str]) -> Tuple[str, ...]:
    """
    Lowercase and strip every word, dropping duplicates but keeping first-seen order.
    """
    seen = set()
    out = []
    for w in words:
        w = (w or "").strip().lower()
        if w not in seen:
            seen.add(w)
            out.append(w)
    return tuple(out)


@dataclass(frozen=True)
class WordBank:
    """
    Immutable vocabulary plus the two game constants.

    Notes
    -----
    - `words` is normalized on construction (lowercase, de-duplicated).
    - Validation happens here so the engine never has to loop forever:
      every word must admit a scramble different from itself, and there
      must be at least `max_no_of_words` distinct words to play a full game
      without repeats.
    """

    words: Tuple[str, ...] = ALL_WORDS
    max_no_of_words: int = MAX_NO_OF_WORDS
    score_increase: int = SCORE_INCREASE

    def __post_init__(self) -> None:
        # Because dataclass is frozen, use object.__setattr__ for normalization.
        object.__setattr__(self, "words", _normalize(self.words))

        if self.max_no_of_words < 1:
            raise ConfigurationError("`max_no_of_words` must be >= 1.")
        if self.score_increase < 1:
            raise ConfigurationError("`score_increase` must be >= 1.")

        for w in self.words:
            if not w.isalpha():
                raise ConfigurationError(f"Word {w!r} must be non-empty and contain letters only.")
            if len(set(w)) < 2:
                raise ConfigurationError(f"Word {w!r} has no scramble that differs from the original.")

        if len(self.words) < self.max_no_of_words:
            raise ConfigurationError(
                f"Word bank has {len(self.words)} distinct words but a game needs {self.max_no_of_words}."
            )

    def __len__(self) -> int:
        return len(self.words)


DEFAULT_WORD_BANK = WordBank()
