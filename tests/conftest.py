import random

import pytest

from unscramble.core.engine import GameEngine
from unscramble.core.wordlist import WordBank


@pytest.fixture()
def tiny_bank():
    return WordBank(words=("cat", "dog"), max_no_of_words=2, score_increase=20)


@pytest.fixture()
def tiny_engine(tiny_bank):
    return GameEngine(tiny_bank, rng=random.Random(7))


@pytest.fixture()
def engine():
    return GameEngine(rng=random.Random(42))
