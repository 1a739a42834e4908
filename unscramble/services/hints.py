from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from unscramble.config import Settings

logger = logging.getLogger(__name__)


MAX_HINT_WORDS = 25


def _leaks_answer(hint: str, word: str) -> bool:
    """True when the answer appears anywhere in the hint, ignoring case."""
    return word.lower() in (hint or "").lower()


def _shorten(hint: str, limit: int = MAX_HINT_WORDS) -> str:
    parts = hint.split()
    return " ".join(parts[:limit]) if len(parts) > limit else hint


def _offline_hint(word: str) -> str:
    return f"The word has {len(word)} letters and starts with '{word[0].upper()}'."


def llm_hint(word: str, scrambled: str, settings: Optional[Settings] = None, temperature: float = 0.8) -> str:
    """
    Return ONE hint for the answer `word` behind `scrambled`; fallback locally on failure.

    Rules
    -----
    - Offline mode or no API key -> local hint, no network call.
    - Any text is accepted as long as it does NOT contain the answer itself.
    - On any API error or rule violation, return the local hint.
    """
    settings = settings or Settings.from_env()
    if not settings.llm_enabled:
        return _offline_hint(word)

    client = OpenAI(api_key=settings.openai_api_key)

    system = "You are a helpful clue-giver for a word-unscrambling game."
    user = (
        f"The player sees the scrambled letters '{scrambled}' and the answer is '{word}'. "
        "Give exactly ONE short, natural-sounding hint about the meaning of the answer. "
        "Do NOT include the answer itself. Reply with the hint only."
    )

    try:
        resp = client.chat.completions.create(
            model=settings.model_name,
            messages=[{"role": "system", "content": system},
                      {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=80,
        )
        text = (resp.choices[0].message.content or "").strip()
    except Exception as e:
        logger.warning("Hint request failed, using local hint: %s", e)
        return _offline_hint(word)

    if not text or _leaks_answer(text, word):
        return _offline_hint(word)
    return _shorten(text)

__all__ = ["llm_hint"]
