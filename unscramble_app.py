from __future__ import annotations

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from unscramble.config import Settings, configure_logging
from unscramble.core.engine import GameEngine
from unscramble.core.state import GameState

# --- Generative AI services ---
from unscramble.services.hints import llm_hint   # AI hint (with local fallback)


SETTINGS = Settings.from_env()
configure_logging(SETTINGS.log_level)


# =======================================
# Session-state helpers
# =======================================

def _ensure_engine() -> GameEngine:
    """One engine per browser session; created (and thereby reset) on first run."""
    if "engine" not in st.session_state or not isinstance(st.session_state["engine"], GameEngine):
        st.session_state["engine"] = GameEngine()
    st.session_state.setdefault("hint", None)
    return st.session_state["engine"]


def _play_again() -> None:
    st.session_state["engine"].reset()
    st.session_state["hint"] = None


def _submit(engine: GameEngine, guess: str) -> None:
    engine.update_guess_draft(guess)
    before = engine.state.value.current_word_count
    engine.submit_guess()
    if engine.state.value.current_word_count != before:
        st.session_state["hint"] = None


def _skip(engine: GameEngine) -> None:
    engine.skip_word()
    st.session_state["hint"] = None


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Unscramble", page_icon="🔤", layout="centered")
    st.title("🔤 Unscramble")

    engine = _ensure_engine()
    bank = engine.word_bank

    with st.sidebar:
        st.header("Game")
        if st.button("🔁 New Game", use_container_width=True):
            _play_again()
            st.rerun()
        with st.expander("Debug (env)"):
            st.write("OFFLINE_MODE:", SETTINGS.offline_mode)
            st.write("Has OPENAI_API_KEY:", bool(SETTINGS.openai_api_key))
            st.write("MODEL_NAME:", SETTINGS.model_name)

    game: GameState = engine.state.value

    # ---- Board ----
    c1, c2 = st.columns(2)
    c1.metric("Round", f"{game.current_word_count} / {bank.max_no_of_words}")
    c2.metric("Score", game.score)
    st.markdown(f"## `{game.current_scrambled_word}`")
    st.caption("Unscramble the word using all the letters.")

    if game.is_game_over:
        st.success(f"🎉 Game over! Final score: **{game.score}**")
        st.button("Play again", on_click=_play_again)
        return

    # ---- Move input ----
    with st.form("guess_form", clear_on_submit=True):
        guess_inp = st.text_input("Enter your word:", value=engine.guess_draft, max_chars=24)
        s1, s2 = st.columns(2)
        submitted = s1.form_submit_button("Submit")
        skipped = s2.form_submit_button("Skip")
        if submitted:
            _submit(engine, guess_inp or "")
            st.rerun()
        if skipped:
            _skip(engine)
            st.rerun()

    if game.is_guessed_word_wrong:
        st.error("Wrong guess!")

    # ---- Hint ----
    with st.expander("Need a hint?"):
        if st.button("✨ Generate Hint"):
            with st.spinner("Thinking..."):
                st.session_state["hint"] = llm_hint(engine.current_word, game.current_scrambled_word, SETTINGS)
            st.rerun()
        st.info(st.session_state["hint"] or "No hint yet.")


if __name__ == "__main__":
    main()
