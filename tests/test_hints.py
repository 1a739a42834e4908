from types import SimpleNamespace
from unittest import mock

import pytest

from unscramble.config import Settings
from unscramble.services import hints
from unscramble.services.hints import llm_hint

ONLINE = Settings(offline_mode=False, openai_api_key="sk-test", model_name="gpt-test")


def _fake_client(content=None, error=None):
    client = mock.MagicMock()
    if error is not None:
        client.chat.completions.create.side_effect = error
    else:
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
        )
    return client


def test_offline_mode_uses_local_hint():
    with mock.patch.object(hints, "OpenAI") as openai_cls:
        text = llm_hint("coffee", "feofce", Settings(offline_mode=True, openai_api_key="sk-test"))
    openai_cls.assert_not_called()
    assert text == "The word has 6 letters and starts with 'C'."


def test_missing_key_uses_local_hint():
    with mock.patch.object(hints, "OpenAI") as openai_cls:
        text = llm_hint("tiger", "gitre", Settings(offline_mode=False, openai_api_key=""))
    openai_cls.assert_not_called()
    assert "starts with 'T'" in text


def test_llm_hint_is_returned():
    client = _fake_client("  A hot drink many people start the day with.  ")
    with mock.patch.object(hints, "OpenAI", return_value=client):
        text = llm_hint("coffee", "feofce", ONLINE)
    assert text == "A hot drink many people start the day with."
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-test"


@pytest.mark.parametrize("content", ["", None, "It's COFFEE, obviously."])
def test_unusable_llm_output_falls_back(content):
    with mock.patch.object(hints, "OpenAI", return_value=_fake_client(content)):
        assert llm_hint("coffee", "feofce", ONLINE).startswith("The word has 6 letters")


def test_api_error_falls_back():
    with mock.patch.object(hints, "OpenAI", return_value=_fake_client(error=RuntimeError("boom"))):
        assert llm_hint("coffee", "feofce", ONLINE).startswith("The word has 6 letters")


def test_long_hints_are_trimmed():
    long_text = " ".join(["word"] * 40)
    with mock.patch.object(hints, "OpenAI", return_value=_fake_client(long_text)):
        assert len(llm_hint("coffee", "feofce", ONLINE).split()) == 25


def test_shorten_and_leak_check():
    assert hints._shorten("a b c", limit=2) == "a b"
    assert hints._shorten("short hint") == "short hint"
    assert hints._leaks_answer("Rhymes with Toffee? No, COFFEE.", "coffee")
    assert not hints._leaks_answer("A hot drink.", "coffee")
