"""Tests for PromptBuilder."""

import pytest

from articlesum.summarization.prompt_builder import PromptBuilder, SummaryMode


@pytest.fixture
def builder():
    return PromptBuilder()


def test_short_prompt(builder):
    prompt = builder.build("Reduced text.", "en", SummaryMode.SHORT)
    assert prompt == (
        "Summarize the following news article in English.\n"
        "Provide a short summary (2–3 sentences).\n"
        "\n"
        "Text: Reduced text."
    )


def test_long_prompt(builder):
    prompt = builder.build("Reduced text.", "uk", SummaryMode.LONG)
    assert prompt.startswith("Summarize the following news article in Ukrainian.\n")
    assert "Provide a extended summary (5–7 sentences)." in prompt
    assert prompt.endswith("Text: Reduced text.")


@pytest.mark.parametrize(
    "code,name",
    [("uk", "Ukrainian"), ("EN", "English"), ("ru", "Russian"), ("pl", "Polish"),
     ("De", "German"), ("fr", "French"), ("es", "Spanish")],
)
def test_language_lookup_is_case_insensitive(builder, code, name):
    assert builder.language_name(code) == name


def test_unknown_language_used_verbatim(builder):
    prompt = builder.build("Text.", "Klingon", "short")
    assert "in Klingon." in prompt


def test_mode_accepts_string_value(builder):
    assert builder.build("x", "en", "long") == builder.build("x", "en", SummaryMode.LONG)


def test_invalid_mode(builder):
    with pytest.raises(ValueError):
        builder.build("x", "en", "medium")


def test_build_pair_order(builder):
    short, long = builder.build_pair("Body.", "de")
    assert "short summary" in short
    assert "extended summary" in long
    assert "in German." in short and "in German." in long


def test_custom_language_map():
    builder = PromptBuilder(language_names={"xx": "Testish"})
    assert builder.language_name("XX") == "Testish"
    assert builder.language_name("en") == "en"


@pytest.mark.parametrize("language", [None, ""])
def test_missing_language_defaults_to_english(builder, language):
    assert builder.language_name(language) == "English"
    prompt = builder.build("Text.", language, "short")
    assert prompt.startswith("Summarize the following news article in English.\n")
