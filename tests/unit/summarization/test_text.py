"""Tests for sentence splitting and word-frequency counting."""

from articlesum.summarization.text import (
    GENERAL_STOP_WORDS,
    KEYWORD_STOP_WORDS,
    count_word_frequency,
    normalize_words,
    split_sentences,
)


class TestSplitSentences:
    """Test split_sentences."""

    def test_splits_on_terminal_punctuation(self):
        text = "First one. Second one! Third one? Fourth"
        assert split_sentences(text) == ["First one.", "Second one!", "Third one?", "Fourth"]

    def test_collapses_whitespace(self):
        text = "  First   line\nstill first.\n\n\tSecond  line.  "
        assert split_sentences(text) == ["First line still first.", "Second line."]

    def test_no_terminal_punctuation_is_one_sentence(self):
        assert split_sentences("just a fragment without an end") == [
            "just a fragment without an end"
        ]

    def test_punctuation_without_following_space_does_not_split(self):
        assert split_sentences("Version 2.5 shipped.Next") == ["Version 2.5 shipped.Next"]

    def test_empty_and_blank_text(self):
        assert split_sentences("") == []
        assert split_sentences("   \n\t ") == []

    def test_repeated_punctuation_stays_with_sentence(self):
        assert split_sentences("Really?! Yes.") == ["Really?!", "Yes."]


class TestCountWordFrequency:
    """Test count_word_frequency."""

    def test_ignores_case_and_punctuation(self):
        frequency = count_word_frequency("Budget, BUDGET; budget! (Budget)")
        assert frequency == {"budget": 4}

    def test_drops_stop_words_and_short_words(self):
        frequency = count_word_frequency("The cat and an ox sat with the dog")
        assert frequency == {"cat": 1, "sat": 1, "dog": 1}

    def test_first_seen_order(self):
        frequency = count_word_frequency("zeta alpha zeta beta alpha zeta")
        assert list(frequency) == ["zeta", "alpha", "beta"]
        assert frequency["zeta"] == 3

    def test_keyword_settings(self):
        frequency = count_word_frequency(
            "What council? Which council and which city?", KEYWORD_STOP_WORDS, 4
        )
        assert frequency == {"council": 2, "city": 1}

    def test_unicode_words_count(self):
        frequency = count_word_frequency("Київ — столиця. Київ великий.")
        assert frequency["київ"] == 2
        assert "столиця" in frequency

    def test_empty_text(self):
        assert count_word_frequency("") == {}


def test_keyword_stop_words_extend_general():
    assert GENERAL_STOP_WORDS < KEYWORD_STOP_WORDS
    assert {"what", "which", "who", "when", "where", "why", "how"} <= KEYWORD_STOP_WORDS


def test_normalize_words_replaces_punctuation_with_space():
    assert normalize_words("state-of-the-art, e.g.") == ["state", "of", "the", "art", "e", "g"]
