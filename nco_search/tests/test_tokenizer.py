"""
Tests for nco_search/engine/tokenizer.py
"""

from nco_search.engine.tokenizer import STOPWORDS, tokenize


class TestTokenize:
    def test_lowercases(self):
        assert tokenize("SOFTWARE Developer") == ["software", "developer"]

    def test_punctuation_becomes_separator(self):
        assert tokenize("full-time, part-time") == ["full", "time", "part", "time"]

    def test_drops_short_tokens(self):
        assert tokenize("an ox ran far") == ["ran", "far"]

    def test_drops_stopwords(self):
        assert tokenize("the teacher was with the children") == ["teacher", "children"]

    def test_preserves_order_and_duplicates(self):
        assert tokenize("cook food cook") == ["cook", "food", "cook"]

    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("   \t\n") == []

    def test_only_punctuation(self):
        assert tokenize("!!! ??? ...") == []

    def test_is_deterministic(self):
        text = "Operates sewing machines to join, reinforce, or decorate materials"
        assert tokenize(text) == tokenize(text)

    def test_digits_are_word_characters(self):
        assert tokenize("level 4 grade 1234") == ["level", "grade", "1234"]


class TestStopwords:
    def test_contains_articles_and_auxiliaries(self):
        for word in ("the", "and", "with", "been", "have"):
            assert word in STOPWORDS

    def test_long_stopwords_are_removed(self):
        # short ones are already dropped by length; these are not
        assert tokenize("being been were have") == []
