"""Tests for the sentence tokenizer."""

import pytest

from substitute.errors import InvalidInput
from substitute.models import NBSP, has_marker, join_tokens, strip_marker
from substitute.tokenizer import is_boundary, tokenize, tokenize_all


class TestTokenizeBasic:
    """Basic tokenization tests."""

    def test_words_and_punctuation(self) -> None:
        """Test the reference sentence splits into words and punctuation."""
        tokens = tokenize("We're here (in Wilkes-Barre), finally!")
        assert [strip_marker(t) for t in tokens] == [
            "We're",
            "here",
            "(",
            "in",
            "Wilkes-Barre",
            ")",
            ",",
            "finally",
            "!",
        ]

    def test_markers(self) -> None:
        """Test that tokens followed by a space carry the marker."""
        tokens = tokenize("We're here (in Wilkes-Barre), finally!")
        assert tokens == (
            "We're" + NBSP,
            "here" + NBSP,
            "(",
            "in" + NBSP,
            "Wilkes-Barre",
            ")",
            "," + NBSP,
            "finally",
            "!",
        )

    def test_single_word(self) -> None:
        """Test a sentence with one word and no boundary."""
        assert tokenize("Hello") == ("Hello",)

    def test_returns_tuple(self) -> None:
        """Test that the token sequence is immutable."""
        assert isinstance(tokenize("a b"), tuple)

    def test_deterministic(self) -> None:
        """Test identical input gives identical output."""
        assert tokenize("One, two; three.") == tokenize("One, two; three.")


class TestTokenizeBoundaries:
    """Boundary character handling tests."""

    @pytest.mark.parametrize("char", list('.,"/!?*+;:{}=()[]'))
    def test_punctuation_detaches(self, char: str) -> None:
        """Test every boundary character becomes its own token."""
        assert tokenize(f"a{char}b") == ("a", char, "b")

    @pytest.mark.parametrize("char", list("-#$%^&_`~'"))
    def test_word_characters_stay(self, char: str) -> None:
        """Test characters that remain part of the word."""
        assert tokenize(f"a{char}b") == (f"a{char}b",)

    def test_whitespace_is_boundary(self) -> None:
        """Test tabs and newlines split words like spaces."""
        assert [strip_marker(t) for t in tokenize("a\tb\nc")] == ["a", "b", "c"]
        assert is_boundary("\t")
        assert not is_boundary("-")

    def test_repeated_spaces(self) -> None:
        """Test that runs of whitespace produce no empty tokens."""
        assert tokenize("a   b") == ("a" + NBSP, "b")

    def test_whitespace_only(self) -> None:
        """Test that whitespace alone produces no tokens."""
        assert tokenize("   ") == ()

    def test_trailing_space(self) -> None:
        """Test a trailing space marks the last word."""
        assert tokenize("end ") == ("end" + NBSP,)

    def test_consecutive_punctuation(self) -> None:
        """Test punctuation runs split into single characters."""
        assert tokenize("Wait?!") == ("Wait", "?", "!")

    def test_punctuation_before_space(self) -> None:
        """Test punctuation followed by a space carries the marker."""
        tokens = tokenize("Yes, no")
        assert tokens == ("Yes", "," + NBSP, "no")
        assert has_marker(tokens[1])


class TestTokenizeErrors:
    """Invalid input tests."""

    def test_empty_string(self) -> None:
        """Test that an empty sentence is rejected."""
        with pytest.raises(InvalidInput):
            tokenize("")

    @pytest.mark.parametrize("value", [None, 42, ["a"], b"bytes"])
    def test_not_a_string(self, value: object) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidInput):
            tokenize(value)  # type: ignore[arg-type]

    def test_tokenize_all(self) -> None:
        """Test tokenizing a collection of sentences."""
        result = tokenize_all(["a b", "c"])
        assert result == [("a" + NBSP, "b"), ("c",)]

    @pytest.mark.parametrize("value", [None, "a sentence", 7])
    def test_tokenize_all_rejects_non_collections(self, value: object) -> None:
        """Test that the sentence collection must be a collection."""
        with pytest.raises(InvalidInput):
            tokenize_all(value)  # type: ignore[arg-type]

    def test_tokenize_all_rejects_empty_sentence(self) -> None:
        """Test that one empty sentence fails the whole collection."""
        with pytest.raises(InvalidInput):
            tokenize_all(["ok", ""])


class TestRoundTrip:
    """Re-joining tokens rebuilds the sentence."""

    @pytest.mark.parametrize(
        "sentence",
        [
            "We're here (in Wilkes-Barre), finally!",
            "The quick brown fox is very cool, supposedly.",
            'She said "hi" to me.',
            "a+b=c; d/e",
        ],
    )
    def test_join_tokens(self, sentence: str) -> None:
        """Test single-spaced sentences survive a round trip."""
        assert join_tokens(tokenize(sentence)) == sentence

    def test_join_collapses_space_runs(self) -> None:
        """Test that repeated spaces come back as one."""
        assert join_tokens(tokenize("a   b")) == "a b"
