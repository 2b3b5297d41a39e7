"""Unit tests for post and comment input validation."""

import pytest

from agora.domain.validation import (
    is_empty,
    validate_comment_input,
    validate_post_input,
)


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_empty_values(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", ["x", [1], {"a": 1}, 0])
    def test_non_empty_values(self, value):
        assert not is_empty(value)


class TestValidatePostInput:
    """Tests for validate_post_input."""

    def test_valid_text(self):
        result = validate_post_input("Hello world")

        assert result.is_valid
        assert result.errors == {}

    def test_boundaries_are_inclusive(self):
        assert validate_post_input("ab").is_valid
        assert validate_post_input("a" * 300).is_valid

    def test_too_short(self):
        result = validate_post_input("a")

        assert not result.is_valid
        assert result.errors == {"text": "Post must be between 2 and 300 characters"}

    def test_too_long(self):
        result = validate_post_input("a" * 301)

        assert result.errors == {"text": "Post must be between 2 and 300 characters"}

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_missing_text_reports_required(self, text):
        """Required message wins over the length message."""
        result = validate_post_input(text)

        assert result.errors == {"text": "Text field is required"}


class TestValidateCommentInput:
    """Tests for validate_comment_input."""

    def test_valid_text(self):
        assert validate_comment_input("Nice post").is_valid

    def test_too_short(self):
        result = validate_comment_input("x")

        assert result.errors == {
            "text": "Comment must be between 2 and 300 characters"
        }

    def test_too_long(self):
        result = validate_comment_input("a" * 301)

        assert result.errors == {
            "text": "Comment must be between 2 and 300 characters"
        }

    def test_missing_text(self):
        result = validate_comment_input(None)

        assert result.errors == {"text": "Text comment field is required"}
