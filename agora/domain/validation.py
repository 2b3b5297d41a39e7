"""Input validation for post and comment text.

Validators are pure functions: they take raw input and return a
ValidationResult with a field -> message map. Nothing is raised here;
callers decide what to do with an invalid result.
"""

from typing import Any

from pydantic import Field

from agora.domain.value import ValueObject

TEXT_MIN_LENGTH = 2
TEXT_MAX_LENGTH = 300


class ValidationResult(ValueObject):
    """Outcome of validating a piece of input."""

    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True when no field produced an error."""
        return not self.errors


def is_empty(value: Any) -> bool:
    """Check whether a raw input value counts as empty.

    None, empty collections and blank strings are empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, (dict, list, tuple, set)):
        return len(value) == 0
    return False


def _validate_text(
    text: str | None, length_message: str, required_message: str
) -> ValidationResult:
    text = text if not is_empty(text) else ""

    errors: dict[str, str] = {}
    if not TEXT_MIN_LENGTH <= len(text) <= TEXT_MAX_LENGTH:
        errors["text"] = length_message

    # Missing text takes precedence over the length message
    if text == "":
        errors["text"] = required_message

    return ValidationResult(errors=errors)


def validate_post_input(text: str | None) -> ValidationResult:
    """Validate the text of a new post.

    Args:
        text: Raw post text (may be None)

    Returns:
        Validation result keyed by field name
    """
    return _validate_text(
        text,
        length_message=(
            f"Post must be between {TEXT_MIN_LENGTH} and {TEXT_MAX_LENGTH} characters"
        ),
        required_message="Text field is required",
    )


def validate_comment_input(text: str | None) -> ValidationResult:
    """Validate the text of a new comment.

    Args:
        text: Raw comment text (may be None)

    Returns:
        Validation result keyed by field name
    """
    return _validate_text(
        text,
        length_message=(
            f"Comment must be between {TEXT_MIN_LENGTH} and {TEXT_MAX_LENGTH} characters"
        ),
        required_message="Text comment field is required",
    )
