from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class InvalidInputError(ValueError):
    """Raised when a value cannot be stored in or looked up from a trie"""


class WordInput(BaseModel):
    model_config = ConfigDict(strict=True)

    value: str

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Input must not be null or empty.")
        if not v.isalpha():
            raise ValueError("Input must contain only alphabetic characters.")
        lowered = v.lower()
        # letters such as 'é' pass isalpha() but have no slot in the alphabet
        if not all("a" <= ch <= "z" for ch in lowered):
            raise ValueError("Input must contain only the letters a-z.")
        return lowered


def validate_input(value: Any) -> str:
    """
    Validate a raw trie operation argument.

    Args:
        value: Anything a caller passed to insert/contains/contains_prefix/remove

    Returns:
        The value lowercased, ready for traversal

    Raises:
        InvalidInputError: If the value is None, not a string, blank, or
            contains anything other than letters a-z (in either case)
    """
    try:
        return WordInput(value=value).value
    except ValidationError as e:
        error = e.errors()[0]
        cause = error.get("ctx", {}).get("error")
        message = str(cause) if cause is not None else f"Input must be a string, got {type(value).__name__}."
        raise InvalidInputError(message) from e
