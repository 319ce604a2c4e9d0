"""Helpers for asserting autosuggest behaviour against the live service."""

from dataclasses import dataclass
from typing import Any, List


@dataclass
class DelimiterCase:
    delimiter: str
    input: str
    words: List[str]


def _body(response: Any) -> Any:
    return getattr(response, "data", None)


def build_address_with_delimiter(words: List[str], delimiter: str) -> str:
    if not isinstance(words, list) or not words:
        raise ValueError("Invalid words")

    if not isinstance(delimiter, str):
        raise ValueError("Invalid delimiter")

    return delimiter.join(words)


def create_delimiter_test_data(delimiters: List[str], words: List[str]) -> List[DelimiterCase]:
    """One case per delimiter, each joining ``words`` with that delimiter."""
    if not isinstance(delimiters, list) or not delimiters:
        raise ValueError("Invalid delimiters")

    if not isinstance(words, list) or not words:
        raise ValueError("Invalid words")

    return [
        DelimiterCase(
            delimiter=delimiter,
            input=build_address_with_delimiter(words, delimiter),
            words=list(words),
        )
        for delimiter in delimiters
    ]


def validate_autosuggest_response(response: Any) -> bool:
    """Check that a response body is either a well-formed suggestion list or an error.

    Raises:
        ValueError: describing the first structural problem found.
    """
    if response is None or not hasattr(response, "data"):
        raise ValueError("Invalid response")

    data = _body(response)
    if not isinstance(data, dict):
        raise ValueError("Invalid response data")

    suggestions = data.get("suggestions")
    if isinstance(suggestions, list):
        for suggestion in suggestions:
            if not isinstance(suggestion, dict):
                raise ValueError("Invalid suggestion")

            words = suggestion.get("words")
            if not words or not isinstance(words, str):
                raise ValueError("Invalid suggestion words")

        return True

    if data.get("error"):
        return True

    raise ValueError("Invalid response structure")


def validate_autosuggest_contains_words(response: Any, expected_words: List[str]) -> bool:
    """Check that one suggestion equals the dot-joined ``expected_words`` (case-insensitive)."""
    data = _body(response)
    if not isinstance(data, dict) or not isinstance(data.get("suggestions"), list):
        raise ValueError("Invalid response structure")

    if not isinstance(expected_words, list) or not expected_words:
        raise ValueError("Invalid expected words")

    expected_address = ".".join(expected_words).lower()
    has_match = any(
        isinstance(suggestion, dict)
        and isinstance(suggestion.get("words"), str)
        and suggestion["words"].lower() == expected_address
        for suggestion in data["suggestions"]
    )

    if not has_match:
        raise ValueError(f"Expected words not found: {'.'.join(expected_words)}")

    return True
