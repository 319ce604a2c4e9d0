"""Client and conformance helpers for the what3words API."""

from .api_client import ApiClient, ApiResponse, default_api_client
from .exceptions import (
    ApiError,
    AutosuggestError,
    ConfigurationError,
    ConvertError,
    ThreeWordsError,
    ValidationError,
)
from .public_api import autosuggest, convert_to_three_word_address

__all__ = [
    "ApiClient",
    "ApiResponse",
    "ApiError",
    "AutosuggestError",
    "ConfigurationError",
    "ConvertError",
    "ThreeWordsError",
    "ValidationError",
    "autosuggest",
    "convert_to_three_word_address",
    "default_api_client",
]

__version__ = "0.1.0"
