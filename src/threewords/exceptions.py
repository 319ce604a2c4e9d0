"""Exception hierarchy for the threewords client."""

from typing import Optional

import requests


class ThreeWordsError(Exception):
    """Base class for all errors raised by threewords."""
    pass


class ConfigurationError(ThreeWordsError):
    """Raised when a required setting is missing or unusable."""
    pass


class ValidationError(ThreeWordsError, ValueError):
    """Raised when caller-supplied arguments are rejected before any request."""
    pass


class ApiError(ThreeWordsError):
    """Normalized transport failure.

    ``status`` and ``response`` are set when the server answered with a
    rejected status; ``request`` is set when no response was received.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        response: Optional[requests.Response] = None,
        request: Optional[requests.PreparedRequest] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response
        self.request = request

    @classmethod
    def wrap(cls, prefix: str, error: "ApiError") -> "ApiError":
        """Build an error of this class whose message is ``prefix`` + the original."""
        return cls(
            f"{prefix}{error.message}",
            status=error.status,
            response=error.response,
            request=error.request,
        )


class ConvertError(ApiError):
    """Coordinate to three-word address conversion failed."""
    pass


class AutosuggestError(ApiError):
    """Autosuggest request failed."""
    pass
