"""Public operations of the what3words API: convert-to-3wa and autosuggest."""

import re
from typing import Optional, Sequence, Union

from .api_client import ApiClient, ApiResponse, default_api_client
from .exceptions import ApiError, AutosuggestError, ConvertError, ValidationError
from .logging_config import get_logger

logger = get_logger(__name__)

CONVERT_TO_3WA_PATH = "/v3/convert-to-3wa"
AUTOSUGGEST_PATH = "/v3/autosuggest"

DEFAULT_COORDINATES = "51.750984, -1.247145"
MIN_API_KEY_LENGTH = 8

_COORDINATES_RE = re.compile(r"^-?[0-9]+\.?[0-9]*,\s*-?[0-9]+\.?[0-9]*$")

Focus = Union[str, Sequence[float]]


def get_api_client(
    api_client: Optional[ApiClient] = None,
    base_url: Optional[str] = None,
) -> ApiClient:
    """Pick the client for a call: explicit client, then base_url, then the default."""
    if api_client is not None:
        return api_client
    if base_url:
        return ApiClient(base_url)
    return default_api_client


def validate_api_key(key) -> None:
    if not isinstance(key, str) or len(key.strip()) < MIN_API_KEY_LENGTH:
        raise ValidationError("Invalid API key")


def validate_coordinates(coordinates) -> None:
    if not isinstance(coordinates, str) or not coordinates:
        raise ValidationError("Invalid coordinates")

    if not _COORDINATES_RE.match(coordinates.strip()):
        raise ValidationError("Invalid coordinates format")


def validate_input(text) -> None:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Invalid input")


def format_focus(focus: Focus) -> str:
    """Render a focus point as the "lat,lng" string the API expects."""
    if isinstance(focus, str):
        return focus.strip()
    lat, lng = focus
    return f"{lat},{lng}"


def convert_to_three_word_address(
    key: str,
    coordinates: str = DEFAULT_COORDINATES,
    language: str = "en",
    api_client: Optional[ApiClient] = None,
    base_url: Optional[str] = None,
) -> ApiResponse:
    """Convert a "lat, lng" string to a three-word address.

    Returns the raw ``ApiResponse``; on success ``response.data["words"]``
    holds the address.

    Raises:
        ValidationError: key or coordinates rejected, no request was made.
        ConvertError: the transport failed.
    """
    validate_api_key(key)
    validate_coordinates(coordinates)

    client = get_api_client(api_client, base_url)
    params = {
        "coordinates": coordinates.strip(),
        "key": key.strip(),
        "language": language,
    }

    logger.info("Converting coordinates", coordinates=params["coordinates"], language=language)
    try:
        return client.get(CONVERT_TO_3WA_PATH, params=params)
    except ApiError as exc:
        raise ConvertError.wrap("Convert failed: ", exc) from exc


def autosuggest(
    key: str,
    input: str,
    language: Optional[str] = None,
    clip_to_country: Optional[str] = None,
    focus: Optional[Focus] = None,
    api_client: Optional[ApiClient] = None,
    base_url: Optional[str] = None,
) -> ApiResponse:
    """Fetch ranked three-word address suggestions for free text.

    Without ``language`` the service searches every language it supports.
    API-level errors (MissingInput, BadLanguage, ...) come back inside the
    response body, not as exceptions.

    Raises:
        ValidationError: key or input rejected, no request was made.
        AutosuggestError: the transport failed.
    """
    validate_api_key(key)
    validate_input(input)

    client = get_api_client(api_client, base_url)
    params = {
        "input": input.strip(),
        "key": key.strip(),
    }

    if language is not None:
        params["language"] = language

    if clip_to_country:
        params["clip-to-country"] = clip_to_country

    if focus:
        params["focus"] = format_focus(focus)

    logger.info("Requesting suggestions", input=params["input"], language=language)
    try:
        return client.get(AUTOSUGGEST_PATH, params=params)
    except ApiError as exc:
        raise AutosuggestError.wrap("Autosuggest failed: ", exc) from exc
