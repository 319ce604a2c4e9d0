from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from .config import DEFAULT_API_GATEWAY, DEFAULT_TIMEOUT_MS
from .exceptions import ApiError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def default_validate_status(status: int) -> bool:
    # Up to 503 so that API error bodies (400 BadLanguage etc.) reach the caller
    return 200 <= status <= 503


def _redact(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if not params:
        return {}
    return {k: ("***" if k == "key" else v) for k, v in params.items()}


_KEY_IN_TEXT_RE = re.compile(r"key=[^&\s)'\"]+")


def _redact_text(text: str) -> str:
    # requests error messages embed the full URL, query string included
    return _KEY_IN_TEXT_RE.sub("key=***", text)


@dataclass(frozen=True)
class ApiResponse:
    """Status code plus parsed body of a completed request."""

    status: int
    data: Any
    status_text: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def error(self) -> Optional[Dict[str, Any]]:
        if isinstance(self.data, dict) and isinstance(self.data.get("error"), dict):
            return self.data["error"]
        return None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.error is None

    @classmethod
    def from_requests(cls, resp: requests.Response) -> "ApiResponse":
        return cls(
            status=resp.status_code,
            data=_parse_body(resp),
            status_text=resp.reason or "",
            headers=resp.headers,
            url=resp.url or "",
        )


def _parse_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


@dataclass(frozen=True)
class ApiClient:
    """HTTP transport bound to one base URL.

    ``timeout`` is in milliseconds. Responses whose status satisfies
    ``validate_status`` are returned as ``ApiResponse``; every other outcome
    is raised as an ``ApiError``. Each call makes exactly one attempt.
    """

    base_url: str = DEFAULT_API_GATEWAY
    timeout: int = DEFAULT_TIMEOUT_MS
    validate_status: Callable[[int], bool] = default_validate_status

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("Base URL must not be empty")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")

    def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse:
        return self._request("GET", path, params=params, headers=headers)

    def post(
        self,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse:
        return self._request("POST", path, params=params, headers=headers, body=body)

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> ApiResponse:
        url = self.url_for(path)
        merged_headers = {**DEFAULT_HEADERS, **(headers or {})}
        started = time.perf_counter()

        try:
            resp = requests.request(
                method,
                url,
                params=params,
                json=body,
                headers=merged_headers,
                timeout=self.timeout / 1000,
            )
        except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as exc:
            error = ApiError("No response from API", request=exc.request)
            logger.warning(
                "No response from API",
                method=method, path=path, params=_redact(params), error=_redact_text(str(exc)),
            )
            raise error from exc
        except requests.exceptions.RequestException as exc:
            logger.warning(
                "Request could not be sent",
                method=method, path=path, params=_redact(params), error=_redact_text(str(exc)),
            )
            raise ApiError(f"Request error: {exc}", request=exc.request) from exc

        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        response = ApiResponse.from_requests(resp)
        logger.debug(
            "API request completed",
            method=method, path=path, params=_redact(params),
            status=response.status, elapsed_ms=elapsed_ms,
        )

        if not self.validate_status(response.status):
            raise self.handle_error(response, resp)

        return response

    @staticmethod
    def handle_error(response: ApiResponse, raw: Optional[requests.Response] = None) -> ApiError:
        """Turn a rejected response into an ApiError with the most specific message available."""
        message = None
        if response.error is not None:
            message = response.error.get("message")
        message = message or response.status_text or "API request failed"

        logger.warning("API returned error status", status=response.status, message=message)
        return ApiError(
            f"API Error {response.status}: {message}",
            status=response.status,
            response=raw,
        )


default_api_client = ApiClient()
