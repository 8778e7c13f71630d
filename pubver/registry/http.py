"""HTTP client abstraction for registry lookups.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import http.client
import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, cast, runtime_checkable

from pubver import __version__
from pubver.core.result import Err, Ok, Result
from pubver.core.structured import as_str_dict

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network and decoding errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    One request, one response or one failure; nothing is streamed or retried.
    """

    def get_json(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> Result[dict[str, Any], HttpError]:
        """Fetch URL and parse the body as a JSON object.

        Args:
            url: URL to fetch
            headers: Extra request headers (e.g. Authorization)

        Returns:
            Ok with parsed JSON dict, or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - JSON parsing
    - Timeout handling
    """

    def __init__(
        self, timeout: float = 30.0, user_agent: str = f"pubver/{__version__}"
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        # Use system certificates
        self._ssl_context = ssl.create_default_context()

    def _request(self, url: str, headers: Mapping[str, str]) -> Result[bytes, HttpError]:
        try:
            req = urllib.request.Request(
                url,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/json",
                    **headers,
                },
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=_http_error_message(e)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except http.client.HTTPException as e:
            return Err(HttpError(url=url, status=0, message=str(e) or type(e).__name__))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

    def get_json(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> Result[dict[str, Any], HttpError]:
        """Fetch URL and parse as JSON."""
        result = self._request(url, headers or {})
        if isinstance(result, Err):
            return result

        try:
            data_obj: object = json.loads(result.value.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))

        data = as_str_dict(data_obj)
        if data is None:
            return Err(HttpError(url=url, status=0, message="Expected JSON object"))
        # Values are dynamic; preserve as Any for callers.
        return Ok(cast(dict[str, Any], data))


def _http_error_message(e: urllib.error.HTTPError) -> str:
    """Prefer the registry's own `{"error": ...}` body over the status reason."""
    try:
        body: object = json.loads(e.read().decode("utf-8"))
    except (AttributeError, OSError, ValueError):
        return str(e.reason)
    data = as_str_dict(body)
    if data is not None and isinstance(data.get("error"), str) and data["error"]:
        return cast(str, data["error"])
    return str(e.reason)


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json("https://registry.example.com/pkg", {"dist-tags": {"latest": "1.0.0"}})
        result = client.get_json("https://registry.example.com/pkg")
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, dict[str, Any] | HttpError] = {}
        self.calls: list[tuple[str, str]] = []
        self.headers: list[dict[str, str]] = []

    def set_json(self, url: str, response: dict[str, Any] | HttpError) -> None:
        """Set JSON response for URL."""
        self._json_responses[url] = response

    def get_json(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> Result[dict[str, Any], HttpError]:
        """Get mocked JSON response."""
        self.calls.append(("get_json", url))
        self.headers.append(dict(headers or {}))

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
