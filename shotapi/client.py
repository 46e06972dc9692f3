"""
ShotAPI Python Client

HTTP client for the ShotAPI screenshot and rendering API.
"""

import logging
import math
import re
from typing import Any, Mapping, Optional, Union

import requests

from .types import (
    DiffOptions,
    DiffResult,
    ErrorKind,
    ScreenshotOptions,
    normalize_options,
)

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

OptionsArg = Optional[Union[ScreenshotOptions, Mapping[str, Any]]]

# Leading decimal number; trailing text such as a "%" sign is ignored.
_NUMBER_PREFIX = re.compile(r"\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


class ShotAPIError(Exception):
    """Base exception for ShotAPI errors."""

    kind = ErrorKind.GENERIC

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"


class AuthenticationError(ShotAPIError):
    """Raised when the API key is rejected."""

    kind = ErrorKind.AUTHENTICATION


class RateLimitError(ShotAPIError):
    """Raised when rate limit is exceeded."""

    kind = ErrorKind.RATE_LIMIT


class FeatureNotAvailableError(ShotAPIError):
    """Raised when the feature is not included in the account's plan."""

    kind = ErrorKind.FEATURE_NOT_AVAILABLE


def error_for_status(status_code: int, body: str) -> Optional[ShotAPIError]:
    """
    Map an HTTP status to the matching error.

    Returns None for 2xx responses.
    """
    if 200 <= status_code <= 299:
        return None
    if status_code == 401:
        return AuthenticationError("Invalid API key", 401)
    if status_code == 403:
        return FeatureNotAvailableError(body, 403)
    if status_code == 429:
        return RateLimitError("Rate limit exceeded", 429)
    return ShotAPIError(body, status_code)


def parse_percentage(raw: Optional[str]) -> float:
    """
    Read the leading number of an ``X-Diff-Percentage`` header value.

    Missing, non-numeric and non-finite values give 0.0.
    """
    if raw is None:
        return 0.0
    match = _NUMBER_PREFIX.match(raw)
    if match is None:
        logger.debug("Ignoring unparsable X-Diff-Percentage: %r", raw)
        return 0.0
    value = float(match.group().strip())
    if not math.isfinite(value):
        logger.debug("Ignoring non-finite X-Diff-Percentage: %r", raw)
        return 0.0
    return value


def _merge_options(options: OptionsArg, overrides: Mapping[str, Any]) -> dict[str, Any]:
    if options is None:
        merged: dict[str, Any] = {}
    elif isinstance(options, ScreenshotOptions):
        merged = options.to_dict()
    else:
        merged = normalize_options(options)
    merged.update(normalize_options(overrides))
    return merged


class ShotAPIClient:
    """
    Client for the ShotAPI screenshot and rendering API.

    Example:
        >>> client = ShotAPIClient(api_key="sk_your_api_key")
        >>> image = client.screenshot("https://example.com", full_page=True)
        >>> with open("screenshot.png", "wb") as f:
        ...     f.write(image)

    Args:
        api_key: API key sent in the ``X-API-Key`` header (required).
        base_url: Base URL for the API.
            Default: https://shotapi.net
        timeout: Request timeout in seconds. Default: 60
    """

    DEFAULT_BASE_URL = "https://shotapi.net"
    DEFAULT_TIMEOUT = 60

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        self.api_key = api_key
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout

    def _post(self, path: str, body: dict[str, Any]) -> requests.Response:
        """Make an authenticated POST and raise on error statuses."""
        url = f"{self.base_url}{path}"
        headers = {
            "Content-Type": "application/json",
            "X-API-Key": self.api_key,
            "User-Agent": f"shotapi-python/{__version__}",
        }
        logger.debug("POST %s", url)
        response = requests.post(
            url,
            json=body,
            headers=headers,
            timeout=self.timeout,
            allow_redirects=False,
        )
        logger.debug("POST %s -> %s", url, response.status_code)

        error = error_for_status(response.status_code, response.text)
        if error is not None:
            logger.debug("Request to %s failed: %s", path, error)
            raise error
        return response

    def screenshot(self, url: str, options: OptionsArg = None, **kwargs: Any) -> bytes:
        """
        Take a screenshot of a URL.

        Args:
            url: URL to capture.
            options: Screenshot options, as ``ScreenshotOptions`` or a mapping.
            **kwargs: Extra options, merged over ``options``.

        Returns:
            Binary image data.

        Example:
            >>> image = client.screenshot("https://example.com", darkMode=True)
        """
        body: dict[str, Any] = {"url": url}
        body.update(_merge_options(options, kwargs))
        return self._post("/v1/screenshot", body).content

    def render(self, html: str, options: OptionsArg = None, **kwargs: Any) -> bytes:
        """
        Render HTML/CSS to an image.

        Args:
            html: HTML content to render.
            options: Render options.
            **kwargs: Extra options, merged over ``options``.

        Returns:
            Binary image data.
        """
        body: dict[str, Any] = {"html": html}
        body.update(_merge_options(options, kwargs))
        return self._post("/v1/render", body).content

    def metadata(
        self, url: str, options: OptionsArg = None, **kwargs: Any
    ) -> dict[str, Any]:
        """
        Extract metadata from a URL.

        Returns:
            Parsed JSON metadata.
        """
        body: dict[str, Any] = {"url": url}
        body.update(_merge_options(options, kwargs))
        return self._post("/v1/metadata", body).json()

    def batch(
        self, urls: list[str], options: OptionsArg = None, **kwargs: Any
    ) -> dict[str, Any]:
        """
        Take screenshots of multiple URLs.

        Args:
            urls: List of URLs to capture.
            options: Screenshot options applied to all URLs.
            **kwargs: Extra options, merged over ``options``.

        Returns:
            Parsed JSON batch result.

        Example:
            >>> result = client.batch(
            ...     ["https://a.com", "https://b.com"],
            ...     {"fullPage": True},
            ... )
        """
        body: dict[str, Any] = {
            "urls": list(urls),
            "options": _merge_options(options, kwargs),
        }
        return self._post("/v1/batch", body).json()

    def diff(
        self,
        url_a: str,
        url_b: str,
        options: Optional[Union[DiffOptions, Mapping[str, Any]]] = None,
        **kwargs: Any,
    ) -> DiffResult:
        """
        Compare two URLs visually.

        Only ``width`` and ``height`` are read from the options; other
        screenshot options are not applied to diffs.

        Returns:
            DiffResult with the diff image and the difference percentage
            (0.0 when the server does not report one).
        """
        if isinstance(options, DiffOptions):
            settings = {"width": options.width, "height": options.height}
        else:
            settings = dict(options or {})
        settings.update(kwargs)
        viewport = DiffOptions.from_dict(settings)

        body: dict[str, Any] = {
            "url_a": url_a,
            "url_b": url_b,
            "width": viewport.width,
            "height": viewport.height,
        }
        response = self._post("/v1/diff", body)

        percentage = parse_percentage(response.headers.get("X-Diff-Percentage"))
        return DiffResult(image=response.content, percentage=percentage)


Client = ShotAPIClient
Error = ShotAPIError
