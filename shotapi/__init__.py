"""
ShotAPI Python Client

Official Python client for ShotAPI, the screenshot and rendering API.

Example:
    >>> from shotapi import ShotAPIClient
    >>>
    >>> client = ShotAPIClient(api_key="sk_your_api_key")
    >>> image = client.screenshot("https://example.com")
    >>> with open("screenshot.png", "wb") as f:
    ...     f.write(image)
"""

from .client import (
    __version__,
    Client,
    ShotAPIClient,
    Error,
    ShotAPIError,
    AuthenticationError,
    RateLimitError,
    FeatureNotAvailableError,
    error_for_status,
)
from .types import (
    DiffOptions,
    DiffResult,
    ErrorKind,
    ScreenshotOptions,
    normalize_options,
)

__all__ = [
    # Client
    "ShotAPIClient",
    "Client",
    # Errors
    "ShotAPIError",
    "Error",
    "AuthenticationError",
    "RateLimitError",
    "FeatureNotAvailableError",
    "ErrorKind",
    "error_for_status",
    # Types
    "ScreenshotOptions",
    "DiffOptions",
    "DiffResult",
    "normalize_options",
]
