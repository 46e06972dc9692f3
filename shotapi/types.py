"""
Type definitions for the ShotAPI Python client.

Option keys are accepted in either snake_case or camelCase and are sent to
the API in their snake_case form.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping, Optional


# Caller-facing key -> canonical wire key.
OPTION_KEYS: dict[str, str] = {
    "full_page": "full_page",
    "fullPage": "full_page",
    "device_scale_factor": "device_scale_factor",
    "deviceScaleFactor": "device_scale_factor",
    "dark_mode": "dark_mode",
    "darkMode": "dark_mode",
    "custom_css": "custom_css",
    "customCss": "custom_css",
    "custom_js": "custom_js",
    "customJs": "custom_js",
    "user_agent": "user_agent",
    "userAgent": "user_agent",
    "wait_for_selector": "wait_for_selector",
    "waitForSelector": "wait_for_selector",
    "click_selector": "click_selector",
    "clickSelector": "click_selector",
    "hide_selectors": "hide_selectors",
    "hideSelectors": "hide_selectors",
    "block_ads": "block_ads",
    "blockAds": "block_ads",
    "extract_markdown": "extract_markdown",
    "extractMarkdown": "extract_markdown",
}

DEFAULT_DIFF_WIDTH = 1280
DEFAULT_DIFF_HEIGHT = 720


def normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """
    Rewrite option keys to their canonical wire form.

    Keys missing from ``OPTION_KEYS`` are passed through untouched so that
    options added server-side can be used before the client knows about them.

    Example:
        >>> normalize_options({"fullPage": True, "quality": 80})
        {'full_page': True, 'quality': 80}
    """
    return {OPTION_KEYS.get(key, key): value for key, value in options.items()}


class ErrorKind(str, Enum):
    """Error categories returned by the API."""
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    FEATURE_NOT_AVAILABLE = "feature_not_available"
    GENERIC = "generic"


@dataclass
class ScreenshotOptions:
    """Options for screenshot, render, metadata and batch requests."""
    full_page: Optional[bool] = None
    device_scale_factor: Optional[float] = None
    dark_mode: Optional[bool] = None
    custom_css: Optional[str] = None
    custom_js: Optional[str] = None
    user_agent: Optional[str] = None
    wait_for_selector: Optional[str] = None
    click_selector: Optional[str] = None
    hide_selectors: Optional[list[str]] = None
    block_ads: Optional[bool] = None
    extract_markdown: Optional[bool] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to API request format.

        Keys in ``extra`` are normalized; typed fields that are set take
        precedence over the same key in ``extra``.
        """
        result = normalize_options(self.extra)
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScreenshotOptions":
        """Create from a mapping using either naming convention."""
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in normalize_options(data).items():
            if key in OPTION_KEYS:
                known[key] = value
            else:
                extra[key] = value
        return cls(extra=extra, **known)


@dataclass
class DiffOptions:
    """Viewport used when comparing two pages."""
    width: int = DEFAULT_DIFF_WIDTH
    height: int = DEFAULT_DIFF_HEIGHT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DiffOptions":
        """Create from a mapping; only ``width`` and ``height`` are read."""
        width = data.get("width")
        height = data.get("height")
        return cls(
            width=DEFAULT_DIFF_WIDTH if width is None else width,
            height=DEFAULT_DIFF_HEIGHT if height is None else height,
        )


@dataclass
class DiffResult:
    """Result of a visual diff."""
    image: bytes
    percentage: float = 0.0
