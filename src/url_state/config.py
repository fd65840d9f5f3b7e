"""
Global configuration for share links.

Settings come from environment variables and are validated once, when this
module is imported.
"""

import os
from urllib.parse import urlsplit

_SUPPORTED_URL_SCHEMES: list[str] = ["http", "https"]

DEFAULT_BASE_URL: str = "https://yapi.run/c/"
"""Playground route that restores a token from its last path segment."""

DEFAULT_PREVIEW_LENGTH: int = 200
"""Characters of restored text shown in link previews."""

BASE_URL = os.environ.get("URL_STATE_BASE_URL", DEFAULT_BASE_URL)
"""Prefix that a token is appended to when building a share URL."""

if urlsplit(BASE_URL).scheme not in _SUPPORTED_URL_SCHEMES or not urlsplit(BASE_URL).netloc:
    raise ValueError(
        f"Invalid URL_STATE_BASE_URL environment variable: '{BASE_URL}'. "
        f"Supported schemes: {_SUPPORTED_URL_SCHEMES}"
    )

# The token is always its own path segment.
if not BASE_URL.endswith("/"):
    BASE_URL += "/"

_preview_length = os.environ.get("URL_STATE_PREVIEW_LENGTH", str(DEFAULT_PREVIEW_LENGTH))

if not _preview_length.isdecimal() or int(_preview_length) <= 0:
    raise ValueError(
        f"Invalid URL_STATE_PREVIEW_LENGTH environment variable: '{_preview_length}'. "
        "Expected a positive integer."
    )

PREVIEW_LENGTH = int(_preview_length)
"""Characters of restored text shown before truncating with an ellipsis."""
