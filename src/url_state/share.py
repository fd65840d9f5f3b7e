"""
Shareable links built from state tokens.

A share link is the configured base URL followed by a token::

    https://yapi.run/c/<token>

The receiving page reads the last path segment, unpacks it, and loads the
restored text. Link previews show the first few hundred characters of that
text.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from . import config
from .state import pack

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
"""Marker appended to truncated previews."""


class ShareLink(BaseModel):
    """
    A share URL together with the size statistics shown to the user.

    Serializes with camelCase keys (``originalSize``, ``tokenSize``) so the
    JSON form can be handed to a web front end as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    url: str
    """Full link: base URL plus token."""

    token: str
    """Packed state."""

    original_size: int
    """Size of the shared text in UTF-8 bytes."""

    token_size: int
    """Length of the token in characters."""

    lines: int
    """Number of lines in the shared text."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ratio(self) -> float:
        """Token size as a percentage of the original size."""
        if self.original_size == 0:
            return 0.0
        return self.token_size / self.original_size * 100


def share_url(text: str, base_url: str | None = None) -> str:
    """
    Build a share URL for a piece of text.

    Args:
        text: Text to share.
        base_url: Link prefix. Defaults to the configured base URL.

    Returns:
        The base URL followed by the packed token.
    """
    return _base(base_url) + pack(text)


def build_share_link(text: str, base_url: str | None = None) -> ShareLink:
    """
    Pack text and describe the resulting link.

    Args:
        text: Text to share.
        base_url: Link prefix. Defaults to the configured base URL.

    Returns:
        The link and its size statistics.
    """
    token = pack(text)
    link = ShareLink(
        url=_base(base_url) + token,
        token=token,
        original_size=len(text.encode("utf-8")),
        token_size=len(token),
        lines=text.count("\n") + 1,
    )
    logger.debug(
        "Built share link: %d bytes -> %d chars (%.1f%%)",
        link.original_size,
        link.token_size,
        link.ratio,
    )
    return link


def token_from_url(url_or_token: str) -> str:
    """
    Extract the token from a share URL.

    A bare token is returned unchanged. For a URL, the last non-empty path
    segment is the token; query string and fragment are ignored.

    Args:
        url_or_token: Full share URL, path, or token.

    Returns:
        The token. Empty if the URL has no path segments.
    """
    path = urlsplit(url_or_token.strip()).path
    segments = [segment for segment in path.split("/") if segment]
    return segments[-1] if segments else ""


def preview(text: str, limit: int | None = None) -> str:
    """
    Shorten text for a link preview.

    Args:
        text: Restored text.
        limit: Maximum characters kept. Defaults to the configured length.

    Returns:
        The text itself if short enough, otherwise its first ``limit``
        characters followed by an ellipsis.
    """
    if limit is None:
        limit = config.PREVIEW_LENGTH
    if limit <= 0:
        raise ValueError(f"Preview limit must be positive, got {limit}")

    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def _base(base_url: str | None) -> str:
    if base_url is None:
        return config.BASE_URL
    return base_url if base_url.endswith("/") else base_url + "/"
