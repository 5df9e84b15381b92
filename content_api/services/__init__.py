"""Backing logic: content providers."""

from .content_provider import (
    ContentProvider,
    ContentSourceError,
    HttpContentProvider,
    JsonContentProvider,
)

__all__ = [
    "ContentProvider",
    "ContentSourceError",
    "HttpContentProvider",
    "JsonContentProvider",
]
