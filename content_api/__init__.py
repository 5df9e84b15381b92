"""
Media Blog Recommendations API

Usage: uvicorn content_api:app --reload --port 8000
"""

from .app import app
from .config import ServerConfig, get_config, reload_config
from .services import (
    ContentProvider,
    ContentSourceError,
    HttpContentProvider,
    JsonContentProvider,
)

__all__ = [
    "app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "ContentProvider",
    "ContentSourceError",
    "HttpContentProvider",
    "JsonContentProvider",
]
