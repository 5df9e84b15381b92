"""Application state: config, content provider, and scoring engine."""

import logging
from typing import Optional

from recommender import ScoringConfig, ScoringEngine

from .config import ServerConfig, get_config
from .services import ContentProvider, HttpContentProvider, JsonContentProvider

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        content_provider: Optional[ContentProvider] = None,
        scoring_config: Optional[ScoringConfig] = None,
    ):
        self.config = config
        self.content_provider = (
            content_provider
            if content_provider is not None
            else self._create_content_provider(config)
        )
        self.scoring_config = scoring_config or config.load_scoring_config()
        self.engine = ScoringEngine(self.scoring_config)
        logger.info(
            "[startup] Content provider: %s, scoring preset: %s",
            type(self.content_provider).__name__ if self.content_provider else None,
            config.scoring_preset,
        )

    def _create_content_provider(self, config: ServerConfig) -> Optional[ContentProvider]:
        """Create content provider from config (JSON file or blog HTTP API)."""
        if config.content_source == "json":
            if not config.articles_json_path:
                logger.warning("[startup] CONTENT_SOURCE=json but ARTICLES_JSON_PATH is not set")
                return None
            return JsonContentProvider(config.articles_json_path)
        if config.content_source == "http":
            if not config.content_api_url:
                logger.warning("[startup] CONTENT_SOURCE=http but CONTENT_API_URL is not set")
                return None
            return HttpContentProvider(
                config.content_api_url,
                timeout=config.content_api_timeout,
                limit=config.content_fetch_limit,
            )
        return None

    @property
    def is_loaded(self) -> bool:
        return self.content_provider is not None


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (None resets it to be rebuilt from config)."""
    global _state
    _state = state
