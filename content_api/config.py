"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Reads a .env file from the project root when present (python-dotenv).
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from recommender import ScoringConfig, get_preset

BASE_DIR = Path(__file__).resolve().parent.parent

_root_env = BASE_DIR / ".env"
if _root_env.exists():
    load_dotenv(_root_env)

CONTENT_SOURCES = ("json", "http")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Content source: "json" | "http" | None (no articles available)
    content_source: Optional[str] = None
    # When content_source=json: path to an articles JSON array
    articles_json_path: Optional[Path] = None
    # When content_source=http: base URL of the blog API (GET /api/articles)
    content_api_url: Optional[str] = None
    content_api_timeout: float = 10.0
    content_fetch_limit: int = 100

    # Scoring: preset name plus optional JSON overrides file
    scoring_preset: str = "related"
    scoring_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        content_source = os.getenv("CONTENT_SOURCE", "").strip().lower() or None
        if content_source and content_source not in CONTENT_SOURCES:
            content_source = None

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            content_source=content_source,
            articles_json_path=_path_env("ARTICLES_JSON_PATH"),
            content_api_url=(os.getenv("CONTENT_API_URL") or "").rstrip("/") or None,
            content_api_timeout=float(os.getenv("CONTENT_API_TIMEOUT", "10")),
            content_fetch_limit=int(os.getenv("CONTENT_FETCH_LIMIT", "100")),
            scoring_preset=os.getenv("SCORING_PRESET", "related"),
            scoring_config_path=_path_env("SCORING_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.content_source == "json":
            if not self.articles_json_path:
                errors.append("CONTENT_SOURCE=json requires ARTICLES_JSON_PATH")
            elif not self.articles_json_path.exists():
                errors.append(f"Articles JSON not found: {self.articles_json_path}")
        if self.content_source == "http" and not self.content_api_url:
            errors.append("CONTENT_SOURCE=http requires CONTENT_API_URL")

        try:
            get_preset(self.scoring_preset)
        except ValueError as e:
            errors.append(str(e))

        if self.scoring_config_path and not self.scoring_config_path.exists():
            errors.append(f"Scoring config not found: {self.scoring_config_path}")

        return len(errors) == 0, errors

    def load_scoring_config(self) -> ScoringConfig:
        """Preset merged with the JSON overrides file, if any."""
        base = get_preset(self.scoring_preset)
        if not self.scoring_config_path:
            return base
        with open(self.scoring_config_path, encoding="utf-8") as f:
            overrides = json.load(f)
        return ScoringConfig.from_dict(overrides, base=base)


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
