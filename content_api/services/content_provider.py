"""
Content Provider abstraction.

Supplies published articles to the recommender.
Implementations: JSON file (local/testing) and the blog's HTTP API.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union

import requests

from recommender.models import coerce_bool

logger = logging.getLogger(__name__)


class ContentSourceError(RuntimeError):
    """The content store could not be read or returned an unexpected payload."""


def _is_published(article: Dict) -> bool:
    return coerce_bool(article.get("published")) is True


def _find_by_id(articles: List[Dict], article_id: Union[int, str]) -> Optional[Dict]:
    wanted = str(article_id)
    for article in articles:
        if str(article.get("id")) == wanted:
            return article
    return None


class ContentProvider(Protocol):
    """Protocol for article catalog access. Implement for JSON file or HTTP API."""

    def get_articles(
        self,
        limit: Optional[int] = None,
        published_only: bool = True,
    ) -> List[Dict]:
        """
        Return articles as content-store dicts.
        limit=None means return all (subject to implementation limits).
        """
        ...

    def get_article(self, article_id: Union[int, str]) -> Optional[Dict]:
        """Get one article by id (published or not)."""
        ...


class JsonContentProvider:
    """
    Content provider backed by a JSON file holding an array of articles.
    Used when CONTENT_SOURCE=json; path comes from ARTICLES_JSON_PATH.
    """

    def __init__(self, articles_path: Union[Path, str]):
        self._articles_path = Path(articles_path)
        if not self._articles_path.exists():
            raise FileNotFoundError(f"Articles JSON not found: {self._articles_path}")
        with open(self._articles_path, encoding="utf-8") as f:
            articles = json.load(f)
        if not isinstance(articles, list):
            raise ContentSourceError(f"Expected a JSON array in {self._articles_path}")
        self._articles: List[Dict] = [a for a in articles if isinstance(a, dict)]
        logger.info("[content] loaded %s articles from %s", len(self._articles), self._articles_path)

    def get_articles(
        self,
        limit: Optional[int] = None,
        published_only: bool = True,
    ) -> List[Dict]:
        articles = self._articles
        if published_only:
            articles = [a for a in articles if _is_published(a)]
        if limit is not None:
            articles = articles[:limit]
        return list(articles)

    def get_article(self, article_id: Union[int, str]) -> Optional[Dict]:
        return _find_by_id(self._articles, article_id)


class HttpContentProvider:
    """
    Content provider backed by the blog API.
    GET {base_url}/api/articles?limit=N&published=true returns a JSON array.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        limit: int = 100,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._limit = limit
        self._session = session or requests.Session()

    def _fetch(self, params: Dict[str, Any]) -> List[Dict]:
        url = f"{self._base_url}/api/articles"
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ContentSourceError(f"Failed to fetch articles from {url}: {e}") from e
        except ValueError as e:
            raise ContentSourceError(f"Invalid JSON from {url}: {e}") from e
        if not isinstance(payload, list):
            raise ContentSourceError(
                f"Expected a JSON array from {url}, got {type(payload).__name__}"
            )
        return [a for a in payload if isinstance(a, dict)]

    def get_articles(
        self,
        limit: Optional[int] = None,
        published_only: bool = True,
    ) -> List[Dict]:
        params: Dict[str, Any] = {"limit": limit if limit is not None else self._limit}
        if published_only:
            params["published"] = "true"
        articles = self._fetch(params)
        logger.debug("[content] fetched %s articles params=%s", len(articles), params)
        if published_only:
            articles = [a for a in articles if _is_published(a)]
        return articles

    def get_article(self, article_id: Union[int, str]) -> Optional[Dict]:
        return _find_by_id(self._fetch({"limit": self._limit}), article_id)
