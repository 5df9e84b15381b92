"""Related-article recommendation endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from recommender import (
    InvalidCandidateList,
    ScoringConfig,
    ScoringContext,
    ScoringEngine,
)
from recommender.models import ensure_list, normalize_language

from ..models import RecommendationResponse, ScoreRequest
from ..services import ContentSourceError
from ..state import get_state
from ..utils import parse_tags, to_article_card

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_RESULT_LIMIT = 20


def _engine_for(limit: Optional[int]) -> ScoringEngine:
    """Shared engine, or a copy with a different result cap."""
    state = get_state()
    if limit is None or limit == state.scoring_config.max_results:
        return state.engine
    return ScoringEngine(state.scoring_config.model_copy(update={"max_results": limit}))


@router.get("/articles/{article_id}/related", response_model=RecommendationResponse)
def related_articles(
    article_id: str,
    lang: str = Query("en"),
    tags: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=MAX_RESULT_LIMIT),
):
    """
    Articles related to article_id, best first.

    Context comes from the current article (category and tags); the tags
    query param (comma-separated) replaces the article's own tags.
    Scoring failures degrade to an empty list.
    """
    state = get_state()
    if not state.is_loaded:
        raise HTTPException(
            status_code=503,
            detail="No content source configured. Set CONTENT_SOURCE in .env.",
        )
    provider = state.content_provider
    try:
        current = provider.get_article(article_id)
        candidates = provider.get_articles(limit=state.config.content_fetch_limit)
    except ContentSourceError as e:
        logger.error("[recommendations] content source error: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    if current is None:
        raise HTTPException(status_code=404, detail="Article not found")

    language = normalize_language(lang)
    try:
        article = ensure_list([current])[0]
    except InvalidCandidateList as e:
        logger.warning("[recommendations] current article %s is malformed: %s", article_id, e)
        raise HTTPException(status_code=404, detail="Article not found")

    context = ScoringContext.for_article(article, language)
    override_tags = parse_tags(tags)
    if override_tags is not None:
        context = context.model_copy(update={"current_tags": override_tags})

    scored = _engine_for(limit).recommend(candidates, context)
    return RecommendationResponse(
        articles=[to_article_card(s, language, i + 1) for i, s in enumerate(scored)],
        total=len(scored),
        language=language,
        current_article_id=article.id,
    )


@router.post("/recommendations/score", response_model=RecommendationResponse)
def score_articles(request: ScoreRequest):
    """Score caller-supplied candidates against a caller-supplied context."""
    state = get_state()
    try:
        context = ScoringContext.model_validate(request.context.model_dump())
        config = state.scoring_config
        if request.config:
            config = ScoringConfig.from_dict(request.config, base=config)
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        scored = ScoringEngine(config).score(request.candidates, context)
    except InvalidCandidateList as e:
        raise HTTPException(status_code=400, detail=str(e))

    return RecommendationResponse(
        articles=[to_article_card(s, context.language, i + 1) for i, s in enumerate(scored)],
        total=len(scored),
        language=context.language,
        current_article_id=context.current_item_id,
    )
