"""Scoring configuration endpoints."""

from fastapi import APIRouter

from recommender import compute_parameters

from ..state import get_state

router = APIRouter()


@router.get("/scoring")
def get_scoring_config():
    """Active scoring weights plus derived (read-only) parameters."""
    state = get_state()
    return {
        "preset": state.config.scoring_preset,
        "config": state.scoring_config.model_dump(),
        "computed": compute_parameters(state.scoring_config),
    }
