"""
Media Blog Recommendations API: FastAPI app factory.

Use: uvicorn content_api.app:app
Or:  from content_api import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import register_routes
from .routes.root import API_NAME, API_VERSION
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS and routes."""
    app = FastAPI(
        title=API_NAME,
        description="Related-article ranking and reading metrics for the bilingual blog",
        version=API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_logging():
        state = get_state()
        ok, errors = state.config.validate()
        for error in errors:
            logger.warning("[startup] config: %s", error)
        logger.info(
            "[startup] %s starting (content_source=%s, loaded=%s, config_ok=%s)",
            API_NAME,
            state.config.content_source,
            state.is_loaded,
            ok,
        )

    return app


app = create_app()
