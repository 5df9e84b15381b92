#!/usr/bin/env python3
"""
Media Blog Recommendations API: entrypoint.

    python -m content_api.server
    uvicorn content_api.server:app
"""

import logging

from .app import app
from .config import get_config


def main() -> None:
    import uvicorn

    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
